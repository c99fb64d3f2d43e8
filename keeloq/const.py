"""Constants for the KeeLoq cipher."""

# Nonlinear function, read as a table of 32 single bits
KEELOQ_NLF = 0x3A5C742E

# 16 cycles of the 33-bit key word
KEELOQ_ROUNDS = 528
KEY_SCHEDULE_BITS = 64

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF
KEY64_MASK = 0xFFFFFFFFFFFFFFFF

# Normal learning seeds (from the encoder serial number)
SERIAL_MASK = 0x0FFFFFFF
NORMAL_LEARN_LOW_SEED = 0x20000000
NORMAL_LEARN_HIGH_SEED = 0x60000000

# Hopping code plaintext layout:
# Bits 0-15:  synchronization counter
# Bits 16-25: discrimination value
# Bits 26-27: counter overflow
# Bits 28-31: button status
HOP_COUNTER_MASK = 0xFFFF
HOP_DISCRIMINATION_SHIFT = 16
HOP_DISCRIMINATION_MASK = 0x3FF
HOP_OVERFLOW_SHIFT = 26
HOP_OVERFLOW_MASK = 0x3
HOP_BUTTON_SHIFT = 28
HOP_BUTTON_MASK = 0xF

# Configuration
LEARNING_NORMAL = "normal"
LEARNING_NONE = "none"
LEARNING_MODES = (LEARNING_NORMAL, LEARNING_NONE)

ENV_MANUFACTURER_KEY = "KEELOQ_MANUFACTURER_KEY"
ENV_SERIAL = "KEELOQ_SERIAL"
ENV_LEARNING = "KEELOQ_LEARNING"
