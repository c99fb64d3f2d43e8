"""
KeeLoq cipher library.

A Python implementation of the KeeLoq rolling-code block cipher: 528-round
encryption/decryption, normal learning key derivation and 32-bit bit
reflection.

Usage:
    from keeloq import Keeloq

    cipher = Keeloq()
    cipher.set_key(0x5CEC6701, 0xB79FD949)  # manufacturer key
    cipher.normal_learn(0x0ABCDEF)          # derive the device key

    hop = cipher.decrypt_hop(0xE44F4CDF)
    print(hop.button, hop.counter)

    # Captured words arrive LSB first
    word = cipher.reflect_pack(captured)
"""

__version__ = "0.1.0"

# Cipher
from .crypto import (
    Keeloq,
    reflect_pack,
    split_key,
    join_key,
    derive_device_key,
)

# Models
from .models import HopCode

# Configuration
from .config import KeeloqConfig, load_config_from_env

# Exceptions
from .exceptions import (
    KeeloqError,
    ConfigError,
    HopCodeError,
)

# Constants
from .const import KEELOQ_NLF, KEELOQ_ROUNDS

__all__ = [
    # Version
    "__version__",
    # Cipher
    "Keeloq",
    "reflect_pack",
    "split_key",
    "join_key",
    "derive_device_key",
    # Models
    "HopCode",
    # Configuration
    "KeeloqConfig",
    "load_config_from_env",
    # Exceptions
    "KeeloqError",
    "ConfigError",
    "HopCodeError",
    # Constants
    "KEELOQ_NLF",
    "KEELOQ_ROUNDS",
]
