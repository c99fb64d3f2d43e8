"""Data models for KeeLoq hopping codes."""

from dataclasses import dataclass

from .const import (
    HOP_BUTTON_MASK,
    HOP_BUTTON_SHIFT,
    HOP_COUNTER_MASK,
    HOP_DISCRIMINATION_MASK,
    HOP_DISCRIMINATION_SHIFT,
    HOP_OVERFLOW_MASK,
    HOP_OVERFLOW_SHIFT,
    WORD_MASK,
)


@dataclass(frozen=True)
class HopCode:
    """
    Plaintext of a KeeLoq hopping code.

    This is the 32-bit word an encoder encrypts with its device key before
    transmission:
        Bits 0-15:  synchronization counter
        Bits 16-25: discrimination value (usually the low serial bits)
        Bits 26-27: counter overflow
        Bits 28-31: button status
    """
    button: int
    discrimination: int
    counter: int
    overflow: int = 0

    def __post_init__(self):
        # Fields are masked to their width, like the cipher words
        object.__setattr__(self, "button", self.button & HOP_BUTTON_MASK)
        object.__setattr__(
            self, "discrimination", self.discrimination & HOP_DISCRIMINATION_MASK
        )
        object.__setattr__(self, "counter", self.counter & HOP_COUNTER_MASK)
        object.__setattr__(self, "overflow", self.overflow & HOP_OVERFLOW_MASK)

    @classmethod
    def from_word(cls, word: int) -> "HopCode":
        """
        Split a decrypted 32-bit word into its fields.

        Args:
            word: Decrypted hopping code

        Returns:
            HopCode
        """
        word &= WORD_MASK
        return cls(
            button=(word >> HOP_BUTTON_SHIFT) & HOP_BUTTON_MASK,
            discrimination=(word >> HOP_DISCRIMINATION_SHIFT) & HOP_DISCRIMINATION_MASK,
            counter=word & HOP_COUNTER_MASK,
            overflow=(word >> HOP_OVERFLOW_SHIFT) & HOP_OVERFLOW_MASK,
        )

    def to_word(self) -> int:
        """Pack the fields back into a 32-bit plaintext word."""
        return (
            (self.button << HOP_BUTTON_SHIFT)
            | (self.overflow << HOP_OVERFLOW_SHIFT)
            | (self.discrimination << HOP_DISCRIMINATION_SHIFT)
            | self.counter
        )

    def matches_serial(self, serial: int) -> bool:
        """Check the discrimination value against the low serial bits."""
        return self.discrimination == (serial & HOP_DISCRIMINATION_MASK)

    def __str__(self) -> str:
        return (
            f"HopCode(button={self.button:#x}, counter={self.counter}, "
            f"disc={self.discrimination:#05x})"
        )
