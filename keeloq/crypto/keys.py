"""Key handling and derivation for KeeLoq."""

from typing import Tuple

from ..const import KEY64_MASK, WORD_MASK
from .cipher import Keeloq


def split_key(key: int) -> Tuple[int, int]:
    """
    Split a 64-bit key into 32-bit halves.

    Args:
        key: 64-bit key

    Returns:
        Tuple of (key_high, key_low)
    """
    key &= KEY64_MASK
    return key >> 32, key & WORD_MASK


def join_key(key_high: int, key_low: int) -> int:
    """Combine two 32-bit halves into a 64-bit key."""
    return ((key_high & WORD_MASK) << 32) | (key_low & WORD_MASK)


def derive_device_key(manufacturer_key: int, serial: int) -> int:
    """
    Derive a device key by normal learning.

    device_key = decrypt(SN | 0x60000000) << 32 | decrypt(SN | 0x20000000)
    with SN the low 28 bits of the serial, both under the manufacturer key.

    Args:
        manufacturer_key: 64-bit manufacturer key
        serial: Encoder serial number

    Returns:
        64-bit device key
    """
    cipher = Keeloq(manufacturer_key)
    cipher.normal_learn(serial)
    return cipher.key
