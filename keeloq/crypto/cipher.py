"""
KeeLoq block cipher.

KeeLoq is a 32-bit block, 64-bit key NLFSR cipher used by rolling-code
remotes (garage doors, gate openers, car key fobs). Every round shifts the
32-bit state by one bit and feeds back:

    state[0] ^ state[16] ^ NLF(state[31, 26, 20, 9, 1]) ^ key[r mod 64]

for 528 rounds. Decryption runs the register the other way with taps
moved down by one bit and the key consumed in reverse order.
"""

import logging
from typing import Optional

from ..const import (
    KEELOQ_NLF,
    KEELOQ_ROUNDS,
    KEY64_MASK,
    KEY_SCHEDULE_BITS,
    NORMAL_LEARN_HIGH_SEED,
    NORMAL_LEARN_LOW_SEED,
    SERIAL_MASK,
    WORD_BITS,
    WORD_MASK,
)
from ..exceptions import HopCodeError
from ..models import HopCode


_LOGGER = logging.getLogger(__name__)


def _bit(x: int, n: int) -> int:
    """Read bit n of x."""
    return (x >> n) & 1


def _nlf(index: int) -> int:
    """Look up one bit of the nonlinear function."""
    return (KEELOQ_NLF >> index) & 1


def reflect_pack(word: int) -> int:
    """
    Reverse the bit order of a 32-bit word.

    Transmitters shift the code out LSB first, so a word captured in wire
    order has to be reflected before it reaches the cipher (and back).

    Args:
        word: 32-bit word

    Returns:
        word with bit 0 swapped with bit 31, bit 1 with bit 30, ...
    """
    out = 0
    for _ in range(WORD_BITS):
        out = (out << 1) | (word & 1)
        word >>= 1
    return out & WORD_MASK


class Keeloq:
    """KeeLoq 528-round block cipher with a 64-bit key."""

    ROUNDS = KEELOQ_ROUNDS

    def __init__(self, key: Optional[int] = None):
        """
        Initialize the cipher.

        Args:
            key: Optional 64-bit key. The key is all zeros if omitted.
        """
        self._key_high = 0
        self._key_low = 0

        if key is not None:
            self.set_key64(key)

    def set_key(self, key_high: int, key_low: int):
        """
        Set the 64-bit key from its two 32-bit halves.

        Args:
            key_high: Key bits 32-63
            key_low: Key bits 0-31
        """
        self._key_high = key_high & WORD_MASK
        self._key_low = key_low & WORD_MASK
        _LOGGER.debug("Key replaced")

    def get_key(self, select_high: bool) -> int:
        """Return the high key half if select_high, else the low half."""
        if select_high:
            return self._key_high
        return self._key_low

    def set_key64(self, key: int):
        """Set the key from a single 64-bit integer."""
        key &= KEY64_MASK
        self.set_key(key >> 32, key & WORD_MASK)

    @property
    def key(self) -> int:
        """Current key as a 64-bit integer."""
        return (self._key_high << 32) | self._key_low

    def _key_bit(self, index: int) -> int:
        """Bit `index` (0-63) of the key."""
        if index < 32:
            return _bit(self._key_low, index)
        return _bit(self._key_high, index - 32)

    def encrypt(self, plaintext: int) -> int:
        """
        Encrypt a 32-bit block.

        Args:
            plaintext: 32-bit plaintext

        Returns:
            32-bit ciphertext
        """
        x = plaintext & WORD_MASK

        for r in range(self.ROUNDS):
            key_bit = self._key_bit(r % KEY_SCHEDULE_BITS)
            index = (
                _bit(x, 1)
                | _bit(x, 9) << 1
                | _bit(x, 20) << 2
                | _bit(x, 26) << 3
                | _bit(x, 31) << 4
            )
            feedback = _bit(x, 0) ^ _bit(x, 16) ^ _nlf(index) ^ key_bit
            x = (x >> 1) | (feedback << 31)

        return x

    def decrypt(self, ciphertext: int) -> int:
        """
        Decrypt a 32-bit block.

        Args:
            ciphertext: 32-bit ciphertext

        Returns:
            32-bit plaintext
        """
        x = ciphertext & WORD_MASK

        for r in range(self.ROUNDS):
            # Python's modulo keeps (15 - r) in 0..63
            key_bit = self._key_bit((15 - r) % KEY_SCHEDULE_BITS)
            index = (
                _bit(x, 0)
                | _bit(x, 8) << 1
                | _bit(x, 19) << 2
                | _bit(x, 25) << 3
                | _bit(x, 30) << 4
            )
            feedback = _bit(x, 31) ^ _bit(x, 15) ^ _nlf(index) ^ key_bit
            x = ((x << 1) ^ feedback) & WORD_MASK

        return x

    def normal_learn(self, serial: int):
        """
        Replace the key with a device key derived by normal learning.

        The current key is taken as the manufacturer key. Both halves are
        derived from it before either is stored:
            key_low  = decrypt((serial & 0x0FFFFFFF) | 0x20000000)
            key_high = decrypt((serial & 0x0FFFFFFF) | 0x60000000)

        Args:
            serial: Encoder serial number (only the low 28 bits are used)
        """
        fix_sn = serial & SERIAL_MASK
        new_key_low = self.decrypt(fix_sn | NORMAL_LEARN_LOW_SEED)
        new_key_high = self.decrypt(fix_sn | NORMAL_LEARN_HIGH_SEED)

        self._key_high = new_key_high
        self._key_low = new_key_low
        _LOGGER.debug("Derived device key for serial %07X", fix_sn)

    def reflect_pack(self, word: int) -> int:
        """Reverse the bit order of a 32-bit word."""
        return reflect_pack(word)

    def encrypt_hop(self, hop: HopCode) -> int:
        """Encrypt a hopping code plaintext."""
        return self.encrypt(hop.to_word())

    def decrypt_hop(self, ciphertext: int, serial: Optional[int] = None) -> HopCode:
        """
        Decrypt a hopping code and split it into its fields.

        Args:
            ciphertext: Encrypted 32-bit hopping code
            serial: If given, the discrimination value must match the
                    low serial bits

        Returns:
            Decoded HopCode

        Raises:
            HopCodeError: If serial is given and does not match
        """
        hop = HopCode.from_word(self.decrypt(ciphertext))

        if serial is not None and not hop.matches_serial(serial):
            raise HopCodeError(
                f"Discrimination {hop.discrimination:#05x} does not match "
                f"serial {serial & SERIAL_MASK:07X}"
            )

        return hop
