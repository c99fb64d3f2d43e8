"""Cryptographic primitives for KeeLoq."""

from .cipher import Keeloq, reflect_pack
from .keys import (
    split_key,
    join_key,
    derive_device_key,
)

__all__ = [
    "Keeloq",
    "reflect_pack",
    "split_key",
    "join_key",
    "derive_device_key",
]
