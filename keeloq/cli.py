#!/usr/bin/env python3
"""
KeeLoq command line tool

Usage:
    # Encrypt a hopping code with a device key derived from a serial
    keeloq encrypt 0x1234ABCD --key 0x5CEC6701B79FD949 --serial 0x0ABCDEF

    # Decrypt with a raw key
    keeloq decrypt 0xE44F4CDF --key 0x5CEC6701B79FD949 --learning none

    # Derive a device key (normal learning)
    keeloq learn 0x0ABCDEF --key 0x5CEC6701B79FD949

    # Reverse the bit order of a captured word
    keeloq reflect 0x00000001

The key, serial and learning mode can also be set through
KEELOQ_MANUFACTURER_KEY, KEELOQ_SERIAL and KEELOQ_LEARNING.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    CONF_LEARNING,
    CONF_MANUFACTURER_KEY,
    CONF_SERIAL,
    KeeloqConfig,
    config_data_from_env,
    parse_serial,
    parse_word,
)
from .const import LEARNING_MODES
from .crypto import derive_device_key, reflect_pack
from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def _build_config(args: argparse.Namespace) -> KeeloqConfig:
    """Merge command line options over the environment."""
    data = config_data_from_env()
    if args.key is not None:
        data[CONF_MANUFACTURER_KEY] = args.key
    if getattr(args, "serial", None) is not None:
        data[CONF_SERIAL] = args.serial
    if getattr(args, "learning", None) is not None:
        data[CONF_LEARNING] = args.learning

    return KeeloqConfig.from_dict(data)


def _cmd_encrypt(args: argparse.Namespace) -> int:
    cipher = _build_config(args).build_cipher()
    print(f"{cipher.encrypt(parse_word(args.word)):08X}")
    return EXIT_OK


def _cmd_decrypt(args: argparse.Namespace) -> int:
    cipher = _build_config(args).build_cipher()
    print(f"{cipher.decrypt(parse_word(args.word)):08X}")
    return EXIT_OK


def _cmd_learn(args: argparse.Namespace) -> int:
    config = _build_config(args)
    serial = parse_serial(args.serial_number)
    print(f"{derive_device_key(config.manufacturer_key, serial):016X}")
    return EXIT_OK


def _cmd_reflect(args: argparse.Namespace) -> int:
    print(f"{reflect_pack(parse_word(args.word)):08X}")
    return EXIT_OK


def _add_key_options(parser: argparse.ArgumentParser, with_serial: bool = True):
    parser.add_argument("--key", help="Manufacturer key (64-bit hex)")
    if with_serial:
        parser.add_argument("--serial", help="Encoder serial (hex), derives the device key")
        parser.add_argument(
            "--learning",
            choices=LEARNING_MODES,
            help="Key derivation mode (default: normal)",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keeloq", description="KeeLoq cipher tool")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt a 32-bit word")
    enc.add_argument("word", help="Plaintext (32-bit hex)")
    _add_key_options(enc)
    enc.set_defaults(func=_cmd_encrypt)

    dec = sub.add_parser("decrypt", help="Decrypt a 32-bit word")
    dec.add_argument("word", help="Ciphertext (32-bit hex)")
    _add_key_options(dec)
    dec.set_defaults(func=_cmd_decrypt)

    learn = sub.add_parser("learn", help="Derive a device key by normal learning")
    learn.add_argument("serial_number", help="Encoder serial (hex)")
    _add_key_options(learn, with_serial=False)
    learn.set_defaults(func=_cmd_learn)

    reflect = sub.add_parser("reflect", help="Reverse the bit order of a 32-bit word")
    reflect.add_argument("word", help="Word (32-bit hex)")
    reflect.set_defaults(func=_cmd_reflect, key=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except ConfigError as err:
        _LOGGER.debug("Configuration error", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
