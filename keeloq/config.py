"""Configuration of KeeLoq key material."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

import voluptuous as vol

from .const import (
    ENV_LEARNING,
    ENV_MANUFACTURER_KEY,
    ENV_SERIAL,
    KEY64_MASK,
    LEARNING_MODES,
    LEARNING_NORMAL,
    WORD_MASK,
)
from .crypto import Keeloq
from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

CONF_MANUFACTURER_KEY = "manufacturer_key"
CONF_SERIAL = "serial"
CONF_LEARNING = "learning"


def hex_int(value: Any) -> int:
    """Coerce an int or a hex string (0x prefix, separators allowed) to int."""
    if isinstance(value, bool):
        raise vol.Invalid("expected an integer or hex string")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise vol.Invalid("expected an integer or hex string")

    text = value.strip().lower()
    for sep in (":", "_", " "):
        text = text.replace(sep, "")
    if text.startswith("0x"):
        text = text[2:]

    try:
        return int(text, 16)
    except ValueError as err:
        raise vol.Invalid(f"invalid hex value: {value!r}") from err


KEY_SCHEMA = vol.Schema(
    vol.All(hex_int, vol.Range(min=0, max=KEY64_MASK, msg="key must fit in 64 bits"))
)

WORD_SCHEMA = vol.Schema(
    vol.All(hex_int, vol.Range(min=0, max=WORD_MASK, msg="value must fit in 32 bits"))
)

# Serials are full 32-bit words, normal learning drops the top 4 bits
SERIAL_SCHEMA = WORD_SCHEMA

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_MANUFACTURER_KEY): KEY_SCHEMA,
        vol.Optional(CONF_SERIAL): SERIAL_SCHEMA,
        vol.Optional(CONF_LEARNING, default=LEARNING_NORMAL): vol.All(
            str, vol.Lower, vol.In(LEARNING_MODES)
        ),
    }
)


def parse_key(value: Any) -> int:
    """
    Validate a 64-bit key.

    Raises:
        ConfigError: If the value is not a valid key
    """
    try:
        return KEY_SCHEMA(value)
    except vol.Invalid as err:
        raise ConfigError(f"Invalid key {value!r}: {err}") from err


def parse_serial(value: Any) -> int:
    """
    Validate a 32-bit serial number.

    Raises:
        ConfigError: If the value is not a valid serial
    """
    try:
        return SERIAL_SCHEMA(value)
    except vol.Invalid as err:
        raise ConfigError(f"Invalid serial {value!r}: {err}") from err


def parse_word(value: Any) -> int:
    """
    Validate a 32-bit data word.

    Raises:
        ConfigError: If the value does not fit in 32 bits
    """
    try:
        return WORD_SCHEMA(value)
    except vol.Invalid as err:
        raise ConfigError(f"Invalid word {value!r}: {err}") from err


@dataclass
class KeeloqConfig:
    """Validated key material for a cipher."""
    manufacturer_key: int
    serial: int | None = None
    learning: str = LEARNING_NORMAL

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeeloqConfig:
        """
        Build a config from a plain mapping.

        Args:
            data: Dict with 'manufacturer_key', optional 'serial' and 'learning'

        Raises:
            ConfigError: If validation fails
        """
        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ConfigError(f"Invalid configuration: {err}") from err

        return cls(
            manufacturer_key=validated[CONF_MANUFACTURER_KEY],
            serial=validated.get(CONF_SERIAL),
            learning=validated[CONF_LEARNING],
        )

    def build_cipher(self) -> Keeloq:
        """
        Create a keyed cipher.

        With normal learning and a serial, the device key is derived from
        the manufacturer key. Otherwise the manufacturer key is used as is.
        """
        cipher = Keeloq(self.manufacturer_key)
        if self.learning == LEARNING_NORMAL and self.serial is not None:
            cipher.normal_learn(self.serial)
        else:
            _LOGGER.debug("Using manufacturer key without learning")
        return cipher


def config_data_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect raw config values from KEELOQ_* environment variables."""
    if environ is None:
        environ = os.environ

    data: dict[str, Any] = {}
    if ENV_MANUFACTURER_KEY in environ:
        data[CONF_MANUFACTURER_KEY] = environ[ENV_MANUFACTURER_KEY]
    if ENV_SERIAL in environ:
        data[CONF_SERIAL] = environ[ENV_SERIAL]
    if ENV_LEARNING in environ:
        data[CONF_LEARNING] = environ[ENV_LEARNING]
    return data


def load_config_from_env(environ: Mapping[str, str] | None = None) -> KeeloqConfig:
    """
    Read key material from KEELOQ_* environment variables.

    Raises:
        ConfigError: If the manufacturer key is missing or invalid
    """
    return KeeloqConfig.from_dict(config_data_from_env(environ))
