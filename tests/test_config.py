"""Tests for key material configuration."""

import pytest

from keeloq import ConfigError, KeeloqConfig, derive_device_key, load_config_from_env
from keeloq.config import parse_key, parse_serial, parse_word

MANUFACTURER_KEY = 0x5CEC6701B79FD949


@pytest.mark.parametrize(
    "value",
    [
        MANUFACTURER_KEY,
        "5CEC6701B79FD949",
        "0x5cec6701b79fd949",
        "5C:EC:67:01:B7:9F:D9:49",
        "5CEC_6701_B79F_D949",
        " 5CEC6701 B79FD949 ",
    ],
)
def test_parse_key_formats(value):
    assert parse_key(value) == MANUFACTURER_KEY


@pytest.mark.parametrize("value", ["", "xyz", "1" * 17, -1, 1 << 64, 1.5, None, True])
def test_parse_key_rejects(value):
    with pytest.raises(ConfigError):
        parse_key(value)


def test_zero_key_is_valid():
    assert parse_key("0") == 0


def test_parse_serial():
    assert parse_serial("0x0ABCDEF") == 0x0ABCDEF
    assert parse_serial(0xFFFFFFFF) == 0xFFFFFFFF
    with pytest.raises(ConfigError):
        parse_serial(1 << 32)


def test_parse_word():
    assert parse_word("E44F4CDF") == 0xE44F4CDF
    with pytest.raises(ConfigError):
        parse_word("123456789")


def test_from_dict_defaults():
    config = KeeloqConfig.from_dict({"manufacturer_key": "5CEC6701B79FD949"})
    assert config.manufacturer_key == MANUFACTURER_KEY
    assert config.serial is None
    assert config.learning == "normal"


def test_from_dict_learning_case_insensitive():
    config = KeeloqConfig.from_dict(
        {"manufacturer_key": MANUFACTURER_KEY, "learning": "NONE"}
    )
    assert config.learning == "none"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"serial": 1},
        {"manufacturer_key": "zz"},
        {"manufacturer_key": MANUFACTURER_KEY, "learning": "secure"},
        {"manufacturer_key": MANUFACTURER_KEY, "serial": "not hex"},
        {"manufacturer_key": MANUFACTURER_KEY, "extra": 1},
    ],
)
def test_from_dict_rejects(data):
    with pytest.raises(ConfigError):
        KeeloqConfig.from_dict(data)


def test_build_cipher_derives_device_key():
    config = KeeloqConfig.from_dict(
        {"manufacturer_key": MANUFACTURER_KEY, "serial": "0ABCDEF"}
    )
    assert config.build_cipher().key == derive_device_key(MANUFACTURER_KEY, 0x0ABCDEF)


def test_build_cipher_without_serial_uses_manufacturer_key():
    config = KeeloqConfig(manufacturer_key=MANUFACTURER_KEY)
    assert config.build_cipher().key == MANUFACTURER_KEY


def test_build_cipher_without_learning():
    config = KeeloqConfig(manufacturer_key=MANUFACTURER_KEY, serial=0x0ABCDEF, learning="none")
    assert config.build_cipher().key == MANUFACTURER_KEY


def test_load_config_from_env():
    config = load_config_from_env(
        {
            "KEELOQ_MANUFACTURER_KEY": "0x5CEC6701B79FD949",
            "KEELOQ_SERIAL": "0ABCDEF",
            "KEELOQ_LEARNING": "normal",
        }
    )
    assert config == KeeloqConfig(MANUFACTURER_KEY, 0x0ABCDEF, "normal")


def test_load_config_from_env_missing_key():
    with pytest.raises(ConfigError):
        load_config_from_env({})
