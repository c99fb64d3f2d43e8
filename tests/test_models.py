"""Tests for the hopping code model."""

from keeloq import HopCode


def test_from_word_splits_fields():
    hop = HopCode.from_word(0xA5551234)
    assert hop.button == 0xA
    assert hop.overflow == 0x1
    assert hop.discrimination == 0x155
    assert hop.counter == 0x1234


def test_to_word_packs_fields():
    hop = HopCode(button=0xA, discrimination=0x155, counter=0x1234, overflow=1)
    assert hop.to_word() == 0xA5551234


def test_fields_are_masked():
    hop = HopCode(button=0x1F, discrimination=0xFFFF, counter=0x12345, overflow=7)
    assert hop.button == 0xF
    assert hop.discrimination == 0x3FF
    assert hop.counter == 0x2345
    assert hop.overflow == 0x3
    assert hop.to_word() == 0xFFFF2345


def test_from_word_ignores_high_bits():
    assert HopCode.from_word(0xA5551234 | (1 << 40)) == HopCode.from_word(0xA5551234)


def test_matches_serial():
    hop = HopCode.from_word(0xA5551234)
    assert hop.matches_serial(0x0ABC155)
    assert not hop.matches_serial(0x0ABC156)


def test_str():
    hop = HopCode(button=0x2, discrimination=0x1EF, counter=42)
    assert str(hop) == "HopCode(button=0x2, counter=42, disc=0x1ef)"
