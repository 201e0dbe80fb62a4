import pytest

from receipt_printer.escpos import commands as cmd
from receipt_printer.escpos.commands import ReceiptEncodingError
from receipt_printer.models.base import Alignment


def test_fixed_sequences():
    assert cmd.init() == b"\x1b\x40"
    assert cmd.codepage(0) == b"\x1b\x74\x00"
    assert cmd.line_feed() == b"\n"
    assert cmd.cut() == b"\x1d\x56\x00"
    assert cmd.feed(3) == b"\x1b\x64\x03"


def test_align_accepts_enum_and_int():
    assert cmd.align(Alignment.CENTER) == b"\x1b\x61\x01"
    assert cmd.align(2) == b"\x1b\x61\x02"
    assert cmd.align(0) == b"\x1b\x61\x00"


def test_bold_toggle():
    assert cmd.bold(True) == b"\x1b\x45\x01"
    assert cmd.bold(False) == b"\x1b\x45\x00"


@pytest.mark.parametrize(
    "w, h, expected",
    [(0, 0, 0x00), (0, 1, 0x01), (1, 0, 0x10), (1, 1, 0x11), (7, 7, 0x77)],
)
def test_size_packs_width_into_high_nibble(w, h, expected):
    assert cmd.size(w, h) == bytes([0x1D, 0x21, expected])


def test_out_of_range_arguments_rejected():
    with pytest.raises(ValueError):
        cmd.feed(256)
    with pytest.raises(ValueError):
        cmd.codepage(-1)
    with pytest.raises(ValueError):
        cmd.size(16, 0)


def test_horizontal_rule():
    assert cmd.horizontal_rule(32) == b"-" * 32
    assert cmd.horizontal_rule(0) == b""


def test_text_ascii():
    assert cmd.text("Toko Anda") == b"Toko Anda"


def test_text_accented_latin_uses_pc437():
    # é is 0x82 and ü is 0x81 in code page 437
    assert cmd.text("José") == b"Jos\x82"
    assert cmd.text("Müller") == b"M\x81ller"


def test_text_unrepresentable_is_rejected_by_default():
    with pytest.raises(ReceiptEncodingError) as info:
        cmd.text("Nguyễn")
    assert info.value.char == "ễ"
    assert "Nguyễn" in str(info.value)


def test_text_unrepresentable_replaced_when_permissive():
    assert cmd.text("Nguyễn", errors="replace") == b"Nguy?n"
