"""Shared test fixtures and helpers for dat2inp tests."""

import struct
from pathlib import Path
from typing import Optional

import pytest

#: Length of the fixed .DAT header (end of ST6).
DAT_SIZE = 397


class DatBuilder:
    """Write fields into a synthetic .DAT buffer at explicit offsets."""

    def __init__(self, size: int = DAT_SIZE) -> None:
        self.buffer = bytearray(size)

    def pstring(self, offset: int, text: str,
                declared: Optional[int] = None) -> "DatBuilder":
        """Store *text* as a Pascal string; *declared* overrides the length byte."""
        data = text.encode("latin-1")
        self.buffer[offset] = len(data) if declared is None else declared
        self.buffer[offset + 1:offset + 1 + len(data)] = data
        return self

    def number(self, offset: int, fmt: str, value) -> "DatBuilder":
        struct.pack_into(fmt, self.buffer, offset, value)
        return self

    def char(self, offset: int, value: str) -> "DatBuilder":
        self.buffer[offset] = ord(value)
        return self

    def to_bytes(self) -> bytes:
        return bytes(self.buffer)


@pytest.fixture
def dat_builder():
    """Return the DatBuilder class for building buffers in a test."""
    return DatBuilder


@pytest.fixture
def minimal_dat() -> bytes:
    """397 zero bytes with spectrum id ABCD and real = live = 1."""
    return (
        DatBuilder()
        .pstring(0, "ABCD")
        .number(193, "<i", 1)
        .number(197, "<i", 1)
        .to_bytes()
    )


@pytest.fixture
def sample_dat() -> bytes:
    """A fully populated .DAT header resembling a real soil sample export."""
    b = DatBuilder()
    b.pstring(0, "S001")
    b.pstring(5, "Soil sample 17  ")
    b.pstring(46, "RAD ")
    b.pstring(51, "Osteras, Baerum")
    b.number(82, "<f", 59.9)
    b.char(86, "N")
    b.number(87, "<f", 10.5)
    b.char(91, "E")
    b.number(92, "<f", 2.5)
    b.number(96, "<f", 150.0)
    b.number(100, "<f", 1.25)
    b.number(104, "<f", 125.0)
    b.number(108, "<f", 0.75)
    b.number(112, "<f", 5.0)
    b.pstring(116, "kg")
    b.pstring(119, "D1")
    b.pstring(122, "11")
    b.pstring(125, "MB")
    b.pstring(128, "110301120000")
    b.pstring(141, "110302120000")
    b.pstring(154, "110301120000")
    b.pstring(167, "110305083000")
    b.pstring(180, "110305093000")
    b.number(193, "<i", 3600)
    b.number(197, "<i", 3000)
    b.number(201, "<i", 3600)
    b.pstring(209, "NUCLIB01.LIB")
    b.pstring(222, "")
    b.number(235, "<i", 4096)
    b.pstring(239, "SP")
    b.number(243, "<h", 512)
    b.number(245, "<f", 2.0)
    b.number(249, "<f", 1.5)
    b.number(253, "<f", 3.0)
    b.number(257, "<f", 0.5)
    b.number(261, "<f", 1.0)
    b.number(265, "<f", 0.25)
    b.number(269, "<h", 1)
    b.pstring(271, "ENERGY.CAL")
    b.pstring(284, "PEF01.CAL")
    b.pstring(297, "TEF01.CAL")
    b.pstring(310, "BKG2011.SPE")
    for i in range(6):
        b.number(323 + 4 * i, "<i", i + 1)
    for i, flag in enumerate((1, 0, 1, 0, 1)):
        b.number(347 + 2 * i, "<h", flag)
    for i in range(6):
        b.number(357 + 4 * i, "<i", 10 * (i + 1))
    b.number(381, "<h", 1)
    b.number(383, "<h", 0)
    for i, status in enumerate((-1, 0, 1, 2, 3, 4)):
        b.number(385 + 2 * i, "<h", status)
    return b.to_bytes()


@pytest.fixture
def dat_dir(tmp_path: Path, sample_dat: bytes, minimal_dat: bytes) -> Path:
    """A directory with two good exports, one truncated export and a stray file."""
    (tmp_path / "SPEC0001.DAT").write_bytes(sample_dat)
    (tmp_path / "spec0002.dat").write_bytes(minimal_dat)
    (tmp_path / "BROKEN.DAT").write_bytes(sample_dat[:200])
    (tmp_path / "notes.txt").write_text("not an export", encoding="utf-8")
    return tmp_path
