"""QR code versions, error-correction levels and encoding modes."""

from __future__ import annotations

import enum


class Mode(enum.Enum):
    """Data encoding mode; the value is the 4-bit mode indicator."""

    NUMERIC = 0b0001
    ALPHANUMERIC = 0b0010
    BYTE = 0b0100


class ECL(enum.Enum):
    """Error-correction level, from lowest to highest redundancy."""

    L = 0
    M = 1
    Q = 2
    H = 3


_MAX_BYTES = (
    26, 44, 70, 100, 134, 172, 196, 242, 292, 346, 404, 466, 532, 581, 655, 733, 815, 901, 991,
    1085, 1156, 1258, 1364, 1474, 1588, 1706, 1828, 1921, 2051, 2185, 2323, 2465, 2611, 2761,
    2876, 3034, 3196, 3362, 3532, 3706,
)

_VERSION_INFORMATION = (
    0,
    0,
    0,
    0,
    0,
    0,
    0b00_0111_1100_1001_0100,
    0b00_1000_0101_1011_1100,
    0b00_1001_1010_1001_1001,
    0b00_1010_0100_1101_0011,
    0b00_1011_1011_1111_0110,
    0b00_1100_0111_0110_0010,
    0b00_1101_1000_0100_0111,
    0b00_1110_0110_0000_1101,
    0b00_1111_1001_0010_1000,
    0b01_0000_1011_0111_1000,
    0b01_0001_0100_0101_1101,
    0b01_0010_1010_0001_0111,
    0b01_0011_0101_0011_0010,
    0b01_0100_1001_1010_0110,
    0b01_0101_0110_1000_0011,
    0b01_0110_1000_1100_1001,
    0b01_0111_0111_1110_1100,
    0b01_1000_1110_1100_0100,
    0b01_1001_0001_1110_0001,
    0b01_1010_1111_1010_1011,
    0b01_1011_0000_1000_1110,
    0b01_1100_1100_0001_1010,
    0b01_1101_0011_0011_1111,
    0b01_1110_1101_0111_0101,
    0b01_1111_0010_0101_0000,
    0b10_0000_1001_1101_0101,
    0b10_0001_0110_1111_0000,
    0b10_0010_1000_1011_1010,
    0b10_0011_0111_1001_1111,
    0b10_0100_1011_0000_1011,
    0b10_0101_0100_0010_1110,
    0b10_0110_1010_0110_0100,
    0b10_0111_0101_0100_0001,
    0b10_1000_1100_0110_1001,
)

_ALIGNMENT_PATTERNS_GRID: tuple[tuple[int, ...], ...] = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

# Remainder bits appended after the final codeword, keyed by version number.
_MISSING_BITS = {
    **{n: 0 for n in (1, 7, 8, 9, 10, 11, 12, 13, 35, 36, 37, 38, 39, 40)},
    **{n: 3 for n in (14, 15, 16, 17, 18, 19, 20, 28, 29, 30, 31, 32, 33, 34)},
    **{n: 4 for n in (21, 22, 23, 24, 25, 26, 27)},
    **{n: 7 for n in (2, 3, 4, 5, 6)},
}


class Version(enum.Enum):
    """The forty QR code versions; the value is the zero-based index."""

    V01 = 0
    V02 = 1
    V03 = 2
    V04 = 3
    V05 = 4
    V06 = 5
    V07 = 6
    V08 = 7
    V09 = 8
    V10 = 9
    V11 = 10
    V12 = 11
    V13 = 12
    V14 = 13
    V15 = 14
    V16 = 15
    V17 = 16
    V18 = 17
    V19 = 18
    V20 = 19
    V21 = 20
    V22 = 21
    V23 = 22
    V24 = 23
    V25 = 24
    V26 = 25
    V27 = 26
    V28 = 27
    V29 = 28
    V30 = 29
    V31 = 30
    V32 = 31
    V33 = 32
    V34 = 33
    V35 = 34
    V36 = 35
    V37 = 36
    V38 = 37
    V39 = 38
    V40 = 39

    @property
    def number(self) -> int:
        """The one-based version number."""
        return self.value + 1

    @classmethod
    def from_size(cls, size: int) -> Version:
        """Return the version whose matrix is ``size`` modules wide.

        Raises ValueError unless ``size`` is one of 21, 25, ..., 177.
        """
        if not isinstance(size, int) or size < 21 or size > 177 or (size - 21) % 4:
            raise ValueError(f"Invalid matrix size: {size!r}")
        return cls((size - 21) // 4)

    def missing_bits(self) -> int:
        """Number of remainder bits padded at the very end of the symbol."""
        return _MISSING_BITS[self.number]

    def max_bytes(self) -> int:
        """Total number of codewords (data and error correction) the symbol holds."""
        return _MAX_BYTES[self.value]

    def information(self) -> int:
        """The 18-bit version information block; 0 below version 7."""
        return _VERSION_INFORMATION[self.value]

    def alignment_patterns_grid(self) -> tuple[int, ...]:
        """Row/column coordinates of the alignment pattern centres."""
        return _ALIGNMENT_PATTERNS_GRID[self.value]

    def size(self) -> int:
        """Width of the symbol in modules."""
        return self.value * 4 + 21