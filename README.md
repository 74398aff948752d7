# qrversions

Tables that describe the forty QR code versions, and a lookup that picks the
smallest version able to hold a payload.

## Installation

    pip install qrversions

## Usage

The `qrversions.version` module defines three enums:

- `Mode`: the data encoding mode (`NUMERIC`, `ALPHANUMERIC`, `BYTE`). Each
  value is the 4-bit mode indicator.
- `ECL`: the error-correction level (`L`, `M`, `Q`, `H`).
- `Version`: the versions `V01` to `V40`. Each value is the zero-based index.

### Choosing a version

`qrversions.capacity.best_version(mode, ecl, length)` returns the smallest
`Version` that holds `length` characters in the given mode at the given
level:

```python
from qrversions.capacity import best_version
from qrversions.version import ECL, Mode

version = best_version(Mode.ALPHANUMERIC, ECL.M, 42)
print(version)           # Version.V03
print(version.size())    # 29
```

It returns `None` when the payload is too long even for version 40. It raises
`ValueError` for a negative length.

### Layout facts about a version

```python
from qrversions.version import Version

v = Version.V07
v.number                      # 7
v.size()                      # 45, the width in modules
v.max_bytes()                 # total codewords, data and error correction
v.missing_bits()              # remainder bits after the last codeword
v.information()               # 18-bit version information word, 0 below V07
v.alignment_patterns_grid()   # centre coordinates of the alignment patterns

Version.from_size(45)         # Version.V07
```

`Version.from_size` raises `ValueError` for a width that is not one of
21, 25, ..., 177.

## What this package does not do

It holds only version tables and capacity lookup. It does not encode data,
compute error-correction codewords, apply masks or draw a QR code matrix or
image.

## Running the tests

    pip install "qrversions[test]"
    pytest