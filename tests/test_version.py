import pytest

from qrversions.version import ECL, Mode, Version


def test_sizes_of_smallest_and_largest():
    assert Version.V01.size() == 21
    assert Version.V40.size() == 177


@pytest.mark.parametrize("version", list(Version))
def test_from_size_round_trip(version):
    assert Version.from_size(Version.size(version)) is version


@pytest.mark.parametrize("bad", [0, 20, 22, 23, 24, 178, 181, -21])
def test_from_size_rejects_invalid(bad):
    with pytest.raises(ValueError):
        Version.from_size(bad)


def test_sizes_step_by_four():
    sizes = [Version.size(version) for version in Version]
    assert len(sizes) == 40
    assert all(b - a == 4 for a, b in zip(sizes, sizes[1:]))
    assert Version.from_size(sizes[-1]) is Version.V40


def test_max_bytes_table_ends():
    assert Version.V01.max_bytes() == 26
    assert Version.V05.max_bytes() == 134
    assert Version.V40.max_bytes() == 3706


def test_max_bytes_strictly_increasing():
    values = [Version.max_bytes(version) for version in Version]
    assert values == sorted(set(values))
    assert values[0] == Version.V01.max_bytes()


def test_missing_bits_values():
    assert Version.V01.missing_bits() == 0
    assert Version.V02.missing_bits() == 7
    assert Version.V14.missing_bits() == 3
    assert Version.V21.missing_bits() == 4
    assert Version.V40.missing_bits() == 0


def test_missing_bits_cover_all_versions():
    bits = {Version.missing_bits(version) for version in Version}
    assert bits == {0, 3, 4, 7}


def test_information_below_seven_is_zero():
    for size in range(21, 45, 4):
        assert Version.from_size(size).information() == 0


def test_information_known_values():
    assert Version.V07.information() == 0b00_0111_1100_1001_0100
    assert Version.V40.information() == 0b10_1000_1100_0110_1001


@pytest.mark.parametrize("version", list(Version)[6:])
def test_information_top_bits_encode_version_number(version):
    info = Version.information(version)
    assert info >> 12 == (Version.size(version) - 17) // 4
    assert info < 1 << 18


def test_alignment_grid_version_one_is_empty():
    assert Version.V01.alignment_patterns_grid() == ()


def test_alignment_grid_known_values():
    assert Version.V02.alignment_patterns_grid() == (6, 18)
    assert Version.V07.alignment_patterns_grid() == (6, 22, 38)
    assert Version.V40.alignment_patterns_grid() == (6, 30, 58, 86, 114, 142, 170)


@pytest.mark.parametrize("version", list(Version)[1:])
def test_alignment_grid_spans_symbol(version):
    grid = Version.alignment_patterns_grid(version)
    assert grid[0] == 6
    assert grid[-1] == Version.size(version) - 7
    assert list(grid) == sorted(grid)


def test_version_number_property():
    assert Version.from_size(21).number == 1
    assert Version.from_size(177).number == 40


def test_mode_indicators():
    assert Mode(0b0001) is Mode.NUMERIC
    assert Mode(0b0010) is Mode.ALPHANUMERIC
    assert Mode(0b0100) is Mode.BYTE


def test_ecl_order():
    ordered = sorted(ECL, key=lambda e: e.value)
    assert [ECL(level.value).name for level in ordered] == ["L", "M", "Q", "H"]