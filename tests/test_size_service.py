import pytest

from b64image.services.size_service import LARGE_FILE_THRESHOLD, humanize_bytes, is_large


@pytest.mark.parametrize("byte_count, expected", [
    (0, "0 Bytes"),
    (1, "1 Bytes"),
    (1023, "1023 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (20000, "19.53 KB"),
    (1048576, "1 MB"),
    (1024 ** 3, "1 GB"),
    (1024 ** 8, "1 YB"),
    (1024 ** 9, "1024 YB"),
])
def test_humanize_bytes(byte_count: int, expected: str):
    assert humanize_bytes(byte_count) == expected


@pytest.mark.parametrize("i", range(8))
def test_power_boundaries_move_to_next_unit(i: int):
    assert humanize_bytes(1024 ** (i + 1)).startswith("1 ")


def test_humanize_rejects_negative():
    with pytest.raises(ValueError):
        humanize_bytes(-1)


def test_large_file_threshold_is_strict():
    assert LARGE_FILE_THRESHOLD == 10240
    assert not is_large(10240)
    assert is_large(10241)
