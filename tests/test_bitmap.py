import pytest

from bitmap import Bitmap, PBMFormat
from errors import FormatError


def sample():
    return Bitmap([[True, False, True], [False, True, False]], 3, 2)


def asymmetric():
    return Bitmap(
        [
            [True, True, False, False],
            [False, False, False, True],
            [True, False, False, False],
        ],
        4, 3, PBMFormat.PACKED_BINARY,
    )


def test_size_and_at():
    bmp = sample()
    assert bmp.size() == (3, 2)
    assert bmp.at(0, 0) is True
    assert bmp.at(1, 0) is False
    assert bmp.at(1, 1) is True


def test_set():
    bmp = sample()
    bmp.set(1, 0, True)
    assert bmp.at(1, 0) is True
    assert bmp.rows[0] == [True, True, True]


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_access_faults(x, y):
    bmp = sample()
    with pytest.raises(IndexError):
        bmp.at(x, y)
    with pytest.raises(IndexError):
        bmp.set(x, y, True)


def test_constructor_copies_rows():
    rows = [[True, False]]
    bmp = Bitmap(rows, 2, 1)
    bmp.set(0, 0, False)
    assert rows == [[True, False]]


def test_blank():
    bmp = Bitmap.blank(2, 3, PBMFormat.PACKED_BINARY)
    assert bmp.rows == [[False, False]] * 3
    assert bmp.format is PBMFormat.PACKED_BINARY
    bmp.set(0, 0, True)
    assert bmp.rows[1] == [False, False]


def test_invert():
    bmp = sample()
    bmp.invert()
    assert bmp.rows == [[False, True, False], [True, False, True]]


def test_invert_is_self_inverse():
    bmp = asymmetric()
    bmp.invert()
    bmp.invert()
    assert bmp == asymmetric()


def test_flip_palindromic_rows_unchanged():
    bmp = sample()
    bmp.flip()
    assert bmp.rows == [[True, False, True], [False, True, False]]


def test_flip_single_row():
    bmp = Bitmap([[True, True, False]], 3, 1)
    bmp.flip()
    assert bmp.rows == [[False, True, True]]


def test_flip_even_width():
    bmp = asymmetric()
    bmp.flip()
    assert bmp.rows == [
        [False, False, True, True],
        [True, False, False, False],
        [False, False, False, True],
    ]


def test_flip_keeps_middle_column():
    bmp = Bitmap([[True, False, False], [False, True, True]], 3, 2)
    middle = [row[1] for row in bmp.rows]
    bmp.flip()
    assert [row[1] for row in bmp.rows] == middle
    bmp.flip()
    assert bmp.rows == [[True, False, False], [False, True, True]]


def test_flop_swaps_rows_and_keeps_middle_row():
    bmp = asymmetric()
    bmp.flop()
    assert bmp.rows == [
        [True, False, False, False],
        [False, False, False, True],
        [True, True, False, False],
    ]
    bmp.flop()
    assert bmp == asymmetric()


def test_transforms_preserve_dimensions():
    bmp = asymmetric()
    for op in (bmp.invert, bmp.flip, bmp.flop):
        op()
        assert len(bmp.rows) == 3
        assert all(len(row) == 4 for row in bmp.rows)
    assert bmp.size() == (4, 3)


def test_set_format_leaves_pixels_alone():
    bmp = sample()
    bmp.set_format(PBMFormat.PACKED_BINARY)
    assert bmp.format is PBMFormat.PACKED_BINARY
    assert bmp.same_pixels(sample())
    assert bmp != sample()

    bmp.set_format("P1")
    assert bmp == sample()


def test_set_format_rejects_unknown_magic():
    with pytest.raises(FormatError):
        sample().set_format("P2")


def test_from_magic():
    assert PBMFormat.from_magic("P1") is PBMFormat.PLAIN_TEXT
    assert PBMFormat.from_magic("P4") is PBMFormat.PACKED_BINARY
    with pytest.raises(FormatError):
        PBMFormat.from_magic("P6")


def test_repr():
    assert repr(sample()) == "Bitmap(P1, 3x2)"
