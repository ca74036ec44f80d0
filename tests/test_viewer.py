import io

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from bitmap import Bitmap  # noqa: E402
from main import apply_transform  # noqa: E402
from pbm_parser import decode  # noqa: E402


def test_apply_transform_runs_operation():
    bmp = Bitmap([[True, True, False]], 3, 1)
    assert apply_transform(bmp, "flip") is None
    assert bmp.rows == [[False, True, True]]


@pytest.mark.parametrize("data", [
    b"P1\n3 2\n101\n",          # missing last row
    b"P4\n16 1\n\xff\n",        # fewer bytes than the declared width
])
@pytest.mark.parametrize("name", ["invert", "flip"])
def test_apply_transform_reports_short_rows(data, name):
    bmp = decode(io.BytesIO(data))
    before = [list(row) for row in bmp.rows]

    error = apply_transform(bmp, name)

    assert error.startswith(f"Error: cannot {name} image")
    assert bmp.rows == before


def test_apply_transform_flop_ignores_row_length():
    bmp = decode(io.BytesIO(b"P1\n3 2\n101\n"))
    assert apply_transform(bmp, "flop") is None
    assert bmp.rows == [[], [True, False, True]]
