"""Tests for the image exporter."""

import numpy as np
import pytest

from redblack_heat import allocate_grid, initialize
from redblack_heat.export import export_grid


@pytest.fixture
def field():
    grid = allocate_grid(8, 6)
    initialize(grid)
    return grid


def test_png_heatmap(tmp_path, field) -> None:
    out = tmp_path / "plots" / "final.png"
    export_grid(str(out), field.width, field.height, field.data)
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_bmp_raw_image(tmp_path, field) -> None:
    out = tmp_path / "final.bmp"
    export_grid(str(out), field.width, field.height, field.data)
    assert out.read_bytes()[:2] == b"BM"


def test_export_leaves_buffer_untouched(tmp_path, field) -> None:
    before = field.data.copy()
    export_grid(str(tmp_path / "final.png"), field.width, field.height, field.data)
    assert np.array_equal(field.data, before)


def test_buffer_size_must_match(tmp_path) -> None:
    with pytest.raises(ValueError):
        export_grid(str(tmp_path / "x.png"), 4, 4, np.zeros(15))


@pytest.mark.parametrize("name", ["final", "final.dat", "nested/final.out"])
def test_unknown_or_missing_extension_writes_bmp(tmp_path, field, name) -> None:
    out = tmp_path / name
    export_grid(str(out), field.width, field.height, field.data)
    assert out.read_bytes()[:2] == b"BM"
