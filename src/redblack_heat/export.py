# ------------------------------------------------------------
# Image export of the final temperature field (Matplotlib)
# ------------------------------------------------------------
#   - figure formats (png, pdf, svg, ...): heatmap with title and colorbar
#   - anything else, or no extension: one pixel per cell, written as BMP
#   - row y = 0 (the warm edge) is drawn at the top
# ------------------------------------------------------------

from __future__ import annotations

from pathlib import Path

import numpy as np

import matplotlib
matplotlib.use("Agg")  # Use a non-GUI backend (works without Tcl/Tk)

import matplotlib.pyplot as plt
from matplotlib.backend_bases import FigureCanvasBase

CMAP = "inferno"


def _as_field(data: np.ndarray, width: int, height: int) -> np.ndarray:
    if data.size != width * height:
        raise ValueError(f"Export error: buffer has {data.size} cells, expected {width * height}.")
    return np.asarray(data).reshape(height, width)


def save_heatmap(out_path: Path, T: np.ndarray, title: str) -> None:
    """
    Save a heatmap figure (dpi=300).
    T is expected to be a 2D array shaped (height, width).
    """
    fig = plt.figure(figsize=(6.2, 5.0), dpi=300)
    ax = fig.add_subplot(1, 1, 1)

    im = ax.imshow(T, origin="upper", aspect="auto", cmap=CMAP)
    ax.set_title(title)
    ax.set_xlabel("x index")
    ax.set_ylabel("y index")

    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    fig.tight_layout()
    fig.savefig(out_path, dpi=300)
    plt.close(fig)


def save_raw_image(out_path: Path, T: np.ndarray) -> None:
    """BMP with one pixel per cell, colour-mapped between the field's min and max."""
    plt.imsave(out_path, T, cmap=CMAP, origin="upper", format="bmp")


def export_grid(filename: str, width: int, height: int, data: np.ndarray) -> None:
    """
    Write the flat temperature buffer to `filename`.

    Figure extensions (png, pdf, svg, ...) get a heatmap; any other path,
    with or without an extension, is written as a raw BMP.
    """
    out_path = Path(filename)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    T = _as_field(data, width, height)

    fmt = out_path.suffix.lstrip(".").lower()
    if fmt in FigureCanvasBase.get_supported_filetypes():
        save_heatmap(out_path, T, f"Steady-state temperature ({width}x{height})")
    else:
        save_raw_image(out_path, T)
