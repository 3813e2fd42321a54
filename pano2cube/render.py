"""
render.py — Render the six cube faces of an equirectangular panorama.

CubemapRenderer walks a fixed sequence

    IDLE → RENDERING(0) → … → RENDERING(5) → DONE
                  └── writer/render error ──→ FAILED

Each face is rendered into a fresh RGBA grid, handed to the writer as
face<k>.png and discarded.  A failure on face k leaves faces 0..k-1 wherever
the writer put them; nothing is retried.

Memory note: a face is rendered in bands of ROW_BAND rows so the
intermediate float arrays stay small even for large faces.
"""

import enum
from typing import Callable, Optional

import numpy as np

from .errors import RenderStateError
from .projection import FACE_COUNT, direction_to_uv, face_to_direction
from .sampling import sample
from .vectors import to_color

FACE_NAME = 'face{index}.png'
ROW_BAND = 256

Writer = Callable[[str, np.ndarray], object]


def face_name(face_index: int) -> str:
    return FACE_NAME.format(index=face_index)


# ── Single face ───────────────────────────────────────────────────────────────

def render_face(source: np.ndarray, face_index: int, face_size: int,
                band: int = ROW_BAND) -> np.ndarray:
    """
    Project *source* onto one cube face.

    Args:
        source:     (H, W, C) uint8 equirectangular grid
        face_index: 0..5
        face_size:  output side length in pixels
        band:       rows computed per vectorised pass

    Returns:
        (face_size, face_size, 4) uint8 RGBA grid, alpha 255
    """
    out = np.empty((face_size, face_size, 4), dtype=np.uint8)
    columns = np.arange(face_size, dtype=np.float64)

    for top in range(0, face_size, band):
        bottom = min(top + band, face_size)
        rows = np.arange(top, bottom, dtype=np.float64)
        i, j = np.meshgrid(columns, rows)   # i = column, j = row

        direction = face_to_direction(i, j, face_index, face_size)
        uv = direction_to_uv(direction)
        out[top:bottom] = to_color(sample(source, uv.u, uv.v))

    return out


# ── Driver ────────────────────────────────────────────────────────────────────

class RenderState(enum.Enum):
    IDLE = 'idle'
    RENDERING = 'rendering'
    DONE = 'done'
    FAILED = 'failed'


class CubemapRenderer:
    """
    Step through the six faces, rendering each and passing it to *writer*.

    writer(name, grid) stores one face; on_face(face_index, name), if given,
    is called after each face has been written.
    """

    def __init__(self, source: np.ndarray, face_size: int, writer: Writer,
                 on_face: Optional[Callable[[int, str], None]] = None,
                 band: int = ROW_BAND):
        if face_size <= 0:
            raise ValueError(f"face size must be positive, got {face_size}")
        self.source = source
        self.face_size = face_size
        self.writer = writer
        self.on_face = on_face
        self.band = band
        self.state = RenderState.IDLE
        self.face_index = 0

    @property
    def finished(self) -> bool:
        return self.state in (RenderState.DONE, RenderState.FAILED)

    def step(self) -> str:
        """Render and write the next face. Returns the face's file name."""
        if self.finished:
            raise RenderStateError(f"renderer is {self.state.value}, nothing left to render")

        self.state = RenderState.RENDERING
        index = self.face_index
        name = face_name(index)
        print(f"  Converting face {index} → {name} … ", end='', flush=True)

        try:
            grid = render_face(self.source, index, self.face_size, self.band)
            self.writer(name, grid)
        except Exception:
            self.state = RenderState.FAILED
            print("failed")
            raise
        del grid
        print("done")

        if self.on_face is not None:
            self.on_face(index, name)

        self.face_index += 1
        if self.face_index == FACE_COUNT:
            self.state = RenderState.DONE
        return name

    def run(self) -> list[str]:
        """Render all remaining faces; returns the names written."""
        names = []
        while not self.finished:
            names.append(self.step())
        return names
