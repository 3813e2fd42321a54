"""
codec.py — Image decode/encode and output-folder handling.

The renderer only ever talks to an ImageCodec; PillowCodec is the concrete
one used by the CLI (reads anything Pillow can open, writes PNG).
"""

import io
import os
from typing import Protocol

import numpy as np
from PIL import Image

from .errors import DirectoryCreateError, ImageDecodeError, ImageEncodeError

Image.MAX_IMAGE_PIXELS = None   # allow very large panoramas


def _wide_gray_to_rgb(gray: np.ndarray) -> np.ndarray:
    """Rescale 16-bit grey (0..65535) to 8 bits, rounded, and repeat as RGB."""
    wide = np.clip(gray.astype(np.int64), 0, 65535)
    narrow = ((wide * 255 + 32767) // 65535).astype(np.uint8)
    return np.repeat(narrow[..., np.newaxis], 3, axis=-1)


class ImageCodec(Protocol):
    def decode(self, data: bytes) -> np.ndarray: ...

    def encode(self, grid: np.ndarray) -> bytes: ...

    def ensure_directory(self, path: str) -> None: ...


class PillowCodec:
    """Decode any Pillow-readable raster to RGB; encode lossless PNG."""

    format = 'PNG'

    def decode(self, data: bytes) -> np.ndarray:
        try:
            with Image.open(io.BytesIO(data)) as img:
                if img.mode == 'I' or img.mode.startswith('I;16'):
                    return _wide_gray_to_rgb(np.array(img))
                return np.array(img.convert('RGB'))
        except (OSError, ValueError, EOFError, SyntaxError,
                Image.DecompressionBombError) as exc:
            raise ImageDecodeError(f"cannot decode image: {exc}") from exc

    def encode(self, grid: np.ndarray) -> bytes:
        """
        Encode an (H, W, 3) or (H, W, 4) uint8 grid.

        A fully opaque RGBA grid is written as RGB.
        """
        if grid.ndim == 3 and grid.shape[2] == 4 and np.all(grid[..., 3] == 255):
            grid = grid[..., :3]

        buf = io.BytesIO()
        try:
            Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8)).save(
                buf, format=self.format)
        except (OSError, ValueError, TypeError) as exc:
            raise ImageEncodeError(f"cannot encode {self.format}: {exc}") from exc
        return buf.getvalue()

    def ensure_directory(self, path: str) -> None:
        """Create *path* if absent. Parents are not created."""
        if os.path.isdir(path):
            return
        try:
            os.mkdir(path, 0o755)
        except OSError as exc:
            raise DirectoryCreateError(
                exc.errno, f"cannot create folder {path}: {exc.strerror}") from exc


# ── File helpers ──────────────────────────────────────────────────────────────

def load_image(path: str, codec: ImageCodec) -> np.ndarray:
    """Read and decode *path*. The returned grid is read-only."""
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise ImageDecodeError(f"cannot read {path}: {exc.strerror}") from exc

    grid = codec.decode(data)
    grid.setflags(write=False)
    return grid


class FolderWriter:
    """Writer callable: encodes a face grid and stores it as folder/name."""

    def __init__(self, folder: str, codec: ImageCodec):
        self.folder = folder
        self.codec = codec

    def __call__(self, name: str, grid: np.ndarray) -> str:
        data = self.codec.encode(grid)
        out_path = os.path.join(self.folder, name)
        try:
            with open(out_path, 'wb') as f:
                f.write(data)
        except OSError as exc:
            raise ImageEncodeError(f"cannot write {out_path}: {exc.strerror}") from exc
        return out_path
