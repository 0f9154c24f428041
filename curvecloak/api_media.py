"""Image file front end: decode with Pillow, transform, encode losslessly."""

import os
import pathlib
import sys
import warnings

import numpy as np
from PIL import Image

from . import engine

LOSSY_SUFFIXES = {".jpg", ".jpeg", ".webp"}
NO_ALPHA_SUFFIXES = {".jpg", ".jpeg"}


def _with_friendly_interrupt(fn, *args, **kwargs):
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UserWarning)
            result = fn(*args, **kwargs)
        for item in caught:
            msg = str(item.message).strip()
            if msg:
                print(f"⚠ {msg}", file=sys.stderr)
        return result
    except KeyboardInterrupt:
        raise KeyboardInterrupt("Exiting...") from None


def _ensure_existing_file(path: pathlib.Path) -> None:
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")


def _default_output(path: pathlib.Path, tag: str) -> pathlib.Path:
    return path.with_name(f"{path.stem}.{tag}.png")


def load_rgba(path) -> "tuple[np.ndarray, int, int]":
    """Decode ``path`` into an ``(height, width, 4)`` uint8 array."""
    path_obj = pathlib.Path(path)
    _ensure_existing_file(path_obj)
    with Image.open(path_obj) as img:
        arr = np.array(img.convert("RGBA"), dtype=np.uint8, copy=True)
    height, width = arr.shape[:2]
    return arr, width, height


def save_rgba(arr: np.ndarray, path) -> pathlib.Path:
    """Encode an RGBA array to ``path``; the format follows the file suffix."""
    output_path = pathlib.Path(path)
    suffix = output_path.suffix.lower()
    if suffix in LOSSY_SUFFIXES:
        warnings.warn(
            f"{suffix} is lossy; {output_path.name} will not decrypt back to the exact original",
            UserWarning,
        )
    image = Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))
    if suffix in NO_ALPHA_SUFFIXES:
        image = image.convert("RGB")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output_path.with_name(f"{output_path.stem}._tmp{output_path.suffix}")
    try:
        image.save(temp_path, format=Image.registered_extensions().get(suffix))
        os.replace(temp_path, output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    finally:
        image.close()
    return output_path


def _transform_file(path, output, tag: str, mode: "engine.Mode", strength: float, block_size: int) -> pathlib.Path:
    path_obj = pathlib.Path(path)
    arr, width, height = load_rgba(path_obj)
    result = engine.transform(arr, width, height, mode, strength, block_size)
    output_path = pathlib.Path(output) if output else _default_output(path_obj, tag)
    return save_rgba(result, output_path)


def _encrypt_image(path, output=None, *, strength: float = 1.0, block_size: int = 1) -> str:
    output_path = _transform_file(path, output, "enc", engine.Mode.ENCRYPT, strength, block_size)
    print(f"🔥 Encrypted image → {output_path}")
    return str(output_path)


def _decrypt_image(path, output=None, *, strength: float = 1.0) -> str:
    output_path = _transform_file(path, output, "dec", engine.Mode.DECRYPT, strength, 1)
    print(f"✅ Decrypted image → {output_path}")
    return str(output_path)


def _smooth_image(path, output=None, *, block_size: int = 16, strength: float = 0.5) -> str:
    output_path = _transform_file(path, output, "smooth", engine.Mode.BLOCK_SMOOTH, strength, block_size)
    print(f"✨ Smoothed image → {output_path}")
    return str(output_path)


def encrypt_image(path: str, output: str | None = None, *, strength: float = 1.0, block_size: int = 1):
    return _with_friendly_interrupt(_encrypt_image, path, output, strength=strength, block_size=block_size)


def decrypt_image(path: str, output: str | None = None, *, strength: float = 1.0):
    return _with_friendly_interrupt(_decrypt_image, path, output, strength=strength)


def smooth_image(path: str, output: str | None = None, *, block_size: int = 16, strength: float = 0.5):
    return _with_friendly_interrupt(_smooth_image, path, output, block_size=block_size, strength=strength)


__all__ = ["decrypt_image", "encrypt_image", "load_rgba", "save_rgba", "smooth_image"]
