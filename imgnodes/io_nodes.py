"""Nodes that bring images into a graph and write them out."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any, Union

import numpy as np
from PIL import Image

from .node import Node

PathLike = Union[str, "os.PathLike[str]"]

NOISE_SIZE = 512


def _is_empty(image: Any) -> bool:
    return image is None or np.asarray(image).size == 0


def read_image(path: PathLike) -> np.ndarray | None:
    """Load an image file as a three-channel BGR array, or ``None`` if it cannot be read."""
    try:
        with Image.open(path) as picture:
            rgb = np.asarray(picture.convert("RGB"))
    except OSError:
        return None
    return np.ascontiguousarray(rgb[..., ::-1])


def write_image(path: PathLike, image: Any) -> None:
    """Save an 8-bit grey, BGR or BGRA array; the format follows the file extension."""
    arr = np.asarray(image)
    if arr.size == 0:
        raise ValueError("cannot write an empty image")
    if arr.dtype != np.uint8:
        raise ValueError("only 8-bit images can be written")
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[..., 0]
    if arr.ndim == 2:
        picture = Image.fromarray(np.ascontiguousarray(arr))
    elif arr.ndim == 3 and arr.shape[2] == 3:
        picture = Image.fromarray(np.ascontiguousarray(arr[..., ::-1]))
    elif arr.ndim == 3 and arr.shape[2] == 4:
        picture = Image.fromarray(np.ascontiguousarray(arr[..., [2, 1, 0, 3]]))
    else:
        raise ValueError(f"unsupported image shape {arr.shape}")
    picture.save(path)


class ImageInputNode(Node):
    """Loads the image at ``path``; produces nothing while the path is blank."""

    def __init__(self) -> None:
        super().__init__("ImageInput")
        self.parameters["path"] = ""

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        path = self.parameters.get("path") or ""
        if path:
            return read_image(path)
        return None


class OutputNode(Node):
    """Passes its first input through, saving it to ``path`` when one is set."""

    def __init__(self) -> None:
        super().__init__("Output")
        self.parameters["path"] = ""
        self.parameters["format"] = "PNG"

    def process(self, inputs: Sequence[Any]) -> Any:
        if not inputs or _is_empty(inputs[0]):
            return None
        path = self.parameters.get("path") or ""
        if path:
            write_image(path, inputs[0])
        return inputs[0]


class NoiseNode(Node):
    """Produces a 512x512 three-channel image of uniform random bytes."""

    def __init__(self) -> None:
        super().__init__("Noise")
        self.parameters["scale"] = 10.0
        self._rng = np.random.default_rng()

    def process(self, inputs: Sequence[Any]) -> np.ndarray:
        return self._rng.integers(
            0, 255, size=(NOISE_SIZE, NOISE_SIZE, 3), dtype=np.uint8
        )