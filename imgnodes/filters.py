"""Pixel filters: blending, blurring, tone adjustment and 3x3 convolution."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from scipy import ndimage

from .node import Node

# Fixed kernels used for small apertures when no sigma is given.
_SMALL_GAUSSIAN = {
    1: (1.0,),
    3: (0.25, 0.5, 0.25),
    5: (0.0625, 0.25, 0.375, 0.25, 0.0625),
    7: (0.03125, 0.109375, 0.21875, 0.28125, 0.21875, 0.109375, 0.03125),
}


def _is_empty(image: Any) -> bool:
    return image is None or np.asarray(image).size == 0


def _saturate(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Round and clamp ``values`` into the range of ``dtype``."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(values), info.min, info.max).astype(dtype)
    return np.asarray(values).astype(dtype)


def _gaussian_kernel(ksize: int) -> np.ndarray:
    """Return a normalised 1-D Gaussian kernel with sigma derived from ``ksize``."""
    if ksize in _SMALL_GAUSSIAN:
        return np.array(_SMALL_GAUSSIAN[ksize], dtype=np.float64)
    sigma = 0.3 * ((ksize - 1) * 0.5 - 1) + 0.8
    offsets = np.arange(ksize, dtype=np.float64) - (ksize - 1) / 2
    kernel = np.exp(-(offsets**2) / (2 * sigma**2))
    return kernel / kernel.sum()


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _parse_kernel(text: Any) -> np.ndarray:
    values = str(text).split(",")
    if len(values) < 9:
        raise ValueError(f"convolution kernel needs 9 values, got {len(values)}")
    weights = [_to_float(value) for value in values[:9]]
    return np.array(weights, dtype=np.float32).reshape(3, 3)


class BlendNode(Node):
    """Mixes two images, weighting the first by ``opacity``."""

    def __init__(self) -> None:
        super().__init__("Blend")
        self.parameters["mode"] = "normal"
        self.parameters["opacity"] = 0.5

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if len(inputs) < 2 or _is_empty(inputs[0]) or _is_empty(inputs[1]):
            return None
        first = np.asarray(inputs[0])
        second = np.asarray(inputs[1])
        if first.shape != second.shape or first.dtype != second.dtype:
            raise ValueError("blended images must have the same shape and type")
        opacity = float(self.parameters["opacity"])
        mixed = first.astype(np.float64) * opacity + second.astype(np.float64) * (
            1.0 - opacity
        )
        return _saturate(mixed, first.dtype)


class BlurNode(Node):
    """Gaussian blur with a square aperture of ``2 * radius + 1`` pixels."""

    def __init__(self) -> None:
        super().__init__("Blur")
        self.parameters["radius"] = 5

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        image = np.asarray(inputs[0])
        ksize = int(self.parameters["radius"]) * 2 + 1
        if ksize < 1:
            raise ValueError("blur radius must not be negative")
        kernel = _gaussian_kernel(ksize)
        data = image.astype(np.float64)
        data = ndimage.correlate1d(data, kernel, axis=0, mode="mirror")
        data = ndimage.correlate1d(data, kernel, axis=1, mode="mirror")
        return _saturate(data, image.dtype)


class BrightnessContrastNode(Node):
    """Scales pixels by ``contrast`` and then adds ``brightness``."""

    def __init__(self) -> None:
        super().__init__("BrightnessContrast")
        self.parameters["brightness"] = 0
        self.parameters["contrast"] = 1.0

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        image = np.asarray(inputs[0])
        brightness = float(self.parameters["brightness"])
        contrast = float(self.parameters["contrast"])
        return _saturate(image.astype(np.float64) * contrast + brightness, image.dtype)


class ConvolutionNode(Node):
    """Applies a 3x3 kernel given as nine comma-separated numbers, row by row.

    Entries that are not numbers count as zero. The kernel is correlated
    with the image, anchored at its centre, with mirrored borders.
    """

    def __init__(self) -> None:
        super().__init__("Convolution")
        self.parameters["kernel"] = "0,-1,0,-1,5,-1,0,-1,0"

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        image = np.asarray(inputs[0])
        kernel = _parse_kernel(self.parameters["kernel"]).astype(np.float64)
        if image.ndim == 3:
            kernel = kernel[:, :, np.newaxis]
        filtered = ndimage.correlate(image.astype(np.float64), kernel, mode="mirror")
        return _saturate(filtered, image.dtype)