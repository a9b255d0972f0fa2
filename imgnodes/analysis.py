"""Nodes that reduce an image: channel extraction, edges and thresholds."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from scipy import ndimage

from .node import Node

_CHANNEL_INDEX = {"B": 0, "G": 1, "R": 2}
_TG22 = 13573  # tan(22.5 degrees) * 2**15


def _is_empty(image: Any) -> bool:
    return image is None or np.asarray(image).size == 0


def bgr_to_gray(image: Any) -> np.ndarray:
    """Convert a BGR or BGRA image to a single-channel luminance image."""
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("expected an image with 3 or 4 channels in BGR order")
    if arr.dtype == np.uint8:
        b, g, r = (arr[..., i].astype(np.int32) for i in range(3))
        return ((b * 1868 + g * 9617 + r * 4899 + (1 << 13)) >> 14).astype(np.uint8)
    b, g, r = (arr[..., i].astype(np.float64) for i in range(3))
    luma = 0.114 * b + 0.587 * g + 0.299 * r
    if np.issubdtype(arr.dtype, np.integer):
        info = np.iinfo(arr.dtype)
        luma = np.clip(np.rint(luma), info.min, info.max)
    return luma.astype(arr.dtype)


def _canny(gray: np.ndarray, threshold1: float, threshold2: float) -> np.ndarray:
    if gray.dtype != np.uint8:
        raise ValueError("edge detection needs an 8-bit image")
    low, high = (math.floor(t) for t in sorted((threshold1, threshold2)))

    src = gray.astype(np.int32)

    def sobel(deriv_axis: int) -> np.ndarray:
        d = ndimage.correlate1d(src, [-1, 0, 1], axis=deriv_axis, mode="nearest")
        return ndimage.correlate1d(d, [1, 2, 1], axis=1 - deriv_axis, mode="nearest").astype(np.int64)

    dx, dy = sobel(1), sobel(0)
    ax, ay = np.abs(dx), np.abs(dy)
    mag = ax + ay
    p = np.pad(mag, 1)

    tg22 = ax * _TG22
    scaled_y = ay << 15
    horizontal = scaled_y < tg22
    vertical = ~horizontal & (scaled_y > tg22 + (ax << 16))
    diagonal = np.where(
        (dx ^ dy) >= 0,
        (mag > p[:-2, :-2]) & (mag > p[2:, 2:]),
        (mag > p[:-2, 2:]) & (mag > p[2:, :-2]),
    )
    local_max = np.where(
        horizontal,
        (mag > p[1:-1, :-2]) & (mag >= p[1:-1, 2:]),
        np.where(vertical, (mag > p[:-2, 1:-1]) & (mag >= p[2:, 1:-1]), diagonal),
    )

    candidate = (mag > low) & local_max
    labels, _ = ndimage.label(candidate, structure=np.ones((3, 3), dtype=int))
    kept = np.unique(labels[candidate & (mag > high)])
    return np.where(np.isin(labels, kept[kept > 0]), 255, 0).astype(np.uint8)


class ColorChannelSplitterNode(Node):
    """Extracts one of the R, G or B channels as a three-channel grey image."""

    def __init__(self) -> None:
        super().__init__("ColorChannelSplitter")
        self.parameters["channel"] = "R"

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        image = np.asarray(inputs[0])
        planes = image[..., np.newaxis] if image.ndim == 2 else image
        index = _CHANNEL_INDEX.get(str(self.parameters["channel"]))
        if index is None:
            return None
        if planes.ndim != 3 or index >= planes.shape[2]:
            raise ValueError(f"image has no {self.parameters['channel']} channel")
        return np.repeat(planes[..., index : index + 1], 3, axis=2)


class EdgeDetectionNode(Node):
    """Canny edge detection on the luminance of a BGR image."""

    def __init__(self) -> None:
        super().__init__("EdgeDetection")
        self.parameters["threshold1"] = 100
        self.parameters["threshold2"] = 200

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        return _canny(
            bgr_to_gray(inputs[0]),
            int(self.parameters["threshold1"]),
            int(self.parameters["threshold2"]),
        )


class ThresholdNode(Node):
    """Binary threshold: luminance above ``value`` becomes 255, the rest 0."""

    def __init__(self) -> None:
        super().__init__("Threshold")
        self.parameters["value"] = 128
        self.parameters["type"] = "binary"

    def process(self, inputs: Sequence[Any]) -> np.ndarray | None:
        if not inputs or _is_empty(inputs[0]):
            return None
        gray = bgr_to_gray(inputs[0])
        return np.where(gray > int(self.parameters["value"]), 255, 0).astype(gray.dtype)