import numpy as np
import pytest

from imgnodes.analysis import (
    ColorChannelSplitterNode,
    EdgeDetectionNode,
    ThresholdNode,
    bgr_to_gray,
)


@pytest.fixture
def bgr_image():
    image = np.zeros((4, 5, 3), dtype=np.uint8)
    image[..., 0] = 10
    image[..., 1] = 20
    image[..., 2] = 30
    return image


# bgr_to_gray

@pytest.mark.parametrize("level", [0, 17, 128, 255])
def test_gray_of_neutral_pixel_keeps_level(level):
    image = np.full((3, 3, 3), level, dtype=np.uint8)
    gray = bgr_to_gray(image)
    assert gray.shape == (3, 3)
    assert np.all(gray == level)


def test_gray_weights_green_over_blue():
    blue = np.zeros((1, 1, 3), np.uint8)
    blue[..., 0] = 255
    green = np.zeros((1, 1, 3), np.uint8)
    green[..., 1] = 255
    red = np.zeros((1, 1, 3), np.uint8)
    red[..., 2] = 255
    assert bgr_to_gray(green)[0, 0] > bgr_to_gray(red)[0, 0] > bgr_to_gray(blue)[0, 0]


def test_gray_accepts_alpha_channel():
    image = np.full((2, 2, 4), 200, dtype=np.uint8)
    gray = bgr_to_gray(image)
    assert gray.shape == (2, 2)
    np.testing.assert_array_equal(gray, np.full((2, 2), 200))


def test_gray_rejects_single_channel():
    with pytest.raises(ValueError):
        bgr_to_gray(np.zeros((4, 4), np.uint8))


# Channel splitter

@pytest.mark.parametrize("channel, index", [("B", 0), ("G", 1), ("R", 2)])
def test_splitter_picks_channel(bgr_image, channel, index):
    node = ColorChannelSplitterNode()
    node.set_parameter("channel", channel)
    result = node.process([bgr_image])
    assert result.shape == bgr_image.shape
    for c in range(3):
        np.testing.assert_array_equal(result[..., c], bgr_image[..., index])


def test_splitter_default_is_red(bgr_image):
    node = ColorChannelSplitterNode()
    assert node.get_parameter("channel") == "R"
    np.testing.assert_array_equal(node.process([bgr_image])[..., 0], bgr_image[..., 2])


def test_splitter_unknown_channel_gives_none(bgr_image):
    node = ColorChannelSplitterNode()
    node.set_parameter("channel", "A")
    assert node.process([bgr_image]) is None


def test_splitter_missing_channel_raises():
    node = ColorChannelSplitterNode()
    with pytest.raises(ValueError):
        node.process([np.zeros((3, 3), np.uint8)])


def test_splitter_empty_gives_none():
    assert ColorChannelSplitterNode().process([]) is None


# Edge detection

def test_edges_of_uniform_image_are_empty():
    image = np.full((10, 10, 3), 90, dtype=np.uint8)
    result = EdgeDetectionNode().process([image])
    assert result.shape == (10, 10)
    assert not result.any()


def test_edges_follow_vertical_step():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:, 5:] = 255
    result = EdgeDetectionNode().process([image])
    assert result.dtype == np.uint8
    assert set(np.unique(result)) <= {0, 255}
    assert result.any()
    columns = set(np.nonzero(result)[1])
    assert columns <= {4, 5}


def test_edges_respect_high_threshold():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:, 5:] = 20
    node = EdgeDetectionNode()
    assert not node.process([image]).any()
    node.set_parameter("threshold1", 1)
    node.set_parameter("threshold2", 2)
    assert node.process([image]).any()


def test_edge_threshold_order_does_not_matter():
    rng = np.random.default_rng(3)
    image = rng.integers(0, 256, size=(16, 16, 3), dtype=np.uint8)
    node = EdgeDetectionNode()
    forward = node.process([image])
    node.set_parameter("threshold1", 200)
    node.set_parameter("threshold2", 100)
    np.testing.assert_array_equal(node.process([image]), forward)


def test_edges_empty_gives_none():
    assert EdgeDetectionNode().process([None]) is None


# Threshold

def test_threshold_defaults_split_at_128():
    node = ThresholdNode()
    assert node.get_parameter("value") == 128
    assert node.get_parameter("type") == "binary"
    image = np.zeros((1, 2, 3), dtype=np.uint8)
    image[0, 0] = 128
    image[0, 1] = 129
    result = node.process([image])
    assert result[0, 0] == 0
    assert result[0, 1] == 255


def test_threshold_output_is_binary():
    rng = np.random.default_rng(5)
    image = rng.integers(0, 256, size=(20, 20, 3), dtype=np.uint8)
    result = ThresholdNode().process([image])
    assert result.shape == (20, 20)
    assert set(np.unique(result)) <= {0, 255}
    np.testing.assert_array_equal(result == 255, bgr_to_gray(image) > 128)


def test_threshold_empty_gives_none():
    assert ThresholdNode().process([]) is None