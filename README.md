# imgnodes

A small library for node-based image processing. Each node takes a list of
images and gives back one image. A `NodeGraph` ties nodes together and runs
the graph from its output node.

Images are NumPy arrays in BGR channel order (`height x width x 3`, usually
`uint8`). Single-channel results such as edge maps and thresholds are
`height x width`. A node that has nothing to produce (no input, an empty
input, a blank path) returns `None`.

## Installation

```
pip install .
```

Install the test extra to run the tests:

```
pip install .[test]
pytest
```

## Modules

- `imgnodes.node` – the abstract `Node` base class. Every node has a
  `node_type` name, a list of upstream `inputs`, and a `parameters` dict read
  and changed with `get_parameter` (returns `None` for an unknown key) and
  `set_parameter`. `add_input` records an upstream node.
- `imgnodes.graph` – `NodeGraph`, with `add_node(node, pos)`,
  `connect_nodes(source, target)`, `execute()`, and the read-only helpers
  `nodes`, `position_of(node)` and `sources_of(node)`.
- `imgnodes.filters` – `BlendNode`, `BlurNode`, `BrightnessContrastNode`,
  `ConvolutionNode`.
- `imgnodes.analysis` – `ColorChannelSplitterNode`, `EdgeDetectionNode`,
  `ThresholdNode`, and the helper `bgr_to_gray(image)`.
- `imgnodes.io_nodes` – `ImageInputNode`, `OutputNode`, `NoiseNode`, and the
  helpers `read_image(path)` and `write_image(path, image)`.

## Nodes

| Node | Parameters (defaults) | What it does |
| --- | --- | --- |
| `ImageInputNode` | `path=""` | Reads an image file as BGR; `None` if the path is blank or the file cannot be read |
| `NoiseNode` | `scale=10.0` | Makes a 512x512 three-channel image of random bytes (`scale` is stored but not used) |
| `BlurNode` | `radius=5` | Gaussian blur with a square kernel of side `2*radius+1`, mirrored borders; a negative radius raises `ValueError` |
| `BrightnessContrastNode` | `brightness=0`, `contrast=1.0` | `pixel * contrast + brightness`, rounded and saturated to the input type |
| `ConvolutionNode` | `kernel="0,-1,0,-1,5,-1,0,-1,0"` | 3x3 filter from nine comma-separated numbers, row by row; non-numbers count as 0, fewer than nine raises `ValueError`. The default kernel sharpens |
| `BlendNode` | `mode="normal"`, `opacity=0.5` | `first * opacity + second * (1 - opacity)`; needs two inputs of the same shape and type, else `ValueError` (`mode` is stored but not used) |
| `ColorChannelSplitterNode` | `channel="R"` | Keeps one channel (`R`, `G` or `B`) as a three-channel grey image; any other value gives `None` |
| `EdgeDetectionNode` | `threshold1=100`, `threshold2=200` | Canny-style edge map (0 or 255) of the luminance; needs an 8-bit image |
| `ThresholdNode` | `value=128`, `type="binary"` | Luminance above `value` becomes 255, the rest 0 (only binary thresholding is done) |
| `OutputNode` | `path=""`, `format="PNG"` | Passes its first input through and writes it when `path` is set; the file format follows the extension of `path` |

`bgr_to_gray` takes a 3- or 4-channel image and raises `ValueError` otherwise.
`write_image` writes 8-bit grey, BGR or BGRA arrays and raises `ValueError`
for empty, non-8-bit or otherwise shaped arrays.

## Example

```python
from imgnodes.graph import NodeGraph
from imgnodes.io_nodes import ImageInputNode, OutputNode

source = ImageInputNode()
source.set_parameter("path", "photo.png")

sink = OutputNode()
sink.set_parameter("path", "photo-out.png")

graph = NodeGraph()
graph.add_node(source, (0, 0))
graph.add_node(sink, (200, 0))
graph.connect_nodes(source, sink)

result = graph.execute()
```

`execute` finds the first node whose type is `"Output"`. It runs each node
connected directly to that output with an empty input list, passes the results
to the output node, and returns what the output node gives back. With no
output node it returns `None`. Chains longer than one step are run by calling
`process` on each node yourself:

```python
from imgnodes.analysis import EdgeDetectionNode
from imgnodes.io_nodes import read_image, write_image

edges = EdgeDetectionNode().process([read_image("photo.png")])
write_image("edges.png", edges)
```

## What it does not do

This is a library only. There is no graphical editor, canvas or properties
panel and no command-line program; node positions given to `add_node` are
stored but not drawn. Graphs are not saved to or loaded from files.