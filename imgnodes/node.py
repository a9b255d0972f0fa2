"""Base class for image-processing nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class Node(ABC):
    """A node in an image-processing graph.

    Each node has a type name, a list of upstream nodes it takes input
    from, and a mapping of named parameters. Subclasses turn a sequence
    of input images into one output image, or ``None`` when there is
    nothing to produce.
    """

    def __init__(self, node_type: str) -> None:
        self.node_type: str = node_type
        self.inputs: list[Node] = []
        self.parameters: dict[str, Any] = {}

    @abstractmethod
    def process(self, inputs: Sequence[Any]) -> Any:
        """Compute this node's output image from its input images."""

    def add_input(self, node: Node) -> None:
        """Record ``node`` as an upstream input of this node."""
        self.inputs.append(node)

    def set_parameter(self, key: str, value: Any) -> None:
        """Set the parameter ``key`` to ``value``."""
        self.parameters[key] = value

    def get_parameter(self, key: str) -> Any:
        """Return the parameter ``key``, or ``None`` if it is not set."""
        return self.parameters.get(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(node_type={self.node_type!r})"