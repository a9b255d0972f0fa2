"""A graph of connected image-processing nodes."""

from __future__ import annotations

from typing import Any

from .node import Node


class NodeGraph:
    """Holds nodes, their canvas positions and the links between them."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._positions: dict[Node, tuple[float, float]] = {}
        self._connections: dict[Node, list[Node]] = {}

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    def position_of(self, node: Node) -> tuple[float, float] | None:
        return self._positions.get(node)

    def sources_of(self, node: Node) -> list[Node]:
        return list(self._connections.get(node, ()))

    def add_node(self, node: Node, pos: tuple[float, float]) -> None:
        self._nodes.append(node)
        x, y = pos
        self._positions[node] = (float(x), float(y))

    def connect_nodes(self, source: Node, target: Node) -> None:
        self._connections.setdefault(target, []).append(source)
        target.add_input(source)

    def execute(self) -> Any:
        """Run the first "Output" node on its direct sources; None if there is none."""
        for node in self._nodes:
            if node.node_type == "Output":
                inputs = [src.process([]) for src in self._connections.get(node, ())]
                return node.process(inputs)
        return None