"""
Graph text export.

Each graph becomes a plain text file: a short comment header followed by one
copy/paste style record per node, in graph order.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from ..model.graph import Graph, Node, Pin, PinDirection
from .errors import ExportFailure

TIMESTAMP_FORMAT = "%Y.%m.%d-%H.%M.%S"

_INDENT = "   "


class NodeTextSerializer(Protocol):
    def serialize(self, node: Node) -> str: ...


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _bool(value: bool) -> str:
    return "True" if value else "False"


class T3DNodeSerializer:
    """
    Writes nodes in the editor's copy/paste (T3D) block shape.

    Object references are left unqualified. The output is meant to be read,
    not pasted back into the editor.
    """

    def serialize(self, node: Node) -> str:
        lines = [f"Begin Object Class={node.node_class} Name={_quote(node.name)}"]
        lines.append(f"{_INDENT}NodePosX={node.pos_x}")
        lines.append(f"{_INDENT}NodePosY={node.pos_y}")
        if node.comment:
            lines.append(f"{_INDENT}NodeComment={_quote(node.comment)}")
        for key, value in node.properties.items():
            lines.append(f"{_INDENT}{key}={value}")
        for pin in node.pins:
            lines.append(f"{_INDENT}CustomProperties Pin ({self._pin_fields(pin)})")
        lines.append("End Object")
        return "\n".join(lines) + "\n"

    def _pin_fields(self, pin: Pin) -> str:
        pin_type = pin.pin_type
        fields = []
        if pin.pin_id:
            fields.append(f"PinId={pin.pin_id}")
        fields.append(f"PinName={_quote(pin.name)}")
        # Input is the default direction and is not written.
        if pin.direction == PinDirection.OUTPUT:
            fields.append('Direction="EGPD_Output"')
        fields.append(f"PinType.PinCategory={_quote(pin_type.category)}")
        if pin_type.sub_category_object:
            fields.append(f"PinType.PinSubCategoryObject={_quote(pin_type.sub_category_object)}")
        else:
            fields.append("PinType.PinSubCategoryObject=None")
        if pin_type.is_array:
            fields.append("PinType.ContainerType=Array")
        fields.append(f"PinType.bIsReference={_bool(pin_type.is_reference)}")
        if pin.default_value:
            fields.append(f"DefaultValue={_quote(pin.default_value)}")
        if pin.linked_to:
            fields.append(f"LinkedTo=({''.join(link + ',' for link in pin.linked_to)})")
        return "".join(f + "," for f in fields)


class GraphTextExporter:
    """Renders one graph to text. Writing the text is the caller's job."""

    def __init__(
        self,
        serializer: NodeTextSerializer | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.serializer = serializer or T3DNodeSerializer()
        self.clock = clock

    def header(self, graph: Graph) -> str:
        return (
            f"// Graph: {graph.name}\n"
            f"// Type: {graph.graph_class}\n"
            f"// Node Count: {len(graph.nodes)}\n"
            f"// Exported: {self.clock().strftime(TIMESTAMP_FORMAT)}\n"
            "\n"
        )

    def export_graph(self, graph: Graph | None) -> str:
        """
        Export a graph's header and node records.

        Raises:
            ExportFailure: If graph is None.
        """
        if graph is None:
            raise ExportFailure("graph is missing")

        parts = [self.header(graph)]
        for node in graph.nodes:
            parts.append(self.serializer.serialize(node))
        return "".join(parts)
