"""
Graph, node and pin model.

Nodes are a tagged variant: exporters dispatch on `Node.kind` and treat
anything they do not recognise as a generic node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .flags import FunctionFlags

# Pin categories the exporters care about (UEdGraphSchema_K2::PC_*).
PC_EXEC = "exec"
PC_OBJECT = "object"
PC_CLASS = "class"


class PinDirection(str, Enum):
    INPUT = "input"
    OUTPUT = "output"


class NodeKind(str, Enum):
    """Capabilities a node can expose to the exporters."""

    GENERIC = "generic"
    EVENT = "event"  # K2Node_Event and subclasses
    FUNCTION_ENTRY = "function_entry"  # K2Node_FunctionEntry
    FUNCTION_RESULT = "function_result"  # K2Node_FunctionResult
    STATE_MACHINE = "state_machine"  # AnimGraphNode_StateMachine


@dataclass(frozen=True)
class PinType:
    """FEdGraphPinType, reduced to what type rendering needs."""

    category: str = ""
    sub_category_object: str | None = None
    is_array: bool = False
    is_reference: bool = False


@dataclass
class Pin:
    name: str
    direction: PinDirection = PinDirection.INPUT
    pin_type: PinType = field(default_factory=PinType)
    pin_id: str = ""
    default_value: str = ""
    linked_to: list[str] = field(default_factory=list)

    @property
    def is_exec(self) -> bool:
        return self.pin_type.category == PC_EXEC

    @property
    def has_category(self) -> bool:
        return bool(self.pin_type.category)


@dataclass
class Node:
    """A graph node. Only the fields matching `kind` are meaningful."""

    name: str
    node_class: str = "K2Node"
    kind: NodeKind = NodeKind.GENERIC
    title: str = ""
    pos_x: int = 0
    pos_y: int = 0
    comment: str = ""
    pins: list[Pin] = field(default_factory=list)
    function_flags: FunctionFlags = FunctionFlags.NONE
    sub_graph: Graph | None = None
    properties: dict[str, str] = field(default_factory=dict)


@dataclass
class Graph:
    name: str
    graph_class: str = "EdGraph"
    nodes: list[Node] = field(default_factory=list)

    def find_first(self, kind: NodeKind) -> Node | None:
        """First node of the given kind in node order; later matches are ignored."""
        return next((node for node in self.nodes if node.kind == kind), None)

    def nodes_of_kind(self, kind: NodeKind) -> list[Node]:
        return [node for node in self.nodes if node.kind == kind]
