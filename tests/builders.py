"""Small helpers for building Blueprint models in tests."""

from datetime import datetime

from context_core.model import (
    FunctionFlags,
    Graph,
    Node,
    NodeKind,
    Pin,
    PinDirection,
    PinType,
)

FIXED_NOW = datetime(2026, 10, 18, 13, 5, 9)


def fixed_clock() -> datetime:
    return FIXED_NOW


def pin(name, category="", direction=PinDirection.OUTPUT, sub=None, array=False, ref=False):
    return Pin(
        name=name,
        direction=direction,
        pin_type=PinType(category=category, sub_category_object=sub, is_array=array, is_reference=ref),
    )


def exec_pin(name="then", direction=PinDirection.OUTPUT):
    return pin(name, "exec", direction)


def generic_node(name, node_class="K2Node_CallFunction"):
    return Node(name=name, node_class=node_class)


def event_node(title, name=None):
    return Node(
        name=name or f"K2Node_Event_{title}",
        node_class="K2Node_Event",
        kind=NodeKind.EVENT,
        title=title,
        pins=[exec_pin()],
    )


def entry_node(pins=(), flags=FunctionFlags.NONE, name="K2Node_FunctionEntry_0"):
    return Node(
        name=name,
        node_class="K2Node_FunctionEntry",
        kind=NodeKind.FUNCTION_ENTRY,
        function_flags=flags,
        pins=[exec_pin(), *pins],
    )


def result_node(pins=(), name="K2Node_FunctionResult_0"):
    return Node(
        name=name,
        node_class="K2Node_FunctionResult",
        kind=NodeKind.FUNCTION_RESULT,
        pins=[exec_pin("execute", PinDirection.INPUT), *pins],
    )


def state_machine_node(title, sub_graph=None, name=None):
    return Node(
        name=name or f"AnimGraphNode_StateMachine_{len(title)}",
        node_class="AnimGraphNode_StateMachine",
        kind=NodeKind.STATE_MACHINE,
        title=title,
        sub_graph=sub_graph,
    )


def graph(name, *nodes, graph_class="EdGraph"):
    return Graph(name=name, graph_class=graph_class, nodes=list(nodes))
