"""
Read-only Blueprint model consumed by the exporters.
"""

from .blueprint import (
    AnimBlueprint,
    Blueprint,
    BlueprintType,
    ClassDefaults,
    ClassRef,
    ComponentNode,
    SelectedAsset,
    VariableDescription,
)
from .flags import FunctionFlags, PropertyFlags
from .graph import Graph, Node, NodeKind, Pin, PinDirection, PinType
from .snapshot import SnapshotError, blueprint_from_dict, load_snapshot

__all__ = [
    "AnimBlueprint",
    "Blueprint",
    "BlueprintType",
    "ClassDefaults",
    "ClassRef",
    "ComponentNode",
    "FunctionFlags",
    "Graph",
    "Node",
    "NodeKind",
    "Pin",
    "PinDirection",
    "PinType",
    "PropertyFlags",
    "SelectedAsset",
    "SnapshotError",
    "VariableDescription",
    "blueprint_from_dict",
    "load_snapshot",
]
