"""
Blueprint snapshots.

The editor plugin serializes a Blueprint into a JSON snapshot (served at
/blueprint/snapshot, or saved to disk). This module rebuilds the model
from that payload.
"""

from __future__ import annotations

import json
from enum import IntFlag
from pathlib import Path
from typing import Any

from .blueprint import (
    AnimBlueprint,
    Blueprint,
    BlueprintType,
    ClassDefaults,
    ClassRef,
    ComponentNode,
    VariableDescription,
)
from .flags import FunctionFlags, PropertyFlags
from .graph import Graph, Node, NodeKind, Pin, PinDirection, PinType

_FLAG_PREFIXES = {PropertyFlags: "CPF_", FunctionFlags: "FUNC_"}


class SnapshotError(ValueError):
    """Malformed Blueprint snapshot."""

    pass


def _require(data: dict, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise SnapshotError(f"{where}: expected an object, got {type(data).__name__}")
    if key not in data or data[key] in (None, ""):
        raise SnapshotError(f"{where}: missing '{key}'")
    return data[key]


def _list(data: dict, key: str, where: str) -> list:
    """A list field; null or absent reads as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"{where}.{key}: expected a list, got {type(value).__name__}")
    return value


def _dict(data: dict, key: str, where: str) -> dict:
    """An object field; null or absent reads as empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SnapshotError(f"{where}.{key}: expected an object, got {type(value).__name__}")
    return value


def _str(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def _position(data: dict, where: str) -> tuple[int, int]:
    pos = data.get("pos")
    if pos is None:
        return 0, 0
    if (
        not isinstance(pos, list)
        or len(pos) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in pos)
    ):
        raise SnapshotError(f"{where}.pos: expected [x, y] integers")
    return pos[0], pos[1]


def _parse_flags(flag_cls: type[IntFlag], value: Any, where: str) -> IntFlag:
    """Accept a raw bit mask or a list of flag names (with or without CPF_/FUNC_)."""
    if value is None:
        return flag_cls(0)
    if isinstance(value, bool):
        raise SnapshotError(f"{where}: flags must be an integer or a list of names")
    if isinstance(value, int):
        return flag_cls(value)
    if isinstance(value, list):
        prefix = _FLAG_PREFIXES.get(flag_cls, "")
        result = flag_cls(0)
        for name in value:
            key = str(name).removeprefix(prefix)
            try:
                result |= flag_cls[key]
            except KeyError:
                raise SnapshotError(f"{where}: unknown flag '{name}'") from None
        return result
    raise SnapshotError(f"{where}: flags must be an integer or a list of names")


def _parse_enum(enum_cls, value: Any, default, where: str):
    if value is None:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        raise SnapshotError(f"{where}: invalid value '{value}'") from None


def pin_type_from_dict(data: dict | None) -> PinType:
    if not data:
        return PinType()
    return PinType(
        category=_str(data, "category"),
        sub_category_object=data.get("sub_category_object") or None,
        is_array=bool(data.get("is_array", False)),
        is_reference=bool(data.get("is_reference", False)),
    )


def pin_from_dict(data: dict, where: str = "pin") -> Pin:
    name = _require(data, "name", where)
    where = f"{where}[{name}]"
    return Pin(
        name=name,
        direction=_parse_enum(PinDirection, data.get("direction"), PinDirection.INPUT, f"{where}.direction"),
        pin_type=pin_type_from_dict(_dict(data, "type", where)),
        pin_id=_str(data, "id"),
        default_value=_str(data, "default"),
        linked_to=[str(link) for link in _list(data, "linked_to", where)],
    )


def node_from_dict(data: dict, where: str = "node") -> Node:
    name = _require(data, "name", where)
    where = f"{where}[{name}]"
    pos_x, pos_y = _position(data, where)

    sub_graph = data.get("sub_graph")
    return Node(
        name=name,
        node_class=_str(data, "class", "K2Node"),
        kind=_parse_enum(NodeKind, data.get("kind"), NodeKind.GENERIC, f"{where}.kind"),
        title=_str(data, "title"),
        pos_x=pos_x,
        pos_y=pos_y,
        comment=_str(data, "comment"),
        pins=[pin_from_dict(p, f"{where}.pins") for p in _list(data, "pins", where)],
        function_flags=_parse_flags(FunctionFlags, data.get("function_flags"), f"{where}.function_flags"),
        sub_graph=graph_from_dict(sub_graph, f"{where}.sub_graph") if sub_graph else None,
        properties={str(k): str(v) for k, v in _dict(data, "properties", where).items()},
    )


def graph_from_dict(data: dict | None, where: str = "graph") -> Graph | None:
    """A null graph stays None; the exporter reports it as a missing input."""
    if data is None:
        return None
    name = _require(data, "name", where)
    where = f"{where}[{name}]"
    return Graph(
        name=name,
        graph_class=_str(data, "class", "EdGraph"),
        nodes=[node_from_dict(n, f"{where}.nodes") for n in _list(data, "nodes", where)],
    )


def _parent_chain_from_list(chain: list[dict]) -> ClassRef | None:
    """Link a nearest-first list of {name, blueprint?} into ClassRefs."""
    head: ClassRef | None = None
    for entry in reversed(chain):
        head = ClassRef(
            name=_require(entry, "name", "parent_chain"),
            generated_by_blueprint=bool(entry.get("blueprint", False)),
            super_class=head,
        )
    return head


def variable_from_dict(data: dict) -> VariableDescription:
    name = _require(data, "name", "variable")
    where = f"variable[{name}]"
    tooltip = data.get("tooltip")
    return VariableDescription(
        name=name,
        var_type=pin_type_from_dict(_dict(data, "type", where)),
        category=_str(data, "category") or "Default",
        property_flags=_parse_flags(PropertyFlags, data.get("flags"), f"{where}.flags"),
        default_value=_str(data, "default"),
        tooltip=str(tooltip) if tooltip is not None else None,
    )


def _class_defaults_from_dict(data: dict) -> ClassDefaults:
    if not isinstance(data, dict):
        raise SnapshotError("class_defaults: expected an object")
    return ClassDefaults(
        is_actor=bool(data.get("is_actor", False)),
        replicates=bool(data.get("replicates", False)),
        always_relevant=bool(data.get("always_relevant", False)),
        net_load_on_client=bool(data.get("net_load_on_client", True)),
    )


def _component_from_dict(data: dict) -> ComponentNode:
    return ComponentNode(
        variable_name=_require(data, "name", "component"),
        component_class=data.get("class") or None,
        parent=data.get("parent") or None,
    )


def blueprint_from_dict(data: dict) -> Blueprint:
    """Build a Blueprint (or AnimBlueprint) from a snapshot payload."""
    name = _require(data, "name", "blueprint")
    path = _require(data, "path", "blueprint")
    graphs = _dict(data, "graphs", "blueprint")

    def _graphs(key: str) -> list[Graph | None]:
        return [graph_from_dict(g, f"graphs.{key}") for g in _list(graphs, key, "blueprint.graphs")]

    components = data.get("components")
    defaults = data.get("class_defaults")

    kwargs = dict(
        name=name,
        package_path=path,
        blueprint_type=_parse_enum(
            BlueprintType, data.get("blueprint_type"), BlueprintType.NORMAL, "blueprint_type"
        ),
        parent_class=_parent_chain_from_list(_list(data, "parent_chain", "blueprint")),
        ubergraph_pages=_graphs("event"),
        function_graphs=_graphs("function"),
        macro_graphs=_graphs("macro"),
        delegate_signature_graphs=_graphs("delegate"),
        variables=[variable_from_dict(v) for v in _list(data, "variables", "blueprint")],
        interfaces=[ClassRef(name=str(i)) if i else None for i in _list(data, "interfaces", "blueprint")],
        components=(
            [_component_from_dict(c) for c in _list(data, "components", "blueprint")]
            if components is not None
            else None
        ),
        class_defaults=_class_defaults_from_dict(defaults) if defaults is not None else None,
    )

    if data.get("class") == "AnimBlueprint":
        return AnimBlueprint(target_skeleton=data.get("skeleton") or None, **kwargs)
    return Blueprint(**kwargs)


def load_snapshot(path: str | Path) -> Blueprint:
    """Load a snapshot JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{path}: invalid JSON: {e}") from e
    return blueprint_from_dict(data)
