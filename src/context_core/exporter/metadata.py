"""
_meta.json builder.

Summarizes a Blueprint's declarative surface: identity, parent chain,
class settings, interfaces, variables, components, functions, event
dispatchers, events, the graph file index and, for AnimBlueprints, the
skeleton and state machines. Missing optional data yields empty lists or
omitted keys; building never fails for a present Blueprint.
"""

from __future__ import annotations

import json
from typing import Any

from ..model.blueprint import AnimBlueprint, Blueprint, VariableDescription
from ..model.flags import FunctionFlags, PropertyFlags
from ..model.graph import Graph, Node, NodeKind, Pin, PinDirection
from . import naming
from .type_names import render_pin_type


def _signature_pins(node: Node, direction: PinDirection) -> list[dict[str, str]]:
    """Typed, non-exec pins of one direction as [{name, type}]."""
    return [
        {"name": pin.name, "type": render_pin_type(pin.pin_type)}
        for pin in node.pins
        if _is_signature_pin(pin, direction)
    ]


def _is_signature_pin(pin: Pin, direction: PinDirection) -> bool:
    return pin.direction == direction and pin.has_category and not pin.is_exec


def _access_level(flags: FunctionFlags) -> str:
    if flags & FunctionFlags.Protected:
        return "Protected"
    if flags & FunctionFlags.Private:
        return "Private"
    return "Public"


def _present(graphs: list[Graph | None]) -> list[Graph]:
    return [g for g in graphs if g is not None]


class MetadataDocumentBuilder:
    """Builds the _meta.json document for one Blueprint."""

    def __init__(self, legacy_state_machine_names: bool = False):
        self.legacy_state_machine_names = legacy_state_machine_names

    def build(self, blueprint: Blueprint) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "name": blueprint.name,
            "path": blueprint.package_path,
            "type": self.resolve_type(blueprint),
        }
        if blueprint.parent_class is not None:
            doc["parent"] = blueprint.parent_class.name
        doc["cpp_chain"] = self.cpp_chain(blueprint)

        settings = self.class_settings(blueprint)
        if settings is not None:
            doc["class_settings"] = settings

        doc["interfaces"] = [{"name": i.name} for i in blueprint.interfaces if i is not None]
        doc["variables"] = {"list": [self.variable(v) for v in blueprint.variables]}
        doc["components"] = {"list": self.components(blueprint)}
        doc["functions"] = [self.function(g) for g in _present(blueprint.function_graphs)]
        doc["event_dispatchers"] = [
            self.event_dispatcher(g) for g in _present(blueprint.delegate_signature_graphs)
        ]
        doc["events"] = self.events(blueprint)
        doc["graphs"] = self.graph_index(blueprint)

        if isinstance(blueprint, AnimBlueprint):
            if blueprint.target_skeleton:
                doc["skeleton"] = blueprint.target_skeleton
            doc["state_machines"] = self.state_machines(blueprint)

        return doc

    def to_json(self, blueprint: Blueprint) -> str:
        """Pretty-printed document, tab indented like the editor's JSON writer."""
        return json.dumps(self.build(blueprint), indent="\t", ensure_ascii=False)

    @staticmethod
    def resolve_type(blueprint: Blueprint) -> str:
        # Interface wins over AnimBlueprint.
        if blueprint.is_interface:
            return "BlueprintInterface"
        if isinstance(blueprint, AnimBlueprint):
            return "AnimBlueprint"
        return "Blueprint"

    @staticmethod
    def cpp_chain(blueprint: Blueprint) -> list[dict[str, str]]:
        """Native ancestors only, nearest first."""
        if blueprint.parent_class is None:
            return []
        return [
            {"name": cls.name}
            for cls in blueprint.parent_class.ancestors()
            if not cls.generated_by_blueprint
        ]

    @staticmethod
    def class_settings(blueprint: Blueprint) -> dict[str, bool] | None:
        defaults = blueprint.class_defaults
        if defaults is None or not defaults.is_actor:
            return None
        return {
            "replicates": defaults.replicates,
            "always_relevant": defaults.always_relevant,
            "net_load_on_client": defaults.net_load_on_client,
        }

    @staticmethod
    def variable(var: VariableDescription) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "name": var.name,
            "type": render_pin_type(var.var_type),
            "category": var.category,
        }
        if var.has_flag(PropertyFlags.Net):
            entry["replicated"] = True
        if var.has_flag(PropertyFlags.RepNotify):
            entry["rep_notify"] = True

        entry["instance_editable"] = var.has_flag(PropertyFlags.Edit)
        entry["blueprint_read_only"] = var.has_flag(PropertyFlags.BlueprintReadOnly)
        entry["expose_on_spawn"] = var.has_flag(PropertyFlags.ExposeOnSpawn)
        entry["private"] = var.has_flag(PropertyFlags.DisableEditOnInstance)

        if var.default_value:
            entry["default"] = var.default_value
        if var.tooltip is not None:
            entry["tooltip"] = var.tooltip
        return entry

    @staticmethod
    def components(blueprint: Blueprint) -> list[dict[str, str]]:
        return [
            {
                "name": node.variable_name,
                "type": node.component_class,
                "parent": node.parent or "root",
            }
            for node in blueprint.components or []
            if node.component_class
        ]

    @staticmethod
    def function(graph: Graph) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "name": graph.name,
            "file": naming.function_graph_file(graph.name),
        }

        entry_node = graph.find_first(NodeKind.FUNCTION_ENTRY)
        if entry_node is not None:
            flags = entry_node.function_flags
            entry["access"] = _access_level(flags)
            entry["pure"] = bool(flags & FunctionFlags.BlueprintPure)
            entry["const"] = bool(flags & FunctionFlags.Const)
            entry["inputs"] = _signature_pins(entry_node, PinDirection.OUTPUT)

        result_node = graph.find_first(NodeKind.FUNCTION_RESULT)
        entry["outputs"] = (
            _signature_pins(result_node, PinDirection.INPUT) if result_node is not None else []
        )
        return entry

    @staticmethod
    def event_dispatcher(graph: Graph) -> dict[str, Any]:
        entry_node = graph.find_first(NodeKind.FUNCTION_ENTRY)
        return {
            "name": graph.name,
            "params": _signature_pins(entry_node, PinDirection.OUTPUT) if entry_node else [],
        }

    @staticmethod
    def events(blueprint: Blueprint) -> list[str]:
        return [
            node.title
            for graph in _present(blueprint.ubergraph_pages)
            for node in graph.nodes_of_kind(NodeKind.EVENT)
        ]

    @staticmethod
    def graph_index(blueprint: Blueprint) -> dict[str, str]:
        """Event and function graphs only; macros and dispatchers are not indexed."""
        index = {}
        for graph in _present(blueprint.ubergraph_pages):
            index[graph.name] = naming.event_graph_file(graph.name)
        for graph in _present(blueprint.function_graphs):
            index[graph.name] = naming.function_graph_file(graph.name)
        return index

    def state_machines(self, blueprint: AnimBlueprint) -> list[dict[str, str]]:
        return [
            {
                "name": node.title,
                "file": naming.state_machine_file(node.title, legacy=self.legacy_state_machine_names),
            }
            for node in iter_state_machine_nodes(blueprint)
        ]


def iter_state_machine_nodes(blueprint: AnimBlueprint):
    """State machine nodes in every function graph whose name contains "AnimGraph"."""
    for graph in _present(blueprint.function_graphs):
        if not naming.is_anim_graph(graph.name):
            continue
        yield from graph.nodes_of_kind(NodeKind.STATE_MACHINE)
