"""Tests for loading Blueprint snapshots."""

import json

import pytest

from context_core.model import (
    AnimBlueprint,
    Blueprint,
    BlueprintType,
    FunctionFlags,
    NodeKind,
    PinDirection,
    PropertyFlags,
    SnapshotError,
    blueprint_from_dict,
    load_snapshot,
)

HERO_SNAPSHOT = {
    "name": "BP_Hero",
    "path": "/Game/Characters/BP_Hero",
    "class": "Blueprint",
    "parent_chain": [
        {"name": "BP_Base_C", "blueprint": True},
        {"name": "Character"},
        {"name": "Pawn"},
        {"name": "Actor"},
        {"name": "Object"},
    ],
    "graphs": {
        "event": [
            {
                "name": "EventGraph",
                "class": "EdGraph",
                "nodes": [
                    {
                        "name": "K2Node_Event_0",
                        "class": "K2Node_Event",
                        "kind": "event",
                        "title": "Event BeginPlay",
                        "pos": [0, 16],
                        "pins": [{"name": "then", "direction": "output", "type": {"category": "exec"}}],
                    }
                ],
            }
        ],
        "function": [
            {
                "name": "ApplyDamage",
                "nodes": [
                    {
                        "name": "K2Node_FunctionEntry_0",
                        "kind": "function_entry",
                        "function_flags": ["FUNC_Protected", "BlueprintPure"],
                        "pins": [
                            {
                                "name": "Targets",
                                "direction": "output",
                                "type": {
                                    "category": "object",
                                    "sub_category_object": "Actor",
                                    "is_array": True,
                                },
                            }
                        ],
                    }
                ],
            }
        ],
    },
    "variables": [
        {"name": "Health", "type": {"category": "float"}, "category": "Stats", "flags": ["CPF_Edit", "Net"]},
        {"name": "Armor", "type": {"category": "int"}, "flags": 0x10, "default": "5", "tooltip": "Flat"},
    ],
    "interfaces": ["BPI_Damageable", None],
    "components": [
        {"name": "DefaultSceneRoot", "class": "SceneComponent"},
        {"name": "Mesh", "class": "StaticMeshComponent", "parent": "DefaultSceneRoot"},
    ],
    "class_defaults": {"is_actor": True, "replicates": True},
}


class TestBlueprintFromDict:
    """Test building the model from snapshot payloads."""

    def test_identity(self):
        """Test name, path and type."""
        bp = blueprint_from_dict(HERO_SNAPSHOT)

        assert type(bp) is Blueprint
        assert bp.name == "BP_Hero"
        assert bp.package_path == "/Game/Characters/BP_Hero"
        assert bp.blueprint_type == BlueprintType.NORMAL

    def test_parent_chain_is_linked_nearest_first(self):
        """Test the parent chain is linked nearest first."""
        bp = blueprint_from_dict(HERO_SNAPSHOT)
        chain = list(bp.parent_class.ancestors())

        assert [c.name for c in chain] == ["BP_Base_C", "Character", "Pawn", "Actor", "Object"]
        assert [c.generated_by_blueprint for c in chain] == [True, False, False, False, False]

    def test_graphs_nodes_and_pins(self):
        """Test graphs, nodes and pins."""
        bp = blueprint_from_dict(HERO_SNAPSHOT)
        event = bp.ubergraph_pages[0].nodes[0]

        assert event.kind == NodeKind.EVENT
        assert event.title == "Event BeginPlay"
        assert (event.pos_x, event.pos_y) == (0, 16)
        assert event.pins[0].direction == PinDirection.OUTPUT
        assert event.pins[0].is_exec

    def test_function_flags_from_names(self):
        """Flag names work with or without the FUNC_ prefix."""
        entry = blueprint_from_dict(HERO_SNAPSHOT).function_graphs[0].nodes[0]

        assert entry.function_flags == FunctionFlags.Protected | FunctionFlags.BlueprintPure
        assert entry.pins[0].pin_type.is_array

    def test_variable_flags_from_names_and_ints(self):
        """Test variable flags as names and as a bit mask."""
        health, armor = blueprint_from_dict(HERO_SNAPSHOT).variables

        assert health.property_flags == PropertyFlags.Edit | PropertyFlags.Net
        assert armor.property_flags == PropertyFlags.BlueprintReadOnly
        assert armor.category == "Default"
        assert armor.default_value == "5"
        assert armor.tooltip == "Flat"
        assert health.tooltip is None

    def test_interfaces_keep_missing_references(self):
        """Test null interface entries stay None."""
        bp = blueprint_from_dict(HERO_SNAPSHOT)
        assert bp.interfaces[0].name == "BPI_Damageable"
        assert bp.interfaces[1] is None

    def test_components_and_defaults(self):
        """Test components and class defaults."""
        bp = blueprint_from_dict(HERO_SNAPSHOT)

        assert [c.variable_name for c in bp.components] == ["DefaultSceneRoot", "Mesh"]
        assert bp.components[0].parent is None
        assert bp.class_defaults.is_actor
        assert bp.class_defaults.net_load_on_client is True

    def test_missing_components_stays_none(self):
        """Absent components stay None, not empty."""
        bp = blueprint_from_dict({"name": "BPI_Use", "path": "/Game/BPI_Use", "blueprint_type": "Interface"})
        assert bp.components is None
        assert bp.blueprint_type == BlueprintType.INTERFACE

    def test_anim_blueprint(self):
        """Test AnimBlueprint skeleton and state machine sub-graph."""
        data = {
            "name": "ABP_Hero",
            "path": "/Game/ABP_Hero",
            "class": "AnimBlueprint",
            "skeleton": "SK_Mannequin",
            "graphs": {
                "function": [
                    {
                        "name": "AnimGraph",
                        "nodes": [
                            {
                                "name": "SM0",
                                "kind": "state_machine",
                                "title": "Locomotion",
                                "sub_graph": {"name": "Locomotion", "class": "AnimationStateMachineGraph"},
                            }
                        ],
                    }
                ]
            },
        }
        bp = blueprint_from_dict(data)

        assert isinstance(bp, AnimBlueprint)
        assert bp.target_skeleton == "SK_Mannequin"
        sm = bp.function_graphs[0].nodes[0]
        assert sm.sub_graph.graph_class == "AnimationStateMachineGraph"

    def test_null_graph_is_preserved(self):
        """Test null graphs are kept as None."""
        bp = blueprint_from_dict({"name": "X", "path": "/Game/X", "graphs": {"macro": [None]}})
        assert bp.macro_graphs == [None]

    def test_null_fields_read_as_empty(self):
        """Null collections and strings load as empty values."""
        bp = blueprint_from_dict(
            {
                "name": "X",
                "path": "/Game/X",
                "graphs": {
                    "event": [
                        {
                            "name": "G",
                            "class": None,
                            "nodes": [
                                {
                                    "name": "N",
                                    "class": None,
                                    "title": None,
                                    "comment": None,
                                    "pins": [{"name": "P", "id": None, "default": None, "type": None}],
                                    "properties": None,
                                }
                            ],
                        }
                    ],
                    "function": None,
                },
                "variables": None,
                "interfaces": None,
                "parent_chain": None,
            }
        )
        node = bp.ubergraph_pages[0].nodes[0]

        assert bp.ubergraph_pages[0].graph_class == "EdGraph"
        assert (node.node_class, node.title, node.comment) == ("K2Node", "", "")
        assert (node.pins[0].pin_id, node.pins[0].default_value) == ("", "")
        assert node.pins[0].pin_type.category == ""
        assert node.properties == {}
        assert bp.function_graphs == [] and bp.variables == [] and bp.interfaces == []
        assert bp.parent_class is None


def _with_node(node):
    return {"name": "X", "path": "/Game/X", "graphs": {"event": [{"name": "G", "nodes": [node]}]}}


class TestSnapshotErrors:
    """Test malformed snapshots."""

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"path": "/Game/X"}, "missing 'name'"),
            ({"name": "X"}, "missing 'path'"),
            ({"name": "X", "path": "/Game/X", "blueprint_type": "bogus"}, "blueprint_type"),
            ({"name": "X", "path": "/Game/X", "variables": [{"name": "V", "flags": ["Nope"]}]}, "unknown flag"),
            ({"name": "X", "path": "/Game/X", "graphs": {"event": [{"nodes": []}]}}, "missing 'name'"),
            (
                {"name": "X", "path": "/Game/X", "graphs": {"event": [{"name": "G", "nodes": [{"name": "N", "kind": "weird"}]}]}},
                "kind",
            ),
            ({"name": "X", "path": "/Game/X", "variables": {"Health": {}}}, "blueprint.variables: expected a list"),
            ({"name": "X", "path": "/Game/X", "graphs": []}, "blueprint.graphs: expected an object"),
            ({"name": "X", "path": "/Game/X", "graphs": {"event": {"name": "G"}}}, "blueprint.graphs.event: expected a list"),
            (_with_node({"name": "N", "pins": "then"}), r"nodes\[N\]\.pins: expected a list"),
            (_with_node({"name": "N", "pos": 5}), r"nodes\[N\]\.pos: expected \[x, y\]"),
            (_with_node({"name": "N", "pos": ["a", "b"]}), r"nodes\[N\]\.pos: expected \[x, y\]"),
            (_with_node({"name": "N", "pos": [1, 2, 3]}), r"\.pos: expected \[x, y\]"),
            (_with_node({"name": "N", "properties": ["bIsPure=True"]}), r"nodes\[N\]\.properties: expected an object"),
            (_with_node({"name": "N", "pins": [{"name": "P", "type": "float"}]}), r"pins\[P\]\.type: expected an object"),
            ({"name": "X", "path": "/Game/X", "parent_chain": ["Actor"]}, "parent_chain: expected an object"),
        ],
    )
    def test_malformed(self, data, message):
        """Malformed fields raise SnapshotError naming where they are."""
        with pytest.raises(SnapshotError, match=message):
            blueprint_from_dict(data)

    def test_snapshot_error_is_value_error(self):
        """Test SnapshotError is a ValueError."""
        assert issubclass(SnapshotError, ValueError)


class TestLoadSnapshot:
    """Test loading snapshot files."""

    def test_load_file(self, tmp_path):
        """Test loading a snapshot file."""
        path = tmp_path / "BP_Hero.json"
        path.write_text(json.dumps(HERO_SNAPSHOT), encoding="utf-8")
        assert load_snapshot(path).name == "BP_Hero"

    def test_load_file_with_bom(self, tmp_path):
        """Test a UTF-8 BOM is accepted."""
        path = tmp_path / "BP_Hero.json"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps(HERO_SNAPSHOT).encode("utf-8"))
        assert load_snapshot(path).name == "BP_Hero"

    def test_invalid_json(self, tmp_path):
        """Test invalid JSON raises SnapshotError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SnapshotError, match="invalid JSON"):
            load_snapshot(path)
