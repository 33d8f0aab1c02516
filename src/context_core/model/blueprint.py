"""
Blueprint model: the declarative surface the exporters read.

Everything here is borrowed for the duration of one export call; the
exporters never mutate it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .flags import PropertyFlags
from .graph import Graph, PinType


class BlueprintType(str, Enum):
    """EBlueprintType."""

    NORMAL = "normal"
    CONST = "const"
    MACRO_LIBRARY = "macro_library"
    INTERFACE = "interface"
    LEVEL_SCRIPT = "level_script"
    FUNCTION_LIBRARY = "function_library"


@dataclass
class ClassRef:
    """A class in the parent chain. Native classes have generated_by_blueprint=False."""

    name: str
    generated_by_blueprint: bool = False
    super_class: ClassRef | None = None

    def ancestors(self) -> Iterator[ClassRef]:
        """Yield this class, then each superclass up to the root."""
        current: ClassRef | None = self
        while current is not None:
            yield current
            current = current.super_class


@dataclass
class VariableDescription:
    """FBPVariableDescription."""

    name: str
    var_type: PinType = field(default_factory=PinType)
    category: str = "Default"
    property_flags: PropertyFlags = PropertyFlags.NONE
    default_value: str = ""
    tooltip: str | None = None

    def has_flag(self, flag: PropertyFlags) -> bool:
        return bool(self.property_flags & flag)


@dataclass
class ComponentNode:
    """One SCS node. component_class is None when the node has no template."""

    variable_name: str
    component_class: str | None = None
    parent: str | None = None


@dataclass
class ClassDefaults:
    """The interesting bits of the generated class's default object."""

    is_actor: bool = False
    replicates: bool = False
    always_relevant: bool = False
    net_load_on_client: bool = True


@dataclass
class Blueprint:
    name: str
    package_path: str
    blueprint_type: BlueprintType = BlueprintType.NORMAL
    parent_class: ClassRef | None = None
    ubergraph_pages: list[Graph | None] = field(default_factory=list)
    function_graphs: list[Graph | None] = field(default_factory=list)
    macro_graphs: list[Graph | None] = field(default_factory=list)
    delegate_signature_graphs: list[Graph | None] = field(default_factory=list)
    variables: list[VariableDescription] = field(default_factory=list)
    interfaces: list[ClassRef | None] = field(default_factory=list)
    components: list[ComponentNode] | None = None
    class_defaults: ClassDefaults | None = None

    @property
    def is_interface(self) -> bool:
        return self.blueprint_type == BlueprintType.INTERFACE


@dataclass
class AnimBlueprint(Blueprint):
    target_skeleton: str | None = None


@dataclass
class SelectedAsset:
    """A content browser selection entry; asset is None if it failed to load."""

    object_path: str
    asset_class: str = ""
    asset: object | None = None
