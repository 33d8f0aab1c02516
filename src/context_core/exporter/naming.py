"""
Output file naming.

The graph exporter and the metadata builder both go through these helpers so
every "file" reference in _meta.json names a file that is actually written.
"""

META_FILE_NAME = "_meta.json"

# Characters the general file name sanitizer replaces.
UNSAFE_FILE_NAME_CHARS = '/\\:*?"<>|'

# Older exports only replaced path separators and colons in the state machine
# references inside _meta.json.
LEGACY_STATE_MACHINE_CHARS = "/\\:"

ANIM_GRAPH_MARKER = "AnimGraph"


def _replace_chars(name: str, chars: str) -> str:
    return name.translate({ord(c): "_" for c in chars})


def sanitize_file_name(name: str) -> str:
    """Replace each of / \\ : * ? " < > | with an underscore."""
    return _replace_chars(name, UNSAFE_FILE_NAME_CHARS)


def sanitize_legacy_state_machine_name(name: str) -> str:
    """Replace only / \\ and : with an underscore."""
    return _replace_chars(name, LEGACY_STATE_MACHINE_CHARS)


def event_graph_file(graph_name: str) -> str:
    return f"{graph_name}.txt"


def function_graph_file(graph_name: str) -> str:
    return f"Function_{graph_name}.txt"


def macro_graph_file(graph_name: str) -> str:
    return f"Macro_{graph_name}.txt"


def state_machine_file(title: str, legacy: bool = False) -> str:
    safe = sanitize_legacy_state_machine_name(title) if legacy else sanitize_file_name(title)
    return f"StateMachine_{safe}.txt"


def is_anim_graph(graph_name: str) -> bool:
    return ANIM_GRAPH_MARKER in graph_name


def blueprint_output_dir(package_path: str) -> str:
    """Package path relative to the export root ("/Game/BP_X" -> "Game/BP_X")."""
    return package_path.removeprefix("/")
