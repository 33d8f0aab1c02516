"""
Configuration management for ContextCore.

Configuration via environment variables:

Export:
- CONTEXT_EXPORT_ROOT: Root directory for exported files (default: <Project>/Docs/.context)
- CONTEXT_LEGACY_STATE_MACHINE_NAMES: Reference state machine files in _meta.json
  with the narrow sanitizer (/ \\ : only), as older exports did (default: false)
- CONTEXT_VERBOSE: Print per-Blueprint progress lines (default: true)

Unreal Plugin Communication:
- UE_PLUGIN_HOST: Host for Unreal Plugin HTTP API (default: localhost)
- UE_PLUGIN_PORT: Port for Unreal Plugin HTTP API (default: 8080)
- UE_PLUGIN_TIMEOUT: Request timeout in seconds (default: 30)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _parse_bool(value: str | None, default: bool = True) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_float(value: str | None, default: float) -> float:
    """Parse float from environment variable, falling back on bad input."""
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _find_project_root() -> Path | None:
    """
    Find the project root directory by looking for a .uproject file.

    Returns:
        Path to project root directory, or None if not found.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents][:8]:
        try:
            uprojects = list(parent.glob("*.uproject"))
        except OSError:
            uprojects = []
        if uprojects:
            return uprojects[0].parent
    return None


def _default_export_root() -> Path:
    """<Project>/Docs/.context, or <cwd>/Docs/.context outside a project."""
    env_root = os.getenv("CONTEXT_EXPORT_ROOT")
    if env_root:
        return Path(env_root)
    project_root = _find_project_root() or Path.cwd()
    return project_root / "Docs" / ".context"


@dataclass
class Config:
    """Exporter configuration loaded from environment variables."""

    # Export
    export_root: Path = field(default_factory=_default_export_root)
    legacy_state_machine_names: bool = field(
        default_factory=lambda: _parse_bool(os.getenv("CONTEXT_LEGACY_STATE_MACHINE_NAMES"), False)
    )
    verbose: bool = field(default_factory=lambda: _parse_bool(os.getenv("CONTEXT_VERBOSE"), True))

    # Unreal Plugin HTTP API
    ue_plugin_host: str = field(default_factory=lambda: os.getenv("UE_PLUGIN_HOST", "localhost"))
    ue_plugin_port: int = field(default_factory=lambda: int(os.getenv("UE_PLUGIN_PORT", "8080")))
    ue_plugin_timeout: float = field(
        default_factory=lambda: _parse_float(os.getenv("UE_PLUGIN_TIMEOUT"), 30.0)
    )

    def __post_init__(self):
        self.export_root = Path(self.export_root)

    @property
    def ue_plugin_url(self) -> str:
        """Get the full URL for Unreal plugin API."""
        return f"http://{self.ue_plugin_host}:{self.ue_plugin_port}"


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None
