"""
MCP Server entry point - ContextCore.

Environment variables:
- CONTEXT_EXPORT_ROOT: Export root (default: <Project>/Docs/.context)
- CONTEXT_LEGACY_STATE_MACHINE_NAMES: Narrow sanitizer for state machine refs in _meta.json
- UE_PLUGIN_HOST: Editor plugin HTTP API host
- UE_PLUGIN_PORT: Editor plugin HTTP API port (default: 8080)
"""

from __future__ import annotations

import argparse
import os
import sys

from fastmcp import FastMCP

from . import __version__
from .config import get_config, reset_config
from .tools import export

# Initialize MCP server
mcp = FastMCP(
    name="ContextCore",
    version=__version__,
)


def register_tools():
    """
    Register MCP tools.

    - export_blueprints: Export Blueprints by asset path
    - export_selection: Export the Content Browser selection
    - export_snapshot_files: Export from snapshot JSON files (offline)
    - preview_metadata: Build _meta.json without writing files
    """
    mcp.tool(description="Export Blueprints (graph text files + _meta.json) by asset path")(
        export.export_blueprints
    )
    mcp.tool(description="Export the Blueprints selected in the Content Browser")(
        export.export_selection
    )
    mcp.tool(description="Export Blueprints from snapshot JSON files on disk")(
        export.export_snapshot_files
    )
    mcp.tool(description="Preview a Blueprint's _meta.json without writing files")(
        export.preview_metadata
    )
    print("[ContextCore] Registered 4 tools.", file=sys.stderr)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="context-core-mcp",
        description="ContextCore Blueprint export MCP Server",
    )

    parser.add_argument(
        "--export-root",
        help="Export root directory (default: <Project>/Docs/.context)",
        default=None,
    )
    parser.add_argument(
        "--ue-plugin-host",
        help="Editor plugin HTTP API host",
        default=None,
    )
    parser.add_argument(
        "--ue-plugin-port",
        type=int,
        help="Editor plugin HTTP API port (default: 8080)",
        default=None,
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print effective config and exit",
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--mcp-host",
        default="127.0.0.1",
        help="Host for http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--mcp-port",
        type=int,
        default=8000,
        help="Port for http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--mcp-path",
        default="/mcp",
        help="Path prefix for http transport (default: /mcp)",
    )

    return parser


def _apply_cli_overrides(args: argparse.Namespace) -> None:
    """Apply CLI overrides to env vars, then reload config."""
    if args.export_root:
        os.environ["CONTEXT_EXPORT_ROOT"] = args.export_root
    if args.ue_plugin_host:
        os.environ["UE_PLUGIN_HOST"] = args.ue_plugin_host
    if args.ue_plugin_port is not None:
        os.environ["UE_PLUGIN_PORT"] = str(args.ue_plugin_port)
    reset_config()


def main(argv: list[str] | None = None):
    """Run the MCP server."""
    parser = _build_arg_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    _apply_cli_overrides(args)

    if args.print_config:
        cfg = get_config()
        print("[ContextCore] Effective config:")
        print(f"  EXPORT_ROOT: {cfg.export_root}")
        print(f"  LEGACY_STATE_MACHINE_NAMES: {cfg.legacy_state_machine_names}")
        print(f"  UE_PLUGIN_URL: {cfg.ue_plugin_url}")
        return

    register_tools()

    if args.transport == "stdio":
        mcp.run()
    elif args.transport == "http":
        mcp.run(transport="http", host=args.mcp_host, port=args.mcp_port, path=args.mcp_path)
    else:
        mcp.run(transport="sse", host=args.mcp_host, port=args.mcp_port)


if __name__ == "__main__":
    main()
