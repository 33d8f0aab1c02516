"""
MCP tool implementations.
"""

from . import export

__all__ = ["export"]
