"""
Editor Plugin HTTP Client.

Fetches Blueprint snapshots and the content browser selection from the
ContextCore plugin running in the Editor.
"""

from .http_client import UEPluginClient, UEPluginError, get_client, set_client

__all__ = ["UEPluginClient", "UEPluginError", "get_client", "set_client"]
