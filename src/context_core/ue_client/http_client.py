"""
HTTP Client for the ContextCore editor plugin API.

The editor side serializes Blueprints into snapshots; this client fetches
them so the export pipeline can run outside the editor process.
"""

import httpx

from ..config import get_config


class UEPluginClient:
    """HTTP client for communicating with the editor plugin."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the plugin API (default from config)
            timeout: Request timeout in seconds (default from config)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        cfg = get_config()
        self.base_url = base_url or cfg.ue_plugin_url
        self.timeout = timeout if timeout is not None else cfg.ue_plugin_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str, params: dict | None = None) -> dict:
        """Make a GET request.

        Args:
            path: API path
            params: Query parameters (asset paths go here, not in the URL path)

        Returns:
            JSON response as dictionary

        Raises:
            UEPluginError: If the request fails
        """
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UEPluginError(f"HTTP {e.response.status_code}: {e.response.text}") from e
        except httpx.RequestError as e:
            raise UEPluginError(f"Request failed: {e}") from e
        except ValueError as e:
            raise UEPluginError(f"Invalid JSON response: {e}") from e

    async def get_blueprint_snapshot(self, bp_path: str) -> dict:
        """Fetch the snapshot of one Blueprint.

        Args:
            bp_path: Blueprint asset path (e.g. `/Game/Blueprints/BP_Player`)

        Returns:
            The snapshot payload (see context_core.model.snapshot)

        Raises:
            UEPluginError: If the request fails or the plugin reports an error
        """
        result = await self.get("/blueprint/snapshot", {"bp_path": bp_path})
        if not result.get("ok", True):
            raise UEPluginError(result.get("error") or f"Snapshot failed for {bp_path}")
        return result.get("snapshot", result)

    async def get_selected_assets(self) -> list[dict]:
        """Content browser selection as [{path, class}]."""
        result = await self.get("/asset/selection")
        return list(result.get("assets", []))


class UEPluginError(Exception):
    """Error from the editor plugin API."""

    pass


# Global client instance
_client: UEPluginClient | None = None


def get_client() -> UEPluginClient:
    """Get the global client instance."""
    global _client
    if _client is None:
        _client = UEPluginClient()
    return _client


def set_client(client: UEPluginClient | None) -> None:
    """Set the global client instance (None resets it)."""
    global _client
    _client = client
