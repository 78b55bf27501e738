"""
Thin async wrapper around the Figma REST API.

One method per endpoint, one GET per call. Responses come back exactly as
Figma sent them; HTTP and transport failures are raised to the caller as-is.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from figma_mcp.figma_types import (
    CommentsResponse,
    ComponentsResponse,
    FileListResponse,
    FileNodesResponse,
    FileResponse,
    StylesResponse,
    VersionsResponse,
)

logger = logging.getLogger("figma_mcp.figma_client")

FIGMA_API_BASE = "https://api.figma.com/v1"
PAGE_SIZE = 100


def _file_path(file_key: str, suffix: str = "") -> str:
    # The key is one path segment; "/", "?", "#" and ".." must not reshape the URL.
    segment = quote(file_key, safe="")
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return f"/files/{segment}{suffix}"


class FigmaClient:
    """Authenticated client for ``api.figma.com``.

    The access token is sent as ``X-Figma-Token`` on every request. *transport*
    is handed to ``httpx.AsyncClient`` unchanged (tests pass a
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = FIGMA_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ValueError("Figma access token is empty")
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"X-Figma-Token": access_token.strip()},
            # Unbounded; full document trees can take minutes to download.
            timeout=None,
            transport=transport,
        )

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("GET %s %s", path, query)
        response = await self._client.get(path, params=query)
        response.raise_for_status()
        return response.json()

    # -----------------------------------------------------------------------
    # Endpoints
    # -----------------------------------------------------------------------

    async def list_files(
        self,
        project_id: Optional[str] = None,
        team_id: Optional[str] = None,
    ) -> FileListResponse:
        # Callers are expected to pass one scope; Figma decides what both/neither means.
        return await self._get("/files", {"project_id": project_id, "team_id": team_id})

    async def get_file_info(
        self,
        file_key: str,
        depth: Optional[int] = None,
        node_id: Optional[str] = None,
    ) -> FileResponse:
        return await self._get(_file_path(file_key), {"depth": depth, "ids": node_id})

    async def get_components(self, file_key: str) -> ComponentsResponse:
        return await self._get(_file_path(file_key, "/components"), {"page_size": PAGE_SIZE})

    async def get_styles(self, file_key: str) -> StylesResponse:
        return await self._get(_file_path(file_key, "/styles"), {"page_size": PAGE_SIZE})

    async def get_file_versions(self, file_key: str) -> VersionsResponse:
        return await self._get(_file_path(file_key, "/versions"))

    async def get_file_comments(self, file_key: str) -> CommentsResponse:
        return await self._get(_file_path(file_key, "/comments"))

    async def get_file_nodes(self, file_key: str, ids: List[str]) -> FileNodesResponse:
        return await self._get(_file_path(file_key, "/nodes"), {"ids": ",".join(ids)})
