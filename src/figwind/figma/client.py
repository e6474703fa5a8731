"""Figma REST API client built on httpx."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

import httpx

from figwind.errors import FigmaApiError, InvalidFigmaUrlError
from figwind.figma.nodes import FigmaFile, FigmaNode, parse_node

__all__ = ["DEFAULT_BASE_URL", "FigmaClient", "FigmaFileRef", "parse_figma_url"]

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.figma.com/v1"

_URL_RE = re.compile(
    r"^https://(?:www\.)?figma\.com/(?:design|file|proto)/(?P<key>[a-zA-Z0-9]+)"
)
_NODE_ID_RE = re.compile(r"[?&]node-id=(?P<node_id>[^&#]+)")


@dataclass(frozen=True)
class FigmaFileRef:
    """A file key, and optionally a node id, taken from a Figma URL."""

    file_key: str
    node_id: str | None = None


def parse_figma_url(url: str) -> FigmaFileRef:
    """Parse a ``figma.com/design|file|proto/<key>`` URL.

    Share links write node ids as ``12-34``; the API expects ``12:34``.
    Raises :class:`InvalidFigmaUrlError` for anything else.
    """
    match = _URL_RE.match(url.strip())
    if match is None:
        raise InvalidFigmaUrlError(url)
    node_match = _NODE_ID_RE.search(url)
    node_id = None
    if node_match:
        node_id = unquote(node_match.group("node_id")).replace("-", ":")
    return FigmaFileRef(file_key=match.group("key"), node_id=node_id)


class FigmaClient:
    """Thin wrapper around :mod:`httpx` for the Figma files and images endpoints."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={"X-Figma-Token": token},
            timeout=timeout,
            transport=transport,
        )

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        logger.info("Figma request: GET %s", path)
        try:
            resp = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise FigmaApiError(f"Figma API timed out: {exc}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise FigmaApiError(f"Figma API unreachable: {exc}", cause=exc) from exc

        if resp.status_code >= 300:
            raise FigmaApiError(
                f"Figma API error: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise FigmaApiError(
                "Figma API returned invalid JSON", status_code=resp.status_code, cause=exc
            ) from exc

    def get_file(self, file_key: str) -> FigmaFile:
        return FigmaFile.from_dict(self._get(f"/files/{file_key}"))

    def get_file_nodes(self, file_key: str, node_ids: list[str]) -> dict[str, FigmaNode]:
        """Fetch selected nodes; ids the API could not resolve are omitted."""
        body = self._get(f"/files/{file_key}/nodes", params={"ids": ",".join(node_ids)})
        nodes: dict[str, FigmaNode] = {}
        for node_id, entry in (body.get("nodes") or {}).items():
            if entry and entry.get("document"):
                nodes[node_id] = parse_node(entry["document"])
        return nodes

    def get_images(
        self,
        file_key: str,
        node_ids: list[str],
        format: str = "svg",
        scale: float = 1,
    ) -> dict[str, str | None]:
        """Return render URLs keyed by node id."""
        body = self._get(
            f"/images/{file_key}",
            params={"ids": ",".join(node_ids), "format": format, "scale": scale},
        )
        if body.get("err"):
            raise FigmaApiError(f"Figma image render failed: {body['err']}")
        return dict(body.get("images") or {})

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
