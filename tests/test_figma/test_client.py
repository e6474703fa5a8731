"""Tests for the Figma REST client and URL parsing."""
from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from figwind.errors import FigmaApiError, InvalidFigmaUrlError
from figwind.figma.client import FigmaClient, FigmaFileRef, parse_figma_url
from figwind.figma.nodes import ContainerNode, DocumentNode


# ---------------------------------------------------------------------------
# URL parsing
# ---------------------------------------------------------------------------


class TestParseFigmaUrl:
    def test_design_url(self) -> None:
        ref = parse_figma_url("https://www.figma.com/design/AbC123/My-File")
        assert ref == FigmaFileRef(file_key="AbC123", node_id=None)

    def test_file_url_with_node(self) -> None:
        ref = parse_figma_url("https://figma.com/file/XYZ9/Name?node-id=12-34&t=abc")
        assert ref.file_key == "XYZ9"
        assert ref.node_id == "12:34"

    def test_encoded_node_id(self) -> None:
        ref = parse_figma_url("https://www.figma.com/proto/K1?node-id=1%3A2")
        assert ref.node_id == "1:2"

    @pytest.mark.parametrize(
        "url",
        ["", "https://example.com/file/abc", "http://figma.com/file/abc", "https://figma.com/board/abc"],
    )
    def test_rejects_other_urls(self, url: str) -> None:
        with pytest.raises(InvalidFigmaUrlError):
            parse_figma_url(url)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _client(
    handler_body: dict[str, Any] | None = None,
    status_code: int = 200,
    seen: list[httpx.Request] | None = None,
) -> FigmaClient:
    """Create a FigmaClient whose transport returns a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(
            status_code=status_code,
            content=json.dumps(handler_body or {}).encode(),
            headers={"content-type": "application/json"},
        )

    return FigmaClient(
        "figd_test",
        base_url="https://api.figma.test/v1",
        transport=httpx.MockTransport(handler),
    )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TestGetFile:
    def test_sends_token_and_parses(self, file_json: dict[str, Any]) -> None:
        seen: list[httpx.Request] = []
        with _client(file_json, seen=seen) as client:
            figma_file = client.get_file("KEY1")
        assert seen[0].headers["X-Figma-Token"] == "figd_test"
        assert seen[0].url.path == "/v1/files/KEY1"
        assert figma_file.name == "Design System"
        assert isinstance(figma_file.document, DocumentNode)

    def test_error_status(self) -> None:
        client = _client({"status": 403, "err": "Invalid token"}, status_code=403)
        with pytest.raises(FigmaApiError) as exc_info:
            client.get_file("KEY1")
        assert exc_info.value.status_code == 403

    def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        client = FigmaClient("t", transport=httpx.MockTransport(handler))
        with pytest.raises(FigmaApiError) as exc_info:
            client.get_file("KEY1")
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        client = FigmaClient("t", transport=httpx.MockTransport(handler))
        with pytest.raises(FigmaApiError):
            client.get_file("KEY1")


class TestGetFileNodes:
    def test_nodes_parsed(self) -> None:
        body = {
            "nodes": {
                "1:2": {"document": {"id": "1:2", "name": "Button", "type": "COMPONENT"}},
                "9:9": None,
            }
        }
        seen: list[httpx.Request] = []
        client = _client(body, seen=seen)
        nodes = client.get_file_nodes("KEY1", ["1:2", "9:9"])
        assert list(nodes) == ["1:2"]
        assert isinstance(nodes["1:2"], ContainerNode)
        assert seen[0].url.params["ids"] == "1:2,9:9"


class TestGetImages:
    def test_images(self) -> None:
        seen: list[httpx.Request] = []
        client = _client({"err": None, "images": {"1:2": "https://img/1.svg"}}, seen=seen)
        images = client.get_images("KEY1", ["1:2"], format="png", scale=2)
        assert images == {"1:2": "https://img/1.svg"}
        assert seen[0].url.params["format"] == "png"
        assert seen[0].url.params["scale"] == "2"

    def test_render_error(self) -> None:
        client = _client({"err": "Render timeout", "images": {}})
        with pytest.raises(FigmaApiError):
            client.get_images("KEY1", ["1:2"])
