"""Shared Figma fixtures: a trimmed ``GET /v1/files/:key`` response."""

import copy

import pytest

_FILE_JSON = {
    "name": "Design System",
    "lastModified": "2025-01-15T10:00:00Z",
    "version": "42",
    "styles": {
        "S:1": {"name": "Primary", "styleType": "FILL"},
        "S:2": {"name": "Heading", "styleType": "TEXT"},
        "S:3": {"name": "Shadow", "styleType": "EFFECT"},
    },
    "components": {"1:2": {"key": "abc", "name": "PrimaryButton"}},
    "document": {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "children": [
                    {
                        "id": "1:2",
                        "name": "PrimaryButton",
                        "type": "COMPONENT",
                        "layoutMode": "HORIZONTAL",
                        "itemSpacing": 8,
                        "paddingTop": 12,
                        "paddingRight": 24,
                        "paddingBottom": 12,
                        "paddingLeft": 24,
                        "primaryAxisAlignItems": "CENTER",
                        "counterAxisAlignItems": "CENTER",
                        "cornerRadius": 8,
                        "fills": [
                            {"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}
                        ],
                        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 160, "height": 48},
                        "children": [
                            {
                                "id": "1:3",
                                "name": "Label",
                                "type": "TEXT",
                                "characters": "Click me",
                                "style": {
                                    "fontFamily": "Inter",
                                    "fontSize": 16,
                                    "fontWeight": 500,
                                    "textAlignHorizontal": "CENTER",
                                },
                                "fills": [
                                    {"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}
                                ],
                            }
                        ],
                    },
                    {
                        "id": "2:1",
                        "name": "InfoCard",
                        "type": "FRAME",
                        "strokes": [
                            {"type": "SOLID", "color": {"r": 0.898, "g": 0.906, "b": 0.922, "a": 1}}
                        ],
                        "strokeWeight": 1,
                        "absoluteBoundingBox": {"x": 0, "y": 100, "width": 100, "height": 100},
                        "children": [],
                    },
                    {"id": "3:1", "name": "Sticky", "type": "STICKY"},
                ],
            }
        ],
    },
}


@pytest.fixture
def file_json():
    return copy.deepcopy(_FILE_JSON)
