from __future__ import annotations

import logging
from dataclasses import asdict, replace

from flask import Blueprint, current_app, jsonify, request

from figwind.config import FigwindConfig
from figwind.css.analysis import analyze_stylesheet
from figwind.errors import FigwindError
from figwind.pipeline import process_stylesheet, translate_stylesheet
from figwind.translate import ColorPolicy, SpacingPolicy

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    return response


def _request_config(data: dict) -> FigwindConfig:
    """The app config with per-request policy overrides.

    Raises ValueError for unknown policy names.
    """
    config: FigwindConfig = current_app.extensions["figwind_config"]
    if data.get("color_policy"):
        config = replace(config, color_policy=ColorPolicy(data["color_policy"]))
    if data.get("spacing_policy"):
        config = replace(config, spacing_policy=SpacingPolicy(data["spacing_policy"]))
    return config


def _css_payload() -> tuple[dict | None, str | None]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("css"), str):
        return None, None
    return data, data["css"]


@api_bp.route("/convert", methods=["POST"])
def convert():
    """Translate CSS into a component descriptor."""
    data, css = _css_payload()
    if data is None:
        return jsonify({"error": "css required"}), 400
    try:
        config = _request_config(data)
        component = process_stylesheet(css, config)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    except FigwindError as exc:
        logger.info("Rejected convert request: %s", exc)
        return jsonify({"error": str(exc), "kind": type(exc).__name__}), 400
    return jsonify(component.to_dict())


@api_bp.route("/translate", methods=["POST"])
def translate():
    """Translate every block of a stylesheet into utility classes."""
    data, css = _css_payload()
    if data is None:
        return jsonify({"error": "css required"}), 400
    try:
        config = _request_config(data)
        blocks = translate_stylesheet(css, config)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    except FigwindError as exc:
        logger.info("Rejected translate request: %s", exc)
        return jsonify({"error": str(exc), "kind": type(exc).__name__}), 400
    return jsonify({"blocks": [asdict(block) for block in blocks]})


@api_bp.route("/analyze", methods=["POST"])
def analyze():
    """Report custom properties, media queries, animations and colors."""
    data, css = _css_payload()
    if data is None:
        return jsonify({"error": "css required"}), 400
    return jsonify(asdict(analyze_stylesheet(css)))
