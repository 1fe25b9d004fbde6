"""Output formatting utilities for the CLI."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

OUTPUT_FORMATS = ("text", "json")


def format_response(
    payload: Any,
    output_format: str = "text",
    text_renderer: Optional[Callable[[Any], str]] = None,
) -> dict:
    """Normalize response with format metadata and content.

    Args:
        payload: Data to serialize.
        output_format: "text" or "json".
        text_renderer: Optional renderer for text output.
    """
    output_format = (output_format or "text").lower()

    if output_format == "json":
        return {"format": "json", "content": payload}
    if output_format == "text":
        content = text_renderer(payload) if text_renderer else json.dumps(payload, indent=2)
        return {"format": "text", "content": content}

    raise ValueError(f"Unknown output format: {output_format!r} (expected one of {', '.join(OUTPUT_FORMATS)})")


def render_cli(response: dict) -> str:
    """Render a formatted response into a CLI string."""
    fmt = response.get("format")
    content = response.get("content")
    if fmt == "json":
        return json.dumps(content, indent=2)
    return str(content)
