"""Shared helpers for MCP tool results and input schemas."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any

from app_publisher.services.imagegen import guess_mime_type

_MAX_OUTPUT = 20000


def _truncate(text: str) -> str:
    if len(text) <= _MAX_OUTPUT:
        return text
    return text[:_MAX_OUTPUT] + f"\n\n[... output truncated, showing first {_MAX_OUTPUT} chars]"


def _ok(
    text: str, images: list[dict[str, Any]] | None = None, truncate: bool = True
) -> dict[str, Any]:
    """Return a success tool result, optionally followed by image blocks.

    Generated documents pass ``truncate=False`` so their closing sections survive.
    """
    content: list[dict[str, Any]] = [{"type": "text", "text": _truncate(text) if truncate else text}]
    content.extend(images or [])
    return {"content": content}


def _err(message: str) -> dict[str, Any]:
    """Return an error tool result with actionable suggestion."""
    return {"content": [{"type": "text", "text": f"Error: {message}"}], "is_error": True}


def _image(data: str, mime_type: str = "image/png") -> dict[str, Any]:
    return {"type": "image", "data": data, "mimeType": mime_type}


def _image_file(path: str | Path) -> dict[str, Any] | None:
    """Image block for a file on disk, or None if it cannot be read."""
    path = Path(path)
    try:
        data = base64.b64encode(path.read_bytes()).decode("ascii")
    except OSError:
        return None
    return _image(data, guess_mime_type(path))


# ── JSON schema ─────────────────────────────────────────────────────────────


def string(description: str, enum: list[str] | None = None) -> dict[str, Any]:
    prop: dict[str, Any] = {"type": "string", "description": description}
    if enum:
        prop["enum"] = enum
    return prop


def boolean(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def string_list(description: str, enum: list[str] | None = None) -> dict[str, Any]:
    items: dict[str, Any] = {"type": "string"}
    if enum:
        items["enum"] = enum
    return {"type": "array", "items": items, "description": description}


def object_schema(
    required: dict[str, Any] | None = None, optional: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Object schema where only ``required`` keys are mandatory."""
    required = required or {}
    return {
        "type": "object",
        "properties": {**required, **(optional or {})},
        "required": list(required),
    }
