"""LiteLLM wrapper for image-generation calls."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import litellm

log = logging.getLogger("app_publisher.llm")

# Defaults
litellm.num_retries = 3
litellm.request_timeout = 120

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.+)$", re.DOTALL)


@dataclass
class ImagePart:
    data: str  # base64
    mime_type: str


def litellm_model(model: str) -> str:
    """Bare Gemini ids get the ``gemini/`` provider prefix."""
    return model if "/" in model else f"gemini/{model}"


def _parse_data_url(url: str) -> ImagePart | None:
    m = _DATA_URL_RE.match(url)
    if not m:
        return None
    return ImagePart(data=m.group("data"), mime_type=m.group("mime"))


def _image_url(item: Any) -> str:
    if isinstance(item, dict):
        image_url = item.get("image_url") or {}
        return image_url.get("url", "") if isinstance(image_url, dict) else str(image_url)
    image_url = getattr(item, "image_url", None)
    if isinstance(image_url, dict):
        return image_url.get("url", "")
    return getattr(image_url, "url", "") or ""


async def generate_image(
    model: str,
    prompt: str,
    api_key: str,
    source_image: ImagePart | None = None,
) -> tuple[list[str], list[ImagePart]]:
    """Request image output from a multimodal model.

    Returns the text parts and decoded image parts of the first choice. When
    ``source_image`` is given it is sent ahead of the prompt for editing.
    """
    if source_image is not None:
        content: Any = [
            {
                "type": "image_url",
                "image_url": {"url": f"data:{source_image.mime_type};base64,{source_image.data}"},
            },
            {"type": "text", "text": prompt},
        ]
    else:
        content = prompt

    model_id = litellm_model(model)
    log.debug(
        "IMAGE CALL → model=%s edit=%s\n── PROMPT ──\n%s",
        model_id, source_image is not None, prompt,
    )

    response = await litellm.acompletion(
        model=model_id,
        messages=[{"role": "user", "content": content}],
        modalities=["image", "text"],
        api_key=api_key,
    )
    message = response.choices[0].message

    texts = [message.content] if message.content else []
    images = []
    for item in getattr(message, "images", None) or []:
        part = _parse_data_url(_image_url(item))
        if part is not None:
            images.append(part)

    log.debug("IMAGE RESPONSE ← model=%s texts=%d images=%d", model_id, len(texts), len(images))
    return texts, images
