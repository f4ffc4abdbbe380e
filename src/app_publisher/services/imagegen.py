"""Prompted image generation for icons, splash screens and screenshots."""

from __future__ import annotations

import base64
import logging
import secrets
from datetime import datetime, timezone
from pathlib import Path

from app_publisher.config import Settings
from app_publisher.models import GeneratedImage
from app_publisher.utils.llm import ImagePart, generate_image

log = logging.getLogger("app_publisher.imagegen")

NO_IMAGE_MESSAGE = "No image was generated. Try a different prompt or model."

ICON_PROMPT = (
    "Create an app icon design: {prompt}. The icon should be perfectly square, clean, "
    "modern, suitable for mobile app stores. No rounded corners (the OS handles rounding). "
    "High resolution, centered composition, simple and recognizable at small sizes. "
    "No text unless specifically requested."
)
SPLASH_PROMPT = (
    "Create a splash screen design: {prompt}. The design should be clean and centered "
    "with the app branding prominently featured. Suitable for a mobile app launch screen. "
    "Simple background, professional and modern look. Portrait orientation."
)
SCREENSHOT_PROMPT = (
    "Create an app store screenshot mockup: {prompt}. The screenshot should look like a "
    "real mobile app screen, modern UI design, clean layout, suitable for App Store or "
    "Google Play listing. Show the app in use with realistic content."
)

_EXTENSIONS = {"image/jpeg": "jpg", "image/webp": "webp"}


def output_filename(prefix: str, mime_type: str = "image/png") -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%f")
    ext = _EXTENSIONS.get(mime_type, "png")
    return f"{prefix}_{timestamp}_{secrets.token_hex(3)}.{ext}"


def guess_mime_type(path: Path) -> str:
    return "image/jpeg" if path.suffix.lower() in (".jpg", ".jpeg") else "image/png"


class ImageGenerator:
    """Generates images with the configured model and saves them to disk."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _api_key(self) -> str:
        key = self.settings.api_key
        if not key:
            raise RuntimeError("Gemini API key not configured. Use configure_api_key tool first.")
        return key

    async def generate_icon(self, prompt: str, output_dir: Path, model: str | None = None) -> GeneratedImage:
        return await self._generate(ICON_PROMPT.format(prompt=prompt), output_dir, "icon", model)

    async def generate_splash(self, prompt: str, output_dir: Path, model: str | None = None) -> GeneratedImage:
        return await self._generate(SPLASH_PROMPT.format(prompt=prompt), output_dir, "splash", model)

    async def generate_screenshot(
        self, prompt: str, output_dir: Path, model: str | None = None
    ) -> GeneratedImage:
        return await self._generate(
            SCREENSHOT_PROMPT.format(prompt=prompt), output_dir, "screenshot", model
        )

    async def edit_image(
        self,
        image_path: Path,
        prompt: str,
        output_dir: Path,
        prefix: str,
        model: str | None = None,
    ) -> GeneratedImage:
        """Send an existing image plus instructions; save the edited result."""
        source = ImagePart(
            data=base64.b64encode(image_path.read_bytes()).decode("ascii"),
            mime_type=guess_mime_type(image_path),
        )
        return await self._generate(prompt, output_dir, prefix, model, source)

    async def _generate(
        self,
        prompt: str,
        output_dir: Path,
        prefix: str,
        model: str | None,
        source: ImagePart | None = None,
    ) -> GeneratedImage:
        api_key = self._api_key()
        output_dir.mkdir(parents=True, exist_ok=True)
        texts, images = await generate_image(model or self.settings.model, prompt, api_key, source)

        result = GeneratedImage(texts=texts)
        if images:
            image = images[0]
            path = output_dir / output_filename(prefix, image.mime_type)
            path.write_bytes(base64.b64decode(image.data))
            result.image_path = str(path)
            result.image_b64 = image.data
            result.mime_type = image.mime_type
            log.info("Saved %s image to %s", prefix, path)
        else:
            log.warning("Model returned no image for %s prompt", prefix)
        return result
