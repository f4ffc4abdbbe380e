"""Tests for the image model wrapper, image generator and store screenshots."""

from __future__ import annotations

import base64
import io
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from PIL import Image

from app_publisher.config import DEFAULT_MODEL, Settings
from app_publisher.models import GeneratedImage, Platform
from app_publisher.services.imagegen import (
    ICON_PROMPT,
    ImageGenerator,
    guess_mime_type,
    output_filename,
)
from app_publisher.services.store_screenshot import (
    create_store_screenshots,
    resize_to_store_sizes,
    select_sizes,
)
from app_publisher.utils.llm import ImagePart, generate_image, litellm_model


def _png_b64(size: tuple[int, int] = (8, 8)) -> str:
    buf = io.BytesIO()
    Image.new("RGB", size, (10, 20, 30)).save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def _response(content, images) -> SimpleNamespace:
    message = SimpleNamespace(content=content, images=images)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


# ── LLM wrapper ─────────────────────────────────────────────────────────────


class TestLitellmModel:
    def test_bare_id_gets_prefix(self):
        assert litellm_model("gemini-2.5-flash-image") == "gemini/gemini-2.5-flash-image"

    def test_prefixed_id_unchanged(self):
        assert litellm_model("vertex_ai/imagen") == "vertex_ai/imagen"


class TestGenerateImage:
    @pytest.mark.asyncio
    async def test_parses_text_and_images(self):
        response = _response(
            "Here is your icon",
            [{"type": "image_url", "image_url": {"url": "data:image/png;base64,QUJD"}}],
        )
        with patch("app_publisher.utils.llm.litellm.acompletion", AsyncMock(return_value=response)) as call:
            texts, images = await generate_image("gemini-2.5-flash-image", "a cat", "key")
        assert texts == ["Here is your icon"]
        assert images == [ImagePart(data="QUJD", mime_type="image/png")]
        kwargs = call.call_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.5-flash-image"
        assert kwargs["modalities"] == ["image", "text"]
        assert kwargs["api_key"] == "key"
        assert kwargs["messages"] == [{"role": "user", "content": "a cat"}]

    @pytest.mark.asyncio
    async def test_source_image_sent_first(self):
        response = _response(None, None)
        source = ImagePart(data="QUJD", mime_type="image/jpeg")
        with patch("app_publisher.utils.llm.litellm.acompletion", AsyncMock(return_value=response)) as call:
            texts, images = await generate_image("gemini/x", "frame it", "key", source)
        assert (texts, images) == ([], [])
        content = call.call_args.kwargs["messages"][0]["content"]
        assert content[0]["image_url"]["url"] == "data:image/jpeg;base64,QUJD"
        assert content[1] == {"type": "text", "text": "frame it"}

    @pytest.mark.asyncio
    async def test_attribute_style_images(self):
        item = SimpleNamespace(image_url=SimpleNamespace(url="data:image/webp;base64,WFla"))
        with patch(
            "app_publisher.utils.llm.litellm.acompletion",
            AsyncMock(return_value=_response("", [item, {"image_url": {"url": "not-a-data-url"}}])),
        ):
            _, images = await generate_image("gemini/x", "p", "key")
        assert images == [ImagePart(data="WFla", mime_type="image/webp")]


# ── Image generator ─────────────────────────────────────────────────────────


class TestHelpers:
    def test_output_filename(self):
        name = output_filename("icon", "image/jpeg")
        assert name.startswith("icon_")
        assert name.endswith(".jpg")
        assert output_filename("icon") != output_filename("icon")

    def test_guess_mime_type(self):
        assert guess_mime_type(Path("a.JPEG")) == "image/jpeg"
        assert guess_mime_type(Path("a.png")) == "image/png"


class TestImageGenerator:
    @pytest.mark.asyncio
    async def test_requires_api_key(self, settings: Settings, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Gemini API key not configured"):
            await ImageGenerator(settings).generate_icon("a cat", tmp_path)

    @pytest.mark.asyncio
    async def test_saves_first_image(self, settings: Settings, tmp_path: Path):
        settings.gemini_api_key = "key"
        data = _png_b64()
        fake = AsyncMock(return_value=(["done"], [ImagePart(data, "image/png"), ImagePart("x", "image/png")]))
        with patch("app_publisher.services.imagegen.generate_image", fake):
            result = await ImageGenerator(settings).generate_icon("a cat", tmp_path / "out")

        fake.assert_awaited_once_with(DEFAULT_MODEL, ICON_PROMPT.format(prompt="a cat"), "key", None)
        path = Path(result.image_path)
        assert path.parent == tmp_path / "out"
        assert path.name.startswith("icon_")
        assert path.read_bytes() == base64.b64decode(data)
        assert result.texts == ["done"]
        assert result.image_b64 == data

    @pytest.mark.asyncio
    async def test_model_override(self, settings: Settings, tmp_path: Path):
        settings.gemini_api_key = "key"
        fake = AsyncMock(return_value=([], []))
        with patch("app_publisher.services.imagegen.generate_image", fake):
            result = await ImageGenerator(settings).generate_splash("sunrise", tmp_path, model="gemini-x")
        assert fake.call_args.args[0] == "gemini-x"
        assert result.image_path == ""

    @pytest.mark.asyncio
    async def test_edit_image_sends_source(self, settings: Settings, tmp_path: Path):
        settings.gemini_api_key = "key"
        source = tmp_path / "shot.jpg"
        source.write_bytes(b"jpeg-bytes")
        fake = AsyncMock(return_value=([], []))
        with patch("app_publisher.services.imagegen.generate_image", fake):
            await ImageGenerator(settings).edit_image(source, "frame", tmp_path, "store_base")
        part = fake.call_args.args[3]
        assert part == ImagePart(base64.b64encode(b"jpeg-bytes").decode("ascii"), "image/jpeg")


# ── Store screenshots ───────────────────────────────────────────────────────


class TestSelectSizes:
    def test_required_only_by_default(self):
        names = [s.name for s in select_sizes(Platform.BOTH)]
        assert names == ["iPhone_6.7", "iPhone_6.5", "Phone"]

    def test_filter_by_name_or_label(self):
        sizes = select_sizes(Platform.BOTH, ["Tablet_7", 'iPad 12.9"'])
        assert [s.name for s in sizes] == ["iPad_12.9", "Tablet_7"]

    def test_platform_filter(self):
        assert all(s.platform == "android" for s in select_sizes(Platform.ANDROID))


class TestStoreScreenshots:
    def test_resize_to_store_sizes(self, tmp_path: Path):
        source = tmp_path / "framed.png"
        Image.new("RGB", (300, 600)).save(source)
        results = resize_to_store_sizes(source, select_sizes(Platform.ANDROID), tmp_path / "out")
        assert len(results) == 1
        assert results[0].path.endswith("android/store_Phone_1080x1920.png")
        with Image.open(results[0].path) as img:
            assert img.size == (1080, 1920)

    @pytest.mark.asyncio
    async def test_create_store_screenshots(self, tmp_path: Path):
        screenshot = tmp_path / "shot.png"
        Image.new("RGB", (100, 200)).save(screenshot)
        framed = tmp_path / "framed.png"
        Image.new("RGB", (100, 200)).save(framed)

        generator = MagicMock()
        generator.edit_image = AsyncMock(return_value=GeneratedImage(image_path=str(framed)))
        results, base = await create_store_screenshots(
            generator, screenshot, "Build habits", tmp_path / "out", platform=Platform.IOS
        )
        assert base == str(framed)
        assert [r.device for r in results] == ['iPhone 6.7"', 'iPhone 6.5"']
        prompt = generator.edit_image.call_args.args[1]
        assert '"Build habits"' in prompt
        assert "#FFFFFF" in prompt

    @pytest.mark.asyncio
    async def test_missing_screenshot(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Screenshot not found"):
            await create_store_screenshots(MagicMock(), tmp_path / "nope.png", "x", tmp_path)

    @pytest.mark.asyncio
    async def test_no_image_generated(self, tmp_path: Path):
        screenshot = tmp_path / "shot.png"
        Image.new("RGB", (10, 10)).save(screenshot)
        generator = MagicMock()
        generator.edit_image = AsyncMock(return_value=GeneratedImage())
        with pytest.raises(RuntimeError, match="failed to generate"):
            await create_store_screenshots(generator, screenshot, "x", tmp_path / "out")
