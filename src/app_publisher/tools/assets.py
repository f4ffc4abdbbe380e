"""Configuration, image-generation and icon tools."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from claude_agent_sdk import tool

from app_publisher.config import Settings, default_output_dir, mask_key
from app_publisher.models import GeneratedImage
from app_publisher.services import fastlane
from app_publisher.services.icons import resize_icons as resize_icon_set
from app_publisher.services.imagegen import NO_IMAGE_MESSAGE, ImageGenerator
from app_publisher.tools.common import _err, _image, _ok, object_schema, string, string_list

log = logging.getLogger("app_publisher.tools")

_IMAGE_SCHEMA = object_schema(
    {"prompt": string("What the image should show")},
    {
        "model": string("Image model id (defaults to the configured model)"),
        "outputDir": string("Directory to save the image (defaults to ~/app-publisher-assets)"),
    },
)


def _image_result(result: GeneratedImage) -> dict[str, Any]:
    if not result.image_path:
        text = "\n".join(result.texts + [NO_IMAGE_MESSAGE])
        return _ok(text)
    lines = result.texts + [f"Image saved to: {result.image_path}"]
    return _ok("\n".join(lines), [_image(result.image_b64, result.mime_type)])


def format_resize_summary(results: list, output_dir: Path) -> str:
    ios = [r for r in results if r.platform == "ios"]
    android = [r for r in results if r.platform == "android"]
    lines = ["=== Icon Resize Complete ===", "", f"Total: {len(results)} icons generated"]
    if ios:
        lines += [
            "",
            f"iOS ({len(ios)} icons):",
            f"  Output: {output_dir / 'ios' / 'AppIcon.appiconset'}",
            "  Contents.json: Generated (Xcode-compatible)",
            "  Sizes: 20px ~ 1024px",
        ]
    if android:
        lines += [
            "",
            f"Android ({len(android)} icons):",
            f"  Output: {output_dir / 'android'}",
            "  Densities: mdpi, hdpi, xhdpi, xxhdpi, xxxhdpi",
            "  Play Store: 512x512",
        ]
    lines += ["", "All Icons:"]
    lines += [f"  [{r.platform}] {r.name} ({r.size}x{r.size}) -> {r.path}" for r in results]
    return "\n".join(lines)


def format_status(settings: Settings, output_dir: Path) -> str:
    key = settings.api_key
    masked = mask_key(key) if key else "Not configured"
    lines = [
        "=== App Publisher Status ===",
        "",
        f"Gemini API Key: {masked} (source: {settings.config_source()})",
        f"Gemini Model: {settings.model}",
        f"Fastlane: {'Installed' if fastlane.is_installed() else 'Not installed'}",
        f"Output Directory: {output_dir}",
    ]
    if output_dir.is_dir():
        lines.append(f"Generated Assets: {sum(1 for _ in output_dir.iterdir())} files")
    else:
        lines.append("Generated Assets: None")
    return "\n".join(lines)


def create_asset_tools(settings: Settings) -> list:
    """Create configuration, image and icon tools bound to ``settings``."""
    generator = ImageGenerator(settings)

    def _output_dir(args: dict[str, Any]) -> Path:
        return Path(args.get("outputDir") or default_output_dir()).expanduser()

    @tool(
        "configure_api_key",
        "Save the Gemini API key used for image generation. The key is stored in "
        "~/.app-publisher/config.json; the GEMINI_API_KEY environment variable "
        "takes precedence when set.",
        object_schema({"apiKey": string("Gemini API key")}),
    )
    async def configure_api_key(args: dict[str, Any]) -> dict[str, Any]:
        try:
            settings.set_api_key(args["apiKey"])
        except OSError as e:
            return _err(f"Could not save settings: {e}")
        return _ok(f"API key configured: {mask_key(args['apiKey'])}")

    @tool(
        "configure_model",
        "Set the default image-generation model, e.g. gemini-2.5-flash-image.",
        object_schema({"model": string("Model id")}),
    )
    async def configure_model(args: dict[str, Any]) -> dict[str, Any]:
        try:
            settings.set_model(args["model"])
        except OSError as e:
            return _err(f"Could not save settings: {e}")
        return _ok(f"Model set to: {args['model']}")

    async def _generate(kind: str, args: dict[str, Any]) -> dict[str, Any]:
        method = getattr(generator, f"generate_{kind}")
        try:
            result = await method(args["prompt"], _output_dir(args), args.get("model"))
        except RuntimeError as e:
            return _err(str(e))
        except Exception as e:
            log.exception("Image generation failed")
            return _err(f"Image generation failed: {e}")
        return _image_result(result)

    @tool(
        "generate_icon",
        "Generate a square app icon with AI. Returns the image and the saved path.",
        _IMAGE_SCHEMA,
    )
    async def generate_icon(args: dict[str, Any]) -> dict[str, Any]:
        return await _generate("icon", args)

    @tool(
        "generate_splash",
        "Generate a portrait splash screen design with AI.",
        _IMAGE_SCHEMA,
    )
    async def generate_splash(args: dict[str, Any]) -> dict[str, Any]:
        return await _generate("splash", args)

    @tool(
        "generate_screenshot",
        "Generate an app store screenshot mockup using AI. Creates realistic app "
        "screenshots for store listings.",
        _IMAGE_SCHEMA,
    )
    async def generate_screenshot(args: dict[str, Any]) -> dict[str, Any]:
        return await _generate("screenshot", args)

    @tool(
        "resize_icons",
        "Resize a source icon into every iOS AppIcon size (with Contents.json) and "
        "the Android mipmap densities plus the 512px Play Store icon.",
        object_schema(
            {
                "sourcePath": string("Path to the source icon, ideally 1024x1024"),
                "outputDir": string("Directory to write the icon sets into"),
            },
            {"platforms": string_list("Platforms to generate", enum=["ios", "android"])},
        ),
    )
    async def resize_icons(args: dict[str, Any]) -> dict[str, Any]:
        output_dir = Path(args["outputDir"]).expanduser()
        try:
            results = resize_icon_set(args["sourcePath"], output_dir, args.get("platforms"))
        except FileNotFoundError as e:
            return _err(str(e))
        except OSError as e:
            return _err(f"Could not resize icon: {e}")
        return _ok(format_resize_summary(results, output_dir))

    @tool(
        "get_status",
        "Show API key status (masked), the configured model, whether fastlane is "
        "installed, and how many generated assets exist.",
        object_schema(),
    )
    async def get_status(args: dict[str, Any]) -> dict[str, Any]:
        return _ok(format_status(settings, default_output_dir()))

    return [
        configure_api_key,
        configure_model,
        generate_icon,
        generate_splash,
        generate_screenshot,
        resize_icons,
        get_status,
    ]
