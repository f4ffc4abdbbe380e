"""Marketing store screenshots: model-framed headline image, resized per device."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps

from app_publisher.models import Platform, StoreScreenshotResult, StoreScreenshotSize
from app_publisher.services.imagegen import ImageGenerator

log = logging.getLogger("app_publisher.store_screenshot")

IOS_SCREENSHOT_SIZES = [
    StoreScreenshotSize("iPhone_6.7", 1284, 2778, "ios", 'iPhone 6.7"', required=True),
    StoreScreenshotSize("iPhone_6.5", 1242, 2688, "ios", 'iPhone 6.5"', required=True),
    StoreScreenshotSize("iPhone_5.5", 1242, 2208, "ios", 'iPhone 5.5"', required=False),
    StoreScreenshotSize("iPad_12.9", 2048, 2732, "ios", 'iPad 12.9"', required=False),
]

ANDROID_SCREENSHOT_SIZES = [
    StoreScreenshotSize("Phone", 1080, 1920, "android", "Phone", required=True),
    StoreScreenshotSize("Tablet_7", 1200, 1920, "android", 'Tablet 7"', required=False),
    StoreScreenshotSize("Tablet_10", 1920, 1200, "android", 'Tablet 10"', required=False),
]

FRAME_PROMPT = """\
Create a professional app store marketing screenshot.
Place the provided app screenshot in the lower 70% of the image inside a clean phone mockup frame.
Add this headline text in the top 25% area: "{headline}"
Background color: {background}
Text color: {text_color}
The text should be large, bold, and clearly readable.
Keep the design clean, modern, and professional like Apple or Google store screenshots.
Do NOT add any extra text, watermarks, or logos. Only the headline and the app screenshot.
Output as a vertical/portrait image."""


def screenshot_sizes(platform: Platform) -> list[StoreScreenshotSize]:
    if platform is Platform.IOS:
        return list(IOS_SCREENSHOT_SIZES)
    if platform is Platform.ANDROID:
        return list(ANDROID_SCREENSHOT_SIZES)
    return IOS_SCREENSHOT_SIZES + ANDROID_SCREENSHOT_SIZES


def select_sizes(platform: Platform, devices: list[str] | None = None) -> list[StoreScreenshotSize]:
    """Sizes matching ``devices`` by name or label; required sizes when no filter."""
    sizes = screenshot_sizes(platform)
    if devices:
        return [s for s in sizes if s.name in devices or s.device in devices]
    return [s for s in sizes if s.required]


def resize_to_store_sizes(
    source_path: Path, sizes: list[StoreScreenshotSize], output_dir: Path
) -> list[StoreScreenshotResult]:
    results = []
    with Image.open(source_path) as img:
        source = img.convert("RGB")
    for size in sizes:
        platform_dir = output_dir / size.platform
        platform_dir.mkdir(parents=True, exist_ok=True)
        path = platform_dir / f"store_{size.name}_{size.width}x{size.height}.png"
        ImageOps.fit(source, (size.width, size.height), Image.Resampling.LANCZOS).save(path, format="PNG")
        results.append(
            StoreScreenshotResult(size.platform, size.device, size.width, size.height, str(path))
        )
    return results


async def create_store_screenshots(
    generator: ImageGenerator,
    screenshot_path: Path,
    headline: str,
    output_dir: Path,
    platform: Platform = Platform.BOTH,
    background_color: str | None = None,
    text_color: str | None = None,
    devices: list[str] | None = None,
    model: str | None = None,
) -> tuple[list[StoreScreenshotResult], str]:
    """Frame ``screenshot_path`` under ``headline`` and export store sizes.

    Returns the resized results and the path of the framed base image.
    """
    if not screenshot_path.is_file():
        raise FileNotFoundError(f"Screenshot not found: {screenshot_path}")
    output_dir.mkdir(parents=True, exist_ok=True)

    prompt = FRAME_PROMPT.format(
        headline=headline,
        background=background_color or "#FFFFFF",
        text_color=text_color or "#000000",
    )
    framed = await generator.edit_image(screenshot_path, prompt, output_dir, "store_base", model)
    if not framed.image_path:
        raise RuntimeError("The image model failed to generate the marketing screenshot.")

    results = resize_to_store_sizes(Path(framed.image_path), select_sizes(platform, devices), output_dir)
    log.info("Exported %d store screenshots to %s", len(results), output_dir)
    return results, framed.image_path
