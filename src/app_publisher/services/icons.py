"""Resize a source icon into the iOS and Android launcher icon sets."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from PIL import Image, ImageOps

from app_publisher.models import IconSize, ResizeResult

log = logging.getLogger("app_publisher.icons")

IOS_ICON_SIZES = [
    IconSize("Icon-20@2x", 40, "ios", scale="2x"),
    IconSize("Icon-20@3x", 60, "ios", scale="3x"),
    IconSize("Icon-29@2x", 58, "ios", scale="2x"),
    IconSize("Icon-29@3x", 87, "ios", scale="3x"),
    IconSize("Icon-40@2x", 80, "ios", scale="2x"),
    IconSize("Icon-40@3x", 120, "ios", scale="3x"),
    IconSize("Icon-60@2x", 120, "ios", scale="2x"),
    IconSize("Icon-60@3x", 180, "ios", scale="3x"),
    IconSize("Icon-20", 20, "ios", scale="1x"),
    IconSize("Icon-29", 29, "ios", scale="1x"),
    IconSize("Icon-40", 40, "ios", scale="1x"),
    IconSize("Icon-76", 76, "ios", scale="1x"),
    IconSize("Icon-76@2x", 152, "ios", scale="2x"),
    IconSize("Icon-83.5@2x", 167, "ios", scale="2x"),
    IconSize("Icon-1024", 1024, "ios", scale="1x"),
]

ANDROID_ICON_SIZES = [
    IconSize("ic_launcher", 48, "android", folder="mipmap-mdpi"),
    IconSize("ic_launcher", 72, "android", folder="mipmap-hdpi"),
    IconSize("ic_launcher", 96, "android", folder="mipmap-xhdpi"),
    IconSize("ic_launcher", 144, "android", folder="mipmap-xxhdpi"),
    IconSize("ic_launcher", 192, "android", folder="mipmap-xxxhdpi"),
    IconSize("playstore-icon", 512, "android", folder=""),
]

# (filename stem, idiom, scale, point size)
_CONTENTS_IMAGES = [
    ("Icon-20", "ipad", "1x", "20x20"),
    ("Icon-20@2x", "iphone", "2x", "20x20"),
    ("Icon-20@3x", "iphone", "3x", "20x20"),
    ("Icon-29", "ipad", "1x", "29x29"),
    ("Icon-29@2x", "iphone", "2x", "29x29"),
    ("Icon-29@3x", "iphone", "3x", "29x29"),
    ("Icon-40", "ipad", "1x", "40x40"),
    ("Icon-40@2x", "iphone", "2x", "40x40"),
    ("Icon-40@3x", "iphone", "3x", "40x40"),
    ("Icon-60@2x", "iphone", "2x", "60x60"),
    ("Icon-60@3x", "iphone", "3x", "60x60"),
    ("Icon-76", "ipad", "1x", "76x76"),
    ("Icon-76@2x", "ipad", "2x", "76x76"),
    ("Icon-83.5@2x", "ipad", "2x", "83.5x83.5"),
    ("Icon-1024", "ios-marketing", "1x", "1024x1024"),
]


def contents_json() -> dict:
    """Xcode asset catalog manifest for the iOS icon set."""
    return {
        "images": [
            {"filename": f"{stem}.png", "idiom": idiom, "scale": scale, "size": size}
            for stem, idiom, scale, size in _CONTENTS_IMAGES
        ],
        "info": {"author": "app-publisher", "version": 1},
    }


def _save_square(source: Image.Image, size: int, path: Path) -> None:
    # Center-crop to a square then scale, like CSS object-fit: cover.
    resized = ImageOps.fit(source, (size, size), Image.Resampling.LANCZOS)
    resized.save(path, format="PNG")


def resize_icons(
    source_path: str | Path,
    output_dir: str | Path,
    platforms: list[str] | None = None,
) -> list[ResizeResult]:
    """Write every icon size for the requested platforms.

    Raises FileNotFoundError if the source image does not exist.
    """
    source_path = Path(source_path).expanduser()
    if not source_path.is_file():
        raise FileNotFoundError(f"Source image not found: {source_path}")
    output_dir = Path(output_dir).expanduser()
    platforms = platforms or ["ios", "android"]

    results: list[ResizeResult] = []
    with Image.open(source_path) as img:
        source = img.convert("RGBA")

    if "ios" in platforms:
        ios_dir = output_dir / "ios" / "AppIcon.appiconset"
        ios_dir.mkdir(parents=True, exist_ok=True)
        for icon in IOS_ICON_SIZES:
            path = ios_dir / f"{icon.name}.png"
            _save_square(source, icon.size, path)
            results.append(ResizeResult("ios", icon.name, icon.size, str(path)))
        (ios_dir / "Contents.json").write_text(json.dumps(contents_json(), indent=2))

    if "android" in platforms:
        android_dir = output_dir / "android"
        for icon in ANDROID_ICON_SIZES:
            folder = android_dir / icon.folder if icon.folder else android_dir
            folder.mkdir(parents=True, exist_ok=True)
            path = folder / f"{icon.name}.png"
            _save_square(source, icon.size, path)
            name = f"{icon.folder}/{icon.name}" if icon.folder else icon.name
            results.append(ResizeResult("android", name, icon.size, str(path)))

    log.info("Resized %s into %d icons under %s", source_path.name, len(results), output_dir)
    return results
