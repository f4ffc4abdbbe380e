"""Listing assembler: scan, classify, write and format per platform and language."""

from __future__ import annotations

import logging
from pathlib import Path

from app_publisher.models import Language, MetadataWriteResult, Platform, ProjectInfo

log = logging.getLogger("app_publisher.listing")

ALL_LANGUAGES = list(Language)


def parse_languages(value: str | None) -> list[Language]:
    """``None`` or ``"all"`` selects every supported language."""
    if not value or value == "all":
        return list(ALL_LANGUAGES)
    try:
        return [Language(value)]
    except ValueError:
        supported = ", ".join(lang.value for lang in Language)
        raise ValueError(f"Unsupported language: {value} (expected one of {supported}, all)") from None


def parse_platform(value: str | None) -> Platform:
    if not value:
        return Platform.BOTH
    try:
        return Platform(value)
    except ValueError:
        raise ValueError(f"Unsupported platform: {value} (expected ios, android or both)") from None


def generate_store_listing(
    project_dir: str | Path,
    platform: Platform = Platform.BOTH,
    languages: list[Language] | None = None,
) -> str:
    """Build the store listing report for ``project_dir``.

    A missing project directory yields an error block instead of raising.
    """
    from app_publisher.extractors.project_info import scan_project
    from app_publisher.formatters.report import format_error, format_listing_report

    try:
        info = scan_project(project_dir)
    except FileNotFoundError as e:
        log.warning("%s", e)
        return format_error("Store Listing Error", str(e))

    selected = languages or list(ALL_LANGUAGES)
    log.info(
        "Generating store listing for %s (platform=%s, languages=%s)",
        info.app_name, platform.value, ",".join(lang.value for lang in selected),
    )
    return format_listing_report(info, platform, selected)


def generate_publishing_guide(
    project_dir: str | Path,
    languages: list[Language] | None = None,
) -> str:
    """Support page, privacy policy, review notes and rating guides."""
    from app_publisher.extractors.project_info import scan_project
    from app_publisher.formatters.report import format_error, format_publishing_guide

    try:
        info = scan_project(project_dir)
    except FileNotFoundError as e:
        log.warning("%s", e)
        return format_error("Publishing Guide Error", str(e))

    return format_publishing_guide(info, languages or list(ALL_LANGUAGES))


# ── Fastlane metadata ───────────────────────────────────────────────────────


def metadata_files(info: ProjectInfo, languages: list[Language]) -> dict[str, str]:
    """Map fastlane-relative metadata paths to generated contents."""
    from app_publisher.listing import get_writer

    files: dict[str, str] = {}
    for lang in languages:
        writer = get_writer(lang)
        ios = f"metadata/{lang.ios_locale}"
        files[f"{ios}/name.txt"] = writer.app_name(info).text
        files[f"{ios}/subtitle.txt"] = writer.subtitle(info).text
        files[f"{ios}/promotional_text.txt"] = writer.promotional_text(info).text
        files[f"{ios}/description.txt"] = writer.long_description(info).text
        files[f"{ios}/keywords.txt"] = writer.keywords(info).text

        android = f"metadata/android/{lang.android_locale}"
        files[f"{android}/title.txt"] = writer.app_name(info).text
        files[f"{android}/short_description.txt"] = writer.short_description(info).text
        files[f"{android}/full_description.txt"] = writer.long_description(info).text

    if languages:
        files["metadata/review_information/notes.txt"] = get_writer(languages[0]).review_notes(info)
    return files


def write_store_metadata(
    project_dir: str | Path,
    languages: list[Language] | None = None,
    *,
    overwrite: bool = False,
) -> MetadataWriteResult:
    """Write generated listing text into ``fastlane/metadata``.

    Existing non-empty files are kept unless ``overwrite`` is set, so manual
    edits survive a re-run. Raises FileNotFoundError for a missing project.
    """
    from app_publisher.extractors.project_info import scan_project

    info = scan_project(project_dir)
    fastlane_dir = Path(project_dir).expanduser().resolve() / "fastlane"
    result = MetadataWriteResult()

    for rel_path, content in metadata_files(info, languages or list(ALL_LANGUAGES)).items():
        out_path = fastlane_dir / rel_path
        if not overwrite and out_path.is_file() and out_path.read_text(encoding="utf-8").strip():
            result.skipped.append(str(out_path))
            continue
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content + "\n", encoding="utf-8")
        result.written.append(str(out_path))

    log.info("Metadata: %d written, %d kept", len(result.written), len(result.skipped))
    return result
