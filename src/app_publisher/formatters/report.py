"""Plain-text report formatting for store listings and publishing guides."""

from __future__ import annotations

from app_publisher.analyzers.categories import suggest_category
from app_publisher.listing import get_writer
from app_publisher.listing.base import ListingWriter
from app_publisher.models import CappedText, Language, Platform, ProjectInfo

DRAFT_DISCLAIMER = (
    "NOTE: All generated content is a draft. Review and edit every field "
    "before submitting to the App Store or Google Play."
)

SUPPORT_URL_PLACEHOLDER = "[https://example.com/support]"
PRIVACY_URL_PLACEHOLDER = "[https://example.com/privacy]"

_PLATFORM_TITLES = {
    Platform.IOS: "iOS App Store",
    Platform.ANDROID: "Google Play",
}


def category_text(info: ProjectInfo) -> str:
    """Description and features joined for category matching."""
    return " ".join([info.description, *info.features]).lower()


def format_field(label: str, value: CappedText) -> str:
    """Render a capped field with its length budget.

    Truncated fields also show the generated length so the user knows how
    much was cut.
    """
    budget = f"{len(value.text)}/{value.limit}"
    if value.truncated:
        budget += f", truncated from {value.source_length}"
    return f"{label} ({budget}):\n{value.text}"


def format_error(title: str, message: str) -> str:
    return f"=== {title} ===\n\nError: {message}"


# ── Report sections ─────────────────────────────────────────────────────────


def _format_header(info: ProjectInfo, languages: list[Language]) -> str:
    lines = [
        f"=== Store Listing Draft: {info.app_name} ===",
        "",
        f"App name: {info.app_name}",
        f"Bundle ID: {info.bundle_id}",
        f"Version: {info.version}",
        f"Framework: {info.framework.value}",
        f"Description: {info.description or '(none)'}",
        f"Features detected: {len(info.features)}",
        f"Permissions: {', '.join(sorted(info.permissions)) or 'none'}",
    ]
    if info.team_id:
        lines.append(f"Team ID: {info.team_id}")

    lines.append("")
    lines.append("--- Suggested category ---")
    text = category_text(info)
    for lang in languages:
        suggestion = suggest_category(text, lang)
        lines.append(f"[{lang.value}] {suggestion.primary} / {suggestion.secondary}")
    return "\n".join(lines)


def _format_ios_block(writer: ListingWriter, info: ProjectInfo) -> str:
    lang = writer.language
    fields = [
        f"--- [{lang.value}] {lang.ios_locale} ---",
        format_field("App name", writer.app_name(info)),
        format_field("Subtitle", writer.subtitle(info)),
        format_field("Promotional text", writer.promotional_text(info)),
        format_field("Description", writer.long_description(info)),
        format_field("Keywords", writer.keywords(info)),
        f"Support URL: {SUPPORT_URL_PLACEHOLDER}\nPrivacy policy URL: {PRIVACY_URL_PLACEHOLDER}",
    ]
    return "\n\n".join(fields)


def _format_android_block(writer: ListingWriter, info: ProjectInfo) -> str:
    lang = writer.language
    category = suggest_category(category_text(info), lang)
    fields = [
        f"--- [{lang.value}] {lang.android_locale} ---",
        format_field("Title", writer.app_name(info)),
        format_field("Short description", writer.short_description(info)),
        format_field("Full description", writer.long_description(info)),
        f"Category: {category.primary}",
    ]
    return "\n\n".join(fields)


def _format_footer(info: ProjectInfo) -> str:
    lines = ["=== Capability Flags ===", ""]
    for name, enabled in info.capabilities.flags().items():
        lines.append(f"{name}: {'yes' if enabled else 'no'}")
    lines.append("")
    lines.append(DRAFT_DISCLAIMER)
    return "\n".join(lines)


# ── Public formatters ───────────────────────────────────────────────────────


def format_listing_report(
    info: ProjectInfo,
    platform: Platform,
    languages: list[Language],
) -> str:
    """Header, per-platform listing blocks, iOS age rating, capability footer."""
    writers = [get_writer(lang) for lang in languages]
    sections = [_format_header(info, languages)]

    for target in platform.targets:
        block_fn = _format_ios_block if target is Platform.IOS else _format_android_block
        blocks = [block_fn(writer, info) for writer in writers]
        sections.append(f"=== {_PLATFORM_TITLES[target]} ===\n\n" + "\n\n".join(blocks))

    if Platform.IOS in platform.targets:
        questionnaires = [
            f"--- [{w.language.value}] ---\n{w.age_rating_questionnaire(info)}" for w in writers
        ]
        sections.append("=== iOS Age Rating ===\n\n" + "\n\n".join(questionnaires))

    sections.append(_format_footer(info))
    return "\n\n".join(sections) + "\n"


def format_publishing_guide(info: ProjectInfo, languages: list[Language]) -> str:
    """Support page, privacy policy, review notes and rating guides per language."""
    sections = [f"=== Publishing Guide: {info.app_name} ==="]
    for lang in languages:
        writer = get_writer(lang)
        documents = [
            writer.support_page(info),
            writer.privacy_policy(info),
            writer.review_notes(info),
            writer.content_rating_guide(info),
            writer.age_rating_questionnaire(info),
        ]
        sections.append(f"--- [{lang.value}] ---\n\n" + "\n\n".join(documents))
    sections.append(DRAFT_DISCLAIMER)
    return "\n\n".join(sections) + "\n"
