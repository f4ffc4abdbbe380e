"""Tests for the listing pipeline, report formatting and metadata export."""

from __future__ import annotations

from pathlib import Path

import pytest

from app_publisher.formatters import format_error, format_field, format_listing_report
from app_publisher.formatters.report import DRAFT_DISCLAIMER, format_publishing_guide
from app_publisher.models import CappedText, Language, Platform, ProjectInfo
from app_publisher.pipeline import (
    generate_publishing_guide,
    generate_store_listing,
    metadata_files,
    parse_languages,
    parse_platform,
    write_store_metadata,
)


class TestParsing:
    @pytest.mark.parametrize("value", [None, "", "all"])
    def test_all_languages(self, value):
        assert parse_languages(value) == list(Language)

    def test_single_language(self):
        assert parse_languages("ja") == [Language.JA]

    def test_unsupported_language(self):
        with pytest.raises(ValueError, match="Unsupported language: fr"):
            parse_languages("fr")

    def test_platform_default(self):
        assert parse_platform(None) is Platform.BOTH

    def test_platform(self):
        assert parse_platform("android") is Platform.ANDROID

    def test_unsupported_platform(self):
        with pytest.raises(ValueError, match="Unsupported platform: web"):
            parse_platform("web")


class TestFormatField:
    def test_within_limit(self):
        assert format_field("Subtitle", CappedText("Hello", 30, 5)) == "Subtitle (5/30):\nHello"

    def test_truncated(self):
        rendered = format_field("App name", CappedText("x" * 30, 30, 42))
        assert rendered.startswith("App name (30/30, truncated from 42):")

    def test_error_block(self):
        assert format_error("Store Listing Error", "boom") == "=== Store Listing Error ===\n\nError: boom"


class TestListingReport:
    def test_sections_in_order(self, sample_info: ProjectInfo):
        report = format_listing_report(sample_info, Platform.BOTH, [Language.EN])
        headings = [
            "=== Store Listing Draft: Habit Tracker ===",
            "--- Suggested category ---",
            "=== iOS App Store ===",
            "=== Google Play ===",
            "=== iOS Age Rating ===",
            "=== Capability Flags ===",
            DRAFT_DISCLAIMER,
        ]
        positions = [report.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_android_only_has_no_age_rating(self, sample_info: ProjectInfo):
        report = format_listing_report(sample_info, Platform.ANDROID, [Language.EN])
        assert "=== Google Play ===" in report
        assert "=== iOS App Store ===" not in report
        assert "=== iOS Age Rating ===" not in report

    def test_category_per_language(self, sample_info: ProjectInfo):
        report = format_listing_report(sample_info, Platform.IOS, [Language.EN, Language.KO])
        assert "[en] Productivity / Utilities" in report
        assert "[ko] 생산성 / 유틸리티" in report

    def test_capability_flags_footer(self, sample_info: ProjectInfo):
        report = format_listing_report(sample_info, Platform.IOS, [Language.EN])
        assert "ads: yes" in report
        assert "gambling: no" in report

    def test_locales_in_blocks(self, sample_info: ProjectInfo):
        report = format_listing_report(sample_info, Platform.BOTH, [Language.ZH])
        assert "--- [zh] zh-Hans ---" in report
        assert "--- [zh] zh-CN ---" in report

    def test_publishing_guide_per_language(self, sample_info: ProjectInfo):
        guide = format_publishing_guide(sample_info, [Language.EN, Language.JA])
        assert guide.startswith("=== Publishing Guide: Habit Tracker ===")
        assert "--- [en] ---" in guide
        assert "--- [ja] ---" in guide
        assert "# Habit Tracker Privacy Policy" in guide
        assert guide.rstrip().endswith(DRAFT_DISCLAIMER)


class TestGenerateStoreListing:
    def test_end_to_end(self, expo_project: Path):
        report = generate_store_listing(expo_project)
        assert "=== Store Listing Draft: Habit Tracker ===" in report
        assert "Bundle ID: com.acme.habits" in report
        for lang in Language:
            assert f"[{lang.value}] " in report

    def test_language_filter(self, expo_project: Path):
        report = generate_store_listing(expo_project, Platform.IOS, [Language.EN])
        assert "[ko]" not in report
        assert "=== Google Play ===" not in report

    def test_missing_directory(self, tmp_path: Path):
        report = generate_store_listing(tmp_path / "missing")
        assert report.startswith("=== Store Listing Error ===")
        assert "Error: Project directory not found" in report

    def test_empty_directory(self, make_project):
        report = generate_store_listing(make_project({}, name="Blank"), Platform.IOS, [Language.EN])
        assert "App name (5/30):\nBlank" in report
        assert "Bundle ID: com.example.blank" in report
        assert "Expected rating: 4+" in report


class TestGeneratePublishingGuide:
    def test_end_to_end(self, expo_project: Path):
        guide = generate_publishing_guide(expo_project, [Language.EN])
        assert "Information We Collect" in guide
        assert "Expected rating: 4+" in guide

    def test_missing_directory(self, tmp_path: Path):
        guide = generate_publishing_guide(tmp_path / "missing")
        assert guide.startswith("=== Publishing Guide Error ===")


class TestMetadata:
    def test_metadata_paths(self, sample_info: ProjectInfo):
        files = metadata_files(sample_info, [Language.EN, Language.KO])
        assert files["metadata/en-US/name.txt"] == "Habit Tracker"
        assert "metadata/ko/keywords.txt" in files
        assert "metadata/android/ko-KR/short_description.txt" in files
        assert files["metadata/review_information/notes.txt"].startswith("# ")
        assert len(files) == 2 * 8 + 1

    def test_writes_files(self, expo_project: Path):
        result = write_store_metadata(expo_project, [Language.EN])
        name = expo_project / "fastlane" / "metadata" / "en-US" / "name.txt"
        title = expo_project / "fastlane" / "metadata" / "android" / "en-US" / "title.txt"
        assert name.read_text(encoding="utf-8") == "Habit Tracker\n"
        assert title.read_text(encoding="utf-8") == "Habit Tracker\n"
        assert len(result.written) == 9
        assert result.skipped == []

    def test_keeps_manual_edits(self, expo_project: Path):
        name = expo_project / "fastlane" / "metadata" / "en-US" / "name.txt"
        name.parent.mkdir(parents=True)
        name.write_text("My Custom Name\n", encoding="utf-8")

        result = write_store_metadata(expo_project, [Language.EN])
        assert name.read_text(encoding="utf-8") == "My Custom Name\n"
        assert str(name) in result.skipped

    def test_fills_empty_placeholders(self, expo_project: Path):
        name = expo_project / "fastlane" / "metadata" / "en-US" / "name.txt"
        name.parent.mkdir(parents=True)
        name.write_text("", encoding="utf-8")

        write_store_metadata(expo_project, [Language.EN])
        assert name.read_text(encoding="utf-8") == "Habit Tracker\n"

    def test_overwrite(self, expo_project: Path):
        write_store_metadata(expo_project, [Language.EN])
        result = write_store_metadata(expo_project, [Language.EN], overwrite=True)
        assert len(result.written) == 9
        assert result.skipped == []

    def test_rerun_skips_everything(self, expo_project: Path):
        write_store_metadata(expo_project, [Language.EN])
        result = write_store_metadata(expo_project, [Language.EN])
        assert result.written == []
        assert len(result.skipped) == 9

    def test_missing_project(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            write_store_metadata(tmp_path / "missing")


class TestFallbackOnlyProject:
    @pytest.mark.parametrize("language", list(Language))
    def test_fields_generated_from_fallbacks(self, make_project, language: Language):
        from app_publisher.extractors.project_info import scan_project
        from app_publisher.listing import get_writer

        info = scan_project(make_project({}, name="Quiet Notes"))
        writer = get_writer(language)
        assert writer.subtitle(info).text
        assert writer.short_description(info).text
        assert writer.long_description(info).text
        assert writer.keywords(info).text == "quiet,notes"
