"""Tests for the localized listing writers."""

from __future__ import annotations

import pytest

from app_publisher.listing import WRITERS, expected_age_rating, get_writer
from app_publisher.listing.base import (
    APP_NAME_LIMIT,
    KEYWORDS_LIMIT,
    LONG_DESCRIPTION_LIMIT,
    PROMOTIONAL_TEXT_LIMIT,
    SHORT_DESCRIPTION_LIMIT,
    SUBTITLE_LIMIT,
)
from app_publisher.listing.en import EnglishWriter
from app_publisher.models import AgeRating, Capabilities, Framework, Language, ProjectInfo
from app_publisher.utils.text import cap, cap_keywords, keyword_tokens, slugify, unique_ordered

ALL = list(Language)


def _info(**kwargs) -> ProjectInfo:
    """ProjectInfo with defaults; ``has_*`` keywords become capability flags."""
    flags = {k: kwargs.pop(k) for k in list(kwargs) if k.startswith("has_")}
    kwargs.setdefault("app_name", "Habit Tracker")
    kwargs.setdefault("bundle_id", "com.acme.habits")
    return ProjectInfo(capabilities=Capabilities(**flags), **kwargs)


@pytest.fixture
def oversized() -> ProjectInfo:
    return _info(
        app_name="An Extremely Long Application Name That Keeps Going",
        description="Lorem ipsum dolor sit amet. " * 200,
        features=tuple(f"Remarkable capability number {i} with extras" for i in range(30)),
        framework=Framework.EXPO,
        has_ads=True,
        has_in_app_purchase=True,
    )


class TestTextHelpers:
    def test_cap_within_limit(self):
        capped = cap("  hello  ", 10)
        assert capped.text == "hello"
        assert not capped.truncated

    def test_cap_truncates(self):
        capped = cap("abcdefghij", 4)
        assert capped.text == "abcd"
        assert capped.truncated
        assert capped.source_length == 10

    def test_slugify(self):
        assert slugify("My Cool App!") == "mycoolapp"
        assert slugify("앱") == ""

    def test_keyword_tokens_drop_noise(self):
        assert keyword_tokens("The Best App for 2 Users, v2") == ["best", "app", "users", "v2"]

    def test_unique_ordered_case_insensitive(self):
        assert unique_ordered(["App", "app", "Tools", "APP"]) == ["App", "Tools"]

    def test_cap_keywords_cuts_at_comma(self):
        capped = cap_keywords(["alpha", "beta", "gamma"], 12)
        assert capped.text == "alpha,beta"
        assert capped.truncated


class TestCharacterLimits:
    @pytest.mark.parametrize("language", ALL)
    def test_every_field_within_limit(self, language: Language, oversized: ProjectInfo):
        writer = get_writer(language)
        assert len(writer.app_name(oversized).text) <= APP_NAME_LIMIT
        assert len(writer.subtitle(oversized).text) <= SUBTITLE_LIMIT
        assert len(writer.short_description(oversized).text) <= SHORT_DESCRIPTION_LIMIT
        assert len(writer.promotional_text(oversized).text) <= PROMOTIONAL_TEXT_LIMIT
        assert len(writer.long_description(oversized).text) <= LONG_DESCRIPTION_LIMIT
        assert len(writer.keywords(oversized).text) <= KEYWORDS_LIMIT

    def test_truncation_reported(self, oversized: ProjectInfo):
        name = EnglishWriter().app_name(oversized)
        assert name.truncated
        assert name.source_length == len(oversized.app_name)

    @pytest.mark.parametrize("language", ALL)
    def test_keywords_never_split_a_word(self, language: Language, oversized: ProjectInfo):
        writer = get_writer(language)
        tokens = set(keyword_tokens(oversized.app_name))
        for feature in oversized.features:
            tokens.update(keyword_tokens(feature))
        for keyword in writer.keywords(oversized).text.split(","):
            assert keyword in tokens


class TestListingFields:
    def test_subtitle_prefers_short_feature(self):
        info = _info(features=("Streaks that stick",), description="Short description")
        assert EnglishWriter().subtitle(info).text == "Streaks that stick"

    def test_subtitle_falls_back_to_description(self):
        info = _info(features=("A feature much longer than thirty characters",), description="Habits made easy")
        assert EnglishWriter().subtitle(info).text == "Habits made easy"

    def test_subtitle_tagline_fallback(self):
        info = _info(app_name="Hab")
        assert EnglishWriter().subtitle(info).text == "Hab - Simple and smart"

    def test_short_description_joins_features(self):
        info = _info(features=("Streaks", "Reminders", "Charts", "Export"))
        assert EnglishWriter().short_description(info).text == "Streaks, Reminders, Charts"

    def test_short_description_cjk_separator(self):
        info = _info(features=("連続記録", "リマインダー"))
        assert get_writer(Language.JA).short_description(info).text == "連続記録、リマインダー"

    def test_short_description_template(self):
        text = EnglishWriter().short_description(_info()).text
        assert text.startswith("Habit Tracker helps you")

    def test_long_description_sections(self, sample_info: ProjectInfo):
        text = EnglishWriter().long_description(sample_info).text
        assert text.startswith("Welcome to Habit Tracker!")
        assert "KEY FEATURES\n• Track daily habits with streaks" in text
        assert "Version 2.1.0" in text
        assert "Available on both iPhone and Android devices." in text
        assert "This app contains advertisements." in text
        assert "in-app purchases" in text

    def test_long_description_native_without_notices(self):
        text = EnglishWriter().long_description(_info()).text
        assert "Android devices" not in text
        assert "advertisements" not in text
        assert "KEY FEATURES" not in text

    def test_long_description_lists_ten_features(self):
        info = _info(features=tuple(f"Feature item {i}" for i in range(15)))
        text = EnglishWriter().long_description(info).text
        assert "Feature item 9" in text
        assert "Feature item 10" not in text

    def test_keyword_deduplication(self):
        info = _info(app_name="My App App", features=("App App App",))
        keywords = EnglishWriter().keywords(info).text.split(",")
        assert keywords.count("app") == 1
        assert keywords == ["my", "app"]

    @pytest.mark.parametrize("language", ALL)
    def test_default_keywords(self, language: Language):
        writer = get_writer(language)
        keywords = writer.keywords(_info(app_name="X")).text
        assert keywords == ",".join(writer.phrases.default_keywords)


class TestSupportingDocuments:
    def test_support_page_faq_follows_flags(self, sample_info: ProjectInfo):
        text = EnglishWriter().support_page(sample_info)
        assert "How do I restore my purchases?" in text
        assert "Why do I see ads?" in text
        assert "delete my account" not in text
        assert "Current version: 2.1.0" in text

    @pytest.mark.parametrize("language", ALL)
    def test_privacy_policy_without_data_collection(self, language: Language):
        writer = get_writer(language)
        text = writer.privacy_policy(_info())
        assert writer.phrases.no_data_collected.format(name="Habit Tracker") in text
        assert writer.phrases.collected_heading not in text

    def test_privacy_policy_ads_mentions_identifier(self, sample_info: ProjectInfo):
        text = EnglishWriter().privacy_policy(sample_info)
        assert "Information We Collect" in text
        assert "advertising identifier" in text
        assert "does not collect personal information" not in text

    def test_privacy_policy_lists_permissions(self, sample_info: ProjectInfo):
        text = EnglishWriter().privacy_policy(sample_info)
        assert "- CAMERA" in text
        assert "- NSCameraUsageDescription" in text

    def test_review_notes(self, sample_info: ProjectInfo):
        text = EnglishWriter().review_notes(sample_info)
        assert "No login is required." in text
        assert "sandbox account" in text
        assert "- CAMERA" in text

    def test_content_rating_answers(self):
        info = _info(has_gambling=True, permissions=frozenset({"ACCESS_FINE_LOCATION"}))
        text = EnglishWriter().content_rating_guide(info)
        assert "- Does the app contain violence? No" in text
        lines = [line for line in text.splitlines() if line.endswith(" Yes")]
        assert len(lines) == 2

    def test_age_questionnaire_expected_rating(self):
        text = EnglishWriter().age_rating_questionnaire(_info(has_web_view=True))
        assert "Expected rating: 12+" in text
        assert "Infrequent/Mild" not in text


class TestExpectedAgeRating:
    def test_no_flags(self):
        assert expected_age_rating(_info()) is AgeRating.FOUR_PLUS

    def test_most_severe_wins(self):
        info = _info(has_sexual_content=True, has_web_view=True, has_ugc=True)
        assert expected_age_rating(info) is AgeRating.SEVENTEEN_PLUS

    def test_gambling(self):
        assert expected_age_rating(_info(has_gambling=True)) is AgeRating.SEVENTEEN_PLUS

    @pytest.mark.parametrize(
        "flag", ["has_violent_content", "has_web_view", "has_ugc", "has_chat", "has_health_content"]
    )
    def test_twelve_plus(self, flag: str):
        assert expected_age_rating(_info(**{flag: True})) is AgeRating.TWELVE_PLUS

    def test_monetization_does_not_raise_rating(self):
        info = _info(has_ads=True, has_in_app_purchase=True, has_analytics=True, has_loot_box=True)
        assert expected_age_rating(info) is AgeRating.FOUR_PLUS


class TestWriters:
    def test_one_writer_per_language(self):
        assert set(WRITERS) == set(Language)

    @pytest.mark.parametrize("language", ALL)
    def test_writer_language(self, language: Language):
        assert get_writer(language).language is language
