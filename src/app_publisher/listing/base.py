"""Store listing writer interface shared by every output language.

A ``ListingWriter`` owns the layout and fallback rules; each language
subclass only supplies a ``Phrases`` table. All methods are pure functions
of the ProjectInfo they are given.
"""

from __future__ import annotations

from dataclasses import dataclass

from app_publisher.models import AgeRating, CappedText, Language, ProjectInfo
from app_publisher.utils.text import cap, cap_keywords, keyword_tokens, unique_ordered

APP_NAME_LIMIT = 30
SUBTITLE_LIMIT = 30
SHORT_DESCRIPTION_LIMIT = 80
KEYWORDS_LIMIT = 100
PROMOTIONAL_TEXT_LIMIT = 170
LONG_DESCRIPTION_LIMIT = 4000

MAX_LISTED_FEATURES = 10
KEYWORD_FEATURE_COUNT = 5

SUPPORT_EMAIL = "[support@example.com]"
BULLET = "•"


def expected_age_rating(info: ProjectInfo) -> AgeRating:
    """Most severe matching condition wins; there is no stacking."""
    caps = info.capabilities
    if caps.has_sexual_content or caps.has_gambling:
        return AgeRating.SEVENTEEN_PLUS
    if (
        caps.has_violent_content
        or caps.has_web_view
        or caps.has_ugc
        or caps.has_chat
        or caps.has_health_content
    ):
        return AgeRating.TWELVE_PLUS
    return AgeRating.FOUR_PLUS


def _has_location_permission(info: ProjectInfo) -> bool:
    return any("location" in p.lower() for p in info.permissions)


@dataclass(frozen=True)
class Phrases:
    """Localized text templates. ``{name}``, ``{version}``, ``{email}`` and
    ``{tagline}`` are substituted where present."""

    list_separator: str
    default_keywords: tuple[str, ...]

    # Listing
    tagline: str
    short_template: str
    promo_template: str
    intro_template: str
    features_heading: str
    version_template: str
    cross_platform_note: str
    ads_notice: str
    iap_notice: str
    closing: str

    # Support page
    support_title: str
    support_intro: str
    contact_heading: str
    contact_line: str
    faq_heading: str
    faq_general_q: str
    faq_general_a: str
    faq_iap_q: str
    faq_iap_a: str
    faq_account_q: str
    faq_account_a: str
    faq_ads_q: str
    faq_ads_a: str
    current_version: str

    # Privacy policy
    privacy_title: str
    effective_date: str
    privacy_intro: str
    no_data_collected: str
    collected_heading: str
    collect_auth: str
    collect_analytics: str
    collect_iap: str
    collect_ugc: str
    collect_chat: str
    collect_ads: str
    third_party_notice: str
    permissions_heading: str
    permissions_intro: str
    children_heading: str
    children_notice: str
    changes_heading: str
    changes_notice: str
    privacy_contact: str

    # Review notes
    review_title: str
    review_summary: str
    review_demo_account: str
    review_no_login: str
    review_iap: str
    review_webview: str
    review_moderation: str
    review_permissions: str
    review_contact: str

    # Answers
    answer_yes: str
    answer_no: str
    answer_none: str
    answer_mild: str

    # Google Play content rating
    rating_guide_title: str
    rating_guide_intro: str
    q_violence: str
    q_sexuality: str
    q_language: str
    q_substances: str
    q_gambling: str
    q_interaction: str
    q_location: str
    q_purchases: str
    q_ads: str
    q_loot_box: str

    # App Store age rating
    age_title: str
    age_intro: str
    age_cartoon_violence: str
    age_realistic_violence: str
    age_sexual_content: str
    age_profanity: str
    age_substances: str
    age_mature_themes: str
    age_horror: str
    age_medical: str
    age_gambling: str
    age_web_access: str
    age_ugc: str
    age_chat: str
    age_loot_box: str
    age_expected: str
    age_manual_review: str


class ListingWriter:
    """Generates store listing text for one output language."""

    language: Language
    phrases: Phrases

    # ── Capped listing fields ───────────────────────────────────────────────

    def app_name(self, info: ProjectInfo) -> CappedText:
        return cap(info.app_name, APP_NAME_LIMIT)

    def subtitle(self, info: ProjectInfo) -> CappedText:
        """First feature, else description, else "{name} - {tagline}"."""
        first_feature = info.features[0] if info.features else ""
        for candidate in (first_feature, info.description):
            if candidate and len(candidate) <= SUBTITLE_LIMIT:
                return cap(candidate, SUBTITLE_LIMIT)
        return cap(f"{info.app_name} - {self.phrases.tagline}", SUBTITLE_LIMIT)

    def short_description(self, info: ProjectInfo) -> CappedText:
        if info.description and len(info.description) <= SHORT_DESCRIPTION_LIMIT:
            return cap(info.description, SHORT_DESCRIPTION_LIMIT)
        joined = self.phrases.list_separator.join(info.features[:3])
        if joined and len(joined) <= SHORT_DESCRIPTION_LIMIT:
            return cap(joined, SHORT_DESCRIPTION_LIMIT)
        return cap(self._fill(self.phrases.short_template, info), SHORT_DESCRIPTION_LIMIT)

    def promotional_text(self, info: ProjectInfo) -> CappedText:
        if info.description and len(info.description) <= PROMOTIONAL_TEXT_LIMIT:
            return cap(info.description, PROMOTIONAL_TEXT_LIMIT)
        return cap(self._fill(self.phrases.promo_template, info), PROMOTIONAL_TEXT_LIMIT)

    def long_description(self, info: ProjectInfo) -> CappedText:
        p = self.phrases
        caps = info.capabilities
        parts = [self._fill(p.intro_template, info)]
        if info.description:
            parts.append(info.description)
        if info.features:
            listed = "\n".join(f"{BULLET} {f}" for f in info.features[:MAX_LISTED_FEATURES])
            parts.append(f"{p.features_heading}\n{listed}")
        parts.append(self._fill(p.version_template, info))
        if info.framework.is_cross_platform:
            parts.append(p.cross_platform_note)
        notices = []
        if caps.has_ads:
            notices.append(p.ads_notice)
        if caps.has_in_app_purchase:
            notices.append(p.iap_notice)
        if notices:
            parts.append("\n".join(notices))
        parts.append(p.closing)
        return cap("\n\n".join(parts), LONG_DESCRIPTION_LIMIT)

    def keywords(self, info: ProjectInfo) -> CappedText:
        tokens = keyword_tokens(info.app_name)
        for feature in info.features[:KEYWORD_FEATURE_COUNT]:
            tokens.extend(keyword_tokens(feature))
        if not tokens:
            tokens = list(self.phrases.default_keywords)
        return cap_keywords(unique_ordered(tokens), KEYWORDS_LIMIT)

    # ── Supporting documents ────────────────────────────────────────────────

    def support_page(self, info: ProjectInfo) -> str:
        p = self.phrases
        caps = info.capabilities
        faq = [(p.faq_general_q, p.faq_general_a)]
        if caps.has_in_app_purchase:
            faq.append((p.faq_iap_q, p.faq_iap_a))
        if caps.has_user_auth:
            faq.append((p.faq_account_q, p.faq_account_a))
        if caps.has_ads:
            faq.append((p.faq_ads_q, p.faq_ads_a))

        lines = [
            f"# {self._fill(p.support_title, info)}",
            "",
            self._fill(p.support_intro, info),
            "",
            f"## {p.contact_heading}",
            self._fill(p.contact_line, info),
            "",
            f"## {p.faq_heading}",
        ]
        for question, answer in faq:
            lines.append("")
            lines.append(f"**Q. {question}**")
            lines.append(f"A. {self._fill(answer, info)}")
        lines.append("")
        lines.append(self._fill(p.current_version, info))
        return "\n".join(lines)

    def privacy_policy(self, info: ProjectInfo) -> str:
        p = self.phrases
        caps = info.capabilities
        lines = [
            f"# {self._fill(p.privacy_title, info)}",
            "",
            p.effective_date,
            "",
            self._fill(p.privacy_intro, info),
            "",
        ]
        if caps.collects_data:
            lines.append(f"## {p.collected_heading}")
            for enabled, text in (
                (caps.has_user_auth, p.collect_auth),
                (caps.has_analytics, p.collect_analytics),
                (caps.has_in_app_purchase, p.collect_iap),
                (caps.has_ugc, p.collect_ugc),
                (caps.has_chat, p.collect_chat),
                (caps.has_ads, p.collect_ads),
            ):
                if enabled:
                    lines.append(f"- {text}")
            lines.append("")
            lines.append(p.third_party_notice)
        else:
            lines.append(self._fill(p.no_data_collected, info))
        lines.append("")

        if info.permissions:
            lines.append(f"## {p.permissions_heading}")
            lines.append(p.permissions_intro)
            lines.extend(f"- {perm}" for perm in sorted(info.permissions))
            lines.append("")

        lines.extend([
            f"## {p.children_heading}",
            self._fill(p.children_notice, info),
            "",
            f"## {p.changes_heading}",
            p.changes_notice,
            "",
            f"## {p.contact_heading}",
            self._fill(p.privacy_contact, info),
        ])
        return "\n".join(lines)

    def review_notes(self, info: ProjectInfo) -> str:
        p = self.phrases
        caps = info.capabilities
        lines = [f"# {p.review_title}", "", self._fill(p.review_summary, info)]
        if info.description:
            lines.append(info.description)
        lines.append("")
        lines.append(p.review_demo_account if caps.has_user_auth else p.review_no_login)
        if caps.has_in_app_purchase:
            lines.append(p.review_iap)
        if caps.has_web_view:
            lines.append(p.review_webview)
        if caps.has_ugc or caps.has_chat:
            lines.append(p.review_moderation)
        if info.permissions:
            lines.append("")
            lines.append(p.review_permissions)
            lines.extend(f"- {perm}" for perm in sorted(info.permissions))
        lines.append("")
        lines.append(self._fill(p.review_contact, info))
        return "\n".join(lines)

    def content_rating_guide(self, info: ProjectInfo) -> str:
        """Suggested answers for the Google Play content rating questionnaire."""
        p = self.phrases
        caps = info.capabilities
        answers = [
            (p.q_violence, caps.has_violent_content),
            (p.q_sexuality, caps.has_sexual_content),
            (p.q_language, False),
            (p.q_substances, False),
            (p.q_gambling, caps.has_gambling),
            (p.q_interaction, caps.has_ugc or caps.has_chat),
            (p.q_location, _has_location_permission(info)),
            (p.q_purchases, caps.has_in_app_purchase),
            (p.q_ads, caps.has_ads),
            (p.q_loot_box, caps.has_loot_box),
        ]
        lines = [f"# {p.rating_guide_title}", "", p.rating_guide_intro, ""]
        for question, yes in answers:
            lines.append(f"- {question} {p.answer_yes if yes else p.answer_no}")
        return "\n".join(lines)

    def age_rating_questionnaire(self, info: ProjectInfo) -> str:
        """Suggested App Store age rating answers plus the expected tier."""
        p = self.phrases
        caps = info.capabilities

        def level(flag: bool) -> str:
            return p.answer_mild if flag else p.answer_none

        def yes_no(flag: bool) -> str:
            return p.answer_yes if flag else p.answer_no

        answers = [
            (p.age_cartoon_violence, level(caps.has_violent_content)),
            (p.age_realistic_violence, level(caps.has_violent_content)),
            (p.age_sexual_content, level(caps.has_sexual_content)),
            (p.age_profanity, p.answer_none),
            (p.age_substances, p.answer_none),
            (p.age_mature_themes, level(caps.has_sexual_content)),
            (p.age_horror, p.answer_none),
            (p.age_medical, level(caps.has_health_content)),
            (p.age_gambling, level(caps.has_gambling)),
            (p.age_web_access, yes_no(caps.has_web_view)),
            (p.age_ugc, yes_no(caps.has_ugc)),
            (p.age_chat, yes_no(caps.has_chat)),
            (p.age_loot_box, yes_no(caps.has_loot_box)),
        ]
        lines = [f"# {p.age_title}", "", p.age_intro, ""]
        lines.extend(f"- {question}: {answer}" for question, answer in answers)
        lines.append("")
        lines.append(p.age_expected.format(rating=expected_age_rating(info).value))
        lines.append(p.age_manual_review)
        return "\n".join(lines)

    # ── Helpers ─────────────────────────────────────────────────────────────

    def _fill(self, template: str, info: ProjectInfo) -> str:
        return template.format(
            name=info.app_name,
            version=info.version,
            email=SUPPORT_EMAIL,
            tagline=self.phrases.tagline,
        )
