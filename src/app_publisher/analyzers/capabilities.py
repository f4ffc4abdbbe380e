"""Capability flag classification from dependency names and documentation text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from app_publisher.models import Capabilities


@dataclass(frozen=True)
class CapabilityRule:
    """One independent predicate: any dependency marker or doc keyword sets the flag."""

    flag: str
    dependency_markers: tuple[str, ...] = ()
    doc_keywords: tuple[str, ...] = ()


# Doc keywords are matched lower-cased against all docs, in every supported
# language, whatever the output language is.
CAPABILITY_RULES: tuple[CapabilityRule, ...] = (
    CapabilityRule(
        "has_ads",
        dependency_markers=(
            "admob",
            "google-mobile-ads",
            "react-native-ads",
            "fbads",
            "facebook-ads",
            "applovin",
            "unity-ads",
            "ironsource",
        ),
        doc_keywords=("advertis", "admob", "banner ad", "interstitial", "광고", "広告", "广告"),
    ),
    CapabilityRule(
        "has_analytics",
        dependency_markers=(
            "analytics",
            "amplitude",
            "mixpanel",
            "segment",
            "crashlytics",
            "sentry",
            "appsflyer",
        ),
        doc_keywords=("analytics", "crash report", "분석 도구", "アナリティクス", "数据分析"),
    ),
    CapabilityRule(
        "has_in_app_purchase",
        dependency_markers=(
            "react-native-iap",
            "in-app-purchase",
            "purchases",
            "billing",
            "storekit",
            "revenuecat",
        ),
        doc_keywords=(
            "in-app purchase",
            "in app purchase",
            "subscription",
            "premium plan",
            "인앱 결제",
            "인앱결제",
            "구독",
            "アプリ内課金",
            "サブスクリプション",
            "应用内购买",
            "订阅",
        ),
    ),
    CapabilityRule(
        "has_user_auth",
        dependency_markers=("auth", "clerk", "supabase", "cognito", "google-signin"),
        doc_keywords=(
            "login",
            "log in",
            "sign in",
            "sign-in",
            "sign up",
            "sign-up",
            "로그인",
            "회원가입",
            "ログイン",
            "登录",
            "注册",
        ),
    ),
    CapabilityRule(
        "has_web_view",
        dependency_markers=("webview",),
        doc_keywords=("webview", "web view", "in-app browser", "웹뷰"),
    ),
    CapabilityRule(
        "has_ugc",
        dependency_markers=("ugc",),
        doc_keywords=(
            "user-generated",
            "user generated",
            "upload",
            "community",
            "게시판",
            "업로드",
            "커뮤니티",
            "投稿",
            "コミュニティ",
            "上传",
            "社区",
        ),
    ),
    CapabilityRule(
        "has_chat",
        dependency_markers=("chat", "socket.io", "sendbird", "pusher", "twilio-conversations"),
        doc_keywords=("chat", "messaging", "direct message", "채팅", "메신저", "チャット", "聊天"),
    ),
    CapabilityRule(
        "has_gambling",
        doc_keywords=(
            "gambling",
            "casino",
            "betting",
            "slot machine",
            "poker",
            "도박",
            "카지노",
            "ギャンブル",
            "カジノ",
            "赌博",
            "博彩",
        ),
    ),
    CapabilityRule(
        "has_loot_box",
        doc_keywords=("loot box", "lootbox", "gacha", "random reward", "가챠", "뽑기", "ガチャ", "抽卡", "盲盒"),
    ),
    CapabilityRule(
        "has_health_content",
        dependency_markers=("healthkit", "health-connect", "google-fit"),
        doc_keywords=(
            "health",
            "medical",
            "fitness",
            "workout",
            "건강",
            "의료",
            "운동",
            "健康",
            "医療",
            "医疗",
        ),
    ),
    CapabilityRule(
        "has_violent_content",
        doc_keywords=("violence", "violent", "combat", "shooter", "weapon", "blood", "폭력", "暴力"),
    ),
    CapabilityRule(
        "has_sexual_content",
        doc_keywords=(
            "sexual",
            "nudity",
            "adult content",
            "adults only",
            "성인",
            "선정",
            "アダルト",
            "性的",
            "成人内容",
        ),
    ),
)


def rule_matches(rule: CapabilityRule, dependencies: Iterable[str], docs_lower: str) -> bool:
    """Dependency markers are case-sensitive substrings; doc keywords are not."""
    for dep in dependencies:
        if any(marker in dep for marker in rule.dependency_markers):
            return True
    return any(keyword in docs_lower for keyword in rule.doc_keywords)


def classify_capabilities(dependencies: Iterable[str], docs_text: str) -> Capabilities:
    """Derive every capability flag independently of the others."""
    deps = sorted(dependencies)
    docs_lower = docs_text.lower()
    flags = {rule.flag: rule_matches(rule, deps, docs_lower) for rule in CAPABILITY_RULES}
    return Capabilities(**flags)
