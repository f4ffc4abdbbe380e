"""All shared data models for app-publisher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# ── Project scan ────────────────────────────────────────────────────────────


class Framework(Enum):
    EXPO = "expo"
    REACT_NATIVE = "react-native"
    FLUTTER = "flutter"
    NATIVE = "native"

    @property
    def is_cross_platform(self) -> bool:
        return self is not Framework.NATIVE


class Platform(Enum):
    IOS = "ios"
    ANDROID = "android"
    BOTH = "both"

    @property
    def targets(self) -> list[Platform]:
        if self is Platform.BOTH:
            return [Platform.IOS, Platform.ANDROID]
        return [self]


class Language(Enum):
    EN = "en"
    KO = "ko"
    JA = "ja"
    ZH = "zh"

    @property
    def ios_locale(self) -> str:
        return _IOS_LOCALES[self]

    @property
    def android_locale(self) -> str:
        return _ANDROID_LOCALES[self]


_IOS_LOCALES = {
    Language.EN: "en-US",
    Language.KO: "ko",
    Language.JA: "ja",
    Language.ZH: "zh-Hans",
}

_ANDROID_LOCALES = {
    Language.EN: "en-US",
    Language.KO: "ko-KR",
    Language.JA: "ja-JP",
    Language.ZH: "zh-CN",
}


@dataclass(frozen=True)
class Capabilities:
    """Capability flags derived from dependencies and docs."""

    has_ads: bool = False
    has_analytics: bool = False
    has_in_app_purchase: bool = False
    has_user_auth: bool = False
    has_web_view: bool = False
    has_ugc: bool = False
    has_chat: bool = False
    has_gambling: bool = False
    has_loot_box: bool = False
    has_health_content: bool = False
    has_violent_content: bool = False
    has_sexual_content: bool = False

    @property
    def collects_data(self) -> bool:
        """True when any flag implies personal data leaves the device."""
        return (
            self.has_ads
            or self.has_analytics
            or self.has_in_app_purchase
            or self.has_user_auth
            or self.has_ugc
            or self.has_chat
        )

    def flags(self) -> dict[str, bool]:
        """Flag values keyed by name without the ``has_`` prefix."""
        return {name.removeprefix("has_"): value for name, value in vars(self).items()}


@dataclass(frozen=True)
class ProjectInfo:
    """Normalized snapshot of a scanned app project."""

    app_name: str
    bundle_id: str
    version: str = "1.0.0"
    description: str = ""
    features: tuple[str, ...] = ()
    framework: Framework = Framework.NATIVE
    permissions: frozenset[str] = frozenset()
    capabilities: Capabilities = Capabilities()
    team_id: str | None = None
    dependencies: frozenset[str] = frozenset()


# ── Listing output ──────────────────────────────────────────────────────────


class AgeRating(Enum):
    """iOS-style age-rating tiers, most permissive first."""

    FOUR_PLUS = "4+"
    NINE_PLUS = "9+"
    TWELVE_PLUS = "12+"
    SEVENTEEN_PLUS = "17+"


@dataclass(frozen=True)
class CappedText:
    """Generated text cut down to a store character limit."""

    text: str
    limit: int
    source_length: int

    @property
    def truncated(self) -> bool:
        return self.source_length > self.limit

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CategorySuggestion:
    primary: str
    secondary: str


# ── Tool collaborators ──────────────────────────────────────────────────────


@dataclass
class IconSize:
    name: str
    size: int
    platform: str  # ios | android
    scale: str | None = None
    folder: str | None = None


@dataclass
class ResizeResult:
    platform: str
    name: str
    size: int
    path: str


@dataclass
class GeneratedImage:
    """Output of an image-generation call."""

    texts: list[str] = field(default_factory=list)
    image_path: str = ""
    image_b64: str = ""
    mime_type: str = "image/png"


@dataclass
class FastlaneConfig:
    project_dir: str
    app_identifier: str
    app_name: str
    team_id: str | None = None
    itunes_connect_team_id: str | None = None
    json_key_file: str | None = None
    package_name: str | None = None


@dataclass
class FlowStep:
    """One step of a UI-test flow."""

    action: str
    value: str | None = None
    direction: str | None = None
    timeout: int | None = None


@dataclass
class FlowRunResult:
    success: bool
    output: str
    screenshots: list[str] = field(default_factory=list)


@dataclass
class BootedDevices:
    ios: list[str] = field(default_factory=list)
    android: list[str] = field(default_factory=list)

    @property
    def any(self) -> bool:
        return bool(self.ios or self.android)


@dataclass
class InstallResult:
    success: bool
    message: str
    version: str | None = None
    java_version: str | None = None


@dataclass
class StoreScreenshotSize:
    name: str
    width: int
    height: int
    platform: str
    device: str
    required: bool


@dataclass
class StoreScreenshotResult:
    platform: str
    device: str
    width: int
    height: int
    path: str


@dataclass
class MetadataWriteResult:
    """Files touched when populating fastlane metadata."""

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
