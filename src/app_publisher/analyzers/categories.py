"""Store category suggestion via an ordered keyword rule table.

The first rule with any keyword present in the text wins. Rule order is the
tie-breaker, so reordering ``CATEGORY_RULES`` changes results.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app_publisher.models import CategorySuggestion, Language


@dataclass(frozen=True)
class CategoryRule:
    primary: str
    secondary: str
    keywords: dict[Language, tuple[str, ...]] = field(default_factory=dict)

    def keywords_for(self, language: Language) -> tuple[str, ...]:
        """Native keywords for ``language`` followed by the English ones."""
        native = self.keywords.get(language, ())
        if language is Language.EN:
            return native
        return native + self.keywords.get(Language.EN, ())


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "games",
        "entertainment",
        {
            Language.EN: ("game", "puzzle", "arcade", "quiz", "rpg"),
            Language.KO: ("게임", "퍼즐", "퀴즈"),
            Language.JA: ("ゲーム", "パズル", "クイズ"),
            Language.ZH: ("游戏", "拼图", "益智"),
        },
    ),
    CategoryRule(
        "health_fitness",
        "lifestyle",
        {
            Language.EN: ("fitness", "workout", "health", "exercise", "diet", "meditation"),
            Language.KO: ("운동", "건강", "다이어트", "명상"),
            Language.JA: ("フィットネス", "運動", "健康", "ダイエット", "瞑想"),
            Language.ZH: ("健身", "运动", "健康", "减肥", "冥想"),
        },
    ),
    CategoryRule(
        "finance",
        "productivity",
        {
            Language.EN: ("budget", "expense", "finance", "money", "bank", "invest", "wallet"),
            Language.KO: ("가계부", "예산", "지출", "금융", "투자"),
            Language.JA: ("家計簿", "予算", "支出", "金融", "投資"),
            Language.ZH: ("记账", "预算", "支出", "理财", "投资"),
        },
    ),
    CategoryRule(
        "education",
        "productivity",
        {
            Language.EN: ("learn", "study", "education", "course", "vocabulary", "lesson"),
            Language.KO: ("학습", "공부", "교육", "강의", "단어"),
            Language.JA: ("学習", "勉強", "教育", "講座", "単語"),
            Language.ZH: ("学习", "教育", "课程", "单词"),
        },
    ),
    CategoryRule(
        "productivity",
        "utilities",
        {
            Language.EN: ("todo", "to-do", "task", "note", "calendar", "reminder", "productivity"),
            Language.KO: ("할 일", "할일", "메모", "일정", "캘린더", "알림"),
            Language.JA: ("タスク", "メモ", "カレンダー", "リマインダー", "予定"),
            Language.ZH: ("待办", "任务", "笔记", "日历", "提醒"),
        },
    ),
    CategoryRule(
        "photo_video",
        "entertainment",
        {
            Language.EN: ("photo", "camera", "video", "image", "filter"),
            Language.KO: ("사진", "카메라", "동영상", "영상", "필터"),
            Language.JA: ("写真", "カメラ", "動画", "フィルター"),
            Language.ZH: ("照片", "相机", "视频", "滤镜"),
        },
    ),
    CategoryRule(
        "social",
        "lifestyle",
        {
            Language.EN: ("chat", "social", "friend", "message", "community"),
            Language.KO: ("채팅", "소셜", "친구", "메시지", "커뮤니티"),
            Language.JA: ("チャット", "ソーシャル", "友達", "メッセージ", "コミュニティ"),
            Language.ZH: ("聊天", "社交", "好友", "消息", "社区"),
        },
    ),
    CategoryRule(
        "music",
        "entertainment",
        {
            Language.EN: ("music", "audio", "podcast", "playlist", "song"),
            Language.KO: ("음악", "오디오", "팟캐스트", "플레이리스트"),
            Language.JA: ("音楽", "オーディオ", "ポッドキャスト", "プレイリスト"),
            Language.ZH: ("音乐", "音频", "播客", "歌单"),
        },
    ),
    CategoryRule(
        "travel",
        "navigation",
        {
            Language.EN: ("travel", "trip", "hotel", "flight", "itinerary"),
            Language.KO: ("여행", "호텔", "항공", "지도"),
            Language.JA: ("旅行", "ホテル", "フライト", "地図"),
            Language.ZH: ("旅行", "旅游", "酒店", "航班", "地图"),
        },
    ),
    CategoryRule(
        "food_drink",
        "lifestyle",
        {
            Language.EN: ("recipe", "food", "restaurant", "cooking", "meal"),
            Language.KO: ("레시피", "음식", "맛집", "요리", "식단"),
            Language.JA: ("レシピ", "料理", "グルメ", "レストラン", "献立"),
            Language.ZH: ("食谱", "美食", "餐厅", "烹饪"),
        },
    ),
    CategoryRule(
        "shopping",
        "lifestyle",
        {
            Language.EN: ("shop", "cart", "ecommerce", "coupon"),
            Language.KO: ("쇼핑", "장바구니", "쿠폰", "할인"),
            Language.JA: ("ショッピング", "カート", "クーポン", "セール"),
            Language.ZH: ("购物", "购物车", "优惠券", "折扣"),
        },
    ),
    CategoryRule(
        "weather",
        "utilities",
        {
            Language.EN: ("weather", "forecast"),
            Language.KO: ("날씨", "일기예보"),
            Language.JA: ("天気", "天気予報"),
            Language.ZH: ("天气", "预报"),
        },
    ),
)

DEFAULT_CATEGORY = ("utilities", "lifestyle")

CATEGORY_LABELS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "games": "Games",
        "entertainment": "Entertainment",
        "health_fitness": "Health & Fitness",
        "lifestyle": "Lifestyle",
        "finance": "Finance",
        "productivity": "Productivity",
        "education": "Education",
        "utilities": "Utilities",
        "photo_video": "Photo & Video",
        "social": "Social Networking",
        "music": "Music",
        "travel": "Travel",
        "navigation": "Navigation",
        "food_drink": "Food & Drink",
        "shopping": "Shopping",
        "weather": "Weather",
    },
    Language.KO: {
        "games": "게임",
        "entertainment": "엔터테인먼트",
        "health_fitness": "건강 및 피트니스",
        "lifestyle": "라이프스타일",
        "finance": "금융",
        "productivity": "생산성",
        "education": "교육",
        "utilities": "유틸리티",
        "photo_video": "사진 및 비디오",
        "social": "소셜 네트워킹",
        "music": "음악",
        "travel": "여행",
        "navigation": "내비게이션",
        "food_drink": "음식 및 음료",
        "shopping": "쇼핑",
        "weather": "날씨",
    },
    Language.JA: {
        "games": "ゲーム",
        "entertainment": "エンターテインメント",
        "health_fitness": "ヘルスケア/フィットネス",
        "lifestyle": "ライフスタイル",
        "finance": "ファイナンス",
        "productivity": "仕事効率化",
        "education": "教育",
        "utilities": "ユーティリティ",
        "photo_video": "写真/ビデオ",
        "social": "ソーシャルネットワーキング",
        "music": "ミュージック",
        "travel": "旅行",
        "navigation": "ナビゲーション",
        "food_drink": "フード/ドリンク",
        "shopping": "ショッピング",
        "weather": "天気",
    },
    Language.ZH: {
        "games": "游戏",
        "entertainment": "娱乐",
        "health_fitness": "健康健美",
        "lifestyle": "生活",
        "finance": "财务",
        "productivity": "效率",
        "education": "教育",
        "utilities": "工具",
        "photo_video": "摄影与录像",
        "social": "社交",
        "music": "音乐",
        "travel": "旅游",
        "navigation": "导航",
        "food_drink": "美食佳饮",
        "shopping": "购物",
        "weather": "天气",
    },
}


def match_rule(text: str, language: Language) -> CategoryRule | None:
    """Return the first rule with a keyword in ``text``, or None."""
    lower = text.lower()
    for rule in CATEGORY_RULES:
        if any(keyword in lower for keyword in rule.keywords_for(language)):
            return rule
    return None


def suggest_category(text: str, language: Language = Language.EN) -> CategorySuggestion:
    """Map descriptive text to a localized (primary, secondary) category pair."""
    rule = match_rule(text, language)
    primary, secondary = (rule.primary, rule.secondary) if rule else DEFAULT_CATEGORY
    labels = CATEGORY_LABELS[language]
    return CategorySuggestion(primary=labels[primary], secondary=labels[secondary])
