"""Text helpers shared by the listing writers."""

from __future__ import annotations

import re

from app_publisher.models import CappedText

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9]+")
_TOKEN_SPLIT_RE = re.compile(r"[\W_]+")

_STOP_WORDS = frozenset(
    {"a", "an", "and", "the", "of", "for", "to", "in", "on", "with", "your", "you", "by", "or"}
)


def cap(text: str, limit: int) -> CappedText:
    """Truncate text to at most ``limit`` characters."""
    text = text.strip()
    if len(text) <= limit:
        return CappedText(text, limit, len(text))
    return CappedText(text[:limit].rstrip(), limit, len(text))


def slugify(name: str) -> str:
    """Lower-case ``name`` and drop everything but ASCII letters and digits."""
    return _SLUG_STRIP_RE.sub("", name.lower())


def keyword_tokens(text: str) -> list[str]:
    """Split text on whitespace and punctuation into lower-case keyword tokens."""
    tokens = []
    for raw in _TOKEN_SPLIT_RE.split(text.lower()):
        if len(raw) < 2 or raw.isdigit() or raw in _STOP_WORDS:
            continue
        tokens.append(raw)
    return tokens


def unique_ordered(values: list[str]) -> list[str]:
    """Deduplicate case-insensitively, keeping the first occurrence."""
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(value)
    return out


def cap_keywords(keywords: list[str], limit: int) -> CappedText:
    """Join keywords with commas, dropping any keyword cut by the limit."""
    joined = ",".join(keywords)
    if len(joined) <= limit:
        return CappedText(joined, limit, len(joined))
    head = joined[: limit + 1]
    cut = head.rfind(",")
    text = head[:cut] if cut > 0 else joined[:limit]
    return CappedText(text, limit, len(joined))
