"""Localized store listing writers."""

from app_publisher.listing.base import ListingWriter, expected_age_rating
from app_publisher.listing.en import EnglishWriter
from app_publisher.listing.ja import JapaneseWriter
from app_publisher.listing.ko import KoreanWriter
from app_publisher.listing.zh import ChineseWriter
from app_publisher.models import Language

WRITERS: dict[Language, type[ListingWriter]] = {
    Language.EN: EnglishWriter,
    Language.KO: KoreanWriter,
    Language.JA: JapaneseWriter,
    Language.ZH: ChineseWriter,
}


def get_writer(language: Language) -> ListingWriter:
    """Return the writer for *language*."""
    return WRITERS[language]()


__all__ = ["ListingWriter", "WRITERS", "expected_age_rating", "get_writer"]
