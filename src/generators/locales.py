"""
Supported locale registry.

Tags are listed in their BCP 47 spelling. Data tables key their buckets by
the underscore spelling, so both forms are accepted on input.
"""

from typing import Tuple

DEFAULT_LOCALE = "en"

_LOCALE_TAGS = [
    "en",
    "en-US",
    "en-GB",
    "en-AU",
    "en-CA",
    "en-IN",
    "de",
    "de-DE",
    "de-AT",
    "de-CH",
    "es",
    "es-ES",
    "es-MX",
    "fr",
    "fr-FR",
    "fr-CA",
    "it",
    "it-IT",
    "ja",
    "ja-JP",
    "ko",
    "ko-KR",
    "nl",
    "nl-NL",
    "pl",
    "pl-PL",
    "pt",
    "pt-BR",
    "pt-PT",
    "ru",
    "ru-RU",
    "sv",
    "sv-SE",
    "tr",
    "tr-TR",
    "zh",
    "zh-Hans",
    "zh-Hans-CN",
    "zh-Hant",
    "zh-Hant-HK",
    "zh-Hant-TW",
]

AVAILABLE_LOCALE_IDS: Tuple[str, ...] = tuple(_LOCALE_TAGS) + tuple(
    tag.replace("-", "_") for tag in _LOCALE_TAGS if "-" in tag
)


def normalize_locale(locale: str) -> str:
    """Turn a locale tag into the key used for data buckets."""
    return locale.replace("-", "_")


def is_supported(locale: str) -> bool:
    """Check a tag against the registry as given, without normalizing it."""
    return locale in AVAILABLE_LOCALE_IDS
