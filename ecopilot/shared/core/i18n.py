# 📄 File: ecopilot/shared/core/i18n.py
# 🧭 Purpose (Layman Explanation):
# Keeps every message EcoPilot shows in both French and English and picks the
# right one for the person making the request.
# 🧪 Purpose (Technical Summary):
# Translation catalog loaded from JSON files, request-scoped locale context
# variable and helpers to translate a key into one or both supported languages.
# 🔗 Dependencies:
# json, pathlib, contextvars, functools
# 🔄 Connected Modules / Calls From:
# LocalizationMiddleware, exception hierarchy, plant/weather/search/location services

import json
import logging
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES = ("fr", "en")
DEFAULT_LOCALE = "fr"

_TRANSLATIONS_DIR = Path(__file__).parent.parent / "translations"

# Context variable to store current locale across request
current_locale: ContextVar[str] = ContextVar("current_locale", default=DEFAULT_LOCALE)


@lru_cache()
def load_catalog() -> Dict[str, Dict[str, str]]:
    """
    Load translation files from disk.

    Returns:
        Dictionary of translations by locale
    """
    catalog: Dict[str, Dict[str, str]] = {}
    for locale in SUPPORTED_LOCALES:
        locale_file = _TRANSLATIONS_DIR / f"{locale}.json"
        with open(locale_file, "r", encoding="utf-8") as f:
            catalog[locale] = json.load(f)
        logger.debug(f"Loaded {len(catalog[locale])} translations for locale: {locale}")
    return catalog


def normalize_locale(locale: Optional[str]) -> Optional[str]:
    """Reduce ``fr-CA`` / ``EN`` style values to a supported code, or None."""
    if not locale:
        return None
    code = locale.strip().split("-")[0].split("_")[0].lower()
    return code if code in SUPPORTED_LOCALES else None


def resolve_locale(locale: Optional[str]) -> str:
    """Return a supported locale, falling back to French."""
    return normalize_locale(locale) or DEFAULT_LOCALE


def get_current_locale() -> str:
    return current_locale.get()


def translate(key: str, locale: Optional[str] = None, **kwargs: Any) -> str:
    """
    Translate a message key.

    Args:
        key: Translation key (e.g., 'plants.not_found')
        locale: Target locale (uses current if None)
        **kwargs: Template variables for formatting

    Returns:
        Translated message, the French message when the key is missing in
        the target locale, or the key itself as a last resort
    """
    locale = resolve_locale(locale or get_current_locale())
    catalog = load_catalog()

    message = catalog[locale].get(key) or catalog[DEFAULT_LOCALE].get(key)
    if message is None:
        logger.warning(f"Missing translation key: {key}")
        return key

    if kwargs:
        try:
            message = message.format(**kwargs)
        except (KeyError, ValueError):
            logger.warning(f"Translation formatting failed for key: {key}")
    return message


def bilingual(key: str, **kwargs: Any) -> Dict[str, str]:
    """Translate a key into every supported locale."""
    return {locale: translate(key, locale, **kwargs) for locale in SUPPORTED_LOCALES}


def localized_payload(key: str, locale: Optional[str] = None, field: str = "message", **kwargs: Any) -> Dict[str, str]:
    """
    Build the ``message`` / ``message_fr`` / ``message_en`` triple used in
    every API response body.
    """
    messages = bilingual(key, **kwargs)
    return {
        field: messages[resolve_locale(locale or get_current_locale())],
        f"{field}_fr": messages["fr"],
        f"{field}_en": messages["en"],
    }


def pick(texts: Dict[str, Any], locale: Optional[str] = None) -> Any:
    """Select the entry for ``locale`` from a ``{"fr": ..., "en": ...}`` mapping."""
    locale = resolve_locale(locale or get_current_locale())
    if locale in texts:
        return texts[locale]
    return texts.get(DEFAULT_LOCALE)
