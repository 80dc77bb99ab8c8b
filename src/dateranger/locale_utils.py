"""Locale code helpers shared by the point formatter and the host adapters.

Every locale code is normalized once (BCP-47 "de-AT" to POSIX "de_AT")
so mask cache keys, Babel lookups and separator providers agree.

Python 3.13+.
"""

from __future__ import annotations

import functools
import locale as locale_module
import os
from typing import TYPE_CHECKING

from dateranger.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "language_code",
    "normalize_locale",
]

_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})

# Date formatting follows LC_TIME; LC_ALL overrides it, LANG is the default
_LOCALE_VARIABLES: tuple[str, ...] = ("LC_ALL", "LC_TIME", "LANG")


def normalize_locale(locale_code: str) -> str:
    """Trim a locale code and use underscores between subtags.

    Example:
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
    """
    return locale_code.strip().replace("-", "_")


def language_code(locale_code: str) -> str:
    """Extract the lowercase language subtag of a locale code.

    Separator providers are registered per language, so "de-AT", "de_CH"
    and "de" all resolve to "de".

    Example:
        >>> language_code("de-AT")
        'de'
        >>> language_code("EN_us")
        'en'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, once per code.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is malformed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_encoding(code: str | None) -> str:
    return (code or "").split(".", 1)[0]


def _process_locale() -> str | None:
    try:
        return locale_module.getlocale()[0]
    except ValueError:
        # getlocale() rejects locale names it cannot parse; use the environment
        return None


def get_system_locale() -> str:
    """Locale of the running process, for hosts that pass no language.

    Checks locale.getlocale() first, then LC_ALL, LC_TIME and LANG. The C
    and POSIX pseudo-locales carry no language and are skipped.

    Returns:
        POSIX locale code, or FALLBACK_LOCALE if none is set
    """
    candidates = [_strip_encoding(_process_locale())]
    candidates.extend(_strip_encoding(os.environ.get(var)) for var in _LOCALE_VARIABLES)

    for code in candidates:
        if code not in _PSEUDO_LOCALES:
            return normalize_locale(code)
    return FALLBACK_LOCALE
