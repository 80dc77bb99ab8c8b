"""Separator resolver: locale-pluggable text joining the range middles.

Whether the range separator is padded with spaces depends on how much of
the two points differs: "Jan 3–5, 2020" joins two day numbers, while
"Jan 3 – Feb 5, 2020" joins two multi-word phrases. Languages whose
shared suffix swallows punctuation belonging to the start point (German
day ordinals, "3.–5. Januar") register their own provider.

Providers are registered per two-letter language code. Unregistered
languages use DefaultProvider.

Thread-safe. Registry mutations are protected by RLock.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import RLock
from typing import Protocol

from dateranger.enums import DateStyle, FieldCategory
from dateranger.locale_utils import language_code

__all__ = [
    "BUILTIN_PROVIDERS",
    "DefaultProvider",
    "GermanProvider",
    "SeparatorProvider",
    "SeparatorResolver",
]

logger = logging.getLogger(__name__)

# Date styles whose month split joins bare numerals ("Jan 3–5", "1/3–5/20")
_COMPACT_STYLES: frozenset[DateStyle] = frozenset({DateStyle.MEDIUM, DateStyle.SHORT})


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class SeparatorProvider(Protocol):
    """Strategy that adapts the configured separator to a language."""

    def modify_separator(
        self,
        split: FieldCategory,
        separator: str,
        date_style: DateStyle,
    ) -> str:
        """Return the text placed between the left and right middles."""
        ...
# pylint: enable=unnecessary-ellipsis


class DefaultProvider:
    """Bare separator for compact month splits, spaced otherwise."""

    __slots__ = ()

    def modify_separator(
        self,
        split: FieldCategory,
        separator: str,
        date_style: DateStyle,
    ) -> str:
        """Pad the separator unless only day numbers differ in a compact style.

        Examples:
            >>> DefaultProvider().modify_separator(FieldCategory.MONTH, "–", DateStyle.MEDIUM)
            '–'
            >>> DefaultProvider().modify_separator(FieldCategory.YEAR, "–", DateStyle.MEDIUM)
            ' – '
        """
        if split is FieldCategory.MONTH and date_style in _COMPACT_STYLES:
            return separator
        return f" {separator} "


class GermanProvider:
    """German ranges restore the ordinal period of the start day.

    The shared suffix of "3. Januar 2020" begins with the period after the
    day number, so the start middle needs its own: "3.–5. Januar 2020".
    """

    __slots__ = ()

    def modify_separator(
        self,
        split: FieldCategory,
        separator: str,
        date_style: DateStyle,
    ) -> str:
        """Prefix the ordinal period for month splits.

        Examples:
            >>> GermanProvider().modify_separator(FieldCategory.MONTH, "–", DateStyle.MEDIUM)
            '.–'
            >>> GermanProvider().modify_separator(FieldCategory.MONTH, "–", DateStyle.FULL)
            '. – '
        """
        if split is not FieldCategory.MONTH or date_style is DateStyle.NONE:
            return f" {separator} "
        if date_style is DateStyle.FULL:
            # Weekday names make both middles multi-word
            return f". {separator} "
        return f".{separator}"


BUILTIN_PROVIDERS: Mapping[str, SeparatorProvider] = {"de": GermanProvider()}


class SeparatorResolver:
    """Registry of separator providers keyed by language code.

    Examples:
        >>> resolver = SeparatorResolver()
        >>> resolver.resolve("en-US", FieldCategory.MONTH, "–", date_style=DateStyle.MEDIUM)
        '–'
        >>> resolver.resolve("de-AT", FieldCategory.MONTH, "–", date_style=DateStyle.MEDIUM)
        '.–'
    """

    __slots__ = ("_default", "_lock", "_providers")

    def __init__(
        self,
        providers: Mapping[str, SeparatorProvider] | None = None,
        *,
        default: SeparatorProvider | None = None,
    ) -> None:
        """Create a resolver.

        Args:
            providers: Language code to provider mapping. None installs
                BUILTIN_PROVIDERS; pass {} for an empty registry.
            default: Provider for unregistered languages (DefaultProvider)
        """
        source = BUILTIN_PROVIDERS if providers is None else providers
        self._providers: dict[str, SeparatorProvider] = {
            language_code(code): provider for code, provider in source.items()
        }
        self._default: SeparatorProvider = default if default is not None else DefaultProvider()
        self._lock = RLock()

    @property
    def languages(self) -> tuple[str, ...]:
        """Registered language codes, sorted."""
        with self._lock:
            return tuple(sorted(self._providers))

    def register(self, language: str, provider: SeparatorProvider) -> None:
        """Register (or replace) the provider for a language.

        Args:
            language: Language or locale code; only the language subtag is used
            provider: Strategy implementing modify_separator
        """
        key = language_code(language)
        with self._lock:
            if key in self._providers:
                logger.debug("Replacing separator provider for '%s'", key)
            self._providers[key] = provider

    def unregister(self, language: str) -> None:
        """Remove the provider for a language (no-op if absent)."""
        with self._lock:
            self._providers.pop(language_code(language), None)

    def provider_for(self, locale_code: str) -> SeparatorProvider:
        """Return the provider for a locale, falling back to the default."""
        with self._lock:
            return self._providers.get(language_code(locale_code), self._default)

    def resolve(
        self,
        locale_code: str,
        split: FieldCategory,
        separator: str,
        *,
        date_style: DateStyle,
    ) -> str:
        """Return the text joining the middles of a range.

        Args:
            locale_code: Locale of the range
            split: Split category of the range
            separator: Configured range separator
            date_style: Date style of the range

        Returns:
            Separator text, possibly padded or prefixed
        """
        provider = self.provider_for(locale_code)
        return provider.modify_separator(split, separator, date_style)
