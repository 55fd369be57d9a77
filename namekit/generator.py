#!/usr/bin/env python3
"""
Meaningful Name Generator
=========================
Builds readable identifiers ("ActiveUser42", "LoadBuffer") from a
WordCatalog and a seeded random source.

Each call picks a pattern, fills every slot with a random word of that
category and may append a numeric suffix. Candidates that collide with the
caller's exclusion set or with names this generator already returned are
resampled. The loop is bounded:

    SAMPLING         draw a fresh candidate
    DISAMBIGUATING   past half the budget, colliding candidates get a
                     4-digit suffix
    FORCED_FALLBACK  budget exhausted, first pattern + attempt count
    ACCEPTED         candidate is final

Collision checks are case-insensitive. The exclusion set is only read,
never modified.

Usage:
    catalog = WordCatalog.with_defaults()
    gen = NameGenerator(catalog, SeededRandom.from_string("session-1"))
    name = gen.generate_unique_name(existing_names)
"""

import logging
from enum import Enum
from typing import AbstractSet, Dict, List, Optional, Tuple

from .catalog import WordCatalog
from .entropy import RandomSource
from .settings import get_int_range, get_setting
from .words import Word, WordCategory, WordPattern

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_SHORT_SUFFIX = (100, 999)
DEFAULT_LONG_SUFFIX = (1000, 9999)
DEFAULT_SUFFIX_CHANCE = 3

# Word used for slots whose category has no words
FALLBACK_WORD = "Default"

# Categories that must have words; adverb slots borrow nouns instead
REQUIRED_CATEGORIES = (WordCategory.NOUN, WordCategory.VERB, WordCategory.ADJECTIVE)


class GenerationState(Enum):
    """States of the bounded generation loop."""
    SAMPLING = "sampling"
    DISAMBIGUATING = "disambiguating"
    FORCED_FALLBACK = "forced_fallback"
    ACCEPTED = "accepted"


class NameGenerator:
    """
    Generates unique meaningful names from a catalog.

    Parameters
    ----------
    catalog : WordCatalog
        Words, patterns and length settings
    rng : RandomSource
        Seeded source of integer draws; call order determines output
    max_attempts : int, optional
        Sampling budget per name (default from app.yaml, 100)
    """

    def __init__(self,
                 catalog: WordCatalog,
                 rng: RandomSource,
                 max_attempts: Optional[int] = None):
        if catalog is None:
            raise ValueError("catalog is required")
        if rng is None:
            raise ValueError("rng is required")

        self.catalog = catalog
        self.rng = rng

        if max_attempts is None:
            max_attempts = get_setting('generator.max_attempts', DEFAULT_MAX_ATTEMPTS)
        self.max_attempts = max(1, int(max_attempts))
        self._short_suffix = get_int_range('generator.short_suffix', DEFAULT_SHORT_SUFFIX)
        self._long_suffix = get_int_range('generator.long_suffix', DEFAULT_LONG_SUFFIX)
        self._suffix_chance = max(1, int(get_setting('generator.suffix_chance', DEFAULT_SUFFIX_CHANCE)))

        # Lowercased names returned by this instance
        self._used_names: set = set()

        if not catalog.words:
            catalog.set_default_words()
        self._buckets = self._build_buckets()

        missing = [c for c in REQUIRED_CATEGORIES if not self._buckets[c]]
        if missing:
            logger.debug("Catalog has no %s words, requesting defaults",
                         ', '.join(c.value for c in missing))
            # No-op when the catalog has other words; empty slots then use FALLBACK_WORD
            catalog.set_default_words()
            self._buckets = self._build_buckets()

    def _build_buckets(self) -> Dict[WordCategory, Tuple[Word, ...]]:
        return {category: tuple(self.catalog.words_for(category)) for category in WordCategory}

    @property
    def used_names(self) -> frozenset:
        """Lowercased names this generator has returned since the last clear."""
        return frozenset(self._used_names)

    def words(self, category: WordCategory) -> Tuple[Word, ...]:
        """The read-only word bucket for one category."""
        return self._buckets[category]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def generate_name(self) -> str:
        """Generate a name unique within this generator's lifetime."""
        return self.generate_unique_name(None)

    def generate_unique_name(self, existing_names: Optional[AbstractSet[str]] = None) -> str:
        """
        Generate a name that is neither in existing_names nor previously
        returned by this generator.

        Parameters
        ----------
        existing_names : set of str, optional
            Names already taken in the caller's scope. Not modified.

        Returns
        -------
        str
            The new name. If the attempt budget runs out the result is the
            first pattern's fill plus the attempt count, which is not
            re-checked against either set.
        """
        if not self.catalog.patterns:
            self.catalog.set_default_patterns()

        excluded = frozenset(n.lower() for n in existing_names) if existing_names else frozenset()

        state = GenerationState.SAMPLING
        attempts = 0
        name = ''

        while state is not GenerationState.ACCEPTED:
            if state is GenerationState.FORCED_FALLBACK:
                name = self._fill(self.catalog.patterns[0]) + str(attempts)
                logger.debug("Attempt budget exhausted, falling back to '%s'", name)
                state = GenerationState.ACCEPTED
                continue

            name = self._sample()
            if state is GenerationState.DISAMBIGUATING and self._is_taken(name, excluded):
                name += str(self.rng.next_int_range(*self._long_suffix))

            attempts += 1

            if attempts >= self.max_attempts:
                state = GenerationState.FORCED_FALLBACK
            elif not self._is_taken(name, excluded):
                state = GenerationState.ACCEPTED
            elif attempts > self.max_attempts // 2:
                if state is GenerationState.SAMPLING:
                    logger.debug("No free name after %d attempts, adding suffixes", attempts)
                state = GenerationState.DISAMBIGUATING

        name = self._fit_length(name, excluded)
        self._used_names.add(name.lower())
        return name

    def clear_used_names(self) -> None:
        """Forget every name this generator has returned."""
        self._used_names.clear()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _is_taken(self, name: str, excluded: AbstractSet[str]) -> bool:
        key = name.lower()
        return key in excluded or key in self._used_names

    def _sample(self) -> str:
        patterns: List[WordPattern] = self.catalog.patterns
        pattern = patterns[self.rng.next_int(len(patterns))]
        name = self._fill(pattern)

        if self.catalog.use_numbers and (
                len(name) < self.catalog.min_length
                or self.rng.next_int(self._suffix_chance) == 0):
            name += str(self.rng.next_int_range(*self._short_suffix))
        return name

    def _fill(self, pattern: WordPattern) -> str:
        return ''.join(self._word_for(category) for category in pattern)

    def _word_for(self, category: WordCategory) -> str:
        bucket = self._buckets.get(category, ())
        if category is WordCategory.ADVERB and not bucket:
            bucket = self._buckets[WordCategory.NOUN]
        if not bucket:
            return FALLBACK_WORD
        return bucket[self.rng.next_int(len(bucket))].value

    def _fit_length(self, name: str, excluded: AbstractSet[str]) -> str:
        max_length = self.catalog.max_length
        if len(name) <= max_length:
            return name

        name = name[:max_length]
        if self._is_taken(name, excluded):
            logger.debug("Truncated name '%s' collides, re-suffixing", name)
            name = name[:max(1, max_length - 4)] + str(self.rng.next_int_range(*self._long_suffix))
        return name


__all__ = [
    'GenerationState',
    'NameGenerator',
    'FALLBACK_WORD',
]
