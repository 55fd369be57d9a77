#!/usr/bin/env python3
"""
Word Catalog
============
Categorized words, combination patterns and length/suffix settings that
drive name generation.

A catalog is filled either from a configuration document or from the
built-in defaults. Malformed input never raises: every missing or invalid
field falls back to a default, so a loaded catalog always has at least one
word and one pattern.

XML document shape:

    <meaningfulWords useNumbers="true" maxLength="50" minLength="3">
      <patterns>
        <pattern value="Adjective,Noun" />
        <pattern value="Verb+Noun" />
      </patterns>
      <words>
        <noun><word>Car</word><word>House</word></noun>
        <verb><word>Run</word></verb>
      </words>
    </meaningfulWords>

YAML files use the same keys:

    useNumbers: true
    maxLength: 50
    minLength: 3
    patterns: ["Adjective,Noun", "Verb+Noun"]
    words:
      noun: [Car, House]
      verb: [Run]
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .words import (
    DEFAULT_WORDS,
    Word,
    WordCategory,
    WordPattern,
    default_patterns,
)

logger = logging.getLogger(__name__)

DEFAULT_USE_NUMBERS = True
DEFAULT_MAX_LENGTH = 50
DEFAULT_MIN_LENGTH = 3

# Accepted spellings for each setting in YAML/dict configs
_SETTING_KEYS = (
    ('useNumbers', 'use_numbers'),
    ('maxLength', 'max_length'),
    ('minLength', 'min_length'),
)


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == 'true':
            return True
        if text == 'false':
            return False
    return None


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _element_text(element: ET.Element) -> str:
    return ''.join(element.itertext()).strip()


class WordCatalog:
    """
    Words, patterns and settings for one generator.

    Attributes
    ----------
    words : list[Word]
        All words in insertion order
    patterns : list[WordPattern]
        Unique patterns in insertion order
    use_numbers : bool
        Whether numeric suffixes may be appended
    max_length : int
        Names longer than this are truncated (>= 1)
    min_length : int
        Names shorter than this get a numeric suffix when use_numbers is set (>= 1)
    """

    def __init__(self,
                 use_numbers: bool = DEFAULT_USE_NUMBERS,
                 max_length: int = DEFAULT_MAX_LENGTH,
                 min_length: int = DEFAULT_MIN_LENGTH):
        self.words: List[Word] = []
        self.patterns: List[WordPattern] = []
        self.use_numbers = use_numbers
        self.max_length = max(1, max_length)
        self.min_length = max(1, min_length)

    @classmethod
    def with_defaults(cls, **settings) -> 'WordCatalog':
        """Catalog populated with the built-in words and patterns."""
        catalog = cls(**settings)
        catalog.set_default_words()
        catalog.set_default_patterns()
        return catalog

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WordCatalog':
        catalog = cls()
        catalog.load_from_file(path)
        return catalog

    def __repr__(self) -> str:
        return (f"WordCatalog(words={len(self.words)}, patterns={len(self.patterns)}, "
                f"use_numbers={self.use_numbers}, min_length={self.min_length}, "
                f"max_length={self.max_length})")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def words_for(self, category: WordCategory) -> List[Word]:
        """Words of one category, in insertion order."""
        return [w for w in self.words if w.category == category]

    def add_word(self, value: str, category: WordCategory) -> bool:
        """Add a word. Empty or whitespace-only values are ignored."""
        value = (value or '').strip()
        if not value:
            return False
        self.words.append(Word(value, category))
        return True

    def add_pattern(self, pattern: WordPattern) -> bool:
        """Add a pattern unless it is empty or already present."""
        if len(pattern) == 0 or pattern in self.patterns:
            return False
        self.patterns.append(pattern)
        return True

    # -------------------------------------------------------------------------
    # Defaults
    # -------------------------------------------------------------------------

    def set_default_words(self) -> None:
        """Populate the built-in word tables. No-op if any words exist."""
        if self.words:
            return
        for category, values in DEFAULT_WORDS.items():
            for value in values:
                self.words.append(Word(value, category))

    def set_default_patterns(self) -> None:
        """Add the built-in patterns that are not already present."""
        for pattern in default_patterns():
            self.add_pattern(pattern)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_from_element(self, element: Optional[ET.Element]) -> None:
        """
        Load settings, patterns and words from an XML element.

        Parameters
        ----------
        element : xml.etree.ElementTree.Element, optional
            The <meaningfulWords> element. None leaves the catalog in its
            default state.
        """
        if element is None:
            self._ensure_defaults()
            return

        self._apply_settings(element.attrib)

        patterns_element = element.find('patterns')
        if patterns_element is not None:
            values = [p.get('value') for p in patterns_element if p.tag == 'pattern']
            self._load_patterns(values)
        else:
            self.set_default_patterns()

        words_element = element.find('words')
        if words_element is not None:
            for category_element in words_element:
                category = WordCategory.from_name(str(category_element.tag))
                if category is None:
                    logger.warning("Ignoring unknown word category <%s>", category_element.tag)
                    continue
                for word_element in category_element:
                    if word_element.tag == 'word':
                        self.add_word(_element_text(word_element), category)

        self._ensure_defaults()
        logger.debug("Loaded catalog from <%s>: %r", element.tag, self)

    def load_from_string(self, text: Union[str, bytes]) -> None:
        """
        Load from an XML fragment. Unparseable text yields the default state.

        Bytes are decoded by the XML parser, so an encoding declaration or
        BOM in the document is honoured.
        """
        try:
            element = ET.fromstring(text)
        except (ET.ParseError, UnicodeDecodeError) as e:
            logger.warning("Could not parse word catalog XML, using defaults: %s", e)
            element = None
        self.load_from_element(element)

    def load_from_mapping(self, data: Optional[Dict[str, Any]]) -> None:
        """
        Load from a dict (typically parsed YAML).

        Keys mirror the XML attributes and sections: useNumbers, maxLength,
        minLength, patterns (list of strings) and words (category -> list).
        """
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Word catalog config must be a mapping, got %s",
                               type(data).__name__)
            self._ensure_defaults()
            return

        settings = {}
        for keys in _SETTING_KEYS:
            for key in keys:
                if key in data:
                    settings[keys[0]] = data[key]
                    break
        self._apply_settings(settings)

        patterns = data.get('patterns')
        if isinstance(patterns, list):
            self._load_patterns(patterns)
        else:
            self.set_default_patterns()

        words = data.get('words')
        if isinstance(words, dict):
            for category_name, values in words.items():
                category = WordCategory.from_name(str(category_name))
                if category is None:
                    logger.warning("Ignoring unknown word category '%s'", category_name)
                    continue
                if not isinstance(values, list):
                    continue
                for value in values:
                    if value is not None:
                        self.add_word(str(value), category)

        self._ensure_defaults()
        logger.debug("Loaded catalog from mapping: %r", self)

    def load_from_file(self, path: Union[str, Path]) -> None:
        """
        Load from an .xml, .yaml or .yml file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word catalog not found: {path}")

        # Raw bytes let the parsers honour BOMs and XML encoding declarations
        data = path.read_bytes()
        if path.suffix.lower() in ('.yaml', '.yml'):
            try:
                data = yaml.safe_load(data)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                logger.warning("Could not parse %s, using defaults: %s", path, e)
                data = None
            self.load_from_mapping(data)
        else:
            self.load_from_string(data)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _apply_settings(self, attrs: Dict[str, Any]) -> None:
        if 'useNumbers' in attrs:
            use_numbers = _parse_bool(attrs['useNumbers'])
            if use_numbers is None:
                logger.warning("Invalid useNumbers value %r, keeping %s",
                               attrs['useNumbers'], self.use_numbers)
            else:
                self.use_numbers = use_numbers

        if 'maxLength' in attrs:
            max_length = _parse_int(attrs['maxLength'])
            if max_length is None:
                logger.warning("Invalid maxLength value %r, keeping %d",
                               attrs['maxLength'], self.max_length)
            else:
                self.max_length = max(1, max_length)

        if 'minLength' in attrs:
            min_length = _parse_int(attrs['minLength'])
            if min_length is None:
                logger.warning("Invalid minLength value %r, keeping %d",
                               attrs['minLength'], self.min_length)
            else:
                self.min_length = max(1, min_length)

    def _load_patterns(self, values: Iterable[Any]) -> None:
        for value in values:
            if not isinstance(value, str) or not value.strip():
                continue
            self.add_pattern(WordPattern.parse(value))

        if not self.patterns:
            self.set_default_patterns()

    def _ensure_defaults(self) -> None:
        if not self.patterns:
            self.set_default_patterns()
        if not self.words:
            self.set_default_words()


__all__ = [
    'WordCatalog',
    'DEFAULT_USE_NUMBERS',
    'DEFAULT_MAX_LENGTH',
    'DEFAULT_MIN_LENGTH',
]
