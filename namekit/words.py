#!/usr/bin/env python3
"""
Words and Patterns
==================
Categorized words and the patterns that combine them into names.

A pattern is an ordered sequence of word categories. "Adjective,Noun"
yields names like "ActiveUser", "Verb+Noun" yields "LoadBuffer".

Usage:
    from namekit.words import WordPattern, WordCategory

    pattern = WordPattern.parse("Adjective + Noun")
    pattern.display_name()   # "Adjective + Noun"
    pattern.to_string()      # "Adjective,Noun"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class WordCategory(Enum):
    """Grammatical category of a word."""
    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"

    @classmethod
    def from_name(cls, name: str) -> Optional['WordCategory']:
        """Look up a category by name, case-insensitive. Returns None if unknown."""
        if not name:
            return None
        key = name.strip().lower()
        for category in cls:
            if category.value.lower() == key:
                return category
        return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Word:
    """A word and its category."""
    value: str
    category: WordCategory


# Separators accepted between categories in a pattern string
_PATTERN_SEPARATORS = re.compile(r'[,+|;]')


@dataclass(frozen=True)
class WordPattern:
    """
    An ordered sequence of categories describing how a name is assembled.

    Two patterns are equal when their category sequences are equal. Patterns
    are immutable, so they can be shared between catalogs and used as keys.
    """
    categories: Tuple[WordCategory, ...] = ()

    @classmethod
    def of(cls, *categories: WordCategory) -> 'WordPattern':
        return cls(tuple(categories))

    @classmethod
    def parse(cls, text: str) -> 'WordPattern':
        """
        Parse a pattern string like "Adjective,Noun" or "Verb+Adverb+Noun".

        Separators are comma, plus, pipe and semicolon. Category names are
        case-insensitive and unknown tokens are dropped.
        """
        if not text or not text.strip():
            return cls()

        categories = []
        for part in _PATTERN_SEPARATORS.split(text):
            category = WordCategory.from_name(part)
            if category is not None:
                categories.append(category)
        return cls(tuple(categories))

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(self.categories)

    def to_string(self) -> str:
        """Serialized form, e.g. "Adjective,Noun"."""
        return ','.join(c.value for c in self.categories)

    def display_name(self) -> str:
        """Human-readable form, e.g. "Adjective + Noun"."""
        return ' + '.join(c.value for c in self.categories)

    def __str__(self) -> str:
        return self.to_string()


# =============================================================================
# Built-in Defaults
# =============================================================================
# Words read like the identifiers found in ordinary application code so that
# renamed symbols blend in.

DEFAULT_NOUNS: Tuple[str, ...] = (
    "Value", "Data", "Name", "Type", "Item", "User", "File", "Text", "List", "Object",
    "String", "Number", "Node", "Key", "Map", "Table", "Row", "Column", "Record", "Entry",
    "Count", "Index", "Size", "Length", "Buffer", "Stream", "State", "Status", "Result", "Error",
    "Exception", "Message", "Event", "Request", "Response", "Service", "Client", "Server", "Config", "Option",
    "Param", "Command", "Path", "Url", "Query", "Token", "Cache", "Session", "Log", "Time",
    "Date",
)

DEFAULT_VERBS: Tuple[str, ...] = (
    "Get", "Set", "Add", "Remove", "Update", "Create", "Delete", "Load", "Save", "Open",
    "Close", "Read", "Write", "Send", "Receive", "Start", "Stop", "Begin", "End", "Reset",
    "Clear", "Build", "Check", "Find", "Search", "Select", "Insert", "Replace", "Sort", "Filter",
    "Convert", "Format", "Parse", "Validate", "Calculate", "Compute", "Generate", "Render", "Draw", "Print",
    "Execute", "Run", "Call", "Apply", "Bind", "Attach", "Detach", "Connect", "Disconnect", "Deploy",
)

DEFAULT_ADJECTIVES: Tuple[str, ...] = (
    "Active", "Inactive", "Valid", "Invalid", "Enabled", "Disabled", "Visible", "Hidden", "Public", "Private",
    "Internal", "External", "Secure", "Unsafe", "Safe", "Busy", "Idle", "Empty", "Full", "Available",
    "Unavailable", "Online", "Offline", "Open", "Closed", "Max", "Min", "First", "Last", "Next",
    "Previous", "Current", "New", "Old", "Primary", "Secondary", "Main", "Alternate", "Temporary", "Permanent",
    "Successful", "Failed", "True", "False", "High", "Low", "Upper", "Lower", "Left", "Right",
)

DEFAULT_ADVERBS: Tuple[str, ...] = (
    "Automatically", "Manually", "Synchronously", "Asynchronously", "Concurrently",
    "Sequentially", "Simultaneously", "Independently", "Together", "Separately",
    "Globally", "Locally", "Internally", "Externally", "Directly",
    "Indirectly", "Dynamically", "Statically", "Explicitly", "Implicitly",
    "Continuously", "Periodically", "Occasionally", "Frequently", "Rarely",
    "Always", "Never", "Sometimes", "Usually", "Normally",
    "Temporarily", "Permanently", "Safely", "Unsafely", "Correctly",
    "Incorrectly", "Properly", "Improperly", "Efficiently", "Inefficiently",
    "Quickly", "Slowly", "Clearly", "Easily", "Hardly",
    "Approximately", "Exactly", "Partially", "Fully", "Completely",
)

DEFAULT_WORDS = {
    WordCategory.NOUN: DEFAULT_NOUNS,
    WordCategory.VERB: DEFAULT_VERBS,
    WordCategory.ADJECTIVE: DEFAULT_ADJECTIVES,
    WordCategory.ADVERB: DEFAULT_ADVERBS,
}


def default_patterns() -> List[WordPattern]:
    """Adjective+Noun, Verb+Noun, Noun+Verb, Noun+Noun."""
    return [
        WordPattern.of(WordCategory.ADJECTIVE, WordCategory.NOUN),
        WordPattern.of(WordCategory.VERB, WordCategory.NOUN),
        WordPattern.of(WordCategory.NOUN, WordCategory.VERB),
        WordPattern.of(WordCategory.NOUN, WordCategory.NOUN),
    ]


__all__ = [
    'WordCategory',
    'Word',
    'WordPattern',
    'DEFAULT_NOUNS',
    'DEFAULT_VERBS',
    'DEFAULT_ADJECTIVES',
    'DEFAULT_ADVERBS',
    'DEFAULT_WORDS',
    'default_patterns',
]
