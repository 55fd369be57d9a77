#!/usr/bin/env python3
"""
namekit - Meaningful Name Generator
===================================

Generates readable replacement identifiers ("ActiveUser42", "LoadBuffer")
for renaming tools that need new symbol names which look like ordinary
words instead of random characters.

Quick Start
-----------
    from namekit import create_generator

    gen = create_generator(seed="build-1234")
    taken = {"Value", "LoadData"}
    name = gen.generate_unique_name(taken)

    # Or with a custom word catalog
    gen = create_generator("words.xml", seed="build-1234")

Modules
-------
    namekit.words     - Word categories, patterns and default word tables
    namekit.catalog   - WordCatalog (XML/YAML loading, defaults)
    namekit.entropy   - Seeded random source
    namekit.generator - NameGenerator
    namekit.settings  - app.yaml settings and logging setup

CLI Usage
---------
    python -m namekit generate -n 10 --seed demo
    python -m namekit patterns --config words.xml
    python -m namekit words --category verb
"""

__version__ = "0.1.0"
__author__ = "namekit"

from pathlib import Path
from typing import Union

from .words import (
    WordCategory,
    Word,
    WordPattern,
    default_patterns,
)
from .catalog import WordCatalog
from .entropy import RandomSource, SeededRandom, digest_seed
from .generator import GenerationState, NameGenerator


def create_generator(config: Union[str, Path, WordCatalog, None] = None,
                     seed: Union[bytes, int, str, None] = None) -> NameGenerator:
    """
    Build a NameGenerator.

    Args:
        config: Path to an .xml/.yaml catalog, a WordCatalog, or None for defaults
        seed: Seed for the random source (None for a fresh random seed)

    Returns:
        Ready-to-use NameGenerator
    """
    if isinstance(config, WordCatalog):
        catalog = config
    elif config is None:
        catalog = WordCatalog.with_defaults()
    else:
        catalog = WordCatalog.from_file(config)

    return NameGenerator(catalog, SeededRandom(seed))


__all__ = [
    '__version__',
    'WordCategory',
    'Word',
    'WordPattern',
    'default_patterns',
    'WordCatalog',
    'RandomSource',
    'SeededRandom',
    'digest_seed',
    'GenerationState',
    'NameGenerator',
    'create_generator',
]
