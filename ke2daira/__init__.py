"""Ke2daira: swap the leading mora of a Japanese first and last name."""

__version__ = "0.1.0"

from .nlp.japanese.characters import is_katakana, is_katakana_string
from .nlp.japanese.mora import katakana_to_mora
from .transformer import NameTransformer, ke2daira, swap_names_head

__all__ = [
    '__version__',
    'is_katakana',
    'is_katakana_string',
    'katakana_to_mora',
    'NameTransformer',
    'ke2daira',
    'swap_names_head',
]
