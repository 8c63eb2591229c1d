"""Japanese language processing module."""

from .characters import is_katakana, is_katakana_string, is_kana_only
from .mora import SUTEGANA, katakana_to_mora
from .phonetics import JapanesePhonetics
from .reading import JanomeReadingResolver

__all__ = [
    'is_katakana',
    'is_katakana_string',
    'is_kana_only',
    'SUTEGANA',
    'katakana_to_mora',
    'JapanesePhonetics',
    'JanomeReadingResolver',
]
