"""Japanese character classification."""

import re

# Katakana syllabary block, small kana included: ァ (U+30A1) to ヶ (U+30F6)
KATAKANA_FIRST = "ァ"
KATAKANA_LAST = "ヶ"
# Prolonged sound mark
LONG_VOWEL_MARK = "ー"

_KANA_ONLY_RE = re.compile(r"^[ぁ-んゔゕゖァ-ヴー]+$")


def is_katakana(char: str) -> bool:
    """Check if *char* is a Katakana character or the long-vowel mark."""
    if char.isascii():
        return False
    return KATAKANA_FIRST <= char <= KATAKANA_LAST or char == LONG_VOWEL_MARK


def is_katakana_string(text: str) -> bool:
    """Check if every character of *text* is Katakana.

    An empty string is Katakana since none of its characters violate it.
    """
    return all(is_katakana(c) for c in text)


def is_kana_only(text: str) -> bool:
    """Check if text contains only kana characters (hiragana or katakana)."""
    return bool(_KANA_ONLY_RE.match(text))
