"""Katakana mora segmentation."""

from typing import List

# Small kana that merge with the preceding character into one mora.
# ッ is deliberately absent: the geminate mark is a mora on its own.
SUTEGANA = frozenset("ァィゥェォャュョヮ")


def katakana_to_mora(kana: str) -> List[str]:
    """Convert a Katakana string to a list of morae.

    A small kana is merged with the mora before it (``チョ``); a small kana
    at the very start of the string has nothing to merge with and becomes a
    mora of its own. The long-vowel mark ``ー`` always stands alone.

    >>> katakana_to_mora("チョコレート")
    ['チョ', 'コ', 'レ', 'ー', 'ト']
    """
    morae: List[str] = []
    for char in kana:
        if char in SUTEGANA and morae:
            morae[-1] += char
        else:
            morae.append(char)
    return morae
