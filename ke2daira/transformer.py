"""Ke2daira-style name transformation.

The first mora of the first name and the first mora of the last name swap
places, so 松平 健 (マツダイラ ケン) becomes ケツダイラ マン. Middle names stay
as they are and a single name is returned as its own reading.
"""

from typing import Callable, List, Optional, Union

from ke2daira.logger import logger
from ke2daira.nlp import get_reading_resolver
from ke2daira.nlp.base import (
    BaseReadingResolver,
    DegenerateSwapError,
    Ke2dairaError,
    UnresolvableComponentError,
)
from ke2daira.nlp.japanese.characters import is_katakana_string
from ke2daira.nlp.japanese.mora import katakana_to_mora

ReadingResolver = Union[BaseReadingResolver, Callable[[str], Optional[str]]]


def swap_names_head(names: List[str]) -> List[str]:
    """Swap the first mora of the first name with the first mora of the last name.

    *names* must already be Katakana. A new list is returned; names with
    fewer than two components are returned unchanged.

    Raises:
        DegenerateSwapError: If the first or last name has no mora
    """
    names = list(names)
    # nothing to swap with mononyms
    if len(names) < 2:
        return names

    first_morae = katakana_to_mora(names[0])
    last_morae = katakana_to_mora(names[-1])
    if not first_morae or not last_morae:
        raise DegenerateSwapError(names, "first and last names need at least one mora")

    logger.debug(f"Morae: {first_morae} / {last_morae}")
    first_morae[0], last_morae[0] = last_morae[0], first_morae[0]

    names[0] = "".join(first_morae)
    names[-1] = "".join(last_morae)
    return names


class NameTransformer:
    """Turns a whitespace-separated Japanese name into its ke2daira pun."""

    def __init__(self, resolver: Optional[ReadingResolver] = None):
        """*resolver* maps a word to its Katakana reading or None; Janome by default."""
        self._resolver = resolver

    @property
    def resolver(self) -> ReadingResolver:
        if self._resolver is None:
            self._resolver = get_reading_resolver('janome')
        return self._resolver

    def to_katakana_reading(self, word: str) -> str:
        """Return the Katakana reading of *word*, which is *word* itself if already Katakana.

        Raises:
            UnresolvableComponentError: If the resolver has no reading for *word*
        """
        if is_katakana_string(word):
            return word

        reading = self.resolver(word)
        if reading is None:
            raise UnresolvableComponentError(word)
        return reading

    def readings(self, raw_name: str) -> List[str]:
        """Split *raw_name* on whitespace and resolve every component, all or nothing."""
        return [self.to_katakana_reading(name) for name in raw_name.split()]

    def transform(self, raw_name: str) -> Optional[str]:
        """Return the ke2daira form of *raw_name*, or None if it cannot be built.

        An empty or whitespace-only name yields the empty string.
        """
        try:
            names = self.readings(raw_name)
            logger.debug(f"Readings of '{raw_name}': {names}")
            swapped = swap_names_head(names)
        except Ke2dairaError as e:
            logger.info(f"Cannot transform '{raw_name}': {e}")
            return None

        return " ".join(swapped)

    __call__ = transform


_default_transformer: Optional[NameTransformer] = None


def ke2daira(raw_name: str) -> Optional[str]:
    """Transform *raw_name* with the default Janome-backed transformer.

    >>> ke2daira("ハリー ジェームズ ポッター")
    'ポリー ジェームズ ハッター'
    """
    global _default_transformer
    if _default_transformer is None:
        _default_transformer = NameTransformer()
    return _default_transformer.transform(raw_name)
