"""Katakana reading resolution using Janome."""

from typing import List, Optional

import jaconv
from janome.tokenizer import Tokenizer

from ke2daira import config
from ke2daira.logger import logger
from ke2daira.nlp.base import BaseReadingResolver
from .characters import is_kana_only, is_katakana_string

# Janome fills unknown fields with an asterisk
UNKNOWN_FIELD = "*"


class JanomeReadingResolver(BaseReadingResolver):
    """Reading resolver backed by the Janome morphological analyzer
    and its bundled IPADIC dictionary."""

    def __init__(self, user_dict: Optional[str] = None, user_dict_encoding: Optional[str] = None):
        """Initialize the resolver.

        The Janome tokenizer loads its dictionary lazily on first lookup.
        *user_dict* points to an optional IPADIC-format CSV with extra entries.
        """
        self.user_dict = config.USER_DICT if user_dict is None else user_dict
        self.user_dict_encoding = user_dict_encoding or config.USER_DICT_ENCODING
        self._tokenizer: Optional[Tokenizer] = None

    @property
    def tokenizer(self) -> Tokenizer:
        if self._tokenizer is None:
            if self.user_dict:
                logger.info(f"Loading Janome with user dictionary {self.user_dict}")
                self._tokenizer = Tokenizer(self.user_dict, udic_enc=self.user_dict_encoding)
            else:
                self._tokenizer = Tokenizer()
        return self._tokenizer

    def token_readings(self, word: str) -> List[str]:
        """Return the readings of the pronounceable tokens of *word*."""
        readings: List[str] = []

        for token in self.tokenizer.tokenize(word, wakati=False):
            # Symbols (記号) have no pronunciation of their own
            if token.part_of_speech.startswith("記号"):
                continue

            if token.reading != UNKNOWN_FIELD:
                readings.append(token.reading)
            elif is_kana_only(token.surface):
                # Kana missing from the dictionary still reads as written
                readings.append(jaconv.hira2kata(token.surface))
            else:
                logger.debug(f"No reading for token '{token.surface}' in '{word}'")

        return readings

    def reading_of(self, word: str) -> Optional[str]:
        reading = "".join(self.token_readings(word))

        if not reading:
            return None
        if not is_katakana_string(reading):
            logger.warning(f"Discarding non-Katakana reading '{reading}' for '{word}'")
            return None
        return reading
