from abc import ABC, abstractmethod
from typing import List, Optional


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class Ke2dairaError(Exception):
    """Base class for every reason a name cannot be transformed."""


class UnresolvableComponentError(Ke2dairaError):
    """Raised when no Katakana reading can be produced for a name component."""
    def __init__(self, component: str):
        super().__init__(f"Could not phonetically convert '{component}' to Katakana")
        self.component = component


class DegenerateSwapError(Ke2dairaError):
    """Raised when the first or last name has no mora to swap."""
    def __init__(self, names: List[str], reason: str):
        super().__init__(f"Cannot swap heads of {names}: {reason}")
        self.names = list(names)
        self.reason = reason


class BaseReadingResolver(ABC):
    """Abstract capability turning a word into its Katakana reading"""

    @abstractmethod
    def reading_of(self, word: str) -> Optional[str]:
        """
        Return the Katakana reading of *word*, or None when no reading is available.

        Every character of a returned reading must satisfy ``is_katakana``.
        """
        pass

    def __call__(self, word: str) -> Optional[str]:
        return self.reading_of(word)
