"""Japanese phonetic rendering utilities."""

import jaconv
import pykakasi


class JapanesePhonetics:
    """Renders a Katakana name in other phonetic scripts."""

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()

    @staticmethod
    def to_hiragana(kata: str) -> str:
        return jaconv.kata2hira(kata)

    def to_romaji(self, kata: str) -> str:
        """Convert *kata* to Hepburn romaji, keeping spaces between names.

        Each name is capitalised, e.g. "ケツダイラ マン" -> "Ketsudaira Man".
        """
        names = []
        for name in kata.split(" "):
            romaji = "".join(frag["hepburn"] for frag in self._kks.convert(name))
            names.append(romaji.capitalize())
        return " ".join(names)

    def render(self, kata: str, output: str = "katakana") -> str:
        """Render *kata* as 'katakana' (unchanged), 'hiragana' or 'romaji'."""
        if output == "katakana":
            return kata
        elif output == "hiragana":
            return self.to_hiragana(kata)
        elif output == "romaji":
            return self.to_romaji(kata)
        else:
            raise ValueError(f"Unsupported output script: {output}")
