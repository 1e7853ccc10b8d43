"""Tokenizers : découpage d'une chaîne en liste ordonnée de tokens."""
import re
from typing import List, Optional

from simscore.config import settings
from simscore.errors import ConfigurationError


class WhitespaceTokenizer:
    """Découpe sur les espaces, sans tokens vides."""

    _pattern = re.compile(r"\s+")

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self._pattern.split(text) if t]

    def __repr__(self) -> str:
        return "WhitespaceTokenizer"


class QGramTokenizer:
    """
    Découpe en q-grammes glissants.

    Args:
        q: Taille des q-grammes (>= 1)
        extended: Si True, la chaîne est entourée de q - 1 caractères de
            remplissage de chaque côté, pour que les bords comptent autant
            que le milieu.
        padding: Caractère de remplissage (par défaut settings.QGRAM_PADDING)

    Une chaîne vide donne []. Sans extension, une chaîne plus courte que q
    donne un seul token : la chaîne elle-même.
    """

    def __init__(self, q: int, extended: bool = False, padding: Optional[str] = None):
        if q < 1:
            raise ConfigurationError(f"q doit être >= 1 (reçu {q})")
        self.q = q
        self.extended = extended
        self.padding = settings.QGRAM_PADDING if padding is None else padding
        if len(self.padding) != 1:
            raise ConfigurationError("padding doit être un unique caractère")

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        if self.extended:
            fill = self.padding * (self.q - 1)
            text = fill + text + fill
        elif len(text) < self.q:
            return [text]
        return [text[i:i + self.q] for i in range(len(text) - self.q + 1)]

    def __repr__(self) -> str:
        kind = "extended" if self.extended else "plain"
        return f"QGramTokenizer(q={self.q}, {kind})"


class WordQGramTokenizer:
    """Découpe en mots puis chaque mot en q-grammes."""

    def __init__(self, qgrams: QGramTokenizer):
        self.words = WhitespaceTokenizer()
        self.qgrams = qgrams

    def tokenize(self, text: str) -> List[str]:
        tokens: List[str] = []
        for word in self.words.tokenize(text):
            tokens.extend(self.qgrams.tokenize(word))
        return tokens

    def __repr__(self) -> str:
        return f"WordQGramTokenizer({self.qgrams!r})"
