"""Simplifieurs : normalisations chaîne -> chaîne appliquées avant comparaison."""
import re
from typing import Optional

from simscore.config import settings
from simscore.errors import ConfigurationError
from simscore.interfaces import Simplifier


class IdentitySimplifier:
    """Renvoie la chaîne inchangée."""

    def simplify(self, text: str) -> str:
        return text

    def __repr__(self) -> str:
        return "IdentitySimplifier"


class CaseSimplifier:
    """Passe la chaîne en minuscules (ou en majuscules si upper=True)."""

    def __init__(self, upper: bool = False):
        self.upper = upper

    def simplify(self, text: str) -> str:
        return text.upper() if self.upper else text.lower()

    def __repr__(self) -> str:
        return f"CaseSimplifier(upper={self.upper})"


class NonWordCharacterSimplifier:
    """Remplace chaque suite de caractères non alphanumériques par un espace."""

    _pattern = re.compile(r"[\W_]+")

    def simplify(self, text: str) -> str:
        return self._pattern.sub(" ", text).strip()

    def __repr__(self) -> str:
        return "NonWordCharacterSimplifier"


# Codes Soundex de A à Z ; '0' pour les voyelles, '' pour H et W (transparents)
_SOUNDEX_CODES = dict(zip(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    ["0", "1", "2", "3", "0", "1", "2", "", "0", "2", "2", "4", "5",
     "5", "0", "1", "2", "6", "2", "3", "0", "1", "", "2", "0", "2"],
))


class SoundexSimplifier:
    """
    Encodage Soundex américain.

    Seules les lettres A-Z sont gardées ; la première lettre est conservée,
    les suivantes sont codées, les codes identiques consécutifs fusionnés
    (H et W ne séparent pas deux codes, les voyelles si), puis le résultat
    est complété par des zéros jusqu'à `length`. Une chaîne sans lettre
    donne "".
    """

    def __init__(self, length: Optional[int] = None):
        self.length = settings.SOUNDEX_LENGTH if length is None else length
        if self.length < 1:
            raise ConfigurationError(f"length doit être >= 1 (reçu {self.length})")

    def simplify(self, text: str) -> str:
        letters = [c for c in text.upper() if c in _SOUNDEX_CODES]
        if not letters:
            return ""

        first = letters[0]
        encoded = [first]
        last = _SOUNDEX_CODES[first]
        for char in letters[1:]:
            code = _SOUNDEX_CODES[char]
            if code == "":
                continue
            if code != "0" and code != last:
                encoded.append(code)
            last = code
            if len(encoded) == self.length:
                break

        return "".join(encoded).ljust(self.length, "0")

    def __repr__(self) -> str:
        return f"SoundexSimplifier(length={self.length})"


class ChainSimplifier:
    """Applique plusieurs simplifieurs de gauche à droite."""

    def __init__(self, *simplifiers: Simplifier):
        self.simplifiers = tuple(simplifiers)

    def simplify(self, text: str) -> str:
        for simplifier in self.simplifiers:
            text = simplifier.simplify(text)
        return text

    def __repr__(self) -> str:
        return " -> ".join(repr(s) for s in self.simplifiers) or "IdentitySimplifier"
