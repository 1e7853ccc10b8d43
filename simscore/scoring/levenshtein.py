"""Similarité de Levenshtein (distance d'édition normalisée)."""
from simscore.models import UNIT_BOUNDS, ScoreBounds


class Levenshtein:
    """Distance d'édition à coûts unitaires, convertie en similarité dans [0, 1]."""

    bounds: ScoreBounds = UNIT_BOUNDS

    def distance(self, a: str, b: str) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Args:
            a: Première chaîne
            b: Deuxième chaîne

        Returns:
            Nombre minimal d'insertions, suppressions et substitutions
        """
        len_a = len(a)
        len_b = len(b)
        d = [[0] * (len_b + 1) for _ in range(len_a + 1)]
        for i in range(len_a + 1):
            d[i][0] = i
        for j in range(len_b + 1):
            d[0][j] = j
        for i in range(1, len_a + 1):
            for j in range(1, len_b + 1):
                cost = 0 if a[i - 1] == b[j - 1] else 1
                d[i][j] = min(
                    d[i - 1][j] + 1,
                    d[i][j - 1] + 1,
                    d[i - 1][j - 1] + cost,
                )
        return d[len_a][len_b]

    def compare(self, a: str, b: str) -> float:
        """Renvoie 1 - distance / max(len(a), len(b)) ; deux chaînes vides valent 1.0."""
        max_len = max(len(a), len(b))
        if max_len == 0:
            return 1.0
        return self.bounds.clamp(1.0 - self.distance(a, b) / max_len)

    def __repr__(self) -> str:
        return "Levenshtein"
