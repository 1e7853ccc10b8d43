"""
Alignements à gap linéaire : Needleman-Wunch (global) et Smith-Waterman (local).

Les deux algorithmes maximisent un score d'alignement : la fonction de
substitution récompense les correspondances et le gap est une pénalité <= 0.
Seul le score final normalisé est exposé, jamais le chemin d'alignement.
"""
from typing import List, Optional

from simscore.errors import ConfigurationError
from simscore.interfaces import GapCost, SubstitutionCost
from simscore.models import UNIT_BOUNDS, ScoreBounds
from simscore.scoring.costs import AffineGap, LinearGap, MatchMismatch


def _check_linear_gap(gap: GapCost, metric_name: str) -> GapCost:
    # La récurrence n'utilise que gap.cost(1) : un gap affine y perdrait son extension
    if isinstance(gap, AffineGap):
        raise ConfigurationError(
            f"{metric_name} n'accepte que des gaps linéaires (reçu {gap!r}), "
            "utiliser SmithWatermanGotoh pour un gap affine"
        )
    return gap


class NeedlemanWunch:
    """
    Alignement global, normalisé par les bornes déclarées de la fonction de coût.

    Le gap est linéaire : un AffineGap lève ConfigurationError.
    """

    bounds: ScoreBounds = UNIT_BOUNDS

    def __init__(
        self,
        substitution: Optional[SubstitutionCost] = None,
        gap: Optional[GapCost] = None,
    ):
        # Par défaut : Levenshtein pondéré (0 / -1, gap à -2)
        self.substitution = substitution or MatchMismatch(match=0.0, mismatch=-1.0)
        self.gap = _check_linear_gap(gap or LinearGap(-2.0), "NeedlemanWunch")

    def score(self, a: str, b: str) -> float:
        """Score brut d'alignement global (coin inférieur droit de la matrice)."""
        gap = self.gap.cost(1)
        len_a = len(a)
        len_b = len(b)
        d: List[List[float]] = [[0.0] * (len_b + 1) for _ in range(len_a + 1)]
        for i in range(1, len_a + 1):
            d[i][0] = i * gap
        for j in range(1, len_b + 1):
            d[0][j] = j * gap
        for i in range(1, len_a + 1):
            for j in range(1, len_b + 1):
                d[i][j] = max(
                    d[i - 1][j] + gap,
                    d[i][j - 1] + gap,
                    d[i - 1][j - 1] + self.substitution.cost(a, i - 1, b, j - 1),
                )
        return d[len_a][len_b]

    def _score_range(self, len_a: int, len_b: int) -> tuple:
        """Bornes [lo, hi] du score brut pour deux chaînes de ces longueurs."""
        gap = self.gap.cost(1)
        shortest = min(len_a, len_b)
        extra = max(len_a, len_b) - shortest
        all_gaps = (len_a + len_b) * gap
        hi = max(shortest * self.substitution.max_cost + extra * gap, all_gaps)
        lo = max(shortest * self.substitution.min_cost + extra * gap, all_gaps)
        return lo, hi

    def compare(self, a: str, b: str) -> float:
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0

        lo, hi = self._score_range(len(a), len(b))
        if hi == lo:
            return 1.0
        return self.bounds.clamp((self.score(a, b) - lo) / (hi - lo))

    def __repr__(self) -> str:
        return f"NeedlemanWunch [{self.substitution}, {self.gap}]"


class SmithWaterman:
    """
    Alignement local : chaque cellule est bornée à 0 et le score retenu est
    le maximum de la matrice.

    Normalisé par le meilleur score possible de la chaîne la plus courte,
    min(len(a), len(b)) * max_cost. Le gap est linéaire, comme pour
    NeedlemanWunch.
    """

    bounds: ScoreBounds = UNIT_BOUNDS

    def __init__(
        self,
        substitution: Optional[SubstitutionCost] = None,
        gap: Optional[GapCost] = None,
    ):
        self.substitution = substitution or MatchMismatch(match=1.0, mismatch=-2.0)
        self.gap = _check_linear_gap(gap or LinearGap(-0.5), "SmithWaterman")

    def score(self, a: str, b: str) -> float:
        """Meilleur score d'alignement local brut."""
        gap = self.gap.cost(1)
        len_a = len(a)
        len_b = len(b)
        d: List[List[float]] = [[0.0] * (len_b + 1) for _ in range(len_a + 1)]
        best = 0.0
        for i in range(1, len_a + 1):
            for j in range(1, len_b + 1):
                d[i][j] = max(
                    0.0,
                    d[i - 1][j] + gap,
                    d[i][j - 1] + gap,
                    d[i - 1][j - 1] + self.substitution.cost(a, i - 1, b, j - 1),
                )
                if d[i][j] > best:
                    best = d[i][j]
        return best

    def compare(self, a: str, b: str) -> float:
        if not a and not b:
            return 1.0
        max_value = min(len(a), len(b)) * self.substitution.max_cost
        if max_value <= 0:
            return 0.0
        return self.bounds.clamp(self.score(a, b) / max_value)

    def __repr__(self) -> str:
        return f"SmithWaterman [{self.substitution}, {self.gap}]"
