"""
Métriques sur tokens : recouvrement d'ensembles et de multi-ensembles.

Toutes renvoient une similarité dans [0, 1] : 1.0 pour deux séquences
vides, 0.0 si une seule est vide.
"""
import math
from collections import Counter
from typing import Optional, Sequence

from simscore.interfaces import StringMetric
from simscore.models import UNIT_BOUNDS, ScoreBounds
from simscore.scoring.gotoh import SmithWatermanGotoh


class _TokenMetric:
    """Gestion commune des séquences vides ; les sous-classes implémentent `_similarity`."""

    consumes_tokens = True
    bounds: ScoreBounds = UNIT_BOUNDS

    def compare(self, a: Sequence[str], b: Sequence[str]) -> float:
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0
        return self.bounds.clamp(self._similarity(a, b))

    def _similarity(self, a: Sequence[str], b: Sequence[str]) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return type(self).__name__


# -----------------------------------------------------------------
# Multi-ensembles (nombre d'occurrences par token)
# -----------------------------------------------------------------
class BlockDistance(_TokenMetric):
    """1 - distance L1 des occurrences / nombre total de tokens."""

    def _similarity(self, a, b):
        count_a, count_b = Counter(a), Counter(b)
        distance = sum(
            abs(count_a[token] - count_b[token]) for token in count_a.keys() | count_b.keys()
        )
        return 1.0 - distance / (len(a) + len(b))


class QGramsDistance(BlockDistance):
    """Distance par blocs appliquée à des q-grammes."""


class EuclideanDistance(_TokenMetric):
    """1 - distance L2 des occurrences / distance L2 de deux vecteurs disjoints."""

    def _similarity(self, a, b):
        count_a, count_b = Counter(a), Counter(b)
        distance = math.sqrt(sum(
            (count_a[token] - count_b[token]) ** 2 for token in count_a.keys() | count_b.keys()
        ))
        max_distance = math.sqrt(
            sum(v * v for v in count_a.values()) + sum(v * v for v in count_b.values())
        )
        return 1.0 - distance / max_distance


class CosineSimilarity(_TokenMetric):
    """Cosinus entre les vecteurs d'occurrences."""

    def _similarity(self, a, b):
        count_a, count_b = Counter(a), Counter(b)
        dot = sum(v * count_b[token] for token, v in count_a.items())
        norm_a = math.sqrt(sum(v * v for v in count_a.values()))
        norm_b = math.sqrt(sum(v * v for v in count_b.values()))
        return dot / (norm_a * norm_b)


class SimonWhite(_TokenMetric):
    """Dice sur multi-ensembles : 2 * somme des minima / nombre total de tokens."""

    def _similarity(self, a, b):
        common = sum((Counter(a) & Counter(b)).values())
        return 2.0 * common / (len(a) + len(b))


# -----------------------------------------------------------------
# Ensembles (doublons ignorés)
# -----------------------------------------------------------------
class DiceSimilarity(_TokenMetric):
    """2 |A ∩ B| / (|A| + |B|)."""

    def _similarity(self, a, b):
        set_a, set_b = set(a), set(b)
        return 2.0 * len(set_a & set_b) / (len(set_a) + len(set_b))


class JaccardSimilarity(_TokenMetric):
    """|A ∩ B| / |A ∪ B|."""

    def _similarity(self, a, b):
        set_a, set_b = set(a), set(b)
        return len(set_a & set_b) / len(set_a | set_b)


class OverlapCoefficient(_TokenMetric):
    """|A ∩ B| / min(|A|, |B|)."""

    def _similarity(self, a, b):
        set_a, set_b = set(a), set(b)
        return len(set_a & set_b) / min(len(set_a), len(set_b))


class MatchingCoefficient(_TokenMetric):
    """|A ∩ B| / max(|A|, |B|)."""

    def _similarity(self, a, b):
        set_a, set_b = set(a), set(b)
        return len(set_a & set_b) / max(len(set_a), len(set_b))


# -----------------------------------------------------------------
# Monge-Elkan
# -----------------------------------------------------------------
class MongeElkan:
    """
    Moyenne, sur les tokens de a, du meilleur score obtenu contre un token de b.

    Non symétrique. Les bornes sont celles de la métrique interne.
    """

    consumes_tokens = True

    def __init__(self, metric: Optional[StringMetric] = None):
        self.metric = metric or SmithWatermanGotoh()

    @property
    def bounds(self) -> ScoreBounds:
        return self.metric.bounds

    def compare(self, a: Sequence[str], b: Sequence[str]) -> float:
        if not a and not b:
            return self.bounds.upper
        if not a or not b:
            return self.bounds.lower
        total = 0.0
        for token_a in a:
            total += max(self.metric.compare(token_a, token_b) for token_b in b)
        return self.bounds.clamp(total / len(a))

    def __repr__(self) -> str:
        return f"MongeElkan [{self.metric}]"
