"""Similarités de Jaro et Jaro-Winkler."""
from typing import Optional

from simscore.config import settings
from simscore.errors import ConfigurationError
from simscore.models import UNIT_BOUNDS, ScoreBounds


class Jaro:
    """
    Similarité de Jaro.

    Deux caractères correspondent s'ils sont égaux et distants d'au plus
    max(len(a), len(b)) // 2 - 1 positions. Avec m correspondances et t
    transpositions (moitié des correspondances hors d'ordre) :

        jaro = (m / len(a) + m / len(b) + (m - t) / m) / 3
    """

    bounds: ScoreBounds = UNIT_BOUNDS

    def compare(self, a: str, b: str) -> float:
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0

        len_a = len(a)
        len_b = len(b)
        window = max(max(len_a, len_b) // 2 - 1, 0)

        matched_a = [False] * len_a
        matched_b = [False] * len_b
        matches = 0
        for i, char in enumerate(a):
            start = max(0, i - window)
            end = min(len_b, i + window + 1)
            for j in range(start, end):
                if not matched_b[j] and b[j] == char:
                    matched_a[i] = True
                    matched_b[j] = True
                    matches += 1
                    break

        if matches == 0:
            return 0.0

        # Transpositions : caractères appariés lus dans l'ordre de chaque chaîne
        out_of_order = 0
        j = 0
        for i in range(len_a):
            if not matched_a[i]:
                continue
            while not matched_b[j]:
                j += 1
            if a[i] != b[j]:
                out_of_order += 1
            j += 1
        transpositions = out_of_order // 2

        score = (
            matches / len_a
            + matches / len_b
            + (matches - transpositions) / matches
        ) / 3.0
        return self.bounds.clamp(score)

    def __repr__(self) -> str:
        return "Jaro"


class JaroWinkler:
    """
    Jaro-Winkler : bonus pour un préfixe commun.

    Si jaro > boost_threshold :
        jaro + l * prefix_scale * (1 - jaro)
    où l est la longueur du préfixe commun, limitée à max_prefix_length.
    """

    bounds: ScoreBounds = UNIT_BOUNDS

    def __init__(
        self,
        boost_threshold: Optional[float] = None,
        prefix_scale: Optional[float] = None,
        max_prefix_length: Optional[int] = None,
    ):
        self.boost_threshold = (
            settings.JARO_WINKLER_THRESHOLD if boost_threshold is None else boost_threshold
        )
        self.prefix_scale = (
            settings.JARO_WINKLER_PREFIX_SCALE if prefix_scale is None else prefix_scale
        )
        self.max_prefix_length = (
            settings.JARO_WINKLER_MAX_PREFIX if max_prefix_length is None else max_prefix_length
        )

        if self.prefix_scale < 0 or self.max_prefix_length < 0:
            raise ConfigurationError("prefix_scale et max_prefix_length doivent être >= 0")
        if self.prefix_scale * self.max_prefix_length > 1.0:
            raise ConfigurationError(
                "prefix_scale * max_prefix_length ne doit pas dépasser 1 "
                f"(reçu {self.prefix_scale} * {self.max_prefix_length})"
            )
        self.jaro = Jaro()

    def common_prefix_length(self, a: str, b: str) -> int:
        """Longueur du préfixe commun, plafonnée à max_prefix_length."""
        limit = min(len(a), len(b), self.max_prefix_length)
        length = 0
        while length < limit and a[length] == b[length]:
            length += 1
        return length

    def compare(self, a: str, b: str) -> float:
        jaro_score = self.jaro.compare(a, b)
        if jaro_score <= self.boost_threshold:
            return jaro_score

        prefix = self.common_prefix_length(a, b)
        score = jaro_score + prefix * self.prefix_scale * (1.0 - jaro_score)
        return self.bounds.clamp(score)

    def __repr__(self) -> str:
        return (
            f"JaroWinkler [threshold={self.boost_threshold:g}, "
            f"scale={self.prefix_scale:g}, prefix={self.max_prefix_length}]"
        )
