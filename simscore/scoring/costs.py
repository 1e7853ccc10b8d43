"""Fonctions de coût pour les algorithmes d'alignement."""
from simscore.errors import ConfigurationError


def _in_range(text: str, index: int) -> bool:
    return 0 <= index < len(text)


class MatchMismatch:
    """
    Coût de substitution à deux valeurs.

    Renvoie `match` si a[i] == b[j], `mismatch` sinon, et 0.0 si l'un des
    indices sort de la chaîne. Par défaut +1 / -2.
    """

    def __init__(self, match: float = 1.0, mismatch: float = -2.0):
        if match < mismatch:
            raise ConfigurationError(
                f"match ({match}) doit être >= mismatch ({mismatch})"
            )
        self.match = float(match)
        self.mismatch = float(mismatch)

    @property
    def min_cost(self) -> float:
        return self.mismatch

    @property
    def max_cost(self) -> float:
        return self.match

    def cost(self, a: str, i: int, b: str, j: int) -> float:
        if not _in_range(a, i) or not _in_range(b, j):
            return 0.0
        return self.match if a[i] == b[j] else self.mismatch

    def __repr__(self) -> str:
        return f"MatchMismatch({self.match:g}, {self.mismatch:g})"


# Groupes de caractères considérés comme proches (consonnes voisines, voyelles, ponctuation)
APPROXIMATE_GROUPS = ("dt", "gj", "lr", "mn", "bpv", "aeiou", ",.")


class ApproximateMatch:
    """
    Coût de substitution à trois niveaux.

    `exact` pour deux caractères identiques, `approximate` s'ils appartiennent
    au même groupe de APPROXIMATE_GROUPS (sans tenir compte de la casse),
    `mismatch` sinon.
    """

    def __init__(
        self,
        exact: float = 5.0,
        approximate: float = 3.0,
        mismatch: float = -3.0,
    ):
        if not exact >= approximate >= mismatch:
            raise ConfigurationError(
                "il faut exact >= approximate >= mismatch "
                f"(reçu {exact}, {approximate}, {mismatch})"
            )
        self.exact = float(exact)
        self.approximate = float(approximate)
        self.mismatch = float(mismatch)
        self._group_of = {
            char: index
            for index, group in enumerate(APPROXIMATE_GROUPS)
            for char in group
        }

    @property
    def min_cost(self) -> float:
        return self.mismatch

    @property
    def max_cost(self) -> float:
        return self.exact

    def cost(self, a: str, i: int, b: str, j: int) -> float:
        if not _in_range(a, i) or not _in_range(b, j):
            return 0.0
        x, y = a[i], b[j]
        if x == y:
            return self.exact
        group = self._group_of.get(x.lower())
        if group is not None and group == self._group_of.get(y.lower()):
            return self.approximate
        return self.mismatch

    def __repr__(self) -> str:
        return f"ApproximateMatch({self.exact:g}, {self.approximate:g}, {self.mismatch:g})"


class LinearGap:
    """Gap de coût constant par caractère : cost(k) = k * per_unit."""

    def __init__(self, per_unit: float = -0.5):
        if per_unit > 0:
            raise ConfigurationError(f"un coût de gap doit être <= 0 (reçu {per_unit})")
        self.per_unit = float(per_unit)

    @property
    def min_cost(self) -> float:
        return self.per_unit

    @property
    def max_cost(self) -> float:
        return self.per_unit

    def cost(self, length: int) -> float:
        if length <= 0:
            return 0.0
        return length * self.per_unit

    def __repr__(self) -> str:
        return f"LinearGap({self.per_unit:g})"


class AffineGap:
    """
    Gap affine : ouvrir coûte `open_cost`, chaque caractère suivant `extend_cost`.

    cost(k) = open_cost + (k - 1) * extend_cost
    """

    def __init__(self, open_cost: float = -5.0, extend_cost: float = -1.0):
        if open_cost > 0 or extend_cost > 0:
            raise ConfigurationError(
                f"les coûts de gap doivent être <= 0 (reçu {open_cost}, {extend_cost})"
            )
        self.open_cost = float(open_cost)
        self.extend_cost = float(extend_cost)

    @property
    def min_cost(self) -> float:
        return min(self.open_cost, self.extend_cost)

    @property
    def max_cost(self) -> float:
        return max(self.open_cost, self.extend_cost)

    def cost(self, length: int) -> float:
        if length <= 0:
            return 0.0
        return self.open_cost + (length - 1) * self.extend_cost

    def __repr__(self) -> str:
        return f"AffineGap({self.open_cost:g}, {self.extend_cost:g})"
