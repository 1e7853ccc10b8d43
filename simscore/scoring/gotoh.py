"""
Smith-Waterman-Gotoh : alignement local à gaps affines.

Trois états par cellule :
    H  meilleur score se terminant en (i, j)
    E  meilleur score se terminant par un gap le long de b (horizontal)
    F  meilleur score se terminant par un gap le long de a (vertical)

    E[i][j] = max(H[i][j-1] + open, E[i][j-1] + extend)
    F[i][j] = max(H[i-1][j] + open, F[i-1][j] + extend)
    H[i][j] = max(0, H[i-1][j-1] + sub(a, i-1, b, j-1), E[i][j], F[i][j])

Les matrices sont stockées par bande : la ligne i ne contient que les
colonnes j telles que |i - j| <= w, à l'indice k = j - i + w. La variante
fenêtrée utilise w = window_size, la variante complète w = max(n, m).
"""
from typing import Optional

from simscore.errors import ConfigurationError
from simscore.interfaces import SubstitutionCost
from simscore.models import UNIT_BOUNDS, ScoreBounds
from simscore.scoring.costs import AffineGap, ApproximateMatch

NEG_INF = float("-inf")


def local_affine_score(
    a: str,
    b: str,
    substitution: SubstitutionCost,
    gap: AffineGap,
    window: int,
) -> float:
    """
    Meilleur score local affine limité à la bande |i - j| <= window.

    Travail O(n * window), mémoire O(window). Les cellules hors bande sont
    inatteignables (-inf).
    """
    len_a = len(a)
    len_b = len(b)
    w = min(window, max(len_a, len_b))
    width = 2 * w + 1
    open_cost = gap.open_cost
    extend_cost = gap.extend_cost

    # Ligne 0 : H = 0 pour j dans [0, min(w, m)]
    prev_h = [NEG_INF] * width
    prev_f = [NEG_INF] * width
    for k in range(w, min(width, w + len_b + 1)):
        prev_h[k] = 0.0

    best = 0.0
    for i in range(1, len_a + 1):
        cur_h = [NEG_INF] * width
        cur_f = [NEG_INF] * width
        e = NEG_INF
        k_start = max(0, w - i)             # j >= 0
        k_stop = min(width, len_b - i + w + 1)  # j <= m
        for k in range(k_start, k_stop):
            j = i + k - w
            if j == 0:
                cur_h[k] = 0.0
                continue
            left_h = cur_h[k - 1] if k > 0 else NEG_INF
            e = max(left_h + open_cost, e + extend_cost)

            if k + 1 < width:
                f = max(prev_h[k + 1] + open_cost, prev_f[k + 1] + extend_cost)
            else:
                f = NEG_INF

            diag = prev_h[k] + substitution.cost(a, i - 1, b, j - 1)
            h = max(0.0, diag, e, f)
            cur_h[k] = h
            cur_f[k] = f
            if h > best:
                best = h
        prev_h = cur_h
        prev_f = cur_f
    return best


class SmithWatermanGotoh:
    """Alignement local à gaps affines sur la matrice complète."""

    bounds: ScoreBounds = UNIT_BOUNDS

    def __init__(
        self,
        substitution: Optional[SubstitutionCost] = None,
        gap: Optional[AffineGap] = None,
    ):
        if gap is not None and not isinstance(gap, AffineGap):
            raise ConfigurationError(
                f"{type(self).__name__} attend un AffineGap (reçu {gap!r})"
            )
        self.substitution = substitution or ApproximateMatch()
        self.gap = gap or AffineGap(open_cost=-5.0, extend_cost=-1.0)

    def _window(self, a: str, b: str) -> int:
        return max(len(a), len(b))

    def score(self, a: str, b: str) -> float:
        """Meilleur score d'alignement local brut."""
        return local_affine_score(a, b, self.substitution, self.gap, self._window(a, b))

    def compare(self, a: str, b: str) -> float:
        if not a and not b:
            return 1.0
        max_value = min(len(a), len(b)) * self.substitution.max_cost
        if max_value <= 0:
            return 0.0
        return self.bounds.clamp(self.score(a, b) / max_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__} [{self.substitution}, {self.gap}]"


class SmithWatermanGotohWindowedAffine(SmithWatermanGotoh):
    """
    Smith-Waterman-Gotoh restreint à une bande diagonale de demi-largeur
    `window_size`.

    `window_size` est obligatoire : il n'a pas de valeur par défaut car il
    change le score dès que les chaînes dépassent la fenêtre.
    """

    def __init__(
        self,
        window_size: int,
        substitution: Optional[SubstitutionCost] = None,
        gap: Optional[AffineGap] = None,
    ):
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
            raise ConfigurationError(
                f"window_size doit être un entier strictement positif (reçu {window_size!r})"
            )
        super().__init__(substitution=substitution, gap=gap)
        self.window_size = window_size

    def _window(self, a: str, b: str) -> int:
        return self.window_size

    def __repr__(self) -> str:
        return (
            f"SmithWatermanGotohWindowedAffine [{self.substitution}, "
            f"{self.gap}, window={self.window_size}]"
        )
