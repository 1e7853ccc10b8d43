"""
Façade : métriques pré-assemblées et comparaisons par lots.

Chaque fonction renvoie une nouvelle métrique prête à l'emploi, avec le
tokenizer et le simplifieur documentés par défaut.
"""
from typing import List, Optional, Sequence

from simscore.composition import MetricBuilder
from simscore.config import settings
from simscore.errors import SizeMismatchError
from simscore.interfaces import StringMetric, Tokenizer
from simscore.logger import logger
from simscore.scoring.alignment import NeedlemanWunch, SmithWaterman
from simscore.scoring.gotoh import SmithWatermanGotoh, SmithWatermanGotohWindowedAffine
from simscore.scoring.jaro import Jaro, JaroWinkler
from simscore.scoring.levenshtein import Levenshtein
from simscore.scoring.token_metrics import (
    BlockDistance,
    CosineSimilarity,
    DiceSimilarity,
    EuclideanDistance,
    JaccardSimilarity,
    MatchingCoefficient,
    MongeElkan,
    OverlapCoefficient,
    QGramsDistance,
    SimonWhite,
)
from simscore.text.simplifiers import SoundexSimplifier
from simscore.text.tokenizers import QGramTokenizer, WhitespaceTokenizer, WordQGramTokenizer


# -----------------------------------------------------------------
# Comparaisons par lots
# -----------------------------------------------------------------
def compare(metric: StringMetric, fixed: str, candidates: Sequence[str]) -> List[float]:
    """Compare `fixed` à chaque candidat, dans l'ordre."""
    return [metric.compare(fixed, candidate) for candidate in candidates]


def compare_arrays(metric: StringMetric, a: Sequence[str], b: Sequence[str]) -> List[float]:
    """
    Compare a[n] à b[n] pour chaque n.

    Raises:
        SizeMismatchError: si a et b n'ont pas la même taille
    """
    if len(a) != len(b):
        logger.error("compare_arrays: tailles différentes ({} != {})", len(a), len(b))
        raise SizeMismatchError(f"les tableaux doivent avoir la même taille ({len(a)} != {len(b)})")
    return [metric.compare(x, y) for x, y in zip(a, b)]


# -----------------------------------------------------------------
# Métriques sur tokens
# -----------------------------------------------------------------
def _with_tokenizer(metric, tokenizer: Optional[Tokenizer]) -> StringMetric:
    return (
        MetricBuilder()
        .set_metric(metric)
        .set_tokenizer(tokenizer or WhitespaceTokenizer())
        .build()
    )


def block_distance(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(BlockDistance(), tokenizer)


def cosine_similarity(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(CosineSimilarity(), tokenizer)


def dice_similarity(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(DiceSimilarity(), tokenizer)


def euclidean_distance(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(EuclideanDistance(), tokenizer)


def jaccard_similarity(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(JaccardSimilarity(), tokenizer)


def matching_coefficient(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(MatchingCoefficient(), tokenizer)


def overlap_coefficient(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    return _with_tokenizer(OverlapCoefficient(), tokenizer)


def monge_elkan(tokenizer: Optional[Tokenizer] = None) -> StringMetric:
    """Monge-Elkan sur Smith-Waterman-Gotoh, mots séparés par des espaces."""
    return _with_tokenizer(MongeElkan(SmithWatermanGotoh()), tokenizer)


def q_grams_distance(tokenizer: Optional[QGramTokenizer] = None) -> StringMetric:
    """Distance par blocs sur des 3-grammes étendus par défaut."""
    return _with_tokenizer(QGramsDistance(), tokenizer or QGramTokenizer(3, extended=True))


def simon_white(tokenizer: Optional[QGramTokenizer] = None) -> StringMetric:
    """Simon White sur les bigrammes de chaque mot par défaut."""
    return _with_tokenizer(SimonWhite(), WordQGramTokenizer(tokenizer or QGramTokenizer(2)))


# -----------------------------------------------------------------
# Métriques sur chaînes
# -----------------------------------------------------------------
def jaro() -> StringMetric:
    return Jaro()


def jaro_winkler() -> StringMetric:
    return JaroWinkler()


def levenshtein() -> StringMetric:
    return Levenshtein()


def needleman_wunch() -> StringMetric:
    return NeedlemanWunch()


def smith_waterman() -> SmithWaterman:
    return SmithWaterman()


def smith_waterman_gotoh() -> SmithWatermanGotoh:
    return SmithWatermanGotoh()


def smith_waterman_gotoh_windowed_affine(
    window_size: Optional[int] = None,
) -> SmithWatermanGotohWindowedAffine:
    """Fenêtre explicite, ou settings.WINDOW_SIZE (100 par défaut)."""
    return SmithWatermanGotohWindowedAffine(
        window_size=settings.WINDOW_SIZE if window_size is None else window_size
    )


def soundex() -> StringMetric:
    """Jaro-Winkler sur les codes Soundex des deux chaînes."""
    return (
        MetricBuilder()
        .set_metric(JaroWinkler())
        .set_simplifier(SoundexSimplifier())
        .build()
    )
