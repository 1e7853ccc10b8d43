# tests/conftest.py
import pytest

from simscore import string_metrics
from simscore.scoring.alignment import NeedlemanWunch, SmithWaterman
from simscore.scoring.gotoh import SmithWatermanGotoh, SmithWatermanGotohWindowedAffine
from simscore.scoring.jaro import Jaro, JaroWinkler
from simscore.scoring.levenshtein import Levenshtein

# --- Paires de chaînes utilisées par les tests de propriétés ---

SAMPLE_PAIRS = [
    ("", ""),
    ("", "abc"),
    ("a", ""),
    ("a", "a"),
    ("a", "b"),
    ("kitten", "sitting"),
    ("MARTHA", "MARHTA"),
    ("DWAYNE", "DUANE"),
    ("DIXON", "DICKSONX"),
    ("aaaa", "aaaaaaaa"),
    ("abcdefgh", "hgfedcba"),
    ("Le Petit Resto", "le petit restaurant"),
    ("test string", "string test"),
    ("xyz", "xyzxyzxyz"),
    ("GATTACA", "GCATGCU"),
    ("  ", " "),
]

SYMMETRIC_STRING_METRICS = {
    "levenshtein": Levenshtein,
    "needleman_wunch": NeedlemanWunch,
    "smith_waterman": SmithWaterman,
    "smith_waterman_gotoh": SmithWatermanGotoh,
    "smith_waterman_gotoh_windowed_affine": lambda: SmithWatermanGotohWindowedAffine(window_size=3),
    "jaro": Jaro,
    "jaro_winkler": JaroWinkler,
}

FACADE_METRICS = {
    "block_distance": string_metrics.block_distance,
    "cosine_similarity": string_metrics.cosine_similarity,
    "dice_similarity": string_metrics.dice_similarity,
    "euclidean_distance": string_metrics.euclidean_distance,
    "jaccard_similarity": string_metrics.jaccard_similarity,
    "matching_coefficient": string_metrics.matching_coefficient,
    "overlap_coefficient": string_metrics.overlap_coefficient,
    "monge_elkan": string_metrics.monge_elkan,
    "q_grams_distance": string_metrics.q_grams_distance,
    "simon_white": string_metrics.simon_white,
    "soundex": string_metrics.soundex,
    **SYMMETRIC_STRING_METRICS,
}


@pytest.fixture(params=sorted(SYMMETRIC_STRING_METRICS))
def symmetric_metric(request):
    """Chaque métrique sur chaînes documentée comme symétrique."""
    return SYMMETRIC_STRING_METRICS[request.param]()


@pytest.fixture(params=sorted(FACADE_METRICS))
def any_metric(request):
    """Chaque métrique exposée par la façade."""
    return FACADE_METRICS[request.param]()


@pytest.fixture
def sample_pairs():
    return list(SAMPLE_PAIRS)
