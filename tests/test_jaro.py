# tests/test_jaro.py
import Levenshtein as lev
import pytest

from simscore.config import settings
from simscore.errors import ConfigurationError
from simscore.scoring.jaro import Jaro, JaroWinkler
from .test_utils import print_test_name, print_test_result

# Valeurs de référence (Winkler, 1990)
REFERENCE_PAIRS = [
    ("MARTHA", "MARHTA", 0.944, 0.961),
    ("DWAYNE", "DUANE", 0.822, 0.840),
    ("DIXON", "DICKSONX", 0.767, 0.813),
]


class TestJaro:
    """Similarité de Jaro."""

    @pytest.mark.parametrize("a, b, expected, _", REFERENCE_PAIRS)
    def test_reference_values(self, a, b, expected, _):
        test_name = "test_reference_values"
        print_test_name(test_name, Jaro())
        try:
            assert Jaro().compare(a, b) == pytest.approx(expected, abs=1e-3)
            assert Jaro().compare(a, b) == pytest.approx(lev.jaro(a, b))
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_no_matches(self):
        assert Jaro().compare("abc", "xyz") == 0.0

    def test_empty(self):
        assert Jaro().compare("", "") == 1.0
        assert Jaro().compare("", "a") == 0.0
        assert Jaro().compare("a", "") == 0.0

    def test_single_characters(self):
        assert Jaro().compare("a", "a") == 1.0
        assert Jaro().compare("a", "b") == 0.0

    def test_matches_outside_window_do_not_count(self):
        # fenêtre = 8 // 2 - 1 = 3 : le 'a' final est trop loin
        assert Jaro().compare("abcdefgh", "xxxxxxxa") == 0.0


class TestJaroWinkler:
    """Bonus de préfixe de Jaro-Winkler."""

    @pytest.mark.parametrize("a, b, _, expected", REFERENCE_PAIRS)
    def test_reference_values(self, a, b, _, expected):
        test_name = "test_reference_values"
        print_test_name(test_name, JaroWinkler())
        try:
            assert JaroWinkler().compare(a, b) == pytest.approx(expected, abs=1e-3)
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_defaults_come_from_settings(self):
        metric = JaroWinkler()
        assert metric.boost_threshold == settings.JARO_WINKLER_THRESHOLD
        assert metric.prefix_scale == settings.JARO_WINKLER_PREFIX_SCALE
        assert metric.max_prefix_length == settings.JARO_WINKLER_MAX_PREFIX

    def test_no_bonus_below_threshold(self):
        metric = JaroWinkler(boost_threshold=0.95)
        assert metric.compare("MARTHA", "MARHTA") == Jaro().compare("MARTHA", "MARHTA")

    def test_prefix_is_capped(self):
        metric = JaroWinkler()
        assert metric.common_prefix_length("abcdefg", "abcdefh") == 4
        assert JaroWinkler(max_prefix_length=2).common_prefix_length("abcdefg", "abcdefh") == 2
        assert metric.common_prefix_length("", "abc") == 0

    def test_prefix_bonus_is_symmetric(self):
        metric = JaroWinkler()
        assert metric.compare("MARTHA", "MARHTA") == metric.compare("MARHTA", "MARTHA")
        assert metric.compare("abcd", "abcdxyz") == metric.compare("abcdxyz", "abcd")

    def test_identity(self):
        assert JaroWinkler().compare("abcdef", "abcdef") == 1.0

    @pytest.mark.parametrize("kwargs", [
        {"prefix_scale": 0.3},
        {"prefix_scale": -0.1},
        {"max_prefix_length": -1},
        {"prefix_scale": 0.25, "max_prefix_length": 5},
    ])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ConfigurationError):
            JaroWinkler(**kwargs)
