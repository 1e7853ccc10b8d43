# tests/test_alignment.py
import pytest

from simscore.errors import ConfigurationError
from simscore.scoring.alignment import NeedlemanWunch, SmithWaterman
from simscore.scoring.costs import AffineGap, LinearGap, MatchMismatch
from simscore.scoring.gotoh import SmithWatermanGotoh
from .test_utils import print_test_name, print_test_result


class TestNeedlemanWunch:
    """Alignement global à gap linéaire."""

    def test_kitten_sitting_with_defaults(self):
        test_name = "test_kitten_sitting_with_defaults"
        print_test_name(test_name)
        try:
            metric = NeedlemanWunch()
            # deux substitutions (-1) et une insertion (-2)
            assert metric.score("kitten", "sitting") == -4.0
            # bornes du score brut : [-8, -2]
            assert metric.compare("kitten", "sitting") == pytest.approx(4 / 6)
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_identity_and_empty(self):
        metric = NeedlemanWunch()
        assert metric.compare("abc", "abc") == 1.0
        assert metric.compare("", "") == 1.0
        assert metric.compare("", "abc") == 0.0
        assert metric.compare("abc", "") == 0.0

    def test_custom_cost_function(self):
        metric = NeedlemanWunch(substitution=MatchMismatch(1.0, -2.0), gap=LinearGap(-1.0))
        assert metric.score("ab", "ab") == 2.0
        assert metric.compare("ab", "ab") == 1.0
        assert 0.0 <= metric.compare("ab", "ba") < 1.0

    def test_gaps_forced_by_length_are_not_penalized(self):
        metric = NeedlemanWunch(MatchMismatch(1.0, -2.0), LinearGap(-0.5))
        # 3 correspondances + 4 gaps inévitables = meilleur score possible
        assert metric.score("abc", "xxabcxx") == 1.0
        assert metric.compare("abc", "xxabcxx") == 1.0
        assert metric.compare("abc", "xxaxcxx") < 1.0

    def test_repr_mentions_costs(self):
        assert repr(NeedlemanWunch()) == "NeedlemanWunch [MatchMismatch(0, -1), LinearGap(-2)]"


class TestLinearGapOnly:
    """Les alignements à gap linéaire refusent un gap affine."""

    @pytest.mark.parametrize("metric_class", [NeedlemanWunch, SmithWaterman])
    def test_affine_gap_is_rejected_at_construction(self, metric_class):
        test_name = "test_affine_gap_is_rejected_at_construction"
        print_test_name(test_name)
        try:
            with pytest.raises(ConfigurationError):
                metric_class(gap=AffineGap(open_cost=-5.0, extend_cost=-1.0))
            assert metric_class(gap=LinearGap(-1.0)).compare("abc", "abc") == 1.0
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e


class TestSmithWaterman:
    """Alignement local à gap linéaire."""

    def test_local_alignment_finds_substring(self):
        test_name = "test_local_alignment_finds_substring"
        print_test_name(test_name)
        try:
            metric = SmithWaterman()
            assert metric.score("abc", "xabcx") == 3.0
            assert metric.compare("abc", "xabcx") == 1.0
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_no_common_character(self):
        assert SmithWaterman().compare("abc", "xyz") == 0.0

    def test_empty(self):
        metric = SmithWaterman()
        assert metric.compare("", "") == 1.0
        assert metric.compare("", "abc") == 0.0

    def test_gap_inside_alignment(self):
        metric = SmithWaterman(MatchMismatch(1.0, -2.0), LinearGap(-0.5))
        # abcd + gap de 4 (-2) + efgh
        assert metric.score("abcdefgh", "abcdWXYZefgh") == 6.0
        assert metric.compare("abcdefgh", "abcdWXYZefgh") == pytest.approx(6 / 8)

    def test_non_positive_best_score_gives_zero(self):
        metric = SmithWaterman(MatchMismatch(match=-1.0, mismatch=-2.0))
        assert metric.compare("abc", "abc") == 0.0

    @pytest.mark.parametrize("a, b", [
        ("kitten", "sitting"),
        ("abcdefgh", "abcdWXYZefgh"),
        ("GATTACA", "GCATGCU"),
        ("aaaa", "aaaaaaaa"),
    ])
    def test_equals_gotoh_when_open_equals_extend(self, a, b):
        substitution = MatchMismatch(1.0, -2.0)
        linear = SmithWaterman(substitution, LinearGap(-0.5))
        affine = SmithWatermanGotoh(substitution, AffineGap(open_cost=-0.5, extend_cost=-0.5))
        assert linear.score(a, b) == affine.score(a, b)
        assert linear.compare(a, b) == affine.compare(a, b)
