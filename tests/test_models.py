# tests/test_models.py
import pytest
from pydantic import ValidationError

from simscore.models import UNIT_BOUNDS, ScoreBounds
from .test_utils import print_test_name, print_test_result


class TestScoreBounds:
    """Intervalle de score déclaré par les métriques."""

    def test_reversed_bounds_are_rejected(self):
        test_name = "test_reversed_bounds_are_rejected"
        print_test_name(test_name)
        try:
            with pytest.raises(ValidationError):
                ScoreBounds(lower=2.0, upper=1.0)
            assert ScoreBounds(lower=1.0, upper=1.0).contains(1.0)
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_contains_and_clamp(self):
        bounds = ScoreBounds(lower=-1.0, upper=2.0)
        assert bounds.contains(-1.0)
        assert bounds.contains(2.0)
        assert not bounds.contains(2.5)
        assert bounds.clamp(2.5) == 2.0
        assert bounds.clamp(-3.0) == -1.0
        assert bounds.clamp(0.5) == 0.5

    def test_bounds_are_frozen(self):
        with pytest.raises(ValidationError):
            UNIT_BOUNDS.upper = 2.0
