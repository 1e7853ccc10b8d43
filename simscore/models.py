"""Modèles Pydantic partagés par les métriques."""
from pydantic import BaseModel, ConfigDict, model_validator


class ScoreBounds(BaseModel):  # pylint: disable=too-few-public-methods
    """Intervalle [lower, upper] déclaré par une métrique."""

    lower: float = 0.0
    upper: float = 1.0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> "ScoreBounds":
        if self.lower > self.upper:
            raise ValueError(f"lower ({self.lower}) > upper ({self.upper})")
        return self

    def contains(self, score: float) -> bool:
        """Vérifie qu'un score est dans l'intervalle."""
        return self.lower <= score <= self.upper

    def clamp(self, score: float) -> float:
        """Ramène un score dans l'intervalle (les erreurs d'arrondi ne sortent jamais)."""
        return max(self.lower, min(self.upper, score))


# Intervalle commun à toutes les similarités normalisées
UNIT_BOUNDS = ScoreBounds(lower=0.0, upper=1.0)
