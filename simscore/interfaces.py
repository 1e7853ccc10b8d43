from __future__ import annotations

from typing import Protocol, Sequence

from simscore.models import ScoreBounds


class StringMetric(Protocol):
    """
    Capacité commune à toutes les métriques sur chaînes.

    `compare` est totale (chaînes vides et longueurs différentes acceptées),
    déterministe, et son résultat est toujours dans `bounds`.
    """

    @property
    def bounds(self) -> ScoreBounds:
        ...

    def compare(self, a: str, b: str) -> float:
        ...


class TokenMetric(Protocol):
    """Métrique sur séquences de tokens (ensembles ou multi-ensembles)."""

    consumes_tokens: bool

    @property
    def bounds(self) -> ScoreBounds:
        ...

    def compare(self, a: Sequence[str], b: Sequence[str]) -> float:
        ...


class Simplifier(Protocol):
    """Normalisation chaîne -> chaîne, déterministe."""

    def simplify(self, text: str) -> str:
        ...


class Tokenizer(Protocol):
    """Découpage chaîne -> liste ordonnée de tokens (doublons conservés)."""

    def tokenize(self, text: str) -> list[str]:
        ...


class SubstitutionCost(Protocol):
    """
    Coût de substitution entre a[i] et b[j].

    Un indice hors de [0, len) renvoie 0.0 au lieu de lever une erreur.
    """

    @property
    def min_cost(self) -> float:
        ...

    @property
    def max_cost(self) -> float:
        ...

    def cost(self, a: str, i: int, b: str, j: int) -> float:
        ...


class GapCost(Protocol):
    """Pénalité (négative ou nulle) d'un gap de longueur donnée."""

    @property
    def min_cost(self) -> float:
        ...

    @property
    def max_cost(self) -> float:
        ...

    def cost(self, length: int) -> float:
        ...
