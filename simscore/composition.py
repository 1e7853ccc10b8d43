"""
Composition des métriques : simplification -> (tokenisation) -> métrique.

Les composites ne dépendent que des capacités définies dans
simscore.interfaces, jamais d'une métrique concrète.
"""
from typing import List, Optional, Union

from simscore.errors import ConfigurationError
from simscore.interfaces import Simplifier, StringMetric, TokenMetric, Tokenizer
from simscore.logger import logger
from simscore.models import ScoreBounds
from simscore.text.simplifiers import ChainSimplifier, IdentitySimplifier


class CompositeMetric:
    """Simplifie les deux chaînes puis délègue à la métrique interne."""

    def __init__(self, metric: StringMetric, simplifier: Simplifier):
        self.metric = metric
        self.simplifier = simplifier

    @property
    def bounds(self) -> ScoreBounds:
        return self.metric.bounds

    def compare(self, a: str, b: str) -> float:
        return self.metric.compare(
            self.simplifier.simplify(a), self.simplifier.simplify(b)
        )

    def __repr__(self) -> str:
        return f"{self.metric} [{self.simplifier}]"


class CompositeTokenMetric:
    """Simplifie, découpe en tokens, puis compare les séquences de tokens."""

    def __init__(self, metric: TokenMetric, tokenizer: Tokenizer, simplifier: Simplifier):
        self.metric = metric
        self.tokenizer = tokenizer
        self.simplifier = simplifier

    @property
    def bounds(self) -> ScoreBounds:
        return self.metric.bounds

    def compare(self, a: str, b: str) -> float:
        tokens_a = self.tokenizer.tokenize(self.simplifier.simplify(a))
        tokens_b = self.tokenizer.tokenize(self.simplifier.simplify(b))
        return self.metric.compare(tokens_a, tokens_b)

    def __repr__(self) -> str:
        return f"{self.metric} [{self.simplifier} -> {self.tokenizer}]"


class MetricBuilder:
    """
    Assemble simplifieur(s), tokenizer et métrique en une seule métrique.

    Exemple :
        metric = (MetricBuilder()
                  .set_metric(CosineSimilarity())
                  .add_simplifier(CaseSimplifier())
                  .set_tokenizer(WhitespaceTokenizer())
                  .build())

    Le builder ne sert qu'une fois : un second `build()` lève ConfigurationError.
    """

    def __init__(self):
        self._metric: Optional[Union[StringMetric, TokenMetric]] = None
        self._simplifiers: List[Simplifier] = []
        self._tokenizer: Optional[Tokenizer] = None
        self._built = False

    def set_metric(self, metric: Union[StringMetric, TokenMetric]) -> "MetricBuilder":
        """Définit la métrique interne (obligatoire)."""
        self._metric = metric
        return self

    def set_simplifier(self, simplifier: Simplifier) -> "MetricBuilder":
        """Remplace les simplifieurs déjà ajoutés par celui-ci."""
        self._simplifiers = [simplifier]
        return self

    def add_simplifier(self, simplifier: Simplifier) -> "MetricBuilder":
        """Ajoute un simplifieur à la chaîne (appliqués dans l'ordre d'ajout)."""
        self._simplifiers.append(simplifier)
        return self

    def set_tokenizer(self, tokenizer: Tokenizer) -> "MetricBuilder":
        """Définit le tokenizer, requis par les métriques sur tokens."""
        self._tokenizer = tokenizer
        return self

    def _simplifier(self) -> Simplifier:
        if not self._simplifiers:
            return IdentitySimplifier()
        if len(self._simplifiers) == 1:
            return self._simplifiers[0]
        return ChainSimplifier(*self._simplifiers)

    def build(self) -> Union[CompositeMetric, CompositeTokenMetric]:
        """Valide l'assemblage et renvoie la métrique composée."""
        if self._built:
            raise ConfigurationError("ce builder a déjà été utilisé")
        if self._metric is None:
            raise ConfigurationError("aucune métrique définie : appeler set_metric() avant build()")

        consumes_tokens = getattr(self._metric, "consumes_tokens", False)
        if consumes_tokens and self._tokenizer is None:
            raise ConfigurationError(f"{self._metric} compare des tokens : un tokenizer est requis")
        if not consumes_tokens and self._tokenizer is not None:
            raise ConfigurationError(f"{self._metric} compare des chaînes : tokenizer inattendu")

        simplifier = self._simplifier()
        if consumes_tokens:
            composed = CompositeTokenMetric(self._metric, self._tokenizer, simplifier)
        else:
            composed = CompositeMetric(self._metric, simplifier)

        self._built = True
        logger.debug("Métrique assemblée : {metric}", metric=composed)
        return composed
