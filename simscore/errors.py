"""Exceptions levées par simscore."""


class SimscoreError(Exception):
    """Erreur de base de la bibliothèque."""


class ConfigurationError(SimscoreError, ValueError):
    """Assemblage ou paramétrage invalide, détecté à la construction."""


class SizeMismatchError(SimscoreError, ValueError):
    """Deux tableaux comparés élément par élément n'ont pas la même taille."""
