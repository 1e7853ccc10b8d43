'''
Module de configuration pour le logger centralisé de la bibliothèque.

Ce module utilise Loguru pour fournir un logger pré-configuré avec une sortie
console (avec couleurs) et, si LOG_FILE est défini, un fichier rotatif.
'''

import sys
from loguru import logger

from simscore.config import settings

# ==============================================================================
# Configuration de Loguru
# ==============================================================================

# 1. Supprimer le handler par défaut pour éviter les doublons
logger.remove()

# 2. Définir les formats pour les logs
LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)

# 3. Handler console (stderr)
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format=LOG_FORMAT_CONSOLE,
    colorize=True,
    backtrace=True,
    diagnose=False
)

# 4. Handler fichier optionnel : la bibliothèque n'écrit rien sur disque par défaut.
if settings.LOG_FILE:
    logger.add(
        settings.LOG_FILE,
        level="DEBUG",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
    )

# Exemple d'utilisation :
# from simscore.logger import logger
# logger.debug("Métrique construite : {metric}", metric=metric)
