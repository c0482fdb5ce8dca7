"""
last_stander module: evolution/export.py

Offline inspection dumps. Failures here never stop a simulation.
"""

from __future__ import annotations
import logging
import os

from neural.brain import Brain

logger = logging.getLogger(__name__)


def export_dot(genotype: Brain, path: str | os.PathLike) -> bool:
    try:
        with open(path, "w") as f:
            f.write(genotype.to_dot())
    except OSError as e:
        logger.warning("Failed to write %s: %s", path, e)
        return False
    logger.debug("Wrote %s", path)
    return True
