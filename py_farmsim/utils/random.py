"""
Default random source management.

Model functions accept an explicit generator; when none is passed they
fall back to the module-level Alea PRNG kept here. Python's random and
NumPy's random are not used so that a seed reproduces the same farm.
"""

import uuid
from typing import Optional

import structlog

from ..core.alea_prng import AleaPRNG

logger = structlog.get_logger()

# Global PRNG instance
_prng: Optional[AleaPRNG] = None


def set_random_seed(seed: Optional[str]) -> AleaPRNG:
    """
    Reseed the default Alea PRNG.

    Args:
        seed: Seed string to use, or None to draw a fresh one

    Returns:
        The new default AleaPRNG instance
    """
    global _prng

    if seed is None:
        seed = str(uuid.uuid4())[:8]
    _prng = AleaPRNG(seed)
    logger.debug("Default PRNG seeded", seed=seed)
    return _prng


def get_prng() -> AleaPRNG:
    """
    Get the current default PRNG, seeding it on first use.

    The configured default_seed is used when present, otherwise an
    unpredictable seed so unseeded calls are not reproducible.
    """
    global _prng
    if _prng is None:
        from ..config import settings

        set_random_seed(settings.default_seed)
    return _prng


def prng_for(seed: Optional[str]) -> AleaPRNG:
    """Dedicated generator for a request seed, or the default one."""
    if seed is None:
        return get_prng()
    return AleaPRNG(seed)
