import logging
from typing import Optional, Protocol

import numpy as np

logger = logging.getLogger(__name__)


class NormalSource(Protocol):
    """Anything that can hand out one N(0, 1) variate at a time."""

    def standard_normal(self) -> float:
        ...


class NumpyNormalSource:
    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: seed for numpy's default generator, None for fresh entropy
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        logger.debug("Created normal source with seed %s", seed)

    def standard_normal(self) -> float:
        return float(self.rng.standard_normal())
