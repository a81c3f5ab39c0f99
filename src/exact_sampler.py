import logging
from typing import Optional

import numpy as np
from tqdm import trange

from normal_source import NormalSource, NumpyNormalSource
from validation import conditional_sd, validate_parameters

logger = logging.getLogger(__name__)


class ExactBivariateSampler:
    def __init__(
        self,
        n: int,
        rho: float,
        source: Optional[NormalSource] = None,
    ):
        """
        Independent draws from the bivariate normal with zero means,
        unit variances and correlation rho, using
        X ~ N(0, 1) and Y | X ~ N(rho X, 1 - rho^2).

        Args:
            n: number of samples
            rho: correlation between X and Y
            source: standard normal generator, a fresh NumpyNormalSource if None
        """
        self.n, self.rho = validate_parameters(n, rho)
        self.source = source if source is not None else NumpyNormalSource()
        self.sd = conditional_sd(self.rho)
        self.samples = np.empty((0, 2))

    def sample_one(self):
        x = self.source.standard_normal()
        y = self.rho * x + self.sd * self.source.standard_normal()
        return x, y

    def run(self, verbose: bool = False) -> np.ndarray:
        """
        Draws all n samples. Rows are i.i.d., so their order carries no meaning.
        """
        iterator = trange(self.n, desc="Exact sampling") if verbose else range(self.n)

        samples = np.empty((self.n, 2))
        for i in iterator:
            samples[i] = self.sample_one()

        self.samples = samples
        logger.debug("Drew %d exact samples with rho=%s", self.n, self.rho)
        return samples


def exact_sample(n: int, rho: float, source: Optional[NormalSource] = None) -> np.ndarray:
    return ExactBivariateSampler(n, rho, source=source).run()
