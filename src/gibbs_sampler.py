import logging
import threading
from typing import Optional

import numpy as np
from tqdm import trange

from normal_source import NormalSource, NumpyNormalSource
from validation import conditional_sd, validate_parameters

logger = logging.getLogger(__name__)


class BivariateGibbsSampler:
    def __init__(
        self,
        n: int,
        rho: float,
        source: Optional[NormalSource] = None,
        burn_in: int = 0,
    ):
        """
        Args:
            n: number of recorded samples, the initial state included
            rho: correlation of the target bivariate normal
            source: standard normal generator, a fresh NumpyNormalSource if None
            burn_in: transitions run and thrown away before the first recorded sample
        """
        self.n, self.rho = validate_parameters(n, rho, burn_in)
        self.burn_in = burn_in
        self.source = source if source is not None else NumpyNormalSource()
        self.sd = conditional_sd(self.rho)

        self.samples = np.empty((0, 2))

    def sample_x(self, y: float) -> float:
        """
        Samples x ~ N(rho * y, 1 - rho^2) given the current y.
        """
        return self.rho * y + self.sd * self.source.standard_normal()

    def sample_y(self, x: float) -> float:
        """
        Samples y ~ N(rho * x, 1 - rho^2) given the x just drawn.
        """
        return self.rho * x + self.sd * self.source.standard_normal()

    def sweep(self, y: float):
        x = self.sample_x(y)
        return x, self.sample_y(x)

    def run(
        self,
        verbose: bool = False,
        stop_event: Optional[threading.Event] = None,
    ) -> np.ndarray:
        """
        Runs the chain from (0, 0) and records n states. The initial state
        is recorded as is, so the first rows are not yet stationary.

        Args:
            verbose: show a progress bar
            stop_event: when set, stop after the current iteration and
                return the states recorded so far. A stop during burn-in
                returns an empty (0, 2) array, since nothing was recorded yet.
        """
        def stopped() -> bool:
            return stop_event is not None and stop_event.is_set()

        x, y = 0.0, 0.0
        for _ in range(self.burn_in):
            if stopped():
                logger.warning("Gibbs sampling stopped during burn-in, no samples recorded")
                self.samples = np.empty((0, 2))
                return self.samples
            x, y = self.sweep(y)

        samples = np.empty((self.n, 2))
        samples[0] = (x, y)
        recorded = 1

        iterator = trange(1, self.n, desc="Gibbs sampling") if verbose else range(1, self.n)
        for i in iterator:
            if stopped():
                logger.warning("Gibbs sampling stopped early after %d of %d samples", recorded, self.n)
                break
            x, y = self.sweep(y)
            samples[i] = (x, y)
            recorded += 1

        self.samples = samples[:recorded]
        logger.debug("Recorded %d Gibbs samples with rho=%s, burn_in=%d", recorded, self.rho, self.burn_in)
        return self.samples


def gibbs_sample(n: int, rho: float, source: Optional[NormalSource] = None) -> np.ndarray:
    return BivariateGibbsSampler(n, rho, source=source).run()
