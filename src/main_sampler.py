import argparse
import logging
import sys
from typing import List, Optional

from exact_sampler import ExactBivariateSampler
from gibbs_sampler import BivariateGibbsSampler
from sample_io import write_samples
from validation import InvalidParameter

logger = logging.getLogger(__name__)

## Command line entry points. Both take a sample count and a correlation
## and print one "x y" pair per line to stdout, e.g.
##     bivariate-gibbs 10000 0.98 > gibbs.dat
##     bivariate-exact 10000 0.98 > exact.dat

SAMPLERS = {
    "gibbs": BivariateGibbsSampler,
    "exact": ExactBivariateSampler,
}


def setup_logger() -> None:
    """Logs to stderr so stdout carries nothing but samples."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(name)-12s %(levelname)-8s %(message)s",
        level=logging.WARNING,
    )


def build_parser(kind: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"bivariate-{kind}",
        description=f"Draw {kind} samples from a standard bivariate normal with correlation rho",
    )
    parser.add_argument("n", type=int, help="number of samples")
    parser.add_argument("rho", type=float, help="correlation, strictly between -1 and 1")
    return parser


def run(kind: str, argv: Optional[List[str]] = None) -> int:
    setup_logger()
    args = build_parser(kind).parse_args(argv)

    try:
        sampler = SAMPLERS[kind](args.n, args.rho)
    except InvalidParameter as e:
        logger.error("%s", e)
        return 1

    write_samples(sampler.run(), sys.stdout)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run("gibbs", argv)


def main_exact(argv: Optional[List[str]] = None) -> int:
    return run("exact", argv)


if __name__ == "__main__":
    sys.exit(main())
