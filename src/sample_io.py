import logging
from typing import IO, Iterator, NamedTuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

COLUMNS = ["x", "y"]


class Sample(NamedTuple):
    x: float
    y: float


def _as_array(samples) -> np.ndarray:
    if isinstance(samples, pd.DataFrame):
        samples = samples[COLUMNS].to_numpy()
    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of samples, got shape {arr.shape}")
    return arr


def iter_samples(samples) -> Iterator[Sample]:
    for x, y in _as_array(samples):
        yield Sample(float(x), float(y))


def to_frame(samples) -> pd.DataFrame:
    """Returns the samples as a DataFrame with columns x, y indexed by position."""
    return pd.DataFrame(_as_array(samples), columns=COLUMNS)


def format_lines(samples) -> Iterator[str]:
    for x, y in _as_array(samples):
        yield f"{x:.3f} {y:.3f}\n"


def format_samples(samples) -> str:
    """
    Two-column text, one sample per line, three decimals, space separated.
    This is the format the analysis scripts read.
    """
    return "".join(format_lines(samples))


def write_samples(samples, stream: IO[str]) -> None:
    for line in format_lines(samples):
        stream.write(line)


def read_samples(path_or_buffer: Union[str, IO[str]]) -> np.ndarray:
    """
    Reads whitespace-delimited two-column text back into an (n, 2) array.

    Args:
        path_or_buffer: file path or open text stream
    """
    df = pd.read_csv(path_or_buffer, sep=r"\s+", header=None)

    if df.shape[1] != 2:
        raise ValueError(f"Expected 2 columns of samples, found {df.shape[1]}")
    try:
        arr = df.to_numpy(dtype=float)
    except ValueError as e:
        raise ValueError("Sample file contains non-numeric values") from e

    logger.debug("Read %d samples", arr.shape[0])
    return arr
