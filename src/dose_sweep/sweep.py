"""
Sweep Generator - Concentration Series and Response Model

Walks a decade-stepped concentration series and evaluates the saturation
binding model for every sample at every concentration.

Stepping rule:
- Start at min_conc with step = min_conc / steps_per_decade
- Whenever the current concentration reaches step * steps_per_decade,
  the step grows tenfold
- Stop, without emitting it, at the value equal to max_conc

All equality tests are absolute-difference comparisons against a fixed
precision, so accumulated rounding from repeated addition cannot skip a
decade boundary or the end of the sweep.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from .config import defaults
from .config.settings import SweepSettings
from .errors import SweepError
from .samples import SampleRecord, SampleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepPoint:
    """One swept concentration and the response of every sample there."""
    concentration: float
    responses: Tuple[float, ...]

    @property
    def log_conc(self) -> float:
        return math.log10(self.concentration)


def floats_equal(a: float, b: float, precision: float = defaults.DEFAULT_PRECISION) -> bool:
    return abs(a - b) < precision


def _check_bounds(min_conc: float, max_conc: float, steps_per_decade: int, precision: float) -> None:
    if min_conc <= 0:
        raise SweepError(f"min_conc must be positive, got {min_conc}")
    if max_conc <= min_conc:
        raise SweepError(f"max_conc ({max_conc}) must be greater than min_conc ({min_conc})")
    if steps_per_decade < 1:
        raise SweepError(f"steps_per_decade must be at least 1, got {steps_per_decade}")
    if not 0 < precision < min_conc / steps_per_decade:
        raise SweepError(
            f"precision ({precision}) must be positive and smaller than the initial step"
            f" ({min_conc / steps_per_decade})"
        )


def iter_concentrations(
    min_conc: float = defaults.DEFAULT_MIN_CONC,
    max_conc: float = defaults.DEFAULT_MAX_CONC,
    steps_per_decade: int = defaults.DEFAULT_STEPS_PER_DECADE,
    precision: float = defaults.DEFAULT_PRECISION,
) -> Iterator[float]:
    """
    Return an iterator over the swept concentrations.

    Bounds are validated immediately. A max_conc that the stepping passes
    without landing on raises SweepError once the sweep overshoots it.
    """
    _check_bounds(min_conc, max_conc, steps_per_decade, precision)

    def _walk() -> Iterator[float]:
        step = min_conc / steps_per_decade
        current = min_conc
        while not floats_equal(current, max_conc, precision):
            if current > max_conc:
                raise SweepError(
                    f"sweep passed max_conc ({max_conc}) at {current} without reaching it;"
                    " max_conc must lie on the decade step grid"
                )
            yield current
            if floats_equal(current, step * steps_per_decade, precision):
                step *= 10
            current += step

    return _walk()


def saturation_response(conc: float, record: SampleRecord) -> float:
    """
    Single-site saturation binding response of one sample.

    response = (ymax - ymin) * (conc / (EC50 + conc)) + ymin

    Returns NaN when EC50 + conc is zero.
    """
    denominator = record.ec50 + conc
    if denominator == 0:
        return math.nan
    return (record.ymax - record.ymin) * (conc / denominator) + record.ymin


def responses_at(conc: float, ymin: np.ndarray, ymax: np.ndarray, ec50: np.ndarray) -> np.ndarray:
    """Vectorised saturation_response() over parameter arrays."""
    denominator = ec50 + conc
    fraction = np.divide(
        conc, denominator,
        out=np.full_like(denominator, np.nan),
        where=denominator != 0,
    )
    return (ymax - ymin) * fraction + ymin


def iter_sweep(table: SampleTable, settings: Optional[SweepSettings] = None) -> Iterator[SweepPoint]:
    """
    Yield one SweepPoint per swept concentration, responses in table order.

    The table is not modified.
    """
    settings = settings or SweepSettings()
    concentrations = iter_concentrations(
        settings.min_conc, settings.max_conc, settings.steps_per_decade, settings.precision
    )
    ymin, ymax, ec50 = table.as_arrays()
    undefined_reported = np.zeros(len(table), dtype=bool)

    for conc in concentrations:
        responses = responses_at(conc, ymin, ymax, ec50)

        undefined = (ec50 + conc == 0) & ~undefined_reported
        for index in np.flatnonzero(undefined):
            logger.warning(
                f"Sample {table[index].name!r}: EC50 + concentration is zero at {conc};"
                " response is undefined (NaN)"
            )
        undefined_reported |= undefined

        yield SweepPoint(concentration=conc, responses=tuple(responses.tolist()))


def sweep_frame(table: SampleTable, settings: Optional[SweepSettings] = None) -> pd.DataFrame:
    """
    Return the full sweep as a DataFrame.

    Column ``conc`` holds log10(concentration); one further column per
    sample, named after it, holds that sample's responses.
    """
    rows = [[point.log_conc, *point.responses] for point in iter_sweep(table, settings)]
    columns = [defaults.CONC_COLUMN, *table.names]
    return pd.DataFrame(rows, columns=columns)
