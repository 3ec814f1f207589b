"""
Sample parameter records and the bounded table that holds them.
"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .config import defaults
from .errors import SampleCapacityError


@dataclass(frozen=True)
class SampleRecord:
    """Fit parameters for one sample."""
    name: str
    ymin: float  # Lower response asymptote
    ymax: float  # Upper response asymptote
    ec50: float  # Concentration at half-maximal response


class SampleTable:
    """
    Ordered collection of SampleRecords with a checked capacity.

    Parse order is preserved and defines the output column order.
    """

    header = defaults.EXPECTED_HEADER

    def __init__(self, capacity: int = defaults.DEFAULT_MAX_SAMPLES):
        self.capacity = capacity
        self._records: List[SampleRecord] = []

    def append(self, record: SampleRecord) -> None:
        if len(self._records) >= self.capacity:
            raise SampleCapacityError(
                f"too many samples: at most {self.capacity} are supported"
                f" (rejected sample {record.name!r})"
            )
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SampleRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> SampleRecord:
        return self._records[index]

    @property
    def names(self) -> List[str]:
        return [r.name for r in self._records]

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (ymin, ymax, ec50) as float64 arrays in parse order."""
        ymin = np.array([r.ymin for r in self._records], dtype=np.float64)
        ymax = np.array([r.ymax for r in self._records], dtype=np.float64)
        ec50 = np.array([r.ec50 for r in self._records], dtype=np.float64)
        return ymin, ymax, ec50
