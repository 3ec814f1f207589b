"""dose_sweep - Saturation binding response sweeps from per-sample fit parameters."""

__version__ = "0.1.0"

from dose_sweep.errors import DoseSweepError, TableFormatError, SampleCapacityError
from dose_sweep.samples import SampleRecord, SampleTable
from dose_sweep.parser import parse_table, parse_table_file
from dose_sweep.sweep import SweepPoint, iter_concentrations, iter_sweep, saturation_response, sweep_frame
from dose_sweep.writer import write_output

__all__ = [
    "DoseSweepError",
    "TableFormatError",
    "SampleCapacityError",
    "SampleRecord",
    "SampleTable",
    "parse_table",
    "parse_table_file",
    "SweepPoint",
    "iter_concentrations",
    "iter_sweep",
    "saturation_response",
    "sweep_frame",
    "write_output",
]
