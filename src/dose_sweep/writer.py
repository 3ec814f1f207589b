"""
Output matrix writer.

The matrix is tab-separated: a header row of ``conc`` followed by the sample
names, then one row per swept concentration holding log10(concentration)
and each sample's response. Files are written to a temporary name in the
destination directory and renamed into place only once complete.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .config import defaults
from .config.settings import SweepSettings
from .errors import TableIOError
from .samples import SampleTable
from .sweep import SweepPoint, iter_sweep
from .tokenizer import ENCODING

logger = logging.getLogger(__name__)


def resolve_output_path(out_name: Optional[str] = None, settings: Optional[SweepSettings] = None) -> Path:
    """Append the .txt suffix to out_name, or use the default name."""
    settings = settings or SweepSettings()
    base = out_name if out_name is not None else settings.default_out_name
    return Path(base + defaults.OUT_SUFFIX)


def format_row(values: Iterable, float_format: str = defaults.DEFAULT_FLOAT_FORMAT) -> str:
    return "\t".join(float_format % value for value in values) + "\n"


def write_matrix(handle: TextIO, table: SampleTable, points: Iterable[SweepPoint],
                 float_format: str = defaults.DEFAULT_FLOAT_FORMAT) -> int:
    """
    Write the header and one row per SweepPoint to an open text stream.

    Returns:
        Number of concentration rows written
    """
    handle.write("\t".join([defaults.CONC_COLUMN, *table.names]) + "\n")
    rows = 0
    for point in points:
        handle.write(format_row((point.log_conc, *point.responses), float_format))
        rows += 1
    return rows


def write_output(path, table: SampleTable, settings: Optional[SweepSettings] = None) -> int:
    """
    Sweep the table and write the matrix to ``path`` atomically.

    On any failure the temporary file is removed and ``path`` is left
    untouched.

    Returns:
        Number of concentration rows written

    Raises:
        TableIOError: The output could not be written or moved into place
        SweepError: The configured bounds are invalid
    """
    settings = settings or SweepSettings()
    path = Path(path)
    tmp_name = None

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding=ENCODING, newline="\n") as handle:
            rows = write_matrix(handle, table, iter_sweep(table, settings), settings.float_format)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise TableIOError(f"could not write output file {path}: {exc}") from exc
    except Exception:
        _discard(tmp_name)
        raise

    logger.info(f"Wrote {rows} rows x {len(table)} samples to {path}")
    return rows


def _default_file_mode() -> int:
    # mkstemp creates 0600; published files get the mode open() would give them
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _discard(tmp_name: Optional[str]) -> None:
    if tmp_name is not None and os.path.exists(tmp_name):
        os.unlink(tmp_name)
