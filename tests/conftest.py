"""
Pytest configuration for dose_sweep tests.
"""
import sys
import os
import pytest

# Add src directory to Python path so tests can import dose_sweep modules
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
sys.path.insert(0, src_path)


HEADER = "name\tymin\tymax\tEC50\n"


# ==============================================================================
# Input Table Fixtures
# ==============================================================================

@pytest.fixture
def write_table(tmp_path):
    """
    Write an input table under tmp_path and return its path.

    Usage in tests:
        def test_something(write_table):
            path = write_table("S1\\t0\\t1\\t1e-5\\n")
            path = write_table(b"raw bytes", header=False)
    """
    def _write(body="", header=True, name="params.txt"):
        path = tmp_path / name
        data = body.encode("latin-1") if isinstance(body, str) else body
        if header:
            data = HEADER.encode("latin-1") + data
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def single_sample_table():
    """Table with one sample: ymin=0, ymax=1, EC50=1e-5."""
    from dose_sweep.samples import SampleRecord, SampleTable
    table = SampleTable()
    table.append(SampleRecord(name="S1", ymin=0.0, ymax=1.0, ec50=0.00001))
    return table


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    from dose_sweep.config.settings import SweepSettings
    return SweepSettings()
