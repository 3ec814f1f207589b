"""Tests for SampleRecord and SampleTable."""

import dataclasses

import numpy as np
import pytest

from dose_sweep.errors import SampleCapacityError
from dose_sweep.samples import SampleRecord, SampleTable


def test_record_is_immutable():
    record = SampleRecord(name="S1", ymin=0.0, ymax=1.0, ec50=1e-5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.ymax = 2.0


def test_table_preserves_order():
    table = SampleTable()
    for name in ["c", "a", "b"]:
        table.append(SampleRecord(name=name, ymin=0.0, ymax=1.0, ec50=1.0))
    assert table.names == ["c", "a", "b"]
    assert [r.name for r in table] == ["c", "a", "b"]
    assert table[0].name == "c"


def test_duplicate_names_allowed():
    table = SampleTable()
    table.append(SampleRecord(name="S", ymin=0.0, ymax=1.0, ec50=1.0))
    table.append(SampleRecord(name="S", ymin=0.0, ymax=2.0, ec50=1.0))
    assert len(table) == 2


def test_capacity_checked():
    table = SampleTable(capacity=2)
    table.append(SampleRecord(name="a", ymin=0.0, ymax=1.0, ec50=1.0))
    table.append(SampleRecord(name="b", ymin=0.0, ymax=1.0, ec50=1.0))
    with pytest.raises(SampleCapacityError, match="'c'"):
        table.append(SampleRecord(name="c", ymin=0.0, ymax=1.0, ec50=1.0))
    assert len(table) == 2


def test_default_capacity_is_32():
    assert SampleTable().capacity == 32


def test_as_arrays():
    table = SampleTable()
    table.append(SampleRecord(name="a", ymin=0.1, ymax=1.0, ec50=1e-5))
    table.append(SampleRecord(name="b", ymin=0.2, ymax=2.0, ec50=1e-4))
    ymin, ymax, ec50 = table.as_arrays()
    np.testing.assert_array_equal(ymin, [0.1, 0.2])
    np.testing.assert_array_equal(ymax, [1.0, 2.0])
    np.testing.assert_array_equal(ec50, [1e-5, 1e-4])
    assert ec50.dtype == np.float64


def test_as_arrays_empty():
    ymin, ymax, ec50 = SampleTable().as_arrays()
    assert ymin.shape == ymax.shape == ec50.shape == (0,)
