import logging

import numpy as np

from planetgen.safe_parse import clamp_param, coerce_param, coerce_resolution


def test_coerce_param_accepts_real_numbers():
    assert coerce_param("sunlight", "1.5", 1.0) == 1.5
    assert coerce_param("sunlight", 2, 1.0) == 2.0
    assert coerce_param("sea_level", np.float32(0.25), 0.5) == 0.25
    assert coerce_param("sea_level", np.int64(1), 0.5) == 1.0
    assert coerce_param("axial_tilt", None, 23.5) == 23.5


def test_coerce_param_rejects_non_finite(caplog):
    with caplog.at_level(logging.WARNING, logger="planetgen.safe_parse"):
        assert coerce_param("sunlight", "nan", 2.5) == 2.5
        assert coerce_param("sunlight", float("inf"), 0.5) == 0.5
        assert coerce_param("sunlight", "bright", 1.0) == 1.0
        assert coerce_param("sunlight", True, 1.0) == 1.0
    assert len(caplog.records) == 4
    assert "sunlight" in caplog.records[0].getMessage()


def test_coerce_resolution():
    bounds = (0, 15)
    assert coerce_resolution(3, bounds) == 3
    assert coerce_resolution(np.int32(2), bounds) == 2
    assert coerce_resolution(np.float64(4.0), bounds) == 4
    assert coerce_resolution(" 1 ", bounds) == 1
    assert coerce_resolution(2.7, bounds) == 2
    assert coerce_resolution("-3", bounds) == 0
    assert coerce_resolution(99, bounds) == 15
    assert coerce_resolution("abc", bounds) == 0


def test_clamp_param_warns_only_when_moved(caplog):
    with caplog.at_level(logging.WARNING, logger="planetgen.safe_parse"):
        assert clamp_param("sea_level", 0.4, (0.0, 1.0)) == 0.4
        assert not caplog.records
        assert clamp_param("sea_level", 1.4, (0.0, 1.0)) == 1.0
        assert clamp_param("sea_level", -0.2, (0.0, 1.0)) == 0.0
    assert len(caplog.records) == 2
    assert "sea_level" in caplog.records[0].getMessage()
