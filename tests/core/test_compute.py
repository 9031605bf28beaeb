"""
Tests for shared compute infrastructure: timing, precision, tolerances.
"""

import numpy as np
import pytest

from pymatrix.core.compute import Timer
from pymatrix.core.compute.precision import (
    EPSILON_64,
    is_close,
    machine_epsilon,
    singularity_threshold,
)
from pymatrix.core.compute.tolerances import (
    CPU_FP32,
    CPU_FP64,
    select_tolerance,
)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a'}
        assert result['a'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestPrecision:

    def test_machine_epsilon(self):
        assert machine_epsilon(np.float64) == EPSILON_64

    def test_is_close(self):
        assert is_close(1.0, 1.0 + 1e-15)
        assert not is_close(1.0, 1.1)

    def test_singularity_threshold_scales_with_size_and_magnitude(self):
        A = np.array([[4.0, 0.0], [0.0, 1.0]])
        assert singularity_threshold(A) == pytest.approx(2 * EPSILON_64 * 4.0)

    def test_singularity_threshold_empty(self):
        assert singularity_threshold(np.zeros((0, 0))) == 0.0


class TestTolerances:

    def test_select(self):
        assert select_tolerance('float64') is CPU_FP64
        assert select_tolerance('float32') is CPU_FP32
