import numpy as np
import pytest

from poissondisc.sampling.sources import numpy_source, sequence_source


def test_numpy_source_range():
    src = numpy_source(np.random.default_rng(0))
    vals = np.array([src(3.0) for _ in range(1000)])
    assert np.all(vals >= 0.0) and np.all(vals < 3.0)
    assert isinstance(src(1.0), float)


def test_sequence_source_cycles():
    src = sequence_source([0.1, 0.5])
    assert [src(10.0) for _ in range(4)] == pytest.approx([1.0, 5.0, 1.0, 5.0])


@pytest.mark.parametrize("values", [[], [1.0], [-0.1, 0.2]])
def test_sequence_source_rejects_bad_values(values):
    with pytest.raises(ValueError):
        sequence_source(values)
