import numpy as np
import pytest

from poissondisc.config.schema import SamplerConfig
from poissondisc.sampling.areas import rect_area
from poissondisc.sampling.poisson import PoissonDiscSampler
from poissondisc.sampling.sources import numpy_source


@pytest.fixture
def rng(): return np.random.default_rng(0)


@pytest.fixture
def demo_conf():
    return SamplerConfig(width=80.0, height=40.0, min_distance=4.0, max_attempts=30)


@pytest.fixture
def run_sampler():
    """Run one distribution; return ``(points, sampler)``."""
    def _fn(conf, seed=0, in_area=None, random=None):
        random = random or numpy_source(np.random.default_rng(seed))
        in_area = in_area or rect_area(conf.width, conf.height)
        sampler = PoissonDiscSampler(conf, random, in_area)
        out = []
        sampler.run(out.append)
        return out, sampler
    return _fn
