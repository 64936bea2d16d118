"""poissondisc top-level API.

External users can simply ``from poissondisc import poisson_disc_distribution``.
"""

from .config import SamplerConfig, load_config, load_sampler_config
from .errors import DomainEmptyError, OutOfDomainError, PoissonDiscError
from .sampling import PoissonDiscSampler, poisson_disc, poisson_disc_distribution
from .types import NO_POINT, Point

__all__ = [
    "Point",
    "NO_POINT",
    "SamplerConfig",
    "load_config",
    "load_sampler_config",
    "PoissonDiscSampler",
    "poisson_disc",
    "poisson_disc_distribution",
    "PoissonDiscError",
    "OutOfDomainError",
    "DomainEmptyError",
]
