"""Minimal example: a Poisson-disc set over the default domain with a hole."""

import numpy as np

from poissondisc import load_config, poisson_disc_distribution, SamplerConfig
from poissondisc.logging_util import get_logger
from poissondisc.sampling import disc_area, numpy_source, rect_area, subtract


def main() -> None:
    cfg = load_config("configs/default.yaml")
    conf = SamplerConfig.model_validate(cfg["sampler"])
    log = get_logger("poissondisc.examples", cfg)

    hole = disc_area(conf.width, conf.height, (0.5 * conf.width, 0.5 * conf.height), 10.0)
    in_area = subtract(rect_area(conf.width, conf.height), hole)

    points = []
    n = poisson_disc_distribution(conf, numpy_source(np.random.default_rng(0)), in_area, points.append)
    log.info("accepted %d points", n)
    print("[minimal_sample] first points", points[:5])


if __name__ == "__main__":
    main()
