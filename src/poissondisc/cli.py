# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib
import numpy as np

from .config.loader import load_config
from .config.schema import SamplerConfig
from .errors import PoissonDiscError
from .utils.logging import configure_logging_from_cfg, logger
from .sampling.areas import disc_area, rect_area
from .sampling.poisson import poisson_disc_distribution
from .sampling.sources import numpy_source


def _dump_json(p: str, obj):
    pathlib.Path(p).parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def _overrides(args) -> dict:
    sampler = {}
    for key in ("width", "height", "min_distance", "max_attempts", "max_seed_attempts"):
        v = getattr(args, key)
        if v is not None:
            sampler[key] = v
    if args.start is not None:
        sampler["start"] = list(args.start)
    return {"sampler": sampler} if sampler else {}


def _area(conf: SamplerConfig, shape: str):
    if shape == "disc":
        radius = 0.5 * min(conf.width, conf.height)
        return disc_area(conf.width, conf.height, (0.5 * conf.width, 0.5 * conf.height), radius)
    return rect_area(conf.width, conf.height)


def cmd_sample(args):
    try:
        cfg = load_config(args.config, _overrides(args))
        conf = SamplerConfig.model_validate(cfg["sampler"])
    except (ValueError, TypeError, FileNotFoundError) as e:  # pydantic ValidationError is a ValueError
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2
    configure_logging_from_cfg(cfg)
    log = logger.getChild("cli")

    rng = np.random.default_rng(args.seed)
    points = []
    try:
        n = poisson_disc_distribution(conf, numpy_source(rng), _area(conf, args.shape), points.append)
    except PoissonDiscError as e:
        log.error("sampling failed: %s", e)
        return 1
    log.info("sampled %d points", n, extra={"extra": {"count": n}})

    xy = [[p.x, p.y] for p in points]
    _dump_json(args.out, xy)
    if args.print:
        print(json.dumps({"count": n, "points": xy}, ensure_ascii=False))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="poissondisc")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("sample", help="Generate a Poisson-disc point set")
    ps.add_argument("--config", default=None, help="YAML config with 'sampler'/'logging' sections")
    ps.add_argument("--width", type=float, default=None)
    ps.add_argument("--height", type=float, default=None)
    ps.add_argument("--min-distance", dest="min_distance", type=float, default=None)
    ps.add_argument("--max-attempts", dest="max_attempts", type=int, default=None)
    ps.add_argument("--max-seed-attempts", dest="max_seed_attempts", type=int, default=None)
    ps.add_argument("--start", type=float, nargs=2, metavar=("X", "Y"), default=None)
    ps.add_argument("--seed", type=int, default=None, help="RNG seed")
    ps.add_argument("--shape", choices=("rect", "disc"), default="rect")
    ps.add_argument("--out", default="out/points.json")
    ps.add_argument("--print", action="store_true", help="print JSON result to stdout")
    ps.set_defaults(func=cmd_sample)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
