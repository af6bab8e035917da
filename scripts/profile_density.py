"""
Profile batched vs point-by-point density evaluation.

Times ``evaluate_density`` on a whole batch against a loop over single
points, and reports the cost of ``prepare_covariance`` for the same
dimensions. Run with ``python scripts/profile_density.py --verbose 2``
to see the per-call debug records.
"""

import argparse
import time

import numpy as np

from gaussmix import Component, evaluate_density, prepare_covariance
from gaussmix.utils import setup_logging, verbosity_to_level


def random_covariance(d, rng):
    A = rng.standard_normal((d, d))
    return A @ A.T / d + np.eye(d)


def time_call(fn, repeats=5):
    best = np.inf
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def run(dims, n_points):
    rng = np.random.default_rng(42)
    print("=" * 72)
    print(f"{'d':>4} | {'prepare (ms)':>12} | {'batch (ms)':>10} | "
          f"{'loop (ms)':>10} | {'speedup':>7}")
    print("-" * 72)

    for d in dims:
        comp = Component(1.0, rng.standard_normal(d), random_covariance(d, rng))
        X = rng.standard_normal((n_points, d))

        t_prep = time_call(lambda: prepare_covariance(comp, d))
        t_batch = time_call(lambda: evaluate_density(comp, d, X))
        t_loop = time_call(
            lambda: [evaluate_density(comp, d, X[i:i + 1]) for i in range(n_points)],
            repeats=1,
        )

        batch = evaluate_density(comp, d, X)
        loop = np.concatenate([evaluate_density(comp, d, X[i:i + 1]) for i in range(n_points)])
        assert np.allclose(batch, loop)

        print(f"{d:>4} | {t_prep * 1e3:>12.3f} | {t_batch * 1e3:>10.3f} | "
              f"{t_loop * 1e3:>10.3f} | {t_loop / t_batch:>6.1f}x")


def main():
    parser = argparse.ArgumentParser(description="Profile batched density evaluation")
    parser.add_argument("--dims", type=int, nargs="+", default=[1, 2, 5, 10, 50, 100],
                        help="Dimensions to profile (default: 1 2 5 10 50 100)")
    parser.add_argument("--n-points", type=int, default=2000,
                        help="Points per batch (default: 2000)")
    parser.add_argument("--verbose", type=int, default=0,
                        help="Verbosity level (default: 0)")
    args = parser.parse_args()

    setup_logging(verbosity_to_level(args.verbose))
    run(dims=args.dims, n_points=args.n_points)


if __name__ == "__main__":
    main()
