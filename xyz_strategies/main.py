"""CLI for checking a strategy submission before handing it in."""

import argparse
import importlib
import inspect
import sys

from .algorithms import Strategy
from .submission import OwnedStrategy
from .timing import DEFAULT_BUDGET_MS, DEFAULT_ROUNDS, TimingReport, profile_strategy


def _takes_no_arguments(fn) -> bool:
    try:
        inspect.signature(fn).bind()
    except TypeError:
        return False
    except ValueError:
        # no signature available, e.g. some builtins
        return True
    return True


def load_target(target: str):
    """Resolve ``package.module:attr`` to an OwnedStrategy or Strategy.

    ``attr`` may also be a zero-argument callable returning either, such as a
    ``provide_strategy`` factory.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid target '{target}'. Expected 'package.module:attribute'.")

    try:
        module = importlib.import_module(module_name)
    except ImportError:
        raise ValueError(f"Cannot import module '{module_name}'") from None
    try:
        obj = getattr(module, attr)
    except AttributeError:
        raise ValueError(f"Module '{module_name}' has no attribute '{attr}'") from None

    if callable(obj) and not isinstance(obj, Strategy):
        if not _takes_no_arguments(obj):
            raise ValueError(f"'{target}' must be a zero-argument factory")
        obj = obj()
    if not isinstance(obj, (OwnedStrategy, Strategy)):
        raise ValueError(f"'{target}' is neither a Strategy nor an OwnedStrategy: {obj!r}")
    return obj


def print_timing_report(report: TimingReport):
    """Print a per-operation timing summary."""
    print("=" * 72)
    print(f"  {report.strategy_name}")
    print(f"  Rounds: {report.rounds}  |  Budget: {report.budget_ms:.1f} ms per call")
    print("=" * 72)
    for timings in (report.play, report.handle):
        print(f"  {timings.operation:26s} mean {timings.mean_ms:>9.4f} ms  "
              f"max {timings.max_ms:>9.4f} ms  slow {timings.slow_calls(report.budget_ms):>4d}")
    if report.within_budget:
        print("  ✓ All calls within budget")
    else:
        print(f"  ✗ {report.slow_calls} call(s) over budget")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="xyz-strategies",
        description="Time every call of an X/Y/Z strategy submission against a budget",
    )
    parser.add_argument("target", help="Submission as 'package.module:attribute'")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                        help=f"Number of rounds (default: {DEFAULT_ROUNDS})")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument("--budget-ms", type=float, default=DEFAULT_BUDGET_MS,
                        help=f"Per-call budget in ms (default: {DEFAULT_BUDGET_MS:g})")
    args = parser.parse_args(argv)

    report = profile_strategy(load_target(args.target), rounds=args.rounds,
                              seed=args.seed, budget_ms=args.budget_ms)
    print_timing_report(report)
    return 0 if report.within_budget else 1


if __name__ == "__main__":
    sys.exit(main())
