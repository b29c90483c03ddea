"""
Poly Secret — Core logic.

Solve a share record end to end:

1. Parse the record (n, k and indexed shares)
2. Decode every share value from its base into a point (x, y)
3. Take the first k points
4. Run each interpolation method on those points and cross-check the results

The secret is the rounded value at x = 0 from the primary method. The
other methods are a consistency check: disagreement is reported, not raised.
"""

import json
import logging
from pathlib import Path

from . import points as point_set
from .interpolate import DEFAULT_METHODS, get_interpolator

logger = logging.getLogger(__name__)


class CrossValidation:
    """Results of several methods on the same points."""

    def __init__(self, results: list):
        self.results = list(results)

    @property
    def methods(self) -> list:
        return [r.method for r in self.results]

    @property
    def values(self) -> list:
        return [r.secret for r in self.results]

    @property
    def agree(self) -> bool:
        return len(set(self.values)) <= 1

    def get(self, method: str):
        for result in self.results:
            if result.method == method:
                return result
        raise KeyError(method)

    def to_dict(self) -> dict:
        return {
            'methods': self.methods,
            'values': self.values,
            'agree': self.agree,
        }


def cross_validate(points: list, methods=DEFAULT_METHODS, exact: bool = True) -> CrossValidation:
    """
    Run every named method on the same points and compare rounded results.

    Raises whatever the first failing method raises; a disagreement between
    methods is only logged.
    """
    if not methods:
        raise ValueError("At least one method is required")

    results = [get_interpolator(name, exact=exact).compute(points) for name in methods]
    validation = CrossValidation(results)

    if not validation.agree:
        logger.warning(
            "Methods disagree: %s",
            ', '.join(f"{m}={v}" for m, v in zip(validation.methods, validation.values)),
        )
    return validation


class Recovery:
    """A solved record: its points, the per-method results and the secret."""

    def __init__(self, n: int, k: int, points: list, selected: list,
                 validation: CrossValidation, primary: str, exact: bool = True,
                 shares: dict = None):
        self.n = n
        self.k = k
        self.shares = shares or {}
        self.points = points
        self.selected = selected
        self.validation = validation
        self.primary = primary
        self.exact = exact

    @property
    def degree(self) -> int:
        return self.k - 1

    @property
    def secret(self) -> int:
        return self.validation.get(self.primary).secret

    def to_dict(self) -> dict:
        return {
            'n': self.n,
            'k': self.k,
            'degree': self.degree,
            'arithmetic': 'exact' if self.exact else 'float',
            'points': [list(p) for p in self.points],
            'selected': [list(p) for p in self.selected],
            'primary': self.primary,
            'secret': self.secret,
            'validation': self.validation.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def solve(record: dict, methods=DEFAULT_METHODS, primary: str = 'newton',
          exact: bool = True) -> Recovery:
    """
    Recover the secret from a parsed JSON record.

    Args:
        record: {"keys": {"n": .., "k": ..}, "1": {"base": .., "value": ..}, ...}
        methods: Method names to run and cross-check
        primary: The method whose result is the secret (must be in methods)
        exact: Rational arithmetic if True, native floats otherwise

    Returns:
        Recovery

    Raises:
        ReconstructionError subclasses for bad input or degenerate points
        ValueError: If primary is not one of methods
    """
    methods = tuple(methods)
    if primary not in methods:
        raise ValueError(f"Primary method {primary!r} must be one of {list(methods)}")

    n, k, shares = point_set.parse_record(record)
    logger.info("n=%d, k=%d, polynomial degree %d", n, k, k - 1)

    points = point_set.build_points(shares, n)
    logger.info("Total points available: %d, using first %d", len(points), k)
    selected = point_set.select_first_k(points, k)

    validation = cross_validate(selected, methods=methods, exact=exact)
    recovery = Recovery(n, k, points, selected, validation, primary,
                        exact=exact, shares=shares)
    logger.info("Secret (%s): %d", primary, recovery.secret)
    return recovery


def recover_secret(record: dict, **kwargs) -> int:
    """Shortcut for solve(record, ...).secret"""
    return solve(record, **kwargs).secret


def load_record(path: str) -> dict:
    """Load one JSON record from a file."""
    return json.loads(Path(path).read_text())
