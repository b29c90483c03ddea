"""
Interpolation methods — recover f(0) from k points.

Every method fits the unique degree-(k-1) polynomial through the points
and evaluates it at x = 0:

    newton       Newton divided differences
    gaussian     Vandermonde system, Gaussian elimination with partial pivoting
    barycentric  Second (true) barycentric form of Lagrange interpolation
    lagrange     Plain Lagrange basis evaluated at 0

By default arithmetic is exact (fractions.Fraction), so all methods agree
for coefficients of any size. With exact=False native floats are used,
which is only adequate for modest magnitudes.

Results are rounded half-up: floor(f(0) + 1/2).
"""

import logging
import math
from fractions import Fraction

from .points import Point
from .errors import (
    DuplicateAbscissaError,
    EvaluationAtNodeError,
    FloatOverflowError,
    InsufficientPointsError,
    SingularSystemError,
)

logger = logging.getLogger(__name__)

DEFAULT_METHODS = ('newton', 'gaussian', 'barycentric')


def round_half_up(value) -> int:
    """Nearest integer, halves rounded towards +infinity."""
    if isinstance(value, float) and not math.isfinite(value):
        raise FloatOverflowError(f"f(0) = {value}")
    half = Fraction(1, 2) if isinstance(value, Fraction) else 0.5
    return math.floor(value + half)


class Interpolation:
    """Outcome of one method run: raw f(0), rounded secret and working data."""

    def __init__(self, method: str, points: list, value, artifacts: dict = None):
        self.method = method
        self.points = list(points)
        self.value = value
        self.secret = round_half_up(value)
        self.artifacts = artifacts or {}

    def __repr__(self):
        return f"Interpolation(method={self.method!r}, secret={self.secret})"


class Interpolator:
    """
    Common interface for the interpolation methods.

    Subclasses implement _evaluate(points) returning (f(0), artifacts).
    """

    name = None

    def __init__(self, exact: bool = True):
        self.exact = exact

    def num(self, value):
        """Lift an int into the working number type."""
        return Fraction(value) if self.exact else float(value)

    def compute(self, points: list) -> Interpolation:
        points = [Point(*p) for p in points]
        if not points:
            raise InsufficientPointsError(0, 1)
        try:
            value, artifacts = self._evaluate(points)
        except OverflowError as exc:
            raise FloatOverflowError(str(exc))
        result = Interpolation(self.name, points, value, artifacts)
        logger.debug("%s: f(0) = %s -> %d", self.name, value, result.secret)
        return result

    def solve(self, points: list) -> int:
        """Return round(f(0)) for the polynomial through points."""
        return self.compute(points).secret

    def _evaluate(self, points: list):
        raise NotImplementedError


class NewtonInterpolator(Interpolator):
    """Newton's divided differences, evaluated at 0 Horner-style."""

    name = 'newton'

    def divided_differences(self, points: list) -> list:
        """
        Build the k x k divided-difference table.

        table[i][0] = y_i
        table[i][j] = (table[i+1][j-1] - table[i][j-1]) / (x_{i+j} - x_i)

        Only the upper-left triangle (i + j < k) is meaningful.
        """
        k = len(points)
        table = [[self.num(0)] * k for _ in range(k)]
        for i, point in enumerate(points):
            table[i][0] = self.num(point.y)

        for j in range(1, k):
            for i in range(k - j):
                dx = points[i + j].x - points[i].x
                if dx == 0:
                    raise DuplicateAbscissaError(points[i].x)
                table[i][j] = (table[i + 1][j - 1] - table[i][j - 1]) / dx

        return table

    def _evaluate(self, points):
        table = self.divided_differences(points)

        result = table[0][0]
        product = self.num(1)
        for i in range(1, len(points)):
            product *= (0 - points[i - 1].x)
            result += table[0][i] * product

        return result, {'table': table}


class GaussianInterpolator(Interpolator):
    """Solve the Vandermonde system for monomial coefficients; a0 is the secret."""

    name = 'gaussian'

    def _evaluate(self, points):
        k = len(points)
        matrix = [[self.num(p.x) ** j for j in range(k)] for p in points]
        rhs = [self.num(p.y) for p in points]
        original = [row[:] for row in matrix]

        coefficients = self.solve_system(matrix, rhs)
        return coefficients[0], {
            'matrix': original,
            'rhs': [self.num(p.y) for p in points],
            'coefficients': coefficients,
        }

    def solve_system(self, matrix: list, rhs: list) -> list:
        """
        Solve matrix * c = rhs in place by partial-pivoted elimination.

        Raises:
            SingularSystemError: If a pivot is exactly zero
        """
        k = len(matrix)

        # Forward elimination
        for i in range(k):
            pivot = max(range(i, k), key=lambda r: abs(matrix[r][i]))
            if matrix[pivot][i] == 0:
                raise SingularSystemError(i)
            matrix[i], matrix[pivot] = matrix[pivot], matrix[i]
            rhs[i], rhs[pivot] = rhs[pivot], rhs[i]

            for row in range(i + 1, k):
                factor = matrix[row][i] / matrix[i][i]
                for j in range(i, k):
                    matrix[row][j] -= factor * matrix[i][j]
                rhs[row] -= factor * rhs[i]

        # Back substitution
        coefficients = [self.num(0)] * k
        for i in range(k - 1, -1, -1):
            acc = rhs[i]
            for j in range(i + 1, k):
                acc -= matrix[i][j] * coefficients[j]
            coefficients[i] = acc / matrix[i][i]

        return coefficients


class BarycentricInterpolator(Interpolator):
    """Second barycentric form evaluated at x = 0."""

    name = 'barycentric'

    def weights(self, points: list) -> list:
        """w_i = 1 / prod_{j != i} (x_i - x_j)"""
        weights = []
        for i, pi in enumerate(points):
            weight = self.num(1)
            for j, pj in enumerate(points):
                if i == j:
                    continue
                diff = pi.x - pj.x
                if diff == 0:
                    raise DuplicateAbscissaError(pi.x)
                weight /= diff
            weights.append(weight)
        return weights

    def _evaluate(self, points):
        weights = self.weights(points)

        numerator = self.num(0)
        denominator = self.num(0)
        for weight, point in zip(weights, points):
            if point.x == 0:
                raise EvaluationAtNodeError(point.x)
            term = weight / (0 - point.x)
            numerator += point.y * term
            denominator += term

        return numerator / denominator, {'weights': weights}


class LagrangeInterpolator(Interpolator):
    """f(0) = sum_i y_i * L_i(0) with L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)."""

    name = 'lagrange'

    def _evaluate(self, points):
        basis = []
        secret = self.num(0)
        for i, pi in enumerate(points):
            li = self.num(1)
            for j, pj in enumerate(points):
                if i == j:
                    continue
                diff = pi.x - pj.x
                if diff == 0:
                    raise DuplicateAbscissaError(pi.x)
                li *= self.num(0 - pj.x) / diff
            basis.append(li)
            secret += pi.y * li

        return secret, {'basis': basis}


METHODS = {
    cls.name: cls
    for cls in (NewtonInterpolator, GaussianInterpolator,
                BarycentricInterpolator, LagrangeInterpolator)
}


def get_interpolator(name: str, exact: bool = True) -> Interpolator:
    """Instantiate a method by name."""
    try:
        cls = METHODS[name]
    except KeyError:
        raise ValueError(
            f"Unknown method {name!r}, expected one of: {', '.join(sorted(METHODS))}"
        )
    return cls(exact=exact)


def newton_secret(points: list, exact: bool = True) -> int:
    return NewtonInterpolator(exact).solve(points)


def gaussian_secret(points: list, exact: bool = True) -> int:
    return GaussianInterpolator(exact).solve(points)


def barycentric_secret(points: list, exact: bool = True) -> int:
    return BarycentricInterpolator(exact).solve(points)


def lagrange_secret(points: list, exact: bool = True) -> int:
    return LagrangeInterpolator(exact).solve(points)
