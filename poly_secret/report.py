"""
Diagnostic report — render a solved Recovery as text.

Pure presentation: everything here reads the artifacts a Recovery already
holds and never changes the computed secret.
"""

from fractions import Fraction

RULE = '=' * 50


def fmt_number(value) -> str:
    """Integers as-is, anything else with six decimals."""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return str(value.numerator)
        try:
            return f"{float(value):.6f}"
        except OverflowError:
            return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6f}"


def _section(title: str) -> list:
    return ['', RULE, title, RULE]


def format_points(recovery) -> str:
    lines = []
    for x, y in recovery.points:
        share = recovery.shares.get(x)
        if share is not None:
            lines.append(f'Point {x}: base {share.base}, value "{share.value}" -> decimal {y}')
        else:
            lines.append(f'Point {x}: decimal {y}')
    return '\n'.join(lines)


def newton_polynomial(points: list, table: list) -> str:
    """P(x) = c0 + c1(x-x0) + c2(x-x0)(x-x1) + ..."""
    poly = f"P(x) = {fmt_number(table[0][0])}"
    for i in range(1, len(points)):
        factors = ''.join(f"(x-{points[j].x})" for j in range(i))
        poly += f" + {fmt_number(table[0][i])}{factors}"
    return poly


def format_newton(result) -> str:
    points = result.points
    table = result.artifacts['table']
    k = len(points)

    header = ["x_i", "f[x_i]"] + [f"f[x0..x{i + 1}]" for i in range(k - 1)]
    lines = ["Newton's Divided Difference Table:", "    ".join(header)]
    for i in range(k):
        row = [str(points[i].x)] + [fmt_number(table[i][j]) for j in range(k - i)]
        lines.append("    ".join(row))

    lines.append('')
    lines.append("Newton's Interpolating Polynomial:")
    lines.append(newton_polynomial(points, table))
    return '\n'.join(lines)


def format_gaussian(result) -> str:
    matrix = result.artifacts['matrix']
    rhs = result.artifacts['rhs']
    coefficients = result.artifacts['coefficients']

    lines = ["Vandermonde Matrix:"]
    for row, y in zip(matrix, rhs):
        lines.append(f"[{', '.join(fmt_number(v) for v in row)}] | {fmt_number(y)}")
    lines.append(
        "Polynomial coefficients (a0, a1, a2, ...): "
        + ', '.join(fmt_number(c) for c in coefficients)
    )
    return '\n'.join(lines)


def format_barycentric(result) -> str:
    weights = result.artifacts['weights']
    return "Barycentric weights: " + ', '.join(fmt_number(w) for w in weights)


def format_lagrange(result) -> str:
    basis = result.artifacts['basis']
    return "Lagrange basis at 0: " + ', '.join(fmt_number(b) for b in basis)


FORMATTERS = {
    'newton': ("NEWTON'S DIVIDED DIFFERENCES", format_newton),
    'gaussian': ("GAUSSIAN ELIMINATION", format_gaussian),
    'barycentric': ("BARYCENTRIC LAGRANGE", format_barycentric),
    'lagrange': ("LAGRANGE BASIS", format_lagrange),
}


def format_recovery(recovery) -> str:
    """Full multi-section report for a Recovery."""
    lines = [
        f"Number of roots (n): {recovery.n}",
        f"Minimum roots required (k): {recovery.k}",
        f"Polynomial degree: {recovery.degree}",
        f"Arithmetic: {'exact' if recovery.exact else 'float'}",
        '',
        format_points(recovery),
        '',
        f"Total points available: {len(recovery.points)}",
        f"Using first {recovery.k} points for interpolation",
        "Selected points: " + ', '.join(f"({x}, {y})" for x, y in recovery.selected),
    ]

    validation = recovery.validation
    for number, result in enumerate(validation.results, 1):
        title, formatter = FORMATTERS[result.method]
        lines += _section(f"METHOD {number}: {title}")
        lines.append(formatter(result))
        lines.append(f"Secret from {result.method}: {result.secret}")

    lines += _section("VERIFICATION")
    for result in validation.results:
        lines.append(f"{result.method} result: {result.secret}")
    lines.append(f"All methods agree: {'YES' if validation.agree else 'NO'}")

    lines += _section(f"FINAL ANSWER: The secret (constant term) is: {recovery.secret}")
    return '\n'.join(lines)
