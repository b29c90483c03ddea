"""Poly Secret — recover a polynomial's constant term from base-encoded shares."""

from .base import decode, encode
from .points import Share, Point, parse_record, build_points, select_first_k
from .interpolate import (
    Interpolator, NewtonInterpolator, GaussianInterpolator,
    BarycentricInterpolator, LagrangeInterpolator, Interpolation,
    METHODS, DEFAULT_METHODS, get_interpolator,
    newton_secret, gaussian_secret, barycentric_secret, lagrange_secret,
)
from .recovery import solve, recover_secret, cross_validate, load_record
from .recovery import Recovery, CrossValidation
from .report import format_recovery
from .errors import (
    ReconstructionError, InvalidBaseError, InvalidDigitError,
    MalformedRecordError, InsufficientPointsError, DuplicateAbscissaError,
    SingularSystemError, EvaluationAtNodeError, FloatOverflowError,
)

__all__ = [
    'decode', 'encode',
    'Share', 'Point', 'parse_record', 'build_points', 'select_first_k',
    'Interpolator', 'NewtonInterpolator', 'GaussianInterpolator',
    'BarycentricInterpolator', 'LagrangeInterpolator', 'Interpolation',
    'METHODS', 'DEFAULT_METHODS', 'get_interpolator',
    'newton_secret', 'gaussian_secret', 'barycentric_secret', 'lagrange_secret',
    'solve', 'recover_secret', 'cross_validate', 'load_record',
    'Recovery', 'CrossValidation', 'format_recovery',
    'ReconstructionError', 'InvalidBaseError', 'InvalidDigitError',
    'MalformedRecordError', 'InsufficientPointsError', 'DuplicateAbscissaError',
    'SingularSystemError', 'EvaluationAtNodeError', 'FloatOverflowError',
]
