# Importing the rule modules fills the global registry
from . import (
    arithmetic,
    exponential,
    hyperbolic,
    nonholomorphic,
    scipy_special,
    trigonometric,
    util,
)
from .nonholomorphic import abs2

__all__ = [
    "abs2",
    "arithmetic",
    "exponential",
    "hyperbolic",
    "nonholomorphic",
    "scipy_special",
    "trigonometric",
    "util",
]
