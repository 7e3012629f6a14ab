from . import ops
from .api import evaluate, partials, primitive, register_rule, seed, value
from .compose import compose
from .core.registry import registry
from .numerical import DerivativeConfig, WirtingerDifferentiator, check_rule, numerical_derivative
from .ops import abs2
from .propagate import apply, forwardprop

__all__ = [
    "DerivativeConfig",
    "WirtingerDifferentiator",
    "abs2",
    "apply",
    "check_rule",
    "compose",
    "evaluate",
    "forwardprop",
    "numerical_derivative",
    "ops",
    "partials",
    "primitive",
    "register_rule",
    "registry",
    "seed",
    "value",
]
