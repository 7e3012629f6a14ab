from . import config, errors, forward, types
from .config import ADConfig, configure, get_config
from .errors import (
    AmbiguousConjugateError,
    NonHolomorphicConversionError,
    PropagationDefect,
    RegistryFrozenError,
    RuleArityError,
    SeedMismatchError,
    UnregisteredPrimitiveError,
    WirtingerADError,
)
from .forward import (
    DerivativeConfig,
    WirtingerDifferentiator,
    abs2,
    check_rule,
    evaluate,
    forwardprop,
    numerical_derivative,
    partials,
    primitive,
    register_rule,
    registry,
    seed,
    value,
)
from .types import (
    AntiHolomorphic,
    CtoR,
    Dual,
    NonHolomorphic,
    Role,
    isclose,
    kind,
    total,
    wirtconj,
    wirtinger_pair,
    wirtprimal,
)

__all__ = [
    "ADConfig",
    "AmbiguousConjugateError",
    "AntiHolomorphic",
    "CtoR",
    "DerivativeConfig",
    "Dual",
    "NonHolomorphic",
    "NonHolomorphicConversionError",
    "PropagationDefect",
    "RegistryFrozenError",
    "Role",
    "RuleArityError",
    "SeedMismatchError",
    "UnregisteredPrimitiveError",
    "WirtingerADError",
    "WirtingerDifferentiator",
    "abs2",
    "check_rule",
    "config",
    "configure",
    "errors",
    "evaluate",
    "forward",
    "forwardprop",
    "get_config",
    "isclose",
    "kind",
    "numerical_derivative",
    "partials",
    "primitive",
    "register_rule",
    "registry",
    "seed",
    "total",
    "types",
    "value",
    "wirtconj",
    "wirtinger_pair",
    "wirtprimal",
]
