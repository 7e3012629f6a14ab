from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from wirtinger_ad.forward.compose import compose
from wirtinger_ad.forward.core.registry import RuleFunction, registry
from wirtinger_ad.types.dual import Dual


def _onehot(length: int, index: int) -> tuple[int, ...]:
    return tuple(int(i == index) for i in range(length))


def seed(*xs: Any) -> Dual | tuple[Dual, ...]:
    """
    Wrap inputs as duals to differentiate with respect to.

    `seed(x)` returns a single Dual with one perturbation slot holding the
    holomorphic unit. `seed(x1, ..., xn)` returns n duals whose perturbation
    tuples are one-hot: 1 in their own slot, 0 everywhere else.
    """
    if not xs:
        raise TypeError("seed() needs at least one value")
    for x in xs:
        if isinstance(x, Dual):
            raise TypeError("Cannot seed a value that is already a Dual")
    if len(xs) == 1:
        return Dual(xs[0], (1,))
    return tuple(Dual(x, _onehot(len(xs), i)) for i, x in enumerate(xs))


def value(x: Any) -> Any:
    """Return the primal value of a Dual; pass plain numbers through unchanged."""
    return x.value if isinstance(x, Dual) else x


def partials(d: Dual) -> tuple[Any, ...]:
    return d.partials


def register_rule(op: str | Callable, rule: RuleFunction) -> RuleFunction:
    """Register the derivative rule of `op` in the process-wide registry."""
    return registry.register(op, rule)


def primitive(func: Callable) -> Callable:
    """
    Make a numeric function dual-aware.

    Calls with at least one Dual argument are differentiated through the
    rule registered under the function's name; other calls run `func` as is.

        @primitive
        def holo(z):
            return z**2

        register_rule(holo, lambda z: (2 * z,))
    """

    @wraps(func)
    def wrapper(*args):
        if any(isinstance(a, Dual) for a in args):
            return compose(func, *args)
        return func(*args)

    return wrapper


def evaluate(f: Callable[..., Any], *xs: Any) -> Dual:
    """Seed `xs` and evaluate `f` on them."""
    seeded = seed(*xs)
    if isinstance(seeded, Dual):
        return f(seeded)
    return f(*seeded)
