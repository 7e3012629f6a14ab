from __future__ import annotations

from collections.abc import Callable
from typing import Any

from wirtinger_ad.errors import RuleArityError, SeedMismatchError
from wirtinger_ad.forward.core.registry import op_name, registry
from wirtinger_ad.forward.propagate import forwardprop
from wirtinger_ad.types.dual import Dual
from wirtinger_ad.types.wirtinger import Role, add


def compose(func: Callable, *args: Any) -> Dual:
    """
    Evaluate a registered primitive on duals (mixed with plain numbers).

    The primal result is `func` applied to the primal values. For every seed
    slot the outgoing perturbation is the sum, over the dual operands, of the
    operand's perturbation pushed through the rule's local derivative.
    """
    name = op_name(func)
    rule = registry.lookup(name)

    values = tuple(a.value if isinstance(a, Dual) else a for a in args)
    duals = [(i, a) for i, a in enumerate(args) if isinstance(a, Dual)]
    if not duals:
        raise TypeError(f"compose('{name}') needs at least one Dual operand")

    nseeds = duals[0][1].nseeds
    for _, d in duals[1:]:
        if d.nseeds != nseeds:
            raise SeedMismatchError(
                f"Operands of '{name}' carry {nseeds} and {d.nseeds} seeds"
            )

    result = func(*values)
    derivs = rule(*values)
    if not isinstance(derivs, tuple) or len(derivs) != len(args):
        raise RuleArityError(
            f"Rule for '{name}' must return a tuple of {len(args)} derivative(s), "
            f"got {derivs!r}"
        )

    partials = []
    for slot in range(nseeds):
        total = None
        for i, d in duals:
            contribution = forwardprop(derivs[i], d.partials[slot])
            total = (
                contribution
                if total is None
                else add(total, contribution, role=Role.PERTURBATION)
            )
        partials.append(total)

    return Dual(result, tuple(partials))
