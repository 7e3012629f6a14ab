"""
Forward propagation of perturbations through local derivatives.

Perturbations are stored as (dw/dz, dw̄/dz) but derivatives as
(df/du, df/dū), so the conjugate partial of a derivative has to be
conjugated again on its way into the conjugate row of the 2x2 Wirtinger
Jacobian:

    ⎛df/du  df/dū⎞ ⎛du/dz⎞
    ⎝df̄/du  df̄/dū⎠ ⎝dū/dz⎠

with df̄/du = conj(df/dū) and df̄/dū = conj(df/du). For holomorphic,
antiholomorphic and C->R values half of that matrix is empty and the
corresponding work is skipped.

The kind of the result follows from the kinds of the inputs:

    deriv \\ perturb  NonHolo  Holo     AntiHolo  CtoR
    NonHolo          NonHolo  NonHolo  NonHolo   NonHolo
    Holo             NonHolo  Holo     AntiHolo  NonHolo
    AntiHolo         NonHolo  AntiHolo Holo      NonHolo
    CtoR             CtoR     CtoR     CtoR      CtoR

Holomorphic values are plain, unwrapped numbers.
"""

from __future__ import annotations

from wirtinger_ad.errors import PropagationDefect
from wirtinger_ad.types.wirtinger import (
    ABSENT,
    AntiHolomorphic,
    CtoR,
    NonHolomorphic,
    Wirtinger,
    _materialize,
    conj,
    wirtconj,
    wirtprimal,
)


def apply(deriv, perturb):
    """
    Apply a derivative to a perturbation.

    A plain derivative (scalar, or anything supporting `*`) multiplies. A
    callable derivative is a linear operator applied directly, for when
    running an algorithm is cheaper than materializing its matrix.
    """
    if deriv is ABSENT or perturb is ABSENT:
        return ABSENT
    if callable(deriv):
        return deriv(perturb)
    return deriv * perturb


def _perturb_conj(perturb):
    # for a CtoR perturbation dw̄/dz is dw/dz itself
    if isinstance(perturb, CtoR):
        return perturb.primal
    return wirtconj(perturb)


def _nonholo_forwardprop(deriv, perturb) -> NonHolomorphic:
    d_primal, d_conj = wirtprimal(deriv), wirtconj(deriv)
    p_primal, p_conj = wirtprimal(perturb), _perturb_conj(perturb)

    primal = apply(d_primal, p_primal) + apply(d_conj, p_conj)
    conjugate = apply(conj(d_conj), p_primal) + apply(conj(d_primal), p_conj)
    return NonHolomorphic(_materialize(primal), _materialize(conjugate))


def _ctor_forwardprop(deriv: CtoR, perturb) -> CtoR:
    d_primal = deriv.primal
    p_primal, p_conj = wirtprimal(perturb), _perturb_conj(perturb)
    return CtoR(_materialize(apply(d_primal, p_primal) + apply(conj(d_primal), p_conj)))


_KINDS = (NonHolomorphic, AntiHolomorphic, CtoR)


def _require_known(value, what: str) -> None:
    if isinstance(value, Wirtinger) and not isinstance(value, _KINDS):
        raise PropagationDefect(f"Unknown {what} kind {type(value).__name__}")


def _require_unwrapped(value, what: str) -> None:
    if isinstance(value, Wirtinger):
        raise PropagationDefect(
            f"Expected a holomorphic (unwrapped) {what}, got {value!r}"
        )


def forwardprop(deriv, perturb):
    """
    Propagate a perturbation from an earlier step through a local derivative.

    Returns the perturbation of the output, of the kind given by the table in
    the module docstring.
    """
    _require_known(deriv, "derivative")
    _require_known(perturb, "perturbation")

    # holomorphic fast path
    if not isinstance(deriv, Wirtinger) and not isinstance(perturb, Wirtinger):
        return apply(deriv, perturb)

    if isinstance(deriv, NonHolomorphic):
        return _nonholo_forwardprop(deriv, perturb)

    if isinstance(deriv, CtoR):
        return _ctor_forwardprop(deriv, perturb)

    if isinstance(deriv, AntiHolomorphic):
        if isinstance(perturb, AntiHolomorphic):
            # two conjugations cancel: the result is holomorphic
            return apply(deriv.conjugate, perturb.conjugate)
        if isinstance(perturb, (NonHolomorphic, CtoR)):
            return _nonholo_forwardprop(deriv, perturb)
        _require_unwrapped(perturb, "perturbation")
        return AntiHolomorphic(apply(conj(deriv.conjugate), perturb))

    # plain derivative, wrapped perturbation
    _require_unwrapped(deriv, "derivative")
    if isinstance(perturb, AntiHolomorphic):
        return AntiHolomorphic(apply(conj(deriv), perturb.conjugate))
    if isinstance(perturb, (NonHolomorphic, CtoR)):
        return _nonholo_forwardprop(deriv, perturb)
    raise PropagationDefect(
        f"No propagation rule for {type(deriv).__name__} and {type(perturb).__name__}"
    )
