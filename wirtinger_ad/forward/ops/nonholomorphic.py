"""
Rules for functions that are not complex-differentiable.

Their derivatives are wrapped to say which Wirtinger partials exist:
AntiHolomorphic when only d/dz̄ survives, CtoR for real-valued functions
(only d/dz is stored, d/dz̄ is its conjugate).
"""

import numpy as np

from wirtinger_ad.forward.api import primitive
from wirtinger_ad.forward.core.registry import registry
from wirtinger_ad.types.wirtinger import AntiHolomorphic, CtoR


@primitive
def abs2(z):
    """|z|^2 without the square root, i.e. conj(z) * z."""
    return np.real(z) ** 2 + np.imag(z) ** 2


@registry.register("conjugate", aliases=["conj"])
def _conjugate_rule(z):
    return (AntiHolomorphic(1),)


@registry.register("real")
def _real_rule(z):
    return (CtoR(0.5),)


@registry.register("imag")
def _imag_rule(z):
    return (CtoR(-0.5j),)


@registry.register(abs2)
def _abs2_rule(z):
    return (CtoR(np.conj(z)),)


@registry.register("absolute")
def _absolute_rule(z):
    return (CtoR(np.conj(z) / (2 * np.abs(z))),)
