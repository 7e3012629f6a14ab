import numpy as np

from wirtinger_ad.forward.core.registry import registry


@registry.register("exp")
def _exp_rule(z):
    return (np.exp(z),)


@registry.register("expm1")
def _expm1_rule(z):
    return (np.exp(z),)


@registry.register("exp2")
def _exp2_rule(z):
    return (np.exp2(z) * np.log(2),)


@registry.register("log")
def _log_rule(z):
    return (1 / z,)


@registry.register("log2")
def _log2_rule(z):
    return (1 / (z * np.log(2)),)


@registry.register("log10")
def _log10_rule(z):
    return (1 / (z * np.log(10)),)


@registry.register("log1p")
def _log1p_rule(z):
    return (1 / (1 + z),)


@registry.register("sqrt")
def _sqrt_rule(z):
    return (0.5 / np.sqrt(z),)
