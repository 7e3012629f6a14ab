import numpy as np

from wirtinger_ad.forward.core.registry import registry


@registry.register("sinh")
def _sinh_rule(z):
    return (np.cosh(z),)


@registry.register("cosh")
def _cosh_rule(z):
    return (np.sinh(z),)


@registry.register("tanh")
def _tanh_rule(z):
    return (1 - np.tanh(z) ** 2,)


@registry.register("arcsinh")
def _arcsinh_rule(z):
    return (1 / np.sqrt(z**2 + 1),)


@registry.register("arccosh")
def _arccosh_rule(z):
    # sqrt(z - 1) * sqrt(z + 1) keeps the principal branch for complex z
    return (1 / (np.sqrt(z - 1) * np.sqrt(z + 1)),)


@registry.register("arctanh")
def _arctanh_rule(z):
    return (1 / (1 - z**2),)
