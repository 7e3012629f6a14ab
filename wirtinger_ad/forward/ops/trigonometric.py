import numpy as np

from wirtinger_ad.forward.core.registry import registry


@registry.register("sin")
def _sin_rule(z):
    return (np.cos(z),)


@registry.register("cos")
def _cos_rule(z):
    return (-np.sin(z),)


@registry.register("tan")
def _tan_rule(z):
    return (1 / np.cos(z) ** 2,)


@registry.register("arcsin")
def _arcsin_rule(z):
    return (1 / np.sqrt(1 - z**2),)


@registry.register("arccos")
def _arccos_rule(z):
    return (-1 / np.sqrt(1 - z**2),)


@registry.register("arctan")
def _arctan_rule(z):
    return (1 / (1 + z**2),)
