from .dual import Dual, isclose
from .wirtinger import (
    ABSENT,
    Absent,
    AntiHolomorphic,
    CtoR,
    NonHolomorphic,
    Role,
    Wirtinger,
    add,
    conj,
    kind,
    promote,
    total,
    wirtconj,
    wirtinger_pair,
    wirtprimal,
)

__all__ = [
    "ABSENT",
    "Absent",
    "AntiHolomorphic",
    "CtoR",
    "Dual",
    "NonHolomorphic",
    "Role",
    "Wirtinger",
    "add",
    "conj",
    "isclose",
    "kind",
    "promote",
    "total",
    "wirtconj",
    "wirtinger_pair",
    "wirtprimal",
]
