# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Structural delegate contracts.

A contract is a ``typing.Protocol`` listing the methods a delegate provides.
Decorate it with ``@runtime_checkable`` so ``isinstance()`` works; the helpers
below go one step further and check that each listed name is callable.
"""

from __future__ import annotations

import inspect
from typing import Any, Generic, Protocol

from delegation._errors import ContractViolationError

__all__ = (
    "contract_methods",
    "missing_methods",
    "conforms",
    "ensure_conforms",
)

_SKIP_BASES = (object, Protocol, Generic)


def contract_methods(contract: type) -> tuple[str, ...]:
    """Public method names declared by `contract` and its protocol bases."""
    names: set[str] = set()
    for base in contract.__mro__:
        if base in _SKIP_BASES:
            continue
        for name, attr in vars(base).items():
            if name.startswith("_"):
                continue
            if isinstance(attr, (staticmethod, classmethod)):
                attr = attr.__func__
            if inspect.isfunction(attr):
                names.add(name)
    return tuple(sorted(names))


def missing_methods(obj: Any, contract: type) -> tuple[str, ...]:
    """Contract methods that `obj` does not provide as callables."""
    return tuple(
        name
        for name in contract_methods(contract)
        if not callable(getattr(obj, name, None))
    )


def conforms(obj: Any, contract: type) -> bool:
    return not missing_methods(obj, contract)


def ensure_conforms(obj: Any, contract: type) -> None:
    """Raise `ContractViolationError` unless `obj` satisfies `contract`."""
    if missing := missing_methods(obj, contract):
        raise ContractViolationError.from_missing(obj, contract, missing)
