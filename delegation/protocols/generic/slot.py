# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import weakref
from typing import Generic, TypeVar, overload

from typing_extensions import Self

from delegation import config
from delegation._errors import DelegateReferenceError

from ..contracts import ensure_conforms

__all__ = ("DelegateSlot",)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DelegateSlot(Generic[T]):
    """Non-owning delegate attribute.

    Declared on the holder class; each instance keeps only a
    ``weakref.ref`` to its delegate, stored in the instance ``__dict__``
    under ``_<name>_ref``. Reading the attribute returns the live delegate,
    or ``None`` when nothing was assigned or the delegate has since been
    garbage collected.

    Example::

        class Bakery:
            delegate = DelegateSlot(BakeryDelegate)

        bakery.delegate = shop     # stored weakly
        bakery.delegate = None     # cleared

    Args:
        contract: Protocol the delegate is expected to satisfy. Only
            enforced in strict mode.
        strict: Reject non-conforming delegates with
            `ContractViolationError`. ``None`` defers to
            ``settings.DELEGATION_STRICT_CONTRACTS``.
    """

    __slots__ = ("contract", "strict", "name", "_attr")

    def __init__(
        self,
        contract: type[T] | None = None,
        *,
        strict: bool | None = None,
    ) -> None:
        self.contract = contract
        self.strict = strict
        self.name = "delegate"
        self._attr = "_delegate_ref"

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._attr = f"_{name}_ref"

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> Self: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> T | None: ...

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        ref = instance.__dict__.get(self._attr)
        if ref is None:
            return None
        if (target := ref()) is None:
            # referent was collected; forget the dead ref
            del instance.__dict__[self._attr]
            logger.debug(
                "%s.%s was released", type(instance).__name__, self.name
            )
        return target

    def __set__(self, instance: object, value: T | None) -> None:
        if value is None:
            self.__delete__(instance)
            return
        if self.is_strict:
            ensure_conforms(value, self.contract)
        try:
            ref = weakref.ref(value)
        except TypeError as e:
            raise DelegateReferenceError(
                f"{type(value).__name__} object cannot be weakly "
                f"referenced and cannot be used as {self.name}",
                details={"slot": self.name, "type": type(value).__name__},
            ) from e
        instance.__dict__[self._attr] = ref
        logger.debug(
            "%s.%s set to %s",
            type(instance).__name__,
            self.name,
            type(value).__name__,
        )

    def __delete__(self, instance: object) -> None:
        if instance.__dict__.pop(self._attr, None) is not None:
            logger.debug("%s.%s cleared", type(instance).__name__, self.name)

    @property
    def is_strict(self) -> bool:
        if self.contract is None:
            return False
        if self.strict is not None:
            return self.strict
        return config.settings.DELEGATION_STRICT_CONTRACTS

    def is_set(self, instance: object) -> bool:
        """Whether `instance` currently has a live delegate in this slot."""
        return self.__get__(instance, type(instance)) is not None

    def __repr__(self) -> str:
        contract = getattr(self.contract, "__name__", None)
        return f"DelegateSlot(name={self.name!r}, contract={contract})"