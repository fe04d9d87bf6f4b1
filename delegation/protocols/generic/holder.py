# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from delegation._errors import DelegateMissingError

from .slot import DelegateSlot

__all__ = ("Delegating",)

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class Delegating:
    """Mixin for objects that hand part of their work to delegates.

    Subclasses declare one or more `DelegateSlot` attributes and call
    :meth:`_notify` (fire-and-forget events) or :meth:`_ask` (data-source
    queries) at the points where the delegate should take over. Calls are
    synchronous; whatever the delegate raises reaches the caller as is.

    Example::

        class Bakery(Delegating):
            delegate = DelegateSlot(BakeryDelegate)

            def make_cookie(self) -> Cookie:
                cookie = Cookie(size=6)
                self._notify("cookie_was_baked", cookie)
                return cookie
    """

    @classmethod
    def delegate_slots(cls) -> tuple[str, ...]:
        """Names of every `DelegateSlot` declared on the class or its bases."""
        names: list[str] = []
        for base in reversed(cls.__mro__):
            for name, attr in vars(base).items():
                if isinstance(attr, DelegateSlot) and name not in names:
                    names.append(name)
        return tuple(names)

    def set_delegate(self, delegate: Any, *, slot: str = "delegate") -> None:
        """Point `slot` at `delegate` (held weakly); ``None`` clears it."""
        self._get_slot(slot).__set__(self, delegate)

    def get_delegate(self, slot: str = "delegate") -> Any:
        return self._get_slot(slot).__get__(self, type(self))

    def _get_slot(self, name: str) -> DelegateSlot:
        slot = getattr(type(self), name, None)
        if not isinstance(slot, DelegateSlot):
            raise AttributeError(
                f"{type(self).__name__} has no delegate slot {name!r}"
            )
        return slot

    def _notify(
        self, method: str, /, *args: Any, slot: str = "delegate", **kwargs: Any
    ) -> bool:
        """Call `method` on the delegate in `slot`, if one is set.

        Returns:
            True if the delegate was called, False if the slot was empty.
        """
        target = self.get_delegate(slot)
        if target is None:
            logger.debug(
                "%s.%s not set, skipping %s",
                type(self).__name__,
                slot,
                method,
            )
            return False
        getattr(target, method)(*args, **kwargs)
        return True

    def _ask(
        self,
        method: str,
        /,
        *args: Any,
        slot: str = "data_source",
        default: Any = _MISSING,
        **kwargs: Any,
    ) -> Any:
        """Return the answer of the delegate in `slot` to `method`.

        Raises:
            DelegateMissingError: If the slot is empty and no `default`
                was given.
        """
        target = self.get_delegate(slot)
        if target is None:
            if default is _MISSING:
                raise DelegateMissingError(
                    f"{type(self).__name__}.{slot} is not set, "
                    f"cannot ask {method}",
                    details={"slot": slot, "method": method},
                )
            return default
        return getattr(target, method)(*args, **kwargs)
