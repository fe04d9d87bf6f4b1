# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Delegation without any UI framework.

::

    Bakery ---delegates to---> BakeryDelegate <---conforms to--- CookieShop
    (holds `delegate`)          (contract)                 (implements it)
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from delegation.protocols.generic import DelegateSlot, Delegating

__all__ = (
    "Cookie",
    "BakeryDelegate",
    "Bakery",
    "CookieShop",
    "run_example",
)

logger = logging.getLogger(__name__)


class Cookie(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int = 5
    has_chocolate_chips: bool = False


@runtime_checkable
class BakeryDelegate(Protocol):
    def cookie_was_baked(self, cookie: Cookie) -> None: ...


class Bakery(Delegating):
    """Bakes cookies and tells its delegate about each one."""

    delegate = DelegateSlot(BakeryDelegate)

    def __init__(self, recipe: dict[str, Any] | None = None) -> None:
        self.recipe = (
            dict(recipe)
            if recipe is not None
            else {"size": 6, "has_chocolate_chips": True}
        )

    def make_cookie(self, **overrides: Any) -> Cookie:
        """Bake one cookie from the recipe plus `overrides`.

        The delegate, if any, is notified once with the finished cookie.
        """
        cookie = Cookie(**{**self.recipe, **overrides})
        self._notify("cookie_was_baked", cookie)
        return cookie


class CookieShop:
    def __init__(self) -> None:
        self.cookies: list[Cookie] = []

    def cookie_was_baked(self, cookie: Cookie) -> None:
        self.cookies.append(cookie)
        logger.info("A new cookie was baked, with size %d", cookie.size)


def run_example() -> CookieShop:
    """Wire a shop to a bakery and bake one cookie."""
    shop = CookieShop()
    bakery = Bakery()
    bakery.set_delegate(shop)
    bakery.make_cookie()
    return shop
