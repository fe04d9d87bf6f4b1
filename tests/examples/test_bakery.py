# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the bakery example."""

import gc
import logging

import pytest
from pydantic import ValidationError

from delegation._errors import ContractViolationError
from delegation.examples.bakery import (
    Bakery,
    BakeryDelegate,
    Cookie,
    CookieShop,
    run_example,
)


class TestCookie:
    def test_defaults(self):
        cookie = Cookie()
        assert cookie.size == 5
        assert cookie.has_chocolate_chips is False

    def test_frozen(self):
        cookie = Cookie()
        with pytest.raises(ValidationError):
            cookie.size = 7

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            Cookie(size="huge")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Cookie(flavour="oat")


class TestBakery:
    def test_without_delegate_still_bakes(self):
        cookie = Bakery().make_cookie()
        assert cookie == Cookie(size=6, has_chocolate_chips=True)

    def test_delegate_receives_one_notification(self, recorder):
        bakery = Bakery()
        bakery.set_delegate(recorder)
        bakery.make_cookie()
        assert recorder.calls == [
            ("cookie_was_baked", Cookie(size=6, has_chocolate_chips=True))
        ]

    def test_overrides_from_plain_cookie(self, recorder):
        bakery = Bakery(recipe={})
        bakery.set_delegate(recorder)
        assert bakery.make_cookie() == Cookie(size=5, has_chocolate_chips=False)
        cookie = bakery.make_cookie(size=6, has_chocolate_chips=True)
        assert cookie.size == 6
        assert cookie.has_chocolate_chips is True
        assert [c[1] for c in recorder.calls] == [
            Cookie(),
            Cookie(size=6, has_chocolate_chips=True),
        ]

    def test_override_wins_over_recipe(self):
        cookie = Bakery().make_cookie(size=8)
        assert cookie.size == 8
        assert cookie.has_chocolate_chips is True

    def test_invalid_override_raises_before_notify(self, recorder):
        bakery = Bakery()
        bakery.set_delegate(recorder)
        with pytest.raises(ValueError, match="sprinkles"):
            bakery.make_cookie(sprinkles=True)
        assert recorder.calls == []

    def test_switch_shops(self, make_recorder):
        bakery, first, second = Bakery(), make_recorder(), make_recorder()
        bakery.set_delegate(first)
        bakery.make_cookie()
        bakery.set_delegate(second)
        bakery.make_cookie()
        assert len(first.calls) == 1
        assert len(second.calls) == 1

    def test_closed_shop_is_forgotten(self):
        bakery = Bakery()
        shop = CookieShop()
        bakery.delegate = shop
        del shop
        gc.collect()
        assert bakery.delegate is None
        bakery.make_cookie()

    def test_strict_mode_rejects_non_shop(self, strict_contracts):
        with pytest.raises(ContractViolationError, match="cookie_was_baked"):
            Bakery().set_delegate(object())


    def test_recorded_cookie_unaffected_by_caller(self):
        bakery, shop = Bakery(), CookieShop()
        bakery.set_delegate(shop)
        cookie = bakery.make_cookie()
        with pytest.raises(ValidationError):
            cookie.size = 99
        assert shop.cookies == [Cookie(size=6, has_chocolate_chips=True)]
        assert shop.cookies[0].size == 6


class TestCookieShop:
    def test_satisfies_contract(self):
        assert isinstance(CookieShop(), BakeryDelegate)

    def test_records_and_logs(self, caplog):
        shop = CookieShop()
        with caplog.at_level(logging.INFO, logger="delegation"):
            shop.cookie_was_baked(Cookie(size=6))
        assert shop.cookies == [Cookie(size=6)]
        assert "A new cookie was baked, with size 6" in caplog.text


def test_run_example():
    shop = run_example()
    assert shop.cookies == [Cookie(size=6, has_chocolate_chips=True)]
