# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Data source and delegate on the same owner.

`TableView` is a headless stand-in for a list widget: it asks its
``data_source`` for rows and tells its ``delegate`` about selections.
`MenuViewController` owns a table view, serves as both of its delegates,
and forwards selections to a `MenuViewControllerDelegate` of its own.

The controller holds its table view strongly while the table view holds
the controller weakly, so the pair never forms a reference cycle.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from delegation.protocols.generic import DelegateSlot, Delegating

__all__ = (
    "Cell",
    "TableViewDataSource",
    "TableViewDelegate",
    "TableView",
    "MenuViewControllerDelegate",
    "MenuViewController",
    "MenuCoordinator",
    "DEFAULT_ITEMS",
    "run_example",
)

logger = logging.getLogger(__name__)

DEFAULT_ITEMS = ("item1", "item2", "item3")


class Cell(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    index: int


@runtime_checkable
class TableViewDataSource(Protocol):
    """Provides the rows a table view displays."""

    def number_of_rows(self, table_view: TableView) -> int: ...

    def cell_for_row(self, table_view: TableView, row: int) -> Cell: ...


@runtime_checkable
class TableViewDelegate(Protocol):
    """Receives row selection events from a table view."""

    def did_select_row(self, table_view: TableView, row: int) -> None: ...


class TableView(Delegating):
    data_source = DelegateSlot(TableViewDataSource)
    delegate = DelegateSlot(TableViewDelegate)

    def __init__(self) -> None:
        self.cells: list[Cell] = []
        self.selected_row: int | None = None

    def reload_data(self) -> list[Cell]:
        """Rebuild `cells` from the data source; empty without one."""
        count = self._ask("number_of_rows", self, default=0)
        self.cells = [self._ask("cell_for_row", self, row) for row in range(count)]
        return list(self.cells)

    def select_row(self, row: int) -> None:
        if not 0 <= row < len(self.cells):
            raise IndexError(
                f"row {row} out of range for {len(self.cells)} loaded rows"
            )
        self.selected_row = row
        self._notify("did_select_row", self, row)


@runtime_checkable
class MenuViewControllerDelegate(Protocol):
    """Notified whenever a user selects a menu item."""

    def menu_did_select_item(
        self, menu: MenuViewController, index: int
    ) -> None: ...


class MenuViewController(Delegating):
    delegate = DelegateSlot(MenuViewControllerDelegate)

    def __init__(
        self,
        items: Sequence[str] = DEFAULT_ITEMS,
        *,
        table_view: TableView | None = None,
    ) -> None:
        self._items = tuple(items)
        self._table_view: TableView | None = None
        if table_view is not None:
            self.table_view = table_view

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def table_view(self) -> TableView | None:
        return self._table_view

    @table_view.setter
    def table_view(self, table_view: TableView | None) -> None:
        previous = self._table_view
        if previous is not None and previous is not table_view:
            if previous.data_source is self:
                previous.data_source = None
            if previous.delegate is self:
                previous.delegate = None
        self._table_view = table_view
        if table_view is not None:
            table_view.data_source = self
            table_view.delegate = self

    def number_of_items(self) -> int:
        return len(self._items)

    def item_at(self, index: int) -> str:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for {len(self._items)} items"
            )
        return self._items[index]

    # TableViewDataSource
    def number_of_rows(self, table_view: TableView) -> int:
        return self.number_of_items()

    def cell_for_row(self, table_view: TableView, row: int) -> Cell:
        return Cell(text=self.item_at(row), index=row)

    # TableViewDelegate
    def did_select_row(self, table_view: TableView, row: int) -> None:
        self._notify("menu_did_select_item", self, row)


class MenuCoordinator:
    """Keeps track of the menu items a user picked."""

    def __init__(self) -> None:
        self.selected: list[str] = []

    def menu_did_select_item(self, menu: MenuViewController, index: int) -> None:
        item = menu.item_at(index)
        self.selected.append(item)
        logger.info("Menu item %r selected at index %d", item, index)


def run_example(row: int = 1) -> MenuCoordinator:
    """Build a menu on a table view, select `row`, return the coordinator."""
    coordinator = MenuCoordinator()
    menu = MenuViewController(table_view=TableView())
    menu.set_delegate(coordinator)
    menu.table_view.reload_data()
    menu.table_view.select_row(row)
    return coordinator
