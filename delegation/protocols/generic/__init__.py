# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .holder import Delegating
from .slot import DelegateSlot

__all__ = ("DelegateSlot", "Delegating")
