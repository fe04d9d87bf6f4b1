# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .contracts import (
    conforms,
    contract_methods,
    ensure_conforms,
    missing_methods,
)
from .generic import DelegateSlot, Delegating

__all__ = (
    "DelegateSlot",
    "Delegating",
    "conforms",
    "contract_methods",
    "ensure_conforms",
    "missing_methods",
)
