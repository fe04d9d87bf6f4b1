# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from . import config as config
from ._errors import (
    ContractViolationError,
    DelegateMissingError,
    DelegateReferenceError,
    DelegationError,
)
from .config import settings
from .protocols import (
    DelegateSlot,
    Delegating,
    conforms,
    contract_methods,
    ensure_conforms,
    missing_methods,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

__all__ = (
    "__version__",
    "settings",
    "DelegateSlot",
    "Delegating",
    "conforms",
    "contract_methods",
    "ensure_conforms",
    "missing_methods",
    "DelegationError",
    "ContractViolationError",
    "DelegateReferenceError",
    "DelegateMissingError",
)
