# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "DelegationError",
    "ContractViolationError",
    "DelegateReferenceError",
    "DelegateMissingError",
)


class DelegationError(Exception):
    default_message: ClassVar[str] = "Delegation error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ContractViolationError(DelegationError):
    """Raised when an object does not provide every method of a contract."""

    default_message = "Object does not satisfy the delegate contract"
    __slots__ = ()

    @classmethod
    def from_missing(
        cls,
        obj: Any,
        contract: type,
        missing: tuple[str, ...],
    ):
        name = getattr(contract, "__name__", repr(contract))
        return cls(
            f"{type(obj).__name__} does not satisfy {name}; "
            f"missing: {', '.join(missing)}",
            details={
                "contract": name,
                "type": type(obj).__name__,
                "missing": list(missing),
            },
        )


class DelegateReferenceError(DelegationError, TypeError):
    """Raised when a delegate cannot be held by a weak reference."""

    default_message = "Delegate cannot be weakly referenced"
    __slots__ = ()


class DelegateMissingError(DelegationError):
    """Raised when a holder queries an empty slot without a default."""

    default_message = "No delegate is set"
    __slots__ = ()
