"""
Result envelope returned by repositories and services.

A result is either ``Ok`` or ``Err``. Both expose ``success``, ``error`` and
``result`` so callers can check ``success`` before touching the payload,
without having to catch exceptions across layers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    result: Optional[T] = None

    @property
    def success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def to_dict(self, payload: Any = None) -> Dict[str, Any]:
        return {
            "success": True,
            "error": None,
            "result": self.result if payload is None else payload,
        }


@dataclass(frozen=True)
class Err:
    # None only for already_exists() "no match"
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return False

    @property
    def result(self) -> None:
        return None

    def to_dict(self, payload: Any = None) -> Dict[str, Any]:
        return {"success": False, "error": self.error, "result": None}


Result = Union[Ok[T], Err]
