"""
models/result.py
----------------
Request and result types exchanged between the dispatcher and the controller.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from models.errors import CarApiError


@dataclass
class CarRequest:
    """
    Transport-independent description of an incoming request.

    Attributes:
        method: HTTP method (e.g., 'GET').
        path: Request path, for logging only.
        params: Path parameters (e.g., {'id': '...'}).
        body: Decoded JSON body, or None when the request carried none.
    """
    method: str = "GET"
    path: str = ""
    params: dict = field(default_factory=dict)
    body: Any = None


@dataclass
class HandlerResult:
    """
    Outcome of one controller call: a response payload or an error value,
    never both.
    """
    status: int
    body: Any = None
    error: Optional[CarApiError] = None

    @classmethod
    def success(cls, body: Any, status: int = 200) -> "HandlerResult":
        return cls(status=status, body=body)

    @classmethod
    def failure(cls, error: CarApiError) -> "HandlerResult":
        return cls(status=error.status, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
