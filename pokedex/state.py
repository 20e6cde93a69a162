"""Load states shared by the list and detail screens: idle, loading, success, failed."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class Failed:
    message: str
    status_code: int = 503


LoadState = Idle | Loading | Success | Failed
