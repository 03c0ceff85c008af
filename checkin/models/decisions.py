# =======================================================================================
# checkin/models/decisions.py - Scan Decisions
# =======================================================================================
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from .enums import DenyReason


@dataclass(frozen=True)
class Allowed:
    """Scan accepted; side_data carries branch-specific fields (name, credits_remaining)."""
    message: str
    side_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class Denied:
    """Valid request that policy rejects."""
    reason: DenyReason
    side_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def allowed(self) -> bool:
        return False


Decision = Union[Allowed, Denied]
