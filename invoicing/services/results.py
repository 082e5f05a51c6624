"""
Result objects returned by every form action.

Actions never redirect themselves: a success carries the path the boundary
layer should navigate to, an error carries the form state to render again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class ActionSuccess:
    message: Optional[str] = None
    redirect_to: Optional[str] = None

    ok = True

    def to_state(self) -> dict:
        state: dict = {}
        if self.message:
            state["message"] = self.message
        return state


@dataclass
class ActionError:
    message: str
    errors: Dict[str, List[str]] = field(default_factory=dict)
    # "validation", "duplicate", "not_found", "auth" or "database"
    kind: str = "validation"

    ok = False

    def to_state(self) -> dict:
        state: dict = {"message": self.message}
        if self.errors:
            state["errors"] = self.errors
        return state


ActionResult = Union[ActionSuccess, ActionError]
