"""Structured error record produced by failed checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """A single failed check.

    ``kind`` is a stable identifier of the rule that failed (``"presence"``,
    ``"tooLong"``, ...). ``options`` holds the parameters needed to render a
    message for it, e.g. ``{"count": 10}``, or ``None`` when the kind needs none.

    This is data, not an exception: checks return it, they never raise it.
    """

    kind: str
    options: dict[str, Any] | None = field(default=None, hash=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary, leaving out empty options."""
        data: dict[str, Any] = {"kind": self.kind}
        if self.options is not None:
            data["options"] = dict(self.options)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationError:
        """Create an error from its dictionary representation."""
        options = data.get("options")
        return cls(kind=data["kind"], options=dict(options) if options is not None else None)
