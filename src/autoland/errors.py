"""Exceptions used inside the parsing pipeline.

None of these cross the public boundary: the parser and the orchestrator
catch them and report the failure as data on the outcome models.
"""

from __future__ import annotations


class FieldParseError(ValueError):
    """A captured field value could not be coerced to its semantic type."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {reason} ({value!r})")
