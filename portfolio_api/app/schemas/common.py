"""
Shared schema helpers.
"""

from typing import ClassVar, FrozenSet

from pydantic import BaseModel, model_validator


class UpdateSchema(BaseModel):
    """Base class for partial update payloads.

    Every field on a subclass is optional so that clients send only
    what changes.  An explicit ``null`` is only accepted for fields
    listed in ``nullable_fields``; for everything else it would erase
    a required value.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete and mark‑read endpoints."""

    message: str
