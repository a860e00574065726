# loanbook/models/base.py

from typing import Any, Optional

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """
    Base for persisted records.

    Stored and wire field names are camelCase; attributes are snake_case.
    Explicit nulls left behind by older records fall back to the field default,
    numbers stored in text fields become strings, and unknown keys are carried
    through untouched.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"

    @field_validator("*", mode="before")
    @classmethod
    def _normalise_stored_value(cls, value: Any, info) -> Any:
        field = cls.model_fields.get(info.field_name)
        if field is None:
            return value
        if value is None:
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        elif field.annotation in (str, Optional[str]) and isinstance(value, (int, float)) \
                and not isinstance(value, bool):
            # older records hold numbers where text is expected (phone numbers, 20240101)
            return str(value)
        return value

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class PayloadModel(BaseModel):
    """
    Loose request body: every field is accepted as-is and checked by the
    ledger service, so the 400 messages and their order stay in one place.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


class Envelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
