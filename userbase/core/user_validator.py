"""User Validator — field rules for user props.

Invariants:
    - name: non-empty string, max 255 chars
    - email: valid address, max 255 chars
    - password: non-empty string, max 100 chars
    - created_at: optional, must already be a datetime (no string parsing)
    - validate(None) validates an empty payload: every required field is reported
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, EmailStr, Field, StrictStr, field_validator

from userbase.core.validator_fields import PydanticValidatorFields


class UserRules(BaseModel):
    name: Annotated[StrictStr, Field(min_length=1, max_length=255)]
    email: EmailStr
    password: Annotated[StrictStr, Field(min_length=1, max_length=100)]
    created_at: Annotated[datetime | None, Field(strict=True)] = None

    @field_validator("email")
    @classmethod
    def limit_email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("email must be shorter than or equal to 255 characters")
        return v


class UserValidator(PydanticValidatorFields[UserRules]):
    rules = UserRules

    def validate(self, data: Any) -> bool:
        return super().validate(data if data is not None else {})


class UserValidatorFactory:
    @staticmethod
    def create() -> UserValidator:
        return UserValidator()
