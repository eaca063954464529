"""User Entity — validated user identity with name/password update operations.

Invariants:
    - Props are validated before the entity exists; invalid props never produce an entity
    - created_at defaults to construction time (UTC) when absent
    - update()/update_password() validate the merged props first, then mutate
    - email is immutable after construction

Design Decisions:
    - Validator injected as a factory argument, not inherited (ADR: pluggable validation)
    - Factory over shared instance: a fresh validator per call keeps errors from leaking
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import NotRequired, TypedDict

from userbase.core.entity import Entity
from userbase.core.errors import EntityValidationError
from userbase.core.user_validator import UserValidatorFactory
from userbase.core.validator_fields import ValidatorFields


class UserProps(TypedDict):
    name: str
    email: str
    password: str
    created_at: NotRequired[datetime | None]


ValidatorFactory = Callable[[], ValidatorFields]


class UserEntity(Entity[UserProps]):
    """A registered user."""

    def __init__(
        self,
        props: UserProps,
        id: str | None = None,
        validator_factory: ValidatorFactory = UserValidatorFactory.create,
    ):
        self._validator_factory = validator_factory
        self._validate(props)
        super().__init__(props, id)
        self.props["created_at"] = props.get("created_at") or datetime.now(timezone.utc)

    @property
    def name(self) -> str:
        return self.props["name"]

    @property
    def email(self) -> str:
        return self.props["email"]

    @property
    def password(self) -> str:
        return self.props["password"]

    @property
    def created_at(self) -> datetime:
        return self.props["created_at"]

    def update(self, name: str) -> None:
        """Rename the user."""
        self._validate({**self.props, "name": name})
        self.props["name"] = name

    def update_password(self, password: str) -> None:
        self._validate({**self.props, "password": password})
        self.props["password"] = password

    def _validate(self, props: UserProps | None) -> None:
        validator = self._validator_factory()
        if not validator.validate(props):
            raise EntityValidationError(validator.errors)
