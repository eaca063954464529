"""PydanticValidatorFields tests — generic contract behaviour with a stub rule set.

Tests cover:
    - Initial state: errors and validated_data are None
    - Failure groups messages per field, in order
    - Non-mapping input reported under "data"
    - Success stores the parsed model
"""

from pydantic import BaseModel, Field

from userbase.core.validator_fields import PydanticValidatorFields


class StubRules(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price: int = Field(ge=0)


class StubValidator(PydanticValidatorFields[StubRules]):
    rules = StubRules


def test_initial_state():
    sut = StubValidator()
    assert sut.errors is None
    assert sut.validated_data is None


def test_invalid_data_groups_errors_by_field():
    sut = StubValidator()
    assert sut.validate({"name": "", "price": -1}) is False
    assert set(sut.errors) == {"name", "price"}
    assert len(sut.errors["name"]) == 1
    assert sut.validated_data is None


def test_non_mapping_input_reported_under_data():
    sut = StubValidator()
    assert sut.validate(None) is False
    assert list(sut.errors) == ["data"]


def test_valid_data_is_stored():
    sut = StubValidator()
    assert sut.validate({"name": "value", "price": 5}) is True
    assert sut.errors == {}
    assert sut.validated_data == StubRules(name="value", price=5)
