"""Shared pydantic configuration for the insert and read schemas.

Insert schemas are strict allow-lists: any key that is not a declared field
(``id``, ``createdAt``, ``status`` and so on) fails validation instead of
being dropped. Fields are accepted under their camelCase wire name or their
snake_case column name, and read schemas serialize back to camelCase.
"""
from decimal import Decimal
from typing import Annotated, Any, Mapping, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from tableside.core.exceptions import ValidationError

CENTS = Decimal("0.01")

# numeric(10, 2): more than two significant decimal places is rejected;
# accepted values are normalised to exactly two (2.5 and 2.500 both become 2.50)
Money = Annotated[
    Decimal,
    Field(max_digits=10, decimal_places=2, ge=0),
    AfterValidator(lambda value: value.quantize(CENTS)),
]

# foreign keys: integers only, no bools or numeric strings
Id = StrictInt

# usernames and display names: surrounding whitespace dropped, never blank
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class InsertSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
        validate_default=True,
    )


class ReadSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


SchemaT = TypeVar("SchemaT", bound=InsertSchema)


def validate_insert(schema: Type[SchemaT], payload: Mapping[str, Any]) -> SchemaT:
    """Validate a raw client payload against an insert schema.

    Raises ``ValidationError`` naming every offending field path, e.g.
    ``["id", "items.0.price"]``.
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
