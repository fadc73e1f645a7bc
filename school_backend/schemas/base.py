from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base for request and response bodies: camelCase on the wire, snake_case in Python.

    Update models declare every field with a ``None`` default but keep the
    create-mode annotation, so an omitted field stays untouched while an
    explicit ``null`` for a required column is rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def changes(self) -> dict:
        """Fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


def _form_int(value: Any) -> Any:
    # Select controls post numeric ids as strings.
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


FormInt = Annotated[StrictInt, BeforeValidator(_form_int)]
RecordId = Annotated[StrictInt, BeforeValidator(_form_int), Field(gt=0)]
Text = Annotated[str, Field(min_length=1)]
Money = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
