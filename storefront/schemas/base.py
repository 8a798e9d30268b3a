"""Schema Base — shared Pydantic configuration for wire models."""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python, readable from ORM objects."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """Partial update body — omitted fields stay unchanged, explicit nulls are rejected."""

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = [
            name for name in self.model_fields_set
            if getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)
