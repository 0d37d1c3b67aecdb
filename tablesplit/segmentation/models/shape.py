"""
Pydantic models describing record shapes.

A shape is an explicit mapping table built once and handed to the projector
as ordinary data:

    {field name -> (accepted header spellings, kind)}
"""

from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, model_validator

from ..constants import FieldKind


class FieldSpec(BaseModel):
    """
    One named, typed field of a record shape

    Attributes:
        name: Field name on the produced record; also an accepted header spelling
        kind: Declared type (text or number)
        aliases: Further accepted header spellings, e.g. "Trade Date"
    """
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind = FieldKind.TEXT
    aliases: Tuple[str, ...] = ()

    @property
    def spellings(self) -> Tuple[str, ...]:
        """Every header name this field accepts, own name first"""
        return (self.name, *self.aliases)


class RecordShape(BaseModel):
    """
    Caller-defined set of typed fields used to project a table's rows

    Attributes:
        name: Shape name (e.g. "account")
        fields: Ordered field specs; order is independent of column order
        record_model: Pydantic model built per row from the coerced values.
            When None, each record is a plain dict.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    fields: Tuple[FieldSpec, ...]
    record_model: Optional[Type[BaseModel]] = None

    @model_validator(mode="after")
    def validate_unique_field_names(self) -> "RecordShape":
        """Reject shapes that declare the same field twice."""
        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ValueError(f"Shape {self.name!r} declares field {spec.name!r} more than once")
            seen.add(spec.name)
        return self

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def build(self, values: Dict[str, Any]) -> Any:
        """Instantiate one record from coerced values keyed by field name."""
        if self.record_model is None:
            return dict(values)
        return self.record_model(**values)
