"""
Base Pydantic schemas with common settings.

These are templates that other schemas inherit from.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema for wire-level payloads.

    Fields are declared in snake_case and exposed to clients in camelCase
    (``due_at`` <-> ``dueAt``). Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
