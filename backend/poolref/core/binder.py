"""
Property binding for configuration models.

Property names are the declared aliases of a pydantic model (field name when
there is no alias). Fields marked ``exclude=True`` are not string-configurable
and are not listed.
"""

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def property_names(config_type: type[BaseModel]) -> list[str]:
    """Configurable property names of *config_type*, in declaration order."""
    return [
        field.alias or name
        for name, field in config_type.model_fields.items()
        if not field.exclude
    ]


def bind_properties(config_type: type[T], properties: Mapping[str, str]) -> T:
    """Build *config_type* from a property mapping. Raises pydantic.ValidationError."""
    return config_type.model_validate(dict(properties))
