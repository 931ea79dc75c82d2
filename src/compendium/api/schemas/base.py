"""Shared base for API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model exchanged with the front-end using the camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
