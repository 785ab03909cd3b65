"""Shared schema building blocks for travel payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with clients and the AI provider.

    Python code uses snake_case attributes; JSON in and out uses camelCase,
    which is what the prompts ask the provider to emit.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CostRange(CamelModel):
    min: float
    max: float


class Coordinates(CamelModel):
    lat: float
    lng: float
