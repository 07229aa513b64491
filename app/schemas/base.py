"""
Shared pydantic base for request/response schemas.

The frontend speaks camelCase; Python code uses snake_case. Responses are
serialized by alias, requests accept either spelling.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
