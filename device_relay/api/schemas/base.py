"""
Shared schema configuration.

Wire payloads use camelCase (deviceId, receivedAt); Python code uses
snake_case field names.
"""
from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)




def json_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI `requestBody` for a model parsed outside FastAPI's body handling."""
    return {
        'required': True,
        'content': {
            'application/json': {'schema': model.model_json_schema(by_alias=True)},
        },
    }
