"""
Shared schema primitives used across the API.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Standard error envelope returned for all 4xx/5xx responses.

    Serialized with camelCase keys:
    `{statusCode, date, restErrorMessage, detailedErrorMessage}`.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    status_code: int
    date: datetime
    rest_error_message: str
    detailed_error_message: str
