"""Error response models."""

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by the HTTP layer."""

    error: str
    detail: str
    timestamp: datetime
    request_id: str
