from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Envelope for 404 and 500 responses."""

    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
