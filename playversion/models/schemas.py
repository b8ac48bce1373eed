from pydantic import BaseModel, Field
from datetime import datetime


class VersionResponse(BaseModel):
    identifier: str
    version: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    status_code: int
    timestamp: datetime = Field(default_factory=datetime.now)
