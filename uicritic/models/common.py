from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class StatusResponse(BaseModel):
    model: str
    ready: bool
