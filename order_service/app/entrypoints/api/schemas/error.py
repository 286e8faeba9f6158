"""Pydantic models for error responses."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """The unified JSON body returned for every failed request."""

    error: ErrorDetail
