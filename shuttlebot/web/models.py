"""Pydantic models for the JSON error body."""
from pydantic import BaseModel


class ErrorMessage(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    errors: list[ErrorMessage]
