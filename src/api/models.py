"""Requests and Response models"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Direction

Grid = list[list[int]]


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    seed: Optional[int] = None

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(f"Seed must be a non-negative integer, got {value}")
        return value


class GetSessionRequest(BaseModel):
    session_id: UUID


class MoveRequest(BaseModel):
    session_id: UUID
    direction: Direction

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, value: Any) -> Direction:
        # raises InvalidDirectionError (instead of a generic ValidationError) for anything but up/down/left/right
        return Direction.parse(value)


class LegalMovesRequest(BaseModel):
    session_id: UUID


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class SessionResponse(BaseModel):
    session_id: UUID
    board: Grid
    score: int
    terminal: bool
    max_tile: int


class LegalMovesResponse(BaseModel):
    session_id: UUID
    legal_moves: list[Direction]
