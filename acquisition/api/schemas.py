"""Pydantic schemas for API."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel


# Challenge schemas
class PointOut(BaseModel):
    id: str
    x: float
    y: float
    z: float

    class Config:
        from_attributes = True


class ChallengeOut(BaseModel):
    challenge_id: str
    player_position: PointOut
    targets: List[PointOut]
    timestamp: int

    class Config:
        from_attributes = True


# Answer schemas
class AnswerCreate(BaseModel):
    challenge_id: str
    closest_target_id: str


class AnswerAccepted(BaseModel):
    status: str = "TARGET ACQUIRED"
    message: str = "Closest target identified! Excellent work."
    response_time: str  # "0.123 seconds"
    challenge_id: str
    target_id: str


class AnswerMissed(BaseModel):
    status: str = "TARGET MISSED"
    message: str = "Wrong target! Check your distance calculations."
    correct_target: str
    chosen_target: str
    correct_distance: str  # two decimals
    chosen_distance: Optional[str]  # None if the chosen id was not a target
    challenge_id: str


# Status schemas
class ServerStatus(BaseModel):
    server_status: str = "OPERATIONAL"
    active_challenges: int
    challenge_timeout: str
    cleanup_interval: str
    player_position: str


# Error schemas
class ErrorResponse(BaseModel):
    status: str = "error"
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
