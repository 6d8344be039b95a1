"""
Contract for the Service layer.

Domain level data model of information representing a game session.
(Plain python types only, so the repository never needs to know about Board or Status.)
"""

from dataclasses import dataclass


@dataclass
class SessionModel:
    """2048 specific data: the grid as nested lists, the cumulative score and the status name."""

    board: list[list[int]]
    score: int
    status: str
