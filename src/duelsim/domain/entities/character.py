"""Character model that persists across repeated battles."""
from __future__ import annotations

from dataclasses import dataclass

from .actor import Actor


@dataclass(slots=True)
class Character:
    """A named fighter whose progression accumulates over a simulation run."""

    name: str
    actor: Actor
    gold: int = 0
    experience: int = 0
    wins: int = 0
    losses: int = 0
