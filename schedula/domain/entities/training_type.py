from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainingType:
    id: int
    name: str
    category: str
    duration_minutes: int
