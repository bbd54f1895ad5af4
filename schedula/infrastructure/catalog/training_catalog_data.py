from __future__ import annotations

from schedula.domain.entities.training_type import TrainingType

TRAINING_TYPES: tuple[TrainingType, ...] = (
    TrainingType(id=1, name="Azure Fundamentals", category="Azure", duration_minutes=60),
    TrainingType(id=2, name="Python Basics", category="Python", duration_minutes=90),
    TrainingType(id=3, name="Advanced Python", category="Python", duration_minutes=120),
    TrainingType(id=4, name="Azure DevOps", category="Azure", duration_minutes=90),
    TrainingType(id=5, name="Data Science with Python", category="Python", duration_minutes=120),
    TrainingType(id=6, name="Azure AI Services", category="Azure", duration_minutes=90),
    TrainingType(id=7, name="Web Development", category="General", duration_minutes=120),
    TrainingType(id=8, name="Database Management", category="General", duration_minutes=90),
)
