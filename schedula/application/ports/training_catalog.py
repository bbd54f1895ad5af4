from __future__ import annotations

from abc import ABC, abstractmethod

from schedula.domain.entities.training_type import TrainingType


class TrainingCatalogPort(ABC):
    @abstractmethod
    def list_types(self, category: str | None = None) -> list[TrainingType]:
        """List training types, optionally filtered by category (case-insensitive)."""
        raise NotImplementedError
