from __future__ import annotations

from schedula.application.ports.training_catalog import TrainingCatalogPort
from schedula.domain.entities.training_type import TrainingType
from schedula.infrastructure.catalog.training_catalog_data import TRAINING_TYPES


class StaticTrainingCatalog(TrainingCatalogPort):
    def __init__(self, types: tuple[TrainingType, ...] | None = None) -> None:
        self._types = types or TRAINING_TYPES

    def list_types(self, category: str | None = None) -> list[TrainingType]:
        if not category:
            return list(self._types)
        normalized = category.lower().strip()
        return [entry for entry in self._types if entry.category.lower() == normalized]
