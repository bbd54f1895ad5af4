from __future__ import annotations

from schedula.application.ports.training_catalog import TrainingCatalogPort
from schedula.domain.entities.training_type import TrainingType


class ListTrainingTypesUseCase:
    def __init__(self, catalog: TrainingCatalogPort) -> None:
        self._catalog = catalog

    def execute(self, category: str | None = None) -> list[TrainingType]:
        return self._catalog.list_types(category or None)
