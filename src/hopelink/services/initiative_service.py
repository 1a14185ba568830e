import logging

from hopelink.core.errors import NotFoundError
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.initiative import Initiative, InitiativeCreate

logger = logging.getLogger(__name__)

class InitiativeService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def list_initiatives(
        self,
        category: str | None = None,
        runner_id: int | None = None,
        country: str | None = None
    ) -> list[Initiative]:
        # Only one filter applies; the first one given wins.
        if category:
            return self.data_access.get_initiatives_by_category(category)
        if runner_id is not None:
            return self.data_access.get_initiatives_by_runner(runner_id)
        if country:
            return self.data_access.get_initiatives_by_country(country)
        return self.data_access.get_initiatives()

    def get_initiative(self, initiative_id: int) -> Initiative:
        initiative = self.data_access.get_initiative(initiative_id)
        if not initiative:
            logger.warning(f"Initiative {initiative_id} not found")
            raise NotFoundError("Initiative not found")
        return initiative

    def create_initiative(self, initiative: InitiativeCreate) -> Initiative:
        created = self.data_access.create_initiative(initiative)
        logger.info(f"Runner {created.runner_id} started initiative {created.id}")
        return created

    def update_initiative(self, initiative_id: int, updates: dict) -> Initiative:
        initiative = self.data_access.update_initiative(initiative_id, updates)
        if not initiative:
            logger.warning(f"Initiative {initiative_id} not found")
            raise NotFoundError("Initiative not found")
        return initiative

    def list_countries(self) -> list[str]:
        return self.data_access.get_available_countries()
