import logging

from hopelink.core.errors import BadRequestError
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.donation import Support, SupportCreate

logger = logging.getLogger(__name__)

class SupportService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def create_support(self, support: SupportCreate) -> Support:
        created = self.data_access.create_support(support)
        logger.info(f"Donor {created.donor_id} now supports beneficiary {created.beneficiary_id}")
        return created

    def list_supports(self, donor_id: int | None = None, beneficiary_id: int | None = None) -> list[Support]:
        if donor_id is not None:
            return self.data_access.get_supports_by_donor(donor_id)
        if beneficiary_id is not None:
            return self.data_access.get_supports_by_beneficiary(beneficiary_id)
        raise BadRequestError("Must specify donor or beneficiary")
