import logging

from hopelink.core.errors import BadRequestError, NotFoundError
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.donation import Donation, DonationCreate

logger = logging.getLogger(__name__)

class DonationService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def create_donation(self, donation: DonationCreate) -> Donation:
        created = self.data_access.create_donation(donation)

        if created is None:
            logger.warning(f"Donation rejected: initiative {donation.initiative_id} does not exist")
            raise NotFoundError("Initiative not found")

        logger.info(
            f"Recorded donation {created.id} of {created.amount} "
            f"from donor {created.donor_id} to initiative {created.initiative_id}."
        )
        return created

    def list_donations(self, donor_id: int | None = None, initiative_id: int | None = None) -> list[Donation]:
        if donor_id is not None:
            return self.data_access.get_donations_by_donor(donor_id)
        if initiative_id is not None:
            return self.data_access.get_donations_by_initiative(initiative_id)
        raise BadRequestError("Must specify donor or initiative")
