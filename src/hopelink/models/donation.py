from datetime import datetime
from pydantic import Field

from hopelink.models.base import CamelModel


class DonationCreate(CamelModel):
    donor_id: int
    initiative_id: int
    amount: int = Field(gt=0)
    message: str | None = None
    anonymous: bool = False

class Donation(DonationCreate):
    id: int
    created_at: datetime = Field(default_factory=datetime.now)

class SupportCreate(CamelModel):
    donor_id: int
    beneficiary_id: int
    initiative_id: int

class Support(SupportCreate):
    """A donor standing behind a beneficiary through an initiative."""
    id: int
    created_at: datetime = Field(default_factory=datetime.now)
