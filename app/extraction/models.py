from dataclasses import dataclass
from enum import Enum

NOT_AVAILABLE = "N/A"


class ProcessingStatus(str, Enum):
    """Phase of the most recent extraction in the current UI session."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class CompanyRecord:
    """One company contact entry extracted from a directory snippet."""

    company_name: str
    phone: str
    email: str
    point_of_contact: str = NOT_AVAILABLE
    address: str = NOT_AVAILABLE
    website: str = NOT_AVAILABLE

    def to_dict(self) -> dict[str, str]:
        """Return the record keyed by its wire (camelCase) field names."""
        return {
            "companyName": self.company_name,
            "phone": self.phone,
            "email": self.email,
            "pointOfContact": self.point_of_contact,
            "address": self.address,
            "website": self.website,
        }
