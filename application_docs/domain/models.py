"""Domain models - pure Python dataclasses representing applications and their documents"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, List, Optional, Tuple, Union

from application_docs.constants import (
    ACTIVATED_APPLICATION_TEMPLATE,
    IN_REVIEW_APPLICATION_TEMPLATE,
    PENDING_APPLICATION_TEMPLATE,
)


class ApplicationState(str, Enum):
    """Lifecycle state of an application, driven outside this service"""

    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"
    DECLINED = "Declined"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str) -> "ApplicationState":
        """Map a stored state string onto a member, UNKNOWN for anything unlisted"""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def description(self) -> str:
        """Human-readable label shown on documents"""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
    ApplicationState.DECLINED: "Declined",
    ApplicationState.UNKNOWN: "Unknown",
}


@dataclass
class Person:
    """Applicant"""

    first_name: str
    surname: str


@dataclass
class LegalEntity:
    """Company the application is made on behalf of"""

    name: str
    registration_number: str


@dataclass
class Fund:
    """Single fund holding within a product"""

    fund_id: str
    name: str
    amount: Decimal
    fees: Decimal


@dataclass
class Product:
    """Investment product holding one or more funds"""

    product_id: str
    name: str
    funds: List[Fund] = field(default_factory=list)


@dataclass
class Review:
    """Most recent review placed on an application"""

    reason: str
    reviewed_on: Optional[date] = None


@dataclass
class Application:
    """Read-only snapshot of an application loaded from the data store"""

    id: uuid.UUID
    reference_number: str
    state: ApplicationState
    person: Person
    date: date
    is_legal_entity: bool = False
    legal_entity: Optional[LegalEntity] = None
    products: List[Product] = field(default_factory=list)
    current_review: Optional[Review] = None
    # State string as stored, kept when it maps to UNKNOWN
    recorded_state: Optional[str] = None

    @property
    def state_label(self) -> str:
        return self.recorded_state or self.state.value


@dataclass(frozen=True)
class DocumentConfiguration:
    """Process-wide values printed on or used to compute every document"""

    support_email: str
    signature: str
    tax_rate: Decimal


@dataclass(frozen=True)
class PendingApplicationViewModel:
    """Data handed to the pending application template"""

    template_key: ClassVar[str] = PENDING_APPLICATION_TEMPLATE

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


@dataclass(frozen=True)
class ActivatedApplicationViewModel:
    """Data handed to the activated application template"""

    template_key: ClassVar[str] = ACTIVATED_APPLICATION_TEMPLATE

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str
    legal_entity: Optional[LegalEntity]
    portfolio_funds: Tuple[Fund, ...]
    portfolio_total_amount: Decimal


@dataclass(frozen=True)
class InReviewApplicationViewModel:
    """Data handed to the in-review application template"""

    template_key: ClassVar[str] = IN_REVIEW_APPLICATION_TEMPLATE

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str
    legal_entity: Optional[LegalEntity]
    portfolio_funds: Tuple[Fund, ...]
    portfolio_total_amount: Decimal
    in_review_message: str
    in_review_information: Optional[Review]


@dataclass(frozen=True)
class UnsupportedState:
    """Marker returned when no document exists for an application's state"""

    state: str


ViewModel = Union[
    PendingApplicationViewModel,
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
]
