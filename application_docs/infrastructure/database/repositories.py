"""Data access layer for applications"""

import uuid
from typing import Optional
from sqlalchemy.orm import Session
from application_docs.infrastructure.database.models import ApplicationRecord, ProductRecord, ReviewRecord
from application_docs.domain.models import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)


class ApplicationRepository:
    """Repository for application snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def find_application_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """
        Fetch one application with its applicant, products, funds and reviews.

        Raises:
            MultipleResultsFound: If the id matches more than one row
        """
        record = (
            self.db.query(ApplicationRecord)
            .filter(ApplicationRecord.id == application_id)
            .one_or_none()
        )
        if record is None:
            return None
        return to_domain(record)


def to_domain(record: ApplicationRecord) -> Application:
    """Map an ORM row graph onto the domain snapshot"""
    legal_entity = None
    if record.legal_entity_name is not None:
        legal_entity = LegalEntity(
            name=record.legal_entity_name,
            registration_number=record.legal_entity_registration_number or "",
        )

    current_review = None
    if record.reviews:
        latest = record.reviews[-1]
        current_review = Review(reason=latest.reason, reviewed_on=latest.reviewed_on)

    return Application(
        id=record.id,
        reference_number=record.reference_number,
        state=ApplicationState.parse(record.state),
        person=Person(first_name=record.applicant.first_name, surname=record.applicant.surname),
        date=record.applied_on,
        is_legal_entity=record.is_legal_entity,
        legal_entity=legal_entity,
        products=[_product_to_domain(p) for p in record.products],
        current_review=current_review,
        recorded_state=record.state,
    )


def _product_to_domain(record: ProductRecord) -> Product:
    return Product(
        product_id=str(record.id),
        name=record.name,
        funds=[
            Fund(fund_id=str(f.id), name=f.name, amount=f.amount, fees=f.fees)
            for f in record.funds
        ],
    )
