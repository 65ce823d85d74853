"""Pytest fixtures for testing"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import logging
import uuid
import pytest
from datetime import date
from decimal import Decimal
from typing import Callable, Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from application_docs.api.dependencies import get_document_generator
from application_docs.api.main import create_app
from application_docs.config import PACKAGED_TEMPLATES_DIR
from application_docs.domain.documents import PdfOptions
from application_docs.domain.models import (
    Application,
    ApplicationState,
    DocumentConfiguration,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)
from application_docs.infrastructure.database.models import (
    ApplicantRecord,
    ApplicationRecord,
    Base,
    FundRecord,
    ProductRecord,
    ReviewRecord,
)
from application_docs.infrastructure.database.repositories import ApplicationRepository
from application_docs.infrastructure.rendering.html import JinjaViewRenderer
from application_docs.infrastructure.templates.paths import SettingsTemplatePathProvider
from application_docs.services.document_generator import DocumentGenerator


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakePdfDocument:
    def __init__(self, markup: str):
        self.markup = markup

    def to_bytes(self) -> bytes:
        return b"%PDF-fake\n" + self.markup.encode("utf-8")


class FakePdfRenderer:
    """Records markup instead of laying it out"""

    def __init__(self):
        self.calls: List[tuple[str, PdfOptions]] = []

    def render_from_markup(self, markup: str, options: PdfOptions) -> FakePdfDocument:
        self.calls.append((markup, options))
        return FakePdfDocument(markup)


@pytest.fixture
def configuration() -> DocumentConfiguration:
    return DocumentConfiguration(
        support_email="support@example.com",
        signature="Client Services",
        tax_rate=Decimal("0.15"),
    )


@pytest.fixture
def make_application() -> Callable[..., Application]:
    """Factory for application snapshots with sensible defaults"""

    def factory(
        state: ApplicationState = ApplicationState.ACTIVATED,
        products: Optional[List[Product]] = None,
        is_legal_entity: bool = False,
        legal_entity: Optional[LegalEntity] = None,
        current_review: Optional[Review] = None,
        application_id: Optional[uuid.UUID] = None,
    ) -> Application:
        if products is None:
            products = [
                Product(
                    product_id="p1",
                    name="Retirement Annuity",
                    funds=[
                        Fund(fund_id="f1", name="Balanced Fund", amount=Decimal("100.00"), fees=Decimal("10.00")),
                        Fund(fund_id="f2", name="Equity Fund", amount=Decimal("200.00"), fees=Decimal("20.00")),
                    ],
                ),
                Product(
                    product_id="p2",
                    name="Tax Free Savings",
                    funds=[Fund(fund_id="f3", name="Money Market", amount=Decimal("50.00"), fees=Decimal("0.00"))],
                ),
            ]
        return Application(
            id=application_id or uuid.uuid4(),
            reference_number="APP-0001",
            state=state,
            person=Person(first_name="Thandi", surname="Nkosi"),
            date=date(2024, 3, 15),
            is_legal_entity=is_legal_entity,
            legal_entity=legal_entity,
            products=products,
            current_review=current_review,
        )

    return factory


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def persist_application(db: Session) -> Callable[[Application], ApplicationRecord]:
    """Store a domain application snapshot in the test database"""

    def persist(application: Application) -> ApplicationRecord:
        record = ApplicationRecord(
            id=application.id,
            reference_number=application.reference_number,
            state=application.state.value,
            applied_on=application.date,
            is_legal_entity=application.is_legal_entity,
            legal_entity_name=application.legal_entity.name if application.legal_entity else None,
            legal_entity_registration_number=(
                application.legal_entity.registration_number if application.legal_entity else None
            ),
        )
        record.applicant = ApplicantRecord(
            first_name=application.person.first_name,
            surname=application.person.surname,
        )
        for product_position, product in enumerate(application.products):
            product_record = ProductRecord(name=product.name, position=product_position)
            product_record.funds = [
                FundRecord(name=fund.name, amount=fund.amount, fees=fund.fees, position=fund_position)
                for fund_position, fund in enumerate(product.funds)
            ]
            record.products.append(product_record)
        if application.current_review is not None:
            record.reviews.append(
                ReviewRecord(
                    reason=application.current_review.reason,
                    reviewed_on=application.current_review.reviewed_on,
                )
            )
        db.add(record)
        db.commit()
        return record

    return persist


@pytest.fixture
def pdf_renderer() -> FakePdfRenderer:
    return FakePdfRenderer()


@pytest.fixture
def client(db: Session, pdf_renderer: FakePdfRenderer, configuration: DocumentConfiguration) -> TestClient:
    """Create FastAPI test client wired to the test database and a fake PDF renderer"""
    app = create_app()

    def override_get_document_generator():
        return DocumentGenerator(
            store=ApplicationRepository(db),
            path_provider=SettingsTemplatePathProvider(),
            view_renderer=JinjaViewRenderer(),
            pdf_renderer=pdf_renderer,
            configuration=configuration,
            logger=logging.getLogger("application_docs.services.document_generator"),
        )

    app.dependency_overrides[get_document_generator] = override_get_document_generator
    return TestClient(app)


@pytest.fixture
def templates_base_uri() -> str:
    return PACKAGED_TEMPLATES_DIR.as_uri()
