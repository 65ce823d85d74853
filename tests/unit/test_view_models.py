"""Unit tests for state-keyed view model construction"""

import pytest
from datetime import date
from decimal import Decimal
from application_docs.domain.models import (
    ActivatedApplicationViewModel,
    ApplicationState,
    InReviewApplicationViewModel,
    LegalEntity,
    PendingApplicationViewModel,
    Review,
    UnsupportedState,
)
from application_docs.domain.view_models import build_view_model

COMPANY = LegalEntity(name="Nkosi Holdings", registration_number="2019/123456/07")


def test_pending_view_model_base_fields(make_application, configuration):
    """Test pending applications get the base fields only"""
    application = make_application(state=ApplicationState.PENDING)
    view_model = build_view_model(application, configuration)

    assert isinstance(view_model, PendingApplicationViewModel)
    assert view_model.template_key == "PendingApplication"
    assert view_model.reference_number == "APP-0001"
    assert view_model.state == "Pending"
    assert view_model.full_name == "Thandi Nkosi"
    assert view_model.applied_on == date(2024, 3, 15)
    assert view_model.support_email == "support@example.com"
    assert view_model.signature == "Client Services"
    assert not hasattr(view_model, "portfolio_funds")


def test_activated_view_model_portfolio(make_application, configuration):
    """Test activated applications carry the flattened portfolio and total"""
    application = make_application(state=ApplicationState.ACTIVATED)
    view_model = build_view_model(application, configuration)

    assert isinstance(view_model, ActivatedApplicationViewModel)
    assert view_model.template_key == "ActivatedApplication"
    assert view_model.state == "Activated"
    assert [f.fund_id for f in view_model.portfolio_funds] == ["f1", "f2", "f3"]
    assert view_model.portfolio_total_amount == Decimal("48.00")


def test_activated_view_model_empty_products(make_application, configuration):
    """Test empty products give an empty portfolio and zero total"""
    application = make_application(state=ApplicationState.ACTIVATED, products=[])
    view_model = build_view_model(application, configuration)

    assert view_model.portfolio_funds == ()
    assert view_model.portfolio_total_amount == Decimal("0")


def test_legal_entity_only_when_flagged(make_application, configuration):
    """Test legal entity is dropped unless the application is for a legal entity"""
    flagged = make_application(is_legal_entity=True, legal_entity=COMPANY)
    unflagged = make_application(is_legal_entity=False, legal_entity=COMPANY)

    assert build_view_model(flagged, configuration).legal_entity == COMPANY
    assert build_view_model(unflagged, configuration).legal_entity is None


def test_in_review_view_model(make_application, configuration):
    """Test in-review applications carry the review message and record"""
    review = Review(reason="bank details outdated", reviewed_on=date(2024, 4, 1))
    application = make_application(
        state=ApplicationState.IN_REVIEW,
        current_review=review,
        is_legal_entity=True,
        legal_entity=COMPANY,
    )
    view_model = build_view_model(application, configuration)

    assert isinstance(view_model, InReviewApplicationViewModel)
    assert view_model.template_key == "InReviewApplication"
    assert view_model.state == "In Review"
    assert view_model.in_review_message == (
        "Your application has been placed in review pending outstanding bank account verification."
    )
    assert view_model.in_review_information is review
    assert view_model.legal_entity == COMPANY
    assert view_model.portfolio_total_amount == Decimal("48.00")


def test_in_review_without_review_record(make_application, configuration):
    """Test a missing review record falls back to the default message"""
    application = make_application(state=ApplicationState.IN_REVIEW, current_review=None)
    view_model = build_view_model(application, configuration)

    assert view_model.in_review_information is None
    assert view_model.in_review_message.endswith("Please contact support ASAP.")


@pytest.mark.parametrize("state", [ApplicationState.CLOSED, ApplicationState.DECLINED])
def test_unsupported_states(make_application, configuration, state):
    """Test states without a document are rejected explicitly"""
    view_model = build_view_model(make_application(state=state), configuration)
    assert view_model == UnsupportedState(state=state.value)


def test_tax_rate_comes_from_configuration(make_application, configuration):
    """Test the configured tax rate drives the total"""
    from dataclasses import replace

    doubled = replace(configuration, tax_rate=Decimal("0.30"))
    view_model = build_view_model(make_application(), doubled)
    assert view_model.portfolio_total_amount == Decimal("96.00")


def test_unrecognised_stored_state_is_unsupported(make_application, configuration):
    """Test a state this service does not know about is rejected with its stored label"""
    application = make_application(state=ApplicationState.parse("Suspended"))
    application.recorded_state = "Suspended"

    view_model = build_view_model(application, configuration)

    assert application.state == ApplicationState.UNKNOWN
    assert view_model == UnsupportedState(state="Suspended")
