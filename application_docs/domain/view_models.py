"""View model construction - maps an application snapshot to its document data"""

from typing import Union

from application_docs.domain.models import (
    ActivatedApplicationViewModel,
    Application,
    ApplicationState,
    DocumentConfiguration,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
    UnsupportedState,
    ViewModel,
)
from application_docs.domain.portfolio import calculate_portfolio_total, flatten_funds
from application_docs.domain.review import resolve_in_review_message


def full_name(application: Application) -> str:
    return f"{application.person.first_name} {application.person.surname}"


def build_view_model(
    application: Application,
    configuration: DocumentConfiguration,
) -> Union[ViewModel, UnsupportedState]:
    """
    Select the view model for the application's current state.

    State table:
    - Pending:   base fields
    - Activated: base fields + legal entity + portfolio
    - InReview:  activated fields + review message and review record
    - anything else: UnsupportedState, no document is produced
    """
    base = dict(
        reference_number=application.reference_number,
        state=application.state.description,
        full_name=full_name(application),
        applied_on=application.date,
        support_email=configuration.support_email,
        signature=configuration.signature,
    )

    if application.state == ApplicationState.PENDING:
        return PendingApplicationViewModel(**base)

    if application.state not in (ApplicationState.ACTIVATED, ApplicationState.IN_REVIEW):
        return UnsupportedState(state=application.state_label)

    funds = flatten_funds(application.products)
    portfolio = dict(
        legal_entity=application.legal_entity if application.is_legal_entity else None,
        portfolio_funds=funds,
        portfolio_total_amount=calculate_portfolio_total(funds, configuration.tax_rate),
    )

    if application.state == ApplicationState.ACTIVATED:
        return ActivatedApplicationViewModel(**base, **portfolio)

    review = application.current_review
    return InReviewApplicationViewModel(
        **base,
        **portfolio,
        in_review_message=resolve_in_review_message(review.reason if review else None),
        in_review_information=review,
    )
