"""In-review message derived from the reason recorded on a review"""

from typing import Optional

from application_docs.constants import IN_REVIEW_PREAMBLE

ADDRESS_VERIFICATION = " pending outstanding address verification for FICA purposes."
BANK_VERIFICATION = " pending outstanding bank account verification."
SUSPICIOUS_BEHAVIOUR = " because of suspicious account behaviour. Please contact support ASAP."

# Checked in order, first match wins
_REASON_MESSAGES = (
    ("address", ADDRESS_VERIFICATION),
    ("bank", BANK_VERIFICATION),
)


def resolve_in_review_message(reason: Optional[str]) -> str:
    """Build the explanation shown on in-review documents"""
    reason = reason or ""
    for keyword, suffix in _REASON_MESSAGES:
        if keyword in reason:
            return IN_REVIEW_PREAMBLE + suffix

    return IN_REVIEW_PREAMBLE + SUSPICIOUS_BEHAVIOUR
