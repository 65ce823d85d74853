"""Fixed values shared across the document pipeline"""

# Template keys resolved by the template path provider
PENDING_APPLICATION_TEMPLATE = "PendingApplication"
ACTIVATED_APPLICATION_TEMPLATE = "ActivatedApplication"
IN_REVIEW_APPLICATION_TEMPLATE = "InReviewApplication"

# Header markup printed on the first page of every document
PDF_HEADER_HTML = (
    '<div class="document-header">'
    "<strong>Application Summary</strong>"
    '<span class="document-header__notice">Private and confidential</span>'
    "</div>"
)

IN_REVIEW_PREAMBLE = "Your application has been placed in review"
