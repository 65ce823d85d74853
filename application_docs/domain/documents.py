"""PDF rendering options applied to every generated document"""

from dataclasses import dataclass
from enum import Enum

from application_docs.constants import PDF_HEADER_HTML


class PageNumbers(str, Enum):
    NONE = "none"
    NUMERIC = "numeric"


class HeaderRepeat(str, Enum):
    FIRST_PAGE_ONLY = "first-page-only"
    ALL_PAGES = "all-pages"


@dataclass(frozen=True)
class HeaderOptions:
    repeat: HeaderRepeat
    html: str


@dataclass(frozen=True)
class PdfOptions:
    page_numbers: PageNumbers
    header: HeaderOptions


def default_pdf_options() -> PdfOptions:
    """Numeric page numbers with the fixed header on the first page only"""
    return PdfOptions(
        page_numbers=PageNumbers.NUMERIC,
        header=HeaderOptions(repeat=HeaderRepeat.FIRST_PAGE_ONLY, html=PDF_HEADER_HTML),
    )
