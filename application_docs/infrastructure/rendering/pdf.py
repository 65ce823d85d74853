"""HTML to PDF conversion using WeasyPrint"""

import re

from application_docs.domain.documents import HeaderRepeat, PageNumbers, PdfOptions
from application_docs.domain.exceptions import PdfRenderError

HEADER_ELEMENT = "document-header"

_BODY_OPEN_TAG = re.compile(r"<body[^>]*>", re.IGNORECASE)


def build_page_css(options: PdfOptions) -> str:
    """Paged-media rules for page numbers and the running header"""
    rules = [f".pdf-running-header {{ position: running({HEADER_ELEMENT}); }}"]

    page_rule = "size: A4; margin: 25mm 18mm 20mm 18mm;"
    if options.page_numbers == PageNumbers.NUMERIC:
        page_rule += " @bottom-center { content: counter(page); font-size: 9pt; }"

    header_box = f"@top-center {{ content: element({HEADER_ELEMENT}); width: 100%; }}"
    if options.header.repeat == HeaderRepeat.FIRST_PAGE_ONLY:
        rules.append(f"@page {{ {page_rule} }}")
        rules.append(f"@page :first {{ {header_box} }}")
    else:
        rules.append(f"@page {{ {page_rule} {header_box} }}")

    return "\n".join(rules)


def inject_header(markup: str, header_html: str) -> str:
    """Place the header markup at the start of the body so it can run into the page margin"""
    header = f'<div class="pdf-running-header">{header_html}</div>'
    match = _BODY_OPEN_TAG.search(markup)
    if match is None:
        return header + markup
    return markup[: match.end()] + header + markup[match.end():]


class WeasyPrintDocument:
    """Laid-out PDF document"""

    def __init__(self, document):
        self.document = document

    def to_bytes(self) -> bytes:
        try:
            return self.document.write_pdf()
        except Exception as e:
            raise PdfRenderError(f"PDF serialisation failed: {e}") from e


class WeasyPrintPdfRenderer:
    """Renders HTML markup to PDF with WeasyPrint"""

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url

    def render_from_markup(self, markup: str, options: PdfOptions) -> WeasyPrintDocument:
        """
        Lay out markup as a paged document.

        Raises:
            PdfRenderError: If WeasyPrint cannot lay out the markup
        """
        # Lazy import to avoid loading WeasyPrint at module import
        from weasyprint import CSS, HTML

        try:
            html = HTML(string=inject_header(markup, options.header.html), base_url=self.base_url)
            document = html.render(stylesheets=[CSS(string=build_page_css(options))])
        except Exception as e:
            raise PdfRenderError(f"PDF layout failed: {e}") from e

        return WeasyPrintDocument(document)
