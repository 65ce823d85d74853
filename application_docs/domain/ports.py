"""Interfaces of the collaborators the document pipeline depends on"""

import uuid
from typing import Optional, Protocol

from application_docs.domain.documents import PdfOptions
from application_docs.domain.models import Application, ViewModel


class ApplicationStore(Protocol):
    def find_application_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """Return the single application with this id, or None"""
        ...


class TemplatePathProvider(Protocol):
    def resolve(self, template_key: str) -> str:
        """Return the template path registered for a template key"""
        ...


class ViewRenderer(Protocol):
    def render(self, full_path: str, view_model: ViewModel) -> str:
        """Render the template at full_path into HTML markup"""
        ...


class PdfDocument(Protocol):
    def to_bytes(self) -> bytes:
        ...


class PdfRenderer(Protocol):
    def render_from_markup(self, markup: str, options: PdfOptions) -> PdfDocument:
        """Lay out HTML markup as a PDF document"""
        ...
