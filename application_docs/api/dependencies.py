"""Dependency injection for FastAPI endpoints"""

import logging
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from application_docs.config import settings
from application_docs.infrastructure.database.repositories import ApplicationRepository
from application_docs.infrastructure.database.session import get_db
from application_docs.infrastructure.rendering.html import JinjaViewRenderer
from application_docs.infrastructure.rendering.pdf import WeasyPrintPdfRenderer
from application_docs.infrastructure.templates.paths import SettingsTemplatePathProvider
from application_docs.services.document_generator import DocumentGenerator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_document_generator(db: Session = Depends(get_db)) -> DocumentGenerator:
    """Wire the document pipeline to the database and rendering adapters"""
    return DocumentGenerator(
        store=ApplicationRepository(db),
        path_provider=SettingsTemplatePathProvider(),
        view_renderer=JinjaViewRenderer(),
        pdf_renderer=WeasyPrintPdfRenderer(),
        configuration=settings.document_configuration(),
        logger=logging.getLogger("application_docs.services.document_generator"),
    )
