"""GET /v1/applications/{application_id}/document - PDF summary endpoint"""

import time
import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import Response

from application_docs.api.dependencies import get_document_generator, get_request_id
from application_docs.config import settings
from application_docs.domain.exceptions import PdfRenderError, TemplateRenderError
from application_docs.infrastructure.observability.logging import log_document_generated
from application_docs.services.document_generator import DocumentGenerator

router = APIRouter()

PDF_MEDIA_TYPE = "application/pdf"


@router.get("/applications/{application_id}/document")
def get_application_document(
    application_id: str,
    request: Request,
    generator: DocumentGenerator = Depends(get_document_generator),
):
    """
    Render the PDF summary of an application in its current state.

    Returns:
        application/pdf body; 404 when the application is missing or its
        state has no document
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        application_uuid = uuid.UUID(application_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid application ID format")

    try:
        content = generator.generate(application_uuid, settings.template_base_uri)

    except (TemplateRenderError, PdfRenderError) as e:
        logging.error(f"Document rendering failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail="Document rendering failed")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if content is None:
        raise HTTPException(status_code=404, detail="No document available for this application")

    duration_ms = (time.time() - start_time) * 1000
    log_document_generated(request_id, application_id, len(content), duration_ms)

    return Response(
        content=content,
        media_type=PDF_MEDIA_TYPE,
        headers={"Content-Disposition": f'inline; filename="application-{application_uuid}.pdf"'},
    )
