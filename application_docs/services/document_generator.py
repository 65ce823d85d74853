"""Document generation - turns an application into PDF bytes"""

import logging
import uuid
from typing import Optional

from application_docs.domain.documents import default_pdf_options
from application_docs.domain.models import DocumentConfiguration, UnsupportedState
from application_docs.domain.paths import combine_template_path
from application_docs.domain.ports import (
    ApplicationStore,
    PdfRenderer,
    TemplatePathProvider,
    ViewRenderer,
)
from application_docs.domain.view_models import build_view_model
from application_docs.infrastructure.observability.metrics import (
    document_failures_counter,
    document_generation_histogram,
    documents_generated_counter,
    documents_skipped_counter,
)


class DocumentGenerator:
    """Renders the PDF summary for an application's current state"""

    def __init__(
        self,
        *,
        store: ApplicationStore,
        path_provider: TemplatePathProvider,
        view_renderer: ViewRenderer,
        pdf_renderer: PdfRenderer,
        configuration: DocumentConfiguration,
        logger: logging.Logger,
    ):
        self.store = store
        self.path_provider = path_provider
        self.view_renderer = view_renderer
        self.pdf_renderer = pdf_renderer
        self.configuration = configuration
        self.logger = logger

    def generate(self, application_id: uuid.UUID, base_location: str) -> Optional[bytes]:
        """
        Generate the PDF document for an application.

        Flow:
        1. Load the application snapshot
        2. Build the view model for its state
        3. Resolve the template and join it onto base_location
        4. Render the template to HTML
        5. Convert the HTML to PDF bytes

        Returns None, after logging a warning, when the application does not
        exist or is in a state with no document. Rendering failures are
        logged and re-raised.
        """
        application = self.store.find_application_by_id(application_id)
        if application is None:
            documents_skipped_counter.labels(reason="not_found").inc()
            self.logger.warning(
                f"No application found for id '{application_id}'",
                extra={"application_id": str(application_id)},
            )
            return None

        view_model = build_view_model(application, self.configuration)
        if isinstance(view_model, UnsupportedState):
            documents_skipped_counter.labels(reason="unsupported_state").inc()
            self.logger.warning(
                f"The application is in state '{view_model.state}' "
                "and no valid document can be generated for it.",
                extra={"application_id": str(application_id)},
            )
            return None

        template_path = self.path_provider.resolve(view_model.template_key)
        full_path = combine_template_path(base_location, template_path)

        with document_generation_histogram.time():
            try:
                view = self.view_renderer.render(full_path, view_model)
            except Exception as e:
                document_failures_counter.labels(stage="view").inc()
                self.logger.warning(
                    f"Error generating view: {e}",
                    extra={"application_id": str(application_id), "template": full_path},
                )
                raise

            try:
                pdf = self.pdf_renderer.render_from_markup(view, default_pdf_options())
                content = pdf.to_bytes()
            except Exception as e:
                document_failures_counter.labels(stage="pdf").inc()
                self.logger.warning(
                    f"Error generating pdf: {e}",
                    extra={"application_id": str(application_id)},
                )
                raise

        documents_generated_counter.labels(state=application.state.value).inc()
        return content
