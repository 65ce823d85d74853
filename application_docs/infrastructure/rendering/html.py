"""HTML rendering of view models with Jinja2 templates"""

from dataclasses import fields
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx
from jinja2 import TemplateError, select_autoescape
from jinja2.sandbox import SandboxedEnvironment

from application_docs.config import settings
from application_docs.domain.exceptions import TemplateRenderError
from application_docs.domain.models import ViewModel
from application_docs.infrastructure.rendering.filters import format_currency, format_date


def build_environment() -> SandboxedEnvironment:
    """Sandboxed Jinja2 environment shared by every document template"""
    env = SandboxedEnvironment(
        autoescape=select_autoescape(default_for_string=True, default=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = format_currency
    env.filters["date"] = format_date
    return env


class JinjaViewRenderer:
    """Loads a template from a file path, file:// or http(s):// URI and renders it"""

    def __init__(self, http_client: httpx.Client | None = None, timeout: float | None = None):
        self.env = build_environment()
        self.timeout = timeout or settings.http_timeout_seconds
        self.http_client = http_client

    def render(self, full_path: str, view_model: ViewModel) -> str:
        """
        Render the template at full_path with the view model's fields.

        The view model is exposed both as `model` and as top-level names.

        Raises:
            TemplateRenderError: If the template cannot be fetched or rendered
        """
        source = self.load_source(full_path)
        try:
            template = self.env.from_string(source)
            context = {f.name: getattr(view_model, f.name) for f in fields(view_model)}
            return template.render(model=view_model, **context)
        except (TemplateError, ArithmeticError, ValueError, TypeError) as e:
            raise TemplateRenderError(f"Template {full_path} failed to render: {e}") from e

    def load_source(self, full_path: str) -> str:
        scheme = urlparse(full_path).scheme
        if scheme in ("http", "https"):
            return self._fetch(full_path)

        if scheme == "file":
            path = Path(unquote(urlparse(full_path).path))
        else:
            path = Path(full_path)

        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateRenderError(f"Template {full_path} could not be read: {e}") from e

    def _fetch(self, url: str) -> str:
        try:
            if self.http_client is not None:
                response = self.http_client.get(url)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url)
            response.raise_for_status()
            return response.text

        except httpx.TimeoutException as e:
            raise TemplateRenderError(f"Template fetch timeout after {self.timeout}s: {url}") from e
        except httpx.HTTPStatusError as e:
            raise TemplateRenderError(f"Template fetch error: {e.response.status_code} for {url}") from e
        except httpx.RequestError as e:
            raise TemplateRenderError(f"Template fetch failed for {url}: {e}") from e
