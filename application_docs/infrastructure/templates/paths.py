"""Template key to template path lookup backed by settings"""

from typing import Mapping

from application_docs.config import settings
from application_docs.domain.exceptions import TemplateNotConfiguredError


class SettingsTemplatePathProvider:
    """Resolves template keys using the configured template_paths mapping"""

    def __init__(self, template_paths: Mapping[str, str] | None = None):
        self.template_paths = dict(template_paths or settings.template_paths)

    def resolve(self, template_key: str) -> str:
        """
        Raises:
            TemplateNotConfiguredError: If no path is registered for the key
        """
        try:
            return self.template_paths[template_key]
        except KeyError as e:
            raise TemplateNotConfiguredError(f"No template configured for '{template_key}'") from e
