"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TemplateNotConfiguredError(DomainException):
    """No template path is configured for a template key"""

    pass


class TemplateRenderError(DomainException):
    """Template could not be loaded or rendered into markup"""

    pass


class PdfRenderError(DomainException):
    """Markup could not be converted into a PDF document"""

    pass
