"""Joining template locations onto a base URI or directory"""

SEPARATOR = "/"


def combine_template_path(base_location: str, template_path: str) -> str:
    """
    Join a base location and a template-relative path with a single separator.

    The base always gains a trailing separator when it lacks one. A leading
    separator on the template path is dropped unless the path is that single
    character, which is passed through as is.

    Example:
        ("https://x.com", "/tpl/a.html") -> "https://x.com/tpl/a.html"
        ("https://x.com/", "tpl/a.html") -> "https://x.com/tpl/a.html"
    """
    if not base_location.endswith(SEPARATOR):
        base_location += SEPARATOR

    if template_path.startswith(SEPARATOR) and len(template_path) > 1:
        template_path = template_path[1:]

    return f"{base_location}{template_path}"
