"""URL path helpers."""

from urllib.parse import quote


def resource_path(template: str, **segments: str) -> str:
    """Fill ``{name}`` placeholders of a path template with escaped segments."""
    return template.format(**{key: quote(str(value), safe="") for key, value in segments.items()})
