"""Text cleanup for catalog descriptions."""

import html
import re

_TAG_RE = re.compile(r"<[^>]*>")


def clean_html(value: str) -> str:
    """Strip markup and decode entities from a catalog description.

    Example:
        >>> clean_html("<p>Keep your back&nbsp;straight &amp; tight</p>")
        'Keep your back straight & tight'
    """
    if not value:
        return ""
    text = _TAG_RE.sub("", value)
    return html.unescape(text).replace("\xa0", " ").strip()
