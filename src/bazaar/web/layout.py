"""
Root page layout: document head, navbar and the main content slot.
"""
from html import escape

from .navigation import render_navbar

METADATA = {
    "title": "Bazaar",
    "description": "A modern platform for online shopping",
}


def render_layout(content: str, metadata: dict[str, str] = METADATA) -> str:
    """
    Wrap already-rendered `content` markup in the full HTML document.
    Only the metadata values are escaped here; `content` is trusted markup.
    """
    return (
        "<!DOCTYPE html>"
        '<html class="scroll-smooth" lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        f"<title>{escape(metadata['title'])}</title>"
        f'<meta name="description" content="{escape(metadata["description"])}">'
        "</head>"
        '<body class="antialiased">'
        f"{render_navbar()}"
        f"<main>{content}</main>"
        "</body>"
        "</html>"
    )
