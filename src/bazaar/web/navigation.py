"""
Site navigation: route constants and the navbar link list.
"""
from html import escape
from typing import NamedTuple


class ROUTES:
    HOME = "/"
    ABOUT = "/about"


class NavLink(NamedTuple):
    id: str
    href: str
    label: str


# Rendered in this order
NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(id="home", href=ROUTES.HOME, label="Home"),
    NavLink(id="about", href=ROUTES.ABOUT, label="About"),
)


def render_navbar(links: tuple[NavLink, ...] = NAV_LINKS) -> str:
    items = "".join(
        f'<li id="nav-{escape(link.id)}"><a href="{escape(link.href)}">{escape(link.label)}</a></li>'
        for link in links
    )
    return f'<nav><ul class="flex gap-3 py-3">{items}</ul></nav>'
