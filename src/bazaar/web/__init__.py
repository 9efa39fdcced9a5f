"""
Static frontend shell: navbar, icon registry and page layout.
"""

from .components import external_link
from .icons import ICONS, Icon, render_icon
from .layout import METADATA, render_layout
from .navigation import NAV_LINKS, ROUTES, NavLink, render_navbar
from .pages import router

__all__ = [
    "ICONS",
    "Icon",
    "METADATA",
    "NAV_LINKS",
    "NavLink",
    "ROUTES",
    "external_link",
    "render_icon",
    "render_layout",
    "render_navbar",
    "router",
]
