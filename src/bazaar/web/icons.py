"""
Icon registry and renderer.

`ICONS` maps an icon name to its label and SVG markup; `render_icon` stamps the
caller's CSS class and the icon name onto the root `<svg>` element.
"""
from html import escape
from typing import NamedTuple


class Icon(NamedTuple):
    label: str
    svg: str


# TODO: replace the placeholder entry once real product icons are added
ICONS: dict[str, Icon] = {
    "next": Icon(
        label="Next.js",
        svg=(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 180 180" fill="none">'
            '<circle cx="90" cy="90" r="90" fill="black"/>'
            '<path d="M149.5 157.5L69.1 54H54v72h12.1V69.4l73.8 95.3a90 90 0 0 0 9.6-7.2z" fill="white"/>'
            '<rect x="115" y="54" width="12" height="72" fill="white"/>'
            '</svg>'
        ),
    ),
}


def render_icon(name: str, class_name: str | None = None) -> str:
    """
    Return the SVG markup for `name`.

    Raises:
        KeyError: if `name` is not registered.
    """
    icon = ICONS[name]
    attrs = f' name="{escape(name)}"'
    if class_name:
        attrs = f' class="{escape(class_name)}"' + attrs
    return icon.svg.replace("<svg", "<svg" + attrs, 1)
