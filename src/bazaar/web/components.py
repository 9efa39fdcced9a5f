from html import escape


def external_link(href: str, text: str, italicize: bool = False) -> str:
    """Anchor that opens in a new tab, styled as an in-text link."""
    classes = "app-text-link italic" if italicize else "app-text-link"
    return f'<a class="{classes}" href="{escape(href)}" target="_blank">{escape(text)}</a>'
