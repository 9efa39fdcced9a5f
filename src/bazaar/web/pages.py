"""
Static pages served as HTML. No state, no data fetching.
"""
from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from .components import external_link
from .icons import render_icon
from .layout import METADATA, render_layout
from .navigation import ROUTES

router = APIRouter()


@router.get(ROUTES.HOME, response_class=HTMLResponse, include_in_schema=False)
async def home_page():
    content = (
        f"<h1>{escape(METADATA['title'])}</h1>"
        f"<p>{escape(METADATA['description'])}</p>"
    )
    return render_layout(content)


@router.get(ROUTES.ABOUT, response_class=HTMLResponse, include_in_schema=False)
async def about_page():
    content = (
        "<h1>About</h1>"
        f"<p>{render_icon('next', class_name='h-6 w-6')} Built on "
        f"{external_link('https://fastapi.tiangolo.com', 'FastAPI', italicize=True)}.</p>"
    )
    return render_layout(content)
