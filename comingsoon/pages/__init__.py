"""Server-rendered HTML pages."""

from comingsoon.pages.root import render_launching_page

__all__ = ["render_launching_page"]
