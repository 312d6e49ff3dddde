from .page import PAGE_TEMPLATE, render_page

__all__ = [
    "PAGE_TEMPLATE",
    "render_page",
]
