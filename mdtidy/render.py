"""Render markdown to HTML to check that a fix did not change the output.

Uses Python-Markdown with the extensions the docs site builds with.
"""
from markdown import markdown

EXTENSIONS = ['fenced_code', 'tables']


def render_html(text: str) -> str:
    return markdown(text, extensions=EXTENSIONS)


def render_changed(before: str, after: str) -> bool:
    return render_html(before) != render_html(after)
