"""Inline wiki-link rewriting on rendered HTML."""

import re

from markupsafe import Markup

from flatwiki.core.models import RenderedPage

# Pattern for wiki links: [PageName]
WIKI_LINK_PATTERN = re.compile(r"\[([A-Za-z0-9]+)\]")
WIKI_LINK_TEMPLATE = r'<a href="/view/\1">\1</a>'


def rewrite_links(page: RenderedPage) -> RenderedPage:
    """Turn every ``[Token]`` in the rendered HTML into a link to its page.

    Targets are not checked for existence; following a link to a missing page
    leads to its edit form.
    """
    html = WIKI_LINK_PATTERN.sub(WIKI_LINK_TEMPLATE, str(page.html))
    return RenderedPage(title=page.title, html=Markup(html))
