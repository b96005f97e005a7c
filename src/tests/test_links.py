"""Unit tests for wiki-link rewriting."""

from markupsafe import Markup

from flatwiki.core.links import rewrite_links
from flatwiki.core.models import RenderedPage


def _rewrite(html: str) -> str:
    return str(rewrite_links(RenderedPage(title="Src", html=Markup(html))).html)


class TestRewriteLinks:
    def test_single_link(self):
        assert _rewrite("<p>[Foo]</p>") == '<p><a href="/view/Foo">Foo</a></p>'

    def test_two_independent_links(self):
        html = _rewrite("<p>[Foo] and [Bar2]</p>")
        assert '<a href="/view/Foo">Foo</a>' in html
        assert '<a href="/view/Bar2">Bar2</a>' in html
        assert html.count("<a ") == 2

    def test_empty_brackets_untouched(self):
        assert _rewrite("<p>[]</p>") == "<p>[]</p>"

    def test_non_alphanumeric_untouched(self):
        assert _rewrite("<p>[not a link] [a-b] [x_y]</p>") == "<p>[not a link] [a-b] [x_y]</p>"

    def test_double_brackets_rewrite_inner_token(self):
        assert _rewrite("[[Foo]]") == '[<a href="/view/Foo">Foo</a>]'

    def test_adjacent_tokens(self):
        html = _rewrite("[A][B]")
        assert html == '<a href="/view/A">A</a><a href="/view/B">B</a>'

    def test_inside_emphasis(self):
        html = _rewrite("<p><em>[Foo]</em></p>")
        assert html == '<p><em><a href="/view/Foo">Foo</a></em></p>'

    def test_keeps_title_and_markup_type(self):
        rendered = rewrite_links(RenderedPage(title="Src", html=Markup("[X]")))
        assert rendered.title == "Src"
        assert isinstance(rendered.html, Markup)
