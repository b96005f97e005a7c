"""Page body rendering: Markdown or plain escaping."""

from enum import Enum

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from markupsafe import Markup, escape

from flatwiki.core.models import Page, RenderedPage

# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class RenderError(Exception):
    """Raised when a page body cannot be converted to HTML."""


class RenderMode(str, Enum):
    """How a page body is turned into HTML."""

    MARKDOWN = "markdown"
    ESCAPE = "escape"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        """Add strikethrough pattern to markdown parser."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


class EscapeHtmlExtension(Extension):
    """Treat raw HTML in the source as literal text.

    Without the raw HTML block preprocessor and inline pattern, tags stay in
    ordinary text nodes and are escaped on serialization.
    """

    def extendMarkdown(self, md: Markdown) -> None:
        """Remove raw HTML handling from the parser."""
        md.preprocessors.deregister("html_block", strict=False)
        md.inlinePatterns.deregister("html", strict=False)


def create_parser() -> Markdown:
    """Create a Markdown parser for page bodies.

    Returns:
        Configured Markdown parser instance. Instances keep state between
        conversions, so callers should not share one across requests.
    """
    return Markdown(
        extensions=[
            "fenced_code",
            "tables",
            "sane_lists",  # Better list handling
            "smarty",  # Smart quotes and dashes
            "pymdownx.tasklist",  # Task lists with checkboxes
            StrikethroughExtension(),  # ~~strikethrough~~
            EscapeHtmlExtension(),  # must come last
        ]
    )


def render_escaped(page: Page) -> RenderedPage:
    """Show the body verbatim, with HTML special characters escaped."""
    return RenderedPage(title=page.title, html=escape(page.text))


def render_markdown(page: Page) -> RenderedPage:
    """Render the body as Markdown."""
    try:
        html = create_parser().convert(page.text)
    except Exception as e:
        raise RenderError(f"Failed to render {page.title}: {e}") from e
    return RenderedPage(title=page.title, html=Markup(html))


def render_page(page: Page, mode: RenderMode = RenderMode.MARKDOWN) -> RenderedPage:
    """Render a page with the given policy."""
    if mode is RenderMode.ESCAPE:
        return render_escaped(page)
    return render_markdown(page)
