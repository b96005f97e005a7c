"""Data models for FlatWiki."""

from typing import Annotated

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, StringConstraints

Title = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9]+$")]


class Page(BaseModel):
    """A wiki page as stored on disk."""

    model_config = ConfigDict(frozen=True)

    title: Title
    body: bytes = b""

    @property
    def text(self) -> str:
        """Return the body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")


class RenderedPage(BaseModel):
    """A page whose body has been turned into markup-safe HTML."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: Title
    html: Markup
