"""FlatWiki FastAPI application."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from markupsafe import Markup

from flatwiki.config import Settings, settings
from flatwiki.core.links import rewrite_links
from flatwiki.core.models import Page
from flatwiki.core.renderer import RenderError, RenderMode, render_page
from flatwiki.core.routing import InvalidPath, parse_action_path
from flatwiki.core.storage import FileStorage, Storage

logger = logging.getLogger(__name__)

templates_path = Path(__file__).parent / "templates"
static_path = Path(__file__).parent / "static"

FALLBACK_CONTENT = Markup("Failed to load ...")

router = APIRouter()


# ========== Dependencies ==========


def get_storage(request: Request) -> Storage:
    """Page store shared by all requests."""
    return request.app.state.storage


def app_path(request: Request) -> str:
    """Request path relative to the application root."""
    path = request.scope["path"]
    root_path = request.scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        path = path[len(root_path) :]
    return path


def valid_title(request: Request) -> str:
    """Validate the request path and return the page title it names.

    Runs before any handler work, so a rejected path never reaches storage.
    """
    try:
        action = parse_action_path(app_path(request))
    except InvalidPath:
        raise HTTPException(status_code=404, detail="Not Found") from None
    return action.title


# ========== Template rendering ==========


def render_template(request: Request, name: str, **context) -> Response:
    """Render an operation template inside the shared chrome.

    A broken operation template is replaced by a fixed fallback message; a
    broken chrome is a server error.
    """
    state = request.app.state
    try:
        content = Markup(state.templates.get_template(name).render(**context))
    except TemplateError:
        logger.exception("Failed to render template %s", name)
        content = FALLBACK_CONTENT

    try:
        return state.templates.TemplateResponse(
            request,
            "main.html",
            {"app_title": state.settings.app_title, "content": content},
        )
    except TemplateError as e:
        logger.exception("Failed to render page chrome")
        return PlainTextResponse(str(e), status_code=500)


# ========== Routes ==========


@router.get("/")
async def index(request: Request):
    """Send visitors to the front page."""
    front_page = request.app.state.settings.front_page
    return RedirectResponse(url=f"/view/{front_page}", status_code=302)


@router.api_route("/view/{title}", methods=["GET", "POST"], response_class=HTMLResponse)
async def view_page(
    request: Request,
    page_title: str = Depends(valid_title),
    storage: Storage = Depends(get_storage),
):
    """View a wiki page."""
    page = await storage.load(page_title)

    if page is None:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{page_title}", status_code=302)

    try:
        rendered = rewrite_links(render_page(page, request.app.state.render_mode))
    except RenderError as e:
        logger.exception("Failed to render page %s", page_title)
        return PlainTextResponse(str(e), status_code=500)
    return render_template(request, "view.html", page=rendered)


@router.get("/edit/{title}", response_class=HTMLResponse)
async def edit_page(
    request: Request,
    page_title: str = Depends(valid_title),
    storage: Storage = Depends(get_storage),
):
    """Edit page form."""
    page = await storage.load(page_title)
    exists = page is not None
    if page is None:
        # New page
        page = Page(title=page_title)

    return render_template(request, "edit.html", page=page, exists=exists)


@router.post("/save/{title}")
async def save_page(
    page_title: str = Depends(valid_title),
    storage: Storage = Depends(get_storage),
    body: str = Form(""),
):
    """Save page content."""
    try:
        await storage.save(page_title, body.encode("utf-8"))
    except OSError as e:
        logger.warning("Failed to save page %s: %s", page_title, e)
        return PlainTextResponse(str(e), status_code=500)

    return RedirectResponse(url=f"/view/{page_title}", status_code=302)


# ========== Application ==========


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Everything on ``app.state`` is set up here and only read afterwards.
    """
    app_settings = app_settings or settings

    # Paths with a trailing slash are invalid, not redirected.
    app = FastAPI(
        title=app_settings.app_title,
        debug=app_settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.storage = FileStorage(app_settings.data_dir)
    app.state.templates = Jinja2Templates(directory=str(templates_path))
    app.state.render_mode = RenderMode(app_settings.render_mode)

    assets_dir = app_settings.assets_dir or static_path
    app.mount(
        "/assets",
        StaticFiles(directory=str(assets_dir), check_dir=False),
        name="assets",
    )
    app.include_router(router)
    return app


app = create_app()
