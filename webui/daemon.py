"""
webui.daemon
------------
Page server built on FastAPI.

Each GET /pages/{name} renders the page layout into a fresh document, runs
the page bundle on it and returns the elements with the behaviors the
initializers attached. Add ``?_ui_performance_trace=1`` to the URL to get
per-initializer timings in the log.
"""
import json
import logging
import socket
import sys

import typer
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from common.app_setup import setup_logging
from .errors import PageNotFoundError
from .pages import load_pages, render_page
from .settings import BootstrapSettings, load_settings

logger = logging.getLogger(__name__)


class ElementView(BaseModel):
    tag: str
    id: str | None = None
    classes: list[str] = Field(default_factory=list)
    attrs: dict[str, str] = Field(default_factory=dict)
    behaviors: list[str] = Field(default_factory=list)


class PageView(BaseModel):
    name: str
    title: str
    ready_state: str
    elements: list[ElementView]


app = FastAPI(title="pagewire")


def get_server():
    # Helper to get the running server instance
    return getattr(app.state, "uvicorn_server", None)


def get_settings() -> BootstrapSettings:
    settings = getattr(app.state, "settings", None)
    if settings is None:
        settings = load_settings()
        app.state.settings = settings
    return settings


@app.post("/shutdown")
def shutdown():
    """Shutdown the server gracefully."""
    logger.info("Shutdown requested via /shutdown endpoint.")
    server = get_server()
    if server:
        server.should_exit = True
    return {"message": "Server shutting down"}


@app.get("/status")
def status():
    """Health/status endpoint for the page server."""
    server = get_server()
    state = "shutting_down" if server and server.should_exit else "ok"
    return {"status": state, "pages": len(load_pages())}


@app.get("/pages")
def list_pages() -> list[str]:
    return sorted(load_pages())


@app.get("/pages/{name}", response_model=PageView)
def get_page(name: str, request: Request) -> PageView:
    """Render a page and return its elements with their wired behaviors."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    try:
        document = render_page(name, url=url, settings=get_settings())
    except PageNotFoundError as exc:
        logger.warning(exc.message)
        raise HTTPException(status_code=404, detail=exc.message)
    return PageView(
        name=name,
        title=load_pages()[name].title,
        ready_state=document.ready_state,
        elements=[ElementView(**el.to_dict()) for el in document.elements],
    )


app_cli = typer.Typer()

@app_cli.command()
def run(port: int = typer.Option(None, help="Port to run the server on (auto if not set)")):
    """Run the page server with Uvicorn on localhost, reporting the actual port used."""
    setup_logging(app_name="pagewire", daemon=True)
    try:
        app.state.settings = load_settings()
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(2)
    if port is None or port == 0:
        # Bind to port 0 to get a free port, then close and reuse
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(('127.0.0.1', 0))
            port = s.getsockname()[1]
        logger.info(f"Selected port: {port}")
        print(json.dumps({"event": "port_selected", "port": port}), flush=True)
    else:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind(('127.0.0.1', port))
            except OSError:
                logger.error(f"Port {port} is already in use.")
                sys.exit(98)  # 98 = EADDRINUSE
        logger.info(f"Using port: {port}")
        print(json.dumps({"event": "port_used", "port": port}), flush=True)
    config = uvicorn.Config(app, host="127.0.0.1", port=port, log_level="info")
    server = uvicorn.Server(config)
    app.state.uvicorn_server = server  # Store server instance for shutdown
    logger.info(f"Starting Uvicorn server on port {port}")
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt in main thread")
    logger.info("Server stopped")


if __name__ == "__main__":
    app_cli()
