"""
This file is the entry point for the 'pagewire' command-line tool.
Run 'pagewire' in your shell to use the CLI.

    pagewire load home --query _ui_performance_trace=1
"""
import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

import httpx
import psutil
import typer

from common.app_setup import setup_logging, monkeypatch_print, print_and_log, print_error
from .dom import Element
from .errors import PageNotFoundError
from .pages import load_pages, render_page
from .settings import load_settings

app = typer.Typer(add_completion=False, help="Render pagewire pages and manage the page server.")

DAEMON_MODULE = "webui.daemon"


@app.callback()
def main(
    logfile: Optional[str] = typer.Option(None, help="Log file (default: ~/.pagewire/log.txt)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages too"),
):
    """Set up logging so diagnostics reach both the log file and the terminal."""
    setup_logging(app_name="pagewire", loglevel=logging.DEBUG if verbose else logging.INFO,
                  logfile=logfile, console=True)
    monkeypatch_print()


def _describe(el: Element) -> str:
    label = el.tag
    if el.id:
        label += f"#{el.id}"
    if el.classes:
        label += "." + ".".join(el.classes)
    return label


@app.command()
def load(
    page: str = typer.Argument(..., help="Name of the page layout"),
    query: str = typer.Option("", help="Raw query string, e.g. _ui_performance_trace=1"),
    settings_file: Optional[Path] = typer.Option(None, "--settings", exists=True, dir_okay=False,
                                                 help="YAML or JSON bootstrap settings"),
):
    """Render a page locally and show which behaviors got wired."""
    try:
        settings = load_settings(settings_file)
    except ValueError as e:
        print_error(f"Invalid settings: {e}")
        raise typer.Exit(2)
    url = f"/pages/{page}" + (f"?{query.lstrip('?')}" if query else "")
    try:
        document = render_page(page, url=url, settings=settings)
    except PageNotFoundError as e:
        print_error(e.message)
        raise typer.Exit(1)
    for el in document.elements:
        if el.behaviors:
            print_and_log(f"{_describe(el)}: {', '.join(el.behaviors)}")
    wired = sum(1 for el in document.elements if el.behaviors)
    print_and_log(f"Page {page!r} is {document.ready_state}: {wired}/{len(document.elements)} elements wired.")


@app.command()
def list_pages():
    """List the page layouts the server knows about."""
    for name, layout in sorted(load_pages().items()):
        print(f"{name}: {layout.title} ({len(layout.elements)} elements)")


@app.command()
def start_server(port: int = typer.Option(None, help="Port to run the server on (auto if not set)")):
    """Start a page server (daemon) in the background."""
    cmd = [sys.executable, '-m', DAEMON_MODULE, '--port', str(port or 0)]
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True, close_fds=True)
    except OSError as e:
        print_error(f"Failed to start page server: {e}")
        raise typer.Exit(1)
    selected_port = None
    assert proc.stdout is not None
    # The daemon announces its port as a JSON event line
    for _ in range(10):
        line = proc.stdout.readline()
        if not line:
            break
        try:
            msg = json.loads(line)
        except json.JSONDecodeError:
            continue
        if msg.get("event") in ("port_selected", "port_used"):
            selected_port = int(msg["port"])
            break
    if selected_port is None:
        print_error(f"Page server (PID {proc.pid}) did not report a port.")
        raise typer.Exit(1)
    print_and_log(f"Started page server with PID {proc.pid} on port {selected_port}.")


@app.command()
def list_servers():
    """List running page servers and their listening ports."""
    found = False
    for proc in psutil.process_iter(['pid', 'name', 'cmdline']):
        try:
            if proc.info['cmdline'] and DAEMON_MODULE in ' '.join(proc.info['cmdline']):
                cons = proc.net_connections(kind='inet')
                listen_ports = [c.laddr.port for c in cons if c.status == psutil.CONN_LISTEN]
                ports = ', '.join(str(p) for p in listen_ports) or 'none'
                print_and_log(f"PID: {proc.pid} | Port: {ports} | Cmd: {' '.join(proc.info['cmdline'])}")
                found = True
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    if not found:
        print_and_log("No running page servers found.")


@app.command()
def stop_server(port: int = typer.Argument(..., help="Port of the server")):
    """Gracefully stop a running page server via its REST API (localhost only)."""
    url = f"http://127.0.0.1:{port}/shutdown"
    try:
        response = httpx.post(url, timeout=5)
    except httpx.HTTPError as e:
        print_error(f"Error contacting server at 127.0.0.1:{port}: {e}")
        raise typer.Exit(1)
    if response.status_code != 200:
        print_error(f"Failed to stop server at 127.0.0.1:{port}: {response.status_code} {response.text}")
        raise typer.Exit(1)
    print_and_log(f"Server at 127.0.0.1:{port} stopped gracefully.")


if __name__ == "__main__":
    app()
