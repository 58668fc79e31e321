"""
Reusable logging and print setup for all parts of the project.

Functions:
    setup_logging      - Configure and return the root logger.
    set_print_logger   - Set the logger for print_and_log and print_error.
    monkeypatch_print  - Replace built-in print with rich print.
    print_and_log      - Print and log an info message.
    print_error        - Print and log an error message.
"""

import logging
import logging.handlers
import os
from typing import Optional
import builtins
from rich import print as rich_print
from rich.logging import RichHandler
import sys

# Module-level variable to hold the logger for print_and_log and print_error
_print_logger = None

def setup_logging(app_name: str = "pagewire", daemon: bool = False, loglevel: int = logging.INFO,
                  logfile: Optional[str] = None, console: bool = False) -> logging.Logger:
    """
    Set up logging for the application.
    - If daemon=True, logs to syslog (Linux only), or stderr when /dev/log is missing.
    - Otherwise, logs to a file in ~/.<app_name>/log.txt or to a custom logfile.
    - If console=True, log records are also rendered on the terminal by rich.
    Returns the configured logger.
    """
    logger = logging.getLogger()
    logger.setLevel(loglevel)
    from logging import Handler
    if daemon:
        formatter = logging.Formatter(f'%(asctime)s %(levelname)s %(process)d [{app_name}] %(message)s')
        try:
            handler: Handler = logging.handlers.SysLogHandler(address='/dev/log')
        except OSError as e:
            print(f"Syslog not available ({e}), logging to stderr", file=sys.stderr)
            handler = logging.StreamHandler()
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(process)d %(name)s %(message)s')
        if logfile is None:
            log_dir = os.path.expanduser(f"~/.{app_name}")
            os.makedirs(log_dir, exist_ok=True)
            logfile = os.path.join(log_dir, "log.txt")
        handler = logging.FileHandler(logfile)

    # Remove any existing handlers
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if console:
        logger.addHandler(RichHandler(show_path=False, markup=False))
    set_print_logger(logger)
    logger.debug(f"Logging initialized for {app_name} (daemon={daemon})")
    return logger

def set_print_logger(logger: Optional[logging.Logger]):
    """
    Set the logger to be used by print_and_log and print_error.
    setup_logging calls this for you.
    """
    global _print_logger
    _print_logger = logger

def monkeypatch_print():
    """
    Monkeypatch built-in print to use rich.print for all output (no logging).
    """
    def print_to_rich(*args, **kwargs):
        rich_print(*args, **kwargs)
    builtins.print = print_to_rich  # monkeypatch print


def print_and_log(message: str, **kwargs):
    """
    Print to console (via print) and log as info.
    """
    print(message, **kwargs)
    if _print_logger is not None:
        _print_logger.info(message)

def print_error(message: str, **kwargs):
    """
    Print and log an error message (stderr and error level), using the logger set by set_print_logger.
    """
    print(f'[bold red]{message}[/bold red]', file=sys.stderr, **kwargs)
    if _print_logger is not None:
        _print_logger.error(message)
