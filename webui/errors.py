"""This file defines the custom exceptions raised by the webui package"""

import logging
mylogger = logging.getLogger(__name__)

class WebUIError(Exception):
    """Base exception for webui errors, with an optional log of the message."""
    def __init__(self, message="A webui error occurred", log=False):
        self.message = message
        super().__init__(self.message)
        if log:
            mylogger.error(message)

class NoDocumentError(WebUIError):
    """Raised when an initializer asks for the current document before one is set."""
    def __init__(self, message="No current document is set", log=False):
        super().__init__(message, log)

class PageNotFoundError(WebUIError):
    """Raised when a page layout name is unknown."""
    def __init__(self, page: str, log=False):
        self.page = page
        super().__init__(f"Unknown page: {page!r}", log)
