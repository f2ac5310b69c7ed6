from __future__ import annotations
from typing import Callable
from urllib.parse import quote, urlencode
import logging
import webbrowser

from .errors import LinkOpenFailed

logger = logging.getLogger(__name__)

LINK_FAILURE_MESSAGE = "Failed to open link"

# Called as opener(uri, failure_message); returns True when the platform accepted the URI.
Opener = Callable[[str, str], bool]


def build_mailto(address: str, subject: str = "", body: str = "") -> str:
    """Builds a mail composition URI, percent-encoding the subject and body."""
    params = {k: v for k, v in (("subject", subject), ("body", body)) if v}
    uri = f"mailto:{address}"
    if params:
        uri += "?" + urlencode(params, quote_via=quote)
    return uri


def system_opener(uri: str, failure_message: str = LINK_FAILURE_MESSAGE) -> bool:
    """Opens `uri` with the browser of the machine running the app (local runs only)."""
    return webbrowser.open(uri)


class LinkDispatcher:
    """
    Hands outbound URIs to an opener.
    A launch reported as successful is a success; anything else raises LinkOpenFailed.
    """

    def __init__(self, opener: Opener) -> None:
        self.opener = opener

    def open(self, uri: str, failure_message: str = LINK_FAILURE_MESSAGE) -> None:
        if not uri:
            raise LinkOpenFailed(uri, "empty URI")
        try:
            launched = self.opener(uri, failure_message)
        except (webbrowser.Error, OSError) as e:
            logger.error("Opening '%s' failed", uri, exc_info=True)
            raise LinkOpenFailed(uri, str(e)) from e

        if not launched:
            logger.error("Platform refused to open '%s'", uri)
            raise LinkOpenFailed(uri, "no handler accepted the URI")
        logger.info("Opened link: %s", uri)
