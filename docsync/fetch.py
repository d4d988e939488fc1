"""Download the Bot API HTML reference with ``requests``."""

import requests

from core.logger import WireLogger

logger = WireLogger.get_logger()

_HEADERS = {"User-Agent": "tgwire-docsync/5.2", "Accept": "text/html"}


def fetch_reference(url: str, timeout: float = 30) -> str:
    """Return the HTML text of the reference page at *url*.

    Raises:
        requests.HTTPError: If the server answers with a non-2xx status.
        requests.RequestException: On transport-level failures.
    """
    logger.debug("Fetching reference", extra={"url": url, "timeout": timeout})
    try:
        response = requests.get(url, headers=_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as exc:
        logger.error("Reference HTTP error", extra={"url": url, "status_code": exc.response.status_code, "error": str(exc)})
        raise
    except requests.RequestException as exc:
        logger.error("Reference request error", extra={"url": url, "error": str(exc)})
        raise
    logger.info("Reference fetched", extra={"url": url, "bytes": len(response.content)})
    return response.text
