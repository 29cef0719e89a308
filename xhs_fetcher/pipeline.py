# xhs_fetcher/pipeline.py
import logging
from typing import Optional

from .errors import FetchError, InvalidLink, ParseFailure, RetrievalFailure
from .fetch import fetch_rendering
from .parse import ExtractionResult, parse_rendering
from .resolve import extract_note_id, resolve_url

logger = logging.getLogger(__name__)

def extract_note(text: str, timeout: Optional[float] = None) -> ExtractionResult:
    """Resolve -> fetch -> parse for one piece of user input.

    Fetch failures are logged with their real cause and re-raised as a plain
    RetrievalFailure so upstream details never reach the caller.
    """
    url = resolve_url(text)
    if not url:
        raise InvalidLink()

    logger.info("Resolved %s (note id: %s)", url, extract_note_id(url) or "unknown")

    try:
        raw = fetch_rendering(url, timeout=timeout)
    except FetchError as e:
        logger.warning("Retrieval failed for %s: [%s] %s", url, e.kind, e)
        raise RetrievalFailure() from None

    try:
        return parse_rendering(raw)
    except Exception:
        logger.exception("Parsing rendering for %s failed", url)
        raise ParseFailure() from None
