# xhs_fetcher/fetch.py
import logging
import re
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Optional, Tuple

import requests

from .config import settings
from .errors import FetchError

logger = logging.getLogger(__name__)

ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
CHUNK_SIZE = 16 * 1024

def build_reader_url(url: str, base: Optional[str] = None) -> str:
    """r.jina.ai wants the bare target after its base, not a second scheme."""
    bare = re.sub(r"^https?://", "", url)
    base = (base or settings.READER_BASE_URL).rstrip("/")
    return f"{base}/{bare}"

def fetch_rendering(url: str, timeout: Optional[float] = None) -> str:
    """Fetch the reader rendering of `url` and return it as text.

    The whole call, headers and body included, is bounded by `timeout`
    seconds of wall-clock time. The download runs on a worker thread; when
    the budget runs out the caller gets FetchError(TIMEOUT) straight away and
    the worker is told to drop the response. Also raises FetchError on a
    non-2xx status or any other network problem.
    """
    timeout = settings.FETCH_TIMEOUT if timeout is None else timeout
    reader_url = build_reader_url(url)
    headers = {"Accept": ACCEPT}
    if settings.READER_API_KEY:
        headers["Authorization"] = f"Bearer {settings.READER_API_KEY}"

    logger.info("Fetching rendering via %s", reader_url)

    cancel = threading.Event()
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="reader-fetch")
    future = executor.submit(_download, reader_url, headers, timeout, cancel)
    try:
        raw, content_type = future.result(timeout=timeout)
    except FutureTimeout:
        cancel.set()
        raise FetchError(FetchError.TIMEOUT, detail=f"after {timeout:g}s") from None
    finally:
        executor.shutdown(wait=False)

    text = raw.decode(_detect_charset(content_type), errors="replace")
    logger.info("Got rendering for %s, length %d", url, len(text))
    return text

# ── internal helpers ──────────────────────────────────────────────────────────

def _download(reader_url: str, headers: dict, timeout: float, cancel: threading.Event) -> Tuple[bytes, str]:
    try:
        resp = requests.get(reader_url, headers=headers, timeout=timeout, stream=True)
    except requests.Timeout as e:
        raise FetchError(FetchError.TIMEOUT, detail=f"after {timeout:g}s") from e
    except requests.RequestException as e:
        raise FetchError(FetchError.NETWORK_FAILURE, detail=e.__class__.__name__) from e

    try:
        if not 200 <= resp.status_code < 300:
            raise FetchError(FetchError.UPSTREAM_STATUS, status_code=resp.status_code)
        raw = _read_body(resp, cancel, timeout)
    finally:
        resp.close()

    return raw, resp.headers.get("Content-Type", "")

def _read_body(resp, cancel: threading.Event, timeout: float) -> bytes:
    chunks = []
    try:
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            if cancel.is_set():
                raise FetchError(FetchError.TIMEOUT, detail=f"after {timeout:g}s")
            chunks.append(chunk)
    except requests.RequestException as e:
        # requests reports a stalled body read as ConnectionError
        if isinstance(e, requests.Timeout) or cancel.is_set():
            raise FetchError(FetchError.TIMEOUT, detail=f"after {timeout:g}s") from e
        raise FetchError(FetchError.NETWORK_FAILURE, detail=e.__class__.__name__) from e
    return b"".join(chunks)

def _detect_charset(content_type: str) -> str:
    m = re.search(r"charset=([^\s;]+)", content_type, re.I)
    charset = m.group(1).strip("\"'").lower() if m else "utf-8"
    try:
        "".encode(charset)
    except LookupError:
        return "utf-8"
    return charset
