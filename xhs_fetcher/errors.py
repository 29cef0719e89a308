# xhs_fetcher/errors.py
from typing import Optional

INVALID_LINK_MESSAGE = "无效的小红书链接"
RETRIEVAL_FAILED_MESSAGE = "获取小红书内容失败，请检查链接是否有效"
PARSE_FAILED_MESSAGE = "解析内容失败"
GENERIC_FAILURE_MESSAGE = "获取内容失败"


class FetchError(Exception):
    """Raised by the fetcher. Never shown to callers as-is."""

    TIMEOUT = "timeout"
    UPSTREAM_STATUS = "upstream_status"
    NETWORK_FAILURE = "network_failure"

    def __init__(self, kind: str, status_code: Optional[int] = None, detail: str = ""):
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind == self.UPSTREAM_STATUS:
            return f"reader returned HTTP {self.status_code}"
        if self.kind == self.TIMEOUT:
            return f"reader request timed out {self.detail}".strip()
        return f"network failure: {self.detail}" if self.detail else "network failure"


class ExtractionError(Exception):
    status_code = 500
    message = GENERIC_FAILURE_MESSAGE

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidLink(ExtractionError):
    status_code = 400
    message = INVALID_LINK_MESSAGE


class RetrievalFailure(ExtractionError):
    message = RETRIEVAL_FAILED_MESSAGE


class ParseFailure(ExtractionError):
    message = PARSE_FAILED_MESSAGE
