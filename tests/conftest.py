"""
Shared fixtures for the XHS fetcher tests.

Nothing here reaches the internet: the reader proxy is either a mocked
`requests.get` or a throwaway HTTP peer on localhost.
"""
import socket
import threading
import time
from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient


SAMPLE_RENDERING = (
    "Title: 春日穿搭|通勤 - 小红书\n"
    "\n"
    "URL Source: https://www.xiaohongshu.com/explore/64b0c1d2e3f4a5b6c7d8e9f0\n"
    "\n"
    "Markdown Content:\n"
    "![Image 1](https://sns-webpic-qc.xhscdn.com/202410/note_1.jpg!nd_dft_wlteh_webp_3)\n"
    "![Image 2](https://sns-webpic-qc.xhscdn.com/202410/note_2.jpg)\n"
    "![Image 3](https://sns-webpic-qc.xhscdn.com/202410/note_1.jpg!nd_dft_wlteh_webp_3)\n"
    "![Image 4](https://sns-webpic-qc.xhscdn.com/avatar/user_9.jpg)\n"
    "这是我的笔记内容[笑哭R] 今天穿  [#穿搭](https://www.xiaohongshu.com/search_result?keyword=穿搭)"
    "[#春天R]\n"
    "编辑于 10-12\n"
)


def make_response(status_code=200, chunks=(b"",), content_type="text/plain; charset=utf-8"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = {"Content-Type": content_type}
    resp.iter_content.return_value = iter(chunks)
    return resp


@pytest.fixture
def sample_rendering() -> str:
    return SAMPLE_RENDERING


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from xhs_fetcher.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def slow_reader():
    """Start a one-shot HTTP peer on localhost that sends `pieces` with a pause
    between each. Returns its base URL."""
    started = []

    def start(pieces, delay=0.25):
        stop = threading.Event()
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        server.settimeout(5)

        def serve():
            try:
                conn, _ = server.accept()
            except OSError:
                return
            with conn:
                conn.recv(65536)
                for piece in pieces:
                    if stop.is_set():
                        break
                    try:
                        conn.sendall(piece)
                    except OSError:
                        break
                    time.sleep(delay)

        threading.Thread(target=serve, daemon=True).start()
        started.append((stop, server))
        return f"http://127.0.0.1:{server.getsockname()[1]}"

    yield start

    for stop, server in started:
        stop.set()
        server.close()
