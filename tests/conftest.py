# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import web

from remote_sme.config import ExplorerConfig


@pytest.fixture()
def config(tmp_path) -> ExplorerConfig:
    """
    Return a valid ExplorerConfig that writes artifacts under tmp_path.
    """
    return ExplorerConfig(
        timeout=2.0,
        user_agent="TestAgent/1.0",
        output_dir=tmp_path,
    )


@pytest.fixture()
def script_body() -> Callable[[str], bytes]:
    """
    Build a small bundle whose last line is a sourceMappingURL directive.
    """

    def _build(reference: str) -> bytes:
        return (
            b"(function(){console.log('bundle');})();\n"
            + f"//# sourceMappingURL={reference}\n".encode("utf-8")
        )

    return _build


@pytest_asyncio.fixture
async def serve(unused_tcp_port: int) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """
    Start an aiohttp app on a free port and return its base URL; cleaned up after the test.
    """
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{unused_tcp_port}"

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()
