# remote_sme/fetcher.py
"""
Fetcher module: a single GET with transparent decompression and no retries.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from remote_sme.config import ExplorerConfig
from remote_sme.logger import logger
from remote_sme.models import BadStatus, FetchFailure, FetchResult, FetchSuccess, NetworkError

ACCEPT_ENCODING = "gzip, deflate"


class Fetcher:
    """Fetches absolute URLs and classifies the outcome."""

    def __init__(self, session: ClientSession, config: ExplorerConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.timeout)
        self._headers = {
            "Accept-Encoding": ACCEPT_ENCODING,
            "User-Agent": config.user_agent,
        }

    async def fetch(self, url: str) -> FetchResult:
        """
        GET *url*, which must already be absolute.

        Returns FetchSuccess for status 200, FetchFailure otherwise.
        """
        try:
            async with self.session.get(
                url,
                headers=self._headers,
                timeout=self._timeout,
                raise_for_status=False,
            ) as resp:
                if resp.status != 200:
                    logger.debug("GET %s -> %s", url, resp.status)
                    return FetchFailure(url, BadStatus(resp.status))
                body = await resp.read()
        except asyncio.TimeoutError:
            return FetchFailure(url, NetworkError(f"timed out after {self.config.timeout}s"))
        except ClientError as exc:
            return FetchFailure(url, NetworkError(str(exc) or type(exc).__name__))

        logger.debug("GET %s -> 200 (%d bytes)", url, len(body))
        return FetchSuccess(url, body)
