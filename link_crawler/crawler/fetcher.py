# link_crawler/crawler/fetcher.py
"""
Fetcher module: retrieves raw page content over HTTP with timeouts and retry/backoff.
"""
from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, List, Optional, Protocol, runtime_checkable

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_crawler.config import CrawlerConfig
from link_crawler.exceptions import FetchError
from link_crawler.logger import logger

SleepFunc = Callable[[float], Awaitable[None]]


@runtime_checkable
class PageFetcher(Protocol):
    """Anything that can turn a URL into page text, raising FetchError on failure."""

    async def fetch(self, url: str) -> str:
        ...


def backoff_schedule(max_retries: int, unit: float = 1.0) -> List[float]:
    """
    Delays slept before attempts 2..max_retries.

    The delay doubles every attempt starting at one *unit*:
    ``backoff_schedule(5) == [1.0, 2.0, 4.0, 8.0]``.
    """
    return [unit * 2 ** i for i in range(max(0, max_retries - 1))]


class HttpPageFetcher:
    """Fetches pages with aiohttp; retries timeouts with exponential backoff."""

    def __init__(
        self,
        session: Optional[ClientSession] = None,
        config: Optional[CrawlerConfig] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.session = session
        self._owns_session = session is None
        self._sleep = sleep
        self._delays = backoff_schedule(self.config.max_retries, self.config.backoff_unit)
        self.logger = logger

    async def __aenter__(self) -> HttpPageFetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session is not None and not self.session.closed:
            await self.session.close()

    @property
    def timeout(self) -> ClientTimeout:
        return ClientTimeout(
            sock_connect=self.config.connect_timeout,
            sock_read=self.config.read_timeout,
        )

    async def fetch(self, url: str) -> str:
        """
        GET *url* and return the body as text.

        Timeouts are retried up to ``max_retries`` attempts in total; any other
        failure raises FetchError straight away.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized")

        last_exc: Optional[BaseException] = None
        max_retries = self.config.max_retries
        for attempt in range(1, max_retries + 1):
            if attempt > 1:
                await self._sleep(self._delays[attempt - 2])
            start = time.monotonic()
            try:
                content = await self._get(url)
            except asyncio.TimeoutError as exc:
                last_exc = exc
                self.logger.debug("Timeout on %s, retrying... (%d/%d)", url, attempt, max_retries)
                continue
            except (ClientError, ValueError) as exc:
                self.logger.debug("Failed to fetch %s: %r", url, exc)
                raise FetchError(url, "Failed to fetch URL", attempts=attempt) from exc
            self.logger.debug(
                "Fetched %s in %.0f ms (attempt %d)", url, (time.monotonic() - start) * 1000, attempt
            )
            return content

        raise FetchError(
            url, f"Failed to fetch URL after {max_retries} attempts", attempts=max_retries
        ) from last_exc

    async def _get(self, url: str) -> str:
        async with self.session.get(
            url,
            timeout=self.timeout,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=True,
        ) as resp:
            try:
                return await resp.text()
            except UnicodeDecodeError:
                data = await resp.read()
                return data.decode("utf-8", errors="replace")


__all__ = ["PageFetcher", "HttpPageFetcher", "backoff_schedule"]
