import logging
from contextlib import asynccontextmanager

import httpx

from clickup_mcp.config import Settings
from clickup_mcp.credentials import Credentials
from clickup_mcp.errors import http_error

log = logging.getLogger(__name__)


def _build_timeout(settings: Settings) -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.connect_timeout,
        read=settings.read_timeout,
        write=settings.read_timeout,
        pool=settings.connect_timeout,
    )


def query_flag(value: bool) -> str:
    """Encode a boolean the way ClickUp expects it in a query string."""
    return "true" if value else "false"


class ClickUpClient:
    """Async client for the ClickUp REST API v2, bound to one call's credentials."""

    def __init__(self, settings: Settings, credentials: Credentials):
        self.settings = settings
        self.credentials = credentials
        self.base_url = str(self.settings.base_url).rstrip("/")

    @property
    def workspace_id(self) -> str:
        return self.credentials.workspace_id

    @property
    def headers(self) -> dict:
        # ClickUp personal tokens go in the header as-is, without a scheme
        return {
            "Authorization": self.credentials.api_key,
            "Accept": "application/json",
        }

    @asynccontextmanager
    async def session(self):
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=_build_timeout(self.settings),
        ) as s:
            yield s

    async def send(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Issue one request and return the response whatever its status."""
        log.debug("%s %s", method, path)
        async with self.session() as s:
            return await s.request(method, path, **kwargs)

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        res = await self.send(method, path, **kwargs)
        if not res.is_success:
            raise http_error(res.status_code, res.text)
        return res

    async def get(self, path: str, **kwargs):
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs):
        return await self._request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs):
        return await self._request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs):
        return await self._request("DELETE", path, **kwargs)


async def download(settings: Settings, url: str) -> httpx.Response:
    """Fetch an arbitrary (unauthenticated) URL, following redirects."""
    log.debug("GET %s", url)
    async with httpx.AsyncClient(
        timeout=_build_timeout(settings), follow_redirects=True
    ) as s:
        return await s.get(url)
