import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from clickup_mcp.client import ClickUpClient
from clickup_mcp.errors import ClickUpError, http_error
from clickup_mcp.models import Entity

T = TypeVar("T", bound=Entity)


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one collection fetch: items, or the error that prevented them."""

    items: List[T] = field(default_factory=list)
    error: Optional[ClickUpError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[T]:
        """Items, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.items

    def items_or_empty(self) -> List[T]:
        return self.items if self.ok else []


async def fetch_collection(
    client: ClickUpClient,
    path: str,
    key: str,
    model: Type[T],
    params: Optional[Dict[str, Any]] = None,
) -> FetchResult[T]:
    """GET ``path`` and parse ``response[key]`` into ``model`` instances.

    Non-success statuses are returned as a failed result rather than raised.
    Transport errors propagate, and a success response that cannot be parsed
    raises ClickUpError.
    """
    res = await client.send("GET", path, params=params)
    if not res.is_success:
        return FetchResult(error=http_error(res.status_code, res.text))
    try:
        raw = res.json().get(key) or []
        items = [model.model_validate(item) for item in raw]
    except (ValueError, AttributeError, TypeError) as e:
        raise ClickUpError(f"Unexpected response from {path}: {e}") from e
    return FetchResult(items=items)


async def gather_or_cancel(*aws):
    """Like asyncio.gather, but cancels and drains the rest on first failure."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
