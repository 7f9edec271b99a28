"""Base class for the per-resource service facades."""

from __future__ import annotations

from ._http.client import BaseClient


class BaseService:
    """Facade over one API resource, bound to a client core.

    Subclasses write their calls once as ``async def _x`` methods; the
    blocking flavor drives them with ``iter_coroutine`` and the async flavor
    awaits them.
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client


__all__ = ["BaseService"]
