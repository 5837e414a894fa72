"""HTTP adapter – HttpxInvoker."""
from __future__ import annotations

from typing import Any

import httpx

from mp_faulttolerance.resilience.errors import RemoteFailure, TimeoutFailure


class HttpxInvoker:
    """One HTTP request as a zero-argument invoker.

    Maps transport outcomes onto the failure taxonomy: a non-2xx status is a
    :class:`RemoteFailure`, an httpx timeout is a :class:`TimeoutFailure`,
    any other httpx error is a :class:`RemoteFailure`. The body is returned
    as text, or parsed JSON when *accept* names a JSON media type.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        *,
        accept: str = "text/plain",
        **request_kwargs: Any,
    ) -> None:
        self._client = client
        self.method = method.upper()
        self.url = url
        self.accept = accept
        self._request_kwargs = request_kwargs

    async def __call__(self) -> Any:
        headers = {"Accept": self.accept, **self._request_kwargs.get("headers", {})}
        kwargs = {k: v for k, v in self._request_kwargs.items() if k != "headers"}
        try:
            response = await self._client.request(self.method, self.url, headers=headers, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TimeoutFailure(f"HTTP request timed out: {self.method} {self.url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise RemoteFailure(
                f"HTTP {exc.response.status_code} from {self.method} {self.url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteFailure(f"HTTP error on {self.method} {self.url}: {exc}", cause=exc) from exc
        return self._decode(response)

    def _decode(self, response: httpx.Response) -> Any:
        if "json" in self.accept:
            return response.json()
        return response.text

    def __repr__(self) -> str:
        return f"HttpxInvoker({self.method} {self.url}, accept={self.accept!r})"


__all__ = ["HttpxInvoker"]
