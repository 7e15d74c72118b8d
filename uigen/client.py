"""uigen Python client — thin async client for the uigen API.

Usage:
    import asyncio
    from uigen.client import UIGenClient

    async def main():
        async with UIGenClient(base_url="http://localhost:5000") as client:
            result = await client.generate("add a login card")
            print(result.code)

    asyncio.run(main())
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from uigen.types import GenerationRequest, GenerationResult


class UIGenClientError(Exception):
    """Raised when the API returns a non-2xx response or cannot be reached."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class UIGenClient:
    """Async HTTP client for the uigen API.

    Args:
        base_url:  API base URL, e.g. "http://localhost:5000"
        timeout:   Request timeout in seconds. One request spans three
                   sequential LLM calls, so keep this generous.
        transport: Optional httpx transport (tests pass an ASGI or mock transport).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    # ── Lifecycle ──────────────────────────────────────────────────────────

    async def __aenter__(self) -> "UIGenClient":
        await self.connect()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def connect(self) -> None:
        """Open HTTP session."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._http:
            await self._http.aclose()
            self._http = None

    # ── Endpoints ──────────────────────────────────────────────────────────

    async def generate(self, prompt: str, existing_code: Optional[str] = None) -> GenerationResult:
        """Run the pipeline on the server.

        Args:
            prompt:        What to build or change.
            existing_code: Currently rendered JSX, or None for a first generation.

        Returns:
            GenerationResult. The code is exactly what the model returned;
            validate it before rendering.

        Raises:
            ValueError:       prompt is blank (pydantic ValidationError).
            UIGenClientError: non-2xx response, transport failure, or a body
                              that is not a generation result.
        """
        payload = GenerationRequest(prompt=prompt, existing_code=existing_code).model_dump(by_alias=True)
        resp = await self._send("POST", "/generate", json=payload)
        data = self._decode(resp)
        try:
            return GenerationResult(
                plan=data.get("plan") or {},
                code=data.get("code") or "",
                explanation=data.get("explanation") or "",
            )
        except (AttributeError, TypeError, ValueError) as exc:
            raise UIGenClientError(resp.status_code, f"Malformed generation response: {exc}") from exc

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")

    # ── Helpers ────────────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        return self._decode(await self._send(method, path, **kwargs))

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        await self.connect()
        try:
            resp = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise UIGenClientError(0, f"{type(exc).__name__}: {exc}") from exc
        self._raise_for_status(resp)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise UIGenClientError(resp.status_code, f"Response is not JSON: {resp.text[:200]}") from exc

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
            detail = body.get("error") or body.get("detail") or resp.text
        except (ValueError, AttributeError):
            detail = resp.text
        raise UIGenClientError(resp.status_code, str(detail))
