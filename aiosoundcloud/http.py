"""
MIT License

Copyright (c) 2021 AkshuAgarwal

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from __future__ import annotations
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

import asyncio
import aiohttp
import logging

from .response import ApiResult, decode_response


__all__: Tuple[str, ...] = ("Route", "HTTPClient")


log = logging.getLogger(__name__)

PARAMS = Mapping[str, Any]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


class Route:
    """A single request against the API.

    POST requests send the encoded parameters as a form body and leave the path
    untouched. Every other method appends them to the query string.
    """

    __slots__ = ("method", "path", "params", "url", "body", "headers")

    BASE: ClassVar[str] = "https://api.soundcloud.com"

    def __init__(self, method: str, path: str, params: Optional[PARAMS] = None) -> None:
        self.method: str = method.upper()
        self.path: str = path
        self.params: Dict[str, Any] = dict(params) if params else {}

        base_url = path if path.startswith("http") else self.BASE + path
        query = urlencode(self.params)

        self.body: Optional[bytes] = None
        self.headers: Dict[str, str] = {}

        if self.method == "POST":
            self.url: str = base_url
            self.body = query.encode("utf-8")
            self.headers = {
                "Content-Type": FORM_CONTENT_TYPE,
                "Content-Length": str(len(self.body)),
            }
        elif query:
            separator = "&" if "?" in base_url else "?"
            self.url = base_url + separator + query
        else:
            self.url = base_url

    def __repr__(self) -> str:
        return f"<Route method={self.method} path={self.path!r}>"


class HTTPClient:
    """The Base Internal Class to make HTTP Requests to the API.
    This is meant to be used internally only.

    A :class:`aiohttp.ClientSession` (or any object with the same ``request``
    interface) may be passed in; otherwise one is created on the first request
    and closed by :meth:`destroy`.
    """

    def __init__(self, *, session: Optional[aiohttp.ClientSession] = None) -> None:
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session: bool = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def request(self, route: Route) -> ApiResult:
        """Send ``route`` once and decode the response. Errors are returned, not raised."""

        session = self._get_session()

        log.debug("Dispatching %s request on %s", route.method, route.path)
        try:
            async with session.request(
                route.method, route.url, data=route.body, headers=route.headers
            ) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            log.debug("%s on %s failed: %r", route.method, route.path, exc)
            return ApiResult(error=exc)

        log.debug("%s on %s has responded with %s", route.method, route.path, status)
        return decode_response(status, body)

    async def destroy(self) -> None:
        """Destroys and cleans the sessions"""

        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
                log.debug("Closed aiohttp session")
            self._session = None
