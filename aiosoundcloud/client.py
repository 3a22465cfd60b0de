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
from typing import Any, Awaitable, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

import aiohttp
import inspect
import logging
import os

from .errors import (
    ConfigurationError,
    InvalidPath,
    NotAuthorized,
    SoundCloudException,
)
from .http import HTTPClient, Route
from .response import ApiResult
from .state import ClientState


__all__: Tuple[str, ...] = ("SoundCloudClient",)


log = logging.getLogger(__name__)

Callback = Callable[..., Union[None, Awaitable[None]]]
PARAMS = Mapping[str, Any]


def _noop(*args: Any) -> None:
    pass


async def _deliver(callback: Callback, *args: Any) -> None:
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


def _valid(path: Any) -> bool:
    # Only absolute API paths and full URLs are accepted
    return isinstance(path, str) and bool(path) and (path.startswith("/") or path.startswith("http"))


class SoundCloudClient:
    """The Base class to connect and utilise the SoundCloud API.

    Every client holds its own :class:`ClientState`, so several accounts can be
    used side by side.

    Examples
    ---------

    Authorizing and making a request: ::

        import asyncio
        from aiosoundcloud import SoundCloudClient

        async def main():
            async with SoundCloudClient('client_id', 'client_secret', 'https://example.com/callback') as sc:
                print(sc.get_connect_url())  # send the user here, receive ?code=... on the redirect URI
                await sc.authorize(code)

                def on_tracks(error, data=None):
                    print(error or data)

                await sc.get('/me/tracks.json', on_tracks)

        asyncio.run(main())

    Callbacks are called as ``callback(error)`` when the call failed without a
    response body, ``callback(None, data)`` on success and ``callback(errors, data)``
    when the API answered with a status of 400 or above, so the data argument
    should have a default. Coroutine functions are awaited.

    Parameters
    -----------
    client_id: Optional[:class:`str`]
        The Client ID of the registered SoundCloud application. When given, the
        client is initialized right away (see :meth:`init`).
    client_secret: Optional[:class:`str`]
        The Client Secret of the application.
    redirect_uri: Optional[:class:`str`]
        The redirect URI registered for the application.
    access_token: Optional[:class:`str`]
        A previously obtained (non-expiring) access token.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session used to talk to the API. A private one is created when omitted.
    """

    CONNECT_URL: ClassVar[str] = "https://soundcloud.com/connect"

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        *,
        access_token: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.state: ClientState = ClientState()
        self.http: HTTPClient = HTTPClient(session=session)

        if client_id is not None:
            self.init(client_id, client_secret, redirect_uri, access_token)

    @classmethod
    def from_env(cls, *, session: Optional[aiohttp.ClientSession] = None) -> SoundCloudClient:
        """Build a client from the ``SOUNDCLOUD_*`` environment variables."""

        try:
            client_id = os.environ["SOUNDCLOUD_CLIENT_ID"]
            client_secret = os.environ["SOUNDCLOUD_CLIENT_SECRET"]
            redirect_uri = os.environ["SOUNDCLOUD_REDIRECT_URI"]
        except KeyError as exc:
            raise ConfigurationError(f"Missing environment variable {exc.args[0]}") from None

        return cls(
            client_id,
            client_secret,
            redirect_uri,
            access_token=os.environ.get("SOUNDCLOUD_ACCESS_TOKEN") or None,
            session=session,
        )

    # Configuration

    def init(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        access_token: Optional[str] = None,
    ) -> None:
        """Set the application credentials. Calling it again overwrites them.

        If ``access_token`` is given the client is authorized immediately.
        """
        self.state.configure(client_id, client_secret, redirect_uri, access_token)
        log.debug("Initialized client %s", client_id)

    @property
    def is_initialized(self) -> bool:
        return self.state.is_initialized

    @property
    def is_authorized(self) -> bool:
        return self.state.is_authorized

    @property
    def access_token(self) -> Optional[str]:
        return self.state.access_token

    @property
    def user_id(self) -> Optional[str]:
        return self.state.user_id

    def get_connect_config(self) -> Dict[str, Optional[str]]:
        return self.state.connect_config()

    def get_connect_url(self, params: Optional[PARAMS] = None) -> str:
        """The URL of SoundCloud's connect page, where the user grants access."""

        if not params:
            params = self.get_connect_config()
        query = {key: "" if value is None else value for key, value in params.items()}
        return self.CONNECT_URL + "?" + urlencode(query)

    def set_token(self, token: str) -> None:
        self.state.access_token = token

    def set_user(self, user_id: str) -> None:
        self.state.user_id = user_id

    # Authorization

    async def authorize(self, code: str, callback: Optional[Callback] = None) -> Optional[str]:
        """Exchange the ``code`` received on the redirect URI for an access token.

        On success the token is stored, ``callback(None, access_token)`` is called
        and the token is returned. On failure ``callback(error)`` is called and
        ``None`` is returned.

        Raises
        -------
        :exc:`.ConfigurationError`
            :meth:`init` was never called. This is raised to the caller and is
            **not** passed to ``callback``.
        """
        callback = callback or _noop

        if not self.state.is_initialized:
            raise ConfigurationError(
                "SoundCloudClient must first be initialized with a client ID, "
                "a client secret, and a redirect URI."
            )

        route = Route(
            "POST",
            "/oauth2/token",
            {
                "client_id": self.state.client_id,
                "client_secret": self.state.client_secret,
                "grant_type": "authorization_code",
                "redirect_uri": self.state.redirect_uri,
                "code": code,
            },
        )
        result = await self.http.request(route)

        if result.error is not None:
            log.error("Token exchange failed: %s", result.error)
            await _deliver(callback, result.error)
            return None

        token = result.data.get("access_token") if isinstance(result.data, dict) else None
        if not token:
            error = SoundCloudException("Token response did not contain an access_token")
            log.error("Token exchange failed: %s", error)
            await _deliver(callback, error)
            return None

        self.set_token(token)
        log.debug("Obtained access token for client %s", self.state.client_id)
        await _deliver(callback, None, token)
        return token

    # Requests

    async def get(
        self, path: str, params: Union[PARAMS, Callback, None] = None, callback: Optional[Callback] = None
    ) -> Union[ApiResult, bool]:
        return await self.dispatch("GET", path, params, callback)

    async def post(
        self, path: str, params: Union[PARAMS, Callback, None] = None, callback: Optional[Callback] = None
    ) -> Union[ApiResult, bool]:
        return await self.dispatch("POST", path, params, callback)

    async def put(
        self, path: str, params: Union[PARAMS, Callback, None] = None, callback: Optional[Callback] = None
    ) -> Union[ApiResult, bool]:
        return await self.dispatch("PUT", path, params, callback)

    async def delete(
        self, path: str, params: Union[PARAMS, Callback, None] = None, callback: Optional[Callback] = None
    ) -> Union[ApiResult, bool]:
        return await self.dispatch("DELETE", path, params, callback)

    async def get_me(self, callback: Optional[Callback] = None) -> Union[ApiResult, bool]:
        """Fetch the profile of the authorized user."""
        return await self.get("/me", callback)

    async def dispatch(
        self,
        method: str,
        path: str,
        params: Union[PARAMS, Callback, None] = None,
        callback: Optional[Callback] = None,
    ) -> Union[ApiResult, bool]:
        """Send ``method`` on ``path`` and hand the outcome to ``callback``.

        ``params`` may be left out, in which case the callback can be passed in
        its place: ``dispatch("GET", "/tracks.json", cb)``.

        ``client_id`` and ``format=json`` are always sent. Paths below ``/me``
        additionally carry the stored access token.

        Returns ``False`` when the request was rejected before being sent
        (the error has been passed to ``callback``), otherwise the
        :class:`ApiResult` that was passed to ``callback``.
        """
        if callback is None and callable(params):
            callback, params = params, None
        callback = callback or _noop

        if not _valid(path):
            error = InvalidPath(path)
            log.warning(error.message)
            await _deliver(callback, error)
            return False

        if not self.state.is_initialized:
            error = ConfigurationError(f"SoundCloudClient must be initialized before requesting {path}")
            log.warning(error.message)
            await _deliver(callback, error)
            return False

        query: Dict[str, Any] = dict(params) if params else {}
        query["client_id"] = self.state.client_id
        query["format"] = "json"

        segments = path.split("/")
        endpoint = segments[1] if len(segments) > 1 else ""
        if endpoint == "me":
            token = self.state.access_token
            if token is None:
                error = NotAuthorized(path)
                log.warning(error.message)
                await _deliver(callback, error)
                return False
            query["oauth_token"] = token

        result = await self.http.request(Route(method, path, query))

        if result.status is not None and result.status >= 400:
            await _deliver(callback, result.error, result.data)
        elif result.error is not None:
            await _deliver(callback, result.error)
        else:
            await _deliver(callback, None, result.data)

        return result

    async def close(self) -> None:
        """Closes all the sessions and connections."""
        await self.http.destroy()

    async def __aenter__(self) -> SoundCloudClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
