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
from typing import Any, NamedTuple, Optional, Tuple, Union

import logging

from .errors import (
    HTTPException,
    Forbidden,
    NotFound,
    ServerError,
    SoundCloudException,
)

try:
    import orjson

    _from_json = orjson.loads
except ImportError:
    import json

    _from_json = json.loads


__all__: Tuple[str, ...] = ("ApiResult", "decode_response")


log = logging.getLogger(__name__)


class ApiResult(NamedTuple):
    """The outcome of a single API call.

    For transport and parse failures only :attr:`error` is set. Responses with a
    status of 400 or above carry both the decoded ``errors`` payload and the body.
    Successful responses only carry :attr:`data`.
    """

    error: Any = None
    data: Any = None
    status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the error of this result, if any.

        Raises
        -------
        :exc:`.Forbidden`
            The API answered with 403.
        :exc:`.NotFound`
            The API answered with 404.
        :exc:`.ServerError`
            The API answered with a 5xx status.
        :exc:`.HTTPException`
            Any other status of 400 or above.
        """
        if self.error is None:
            return

        if self.status is not None and self.status >= 400:
            if self.status == 403:
                raise Forbidden(self.data, self.status)
            if self.status == 404:
                raise NotFound(self.data, self.status)
            if self.status >= 500:
                raise ServerError(self.data, self.status)
            raise HTTPException(self.data, self.status)

        if isinstance(self.error, BaseException):
            raise self.error

        raise SoundCloudException(str(self.error))


def decode_response(status: int, body: Union[bytes, str]) -> ApiResult:
    """Turn a finished HTTP response into an :class:`ApiResult`."""

    try:
        data = _from_json(body)
    except ValueError as exc:
        log.debug("Response with status %s is not valid JSON: %s", status, exc)
        return ApiResult(error=exc)

    # See https://developers.soundcloud.com/docs/api/guide#errors
    if status >= 400:
        errors = data.get("errors") if isinstance(data, dict) else None
        if errors is None:
            # OAuth endpoints answer with {"error": ...} instead of {"errors": [...]}
            errors = data
        return ApiResult(error=errors, data=data, status=status)

    return ApiResult(data=data, status=status)
