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
from typing import Any, Optional, Tuple


__all__: Tuple[str, ...] = (
    "SoundCloudException",
    "ConfigurationError",
    "ValidationError",
    "InvalidPath",
    "NotAuthorized",
    "HTTPException",
    "Forbidden",
    "NotFound",
    "ServerError",
)


class SoundCloudException(Exception):
    """Base Exception for all the SoundCloud related exceptions"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ConfigurationError(SoundCloudException):
    """Raised when the client is used before :meth:`SoundCloudClient.init` was called.

    :meth:`SoundCloudClient.authorize` raises this directly instead of passing it
    to the callback.
    """

    pass


class ValidationError(SoundCloudException):
    """A request was rejected before being sent."""

    pass


class InvalidPath(ValidationError):
    """The path neither starts with ``/`` nor is an absolute ``http`` URL."""

    def __init__(self, path: Any) -> None:
        super().__init__(f"Invalid path: {path}")
        self.path = path


class NotAuthorized(SoundCloudException):
    """A ``/me`` endpoint was requested while no access token is stored."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not authorized to use path: {path}")
        self.path: str = path


class HTTPException(SoundCloudException):
    """Base Exception for all the HTTP Requests related Exceptions"""

    def __init__(self, data: Any, status_code: int, message: Optional[str] = None) -> None:
        fmt = f"{status_code}"
        errors = data.get("errors") if isinstance(data, dict) else None
        if errors:
            fmt += ": " + ", ".join(
                str(e.get("error_message", e)) if isinstance(e, dict) else str(e)
                for e in errors
            )
        elif isinstance(data, dict) and (desc := data.get("error_description") or data.get("error")):
            fmt += f": {desc}"

        if message is not None:
            fmt += f" ({message})"

        super().__init__(fmt)
        self.data = data
        self.status_code: int = status_code


class Forbidden(HTTPException):
    """Forbidden (The server understood the request, but is refusing to fulfill it)"""

    pass


class NotFound(HTTPException):
    """Not Found - The requested resource could not be found."""

    pass


class ServerError(HTTPException):
    """Server side error. Possibly nothing we can do for this."""

    pass
