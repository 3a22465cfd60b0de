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
from typing import Dict, Optional, Tuple


__all__: Tuple[str, ...] = ("ClientState",)


class ClientState:
    """Identity and authorization status of a single SoundCloud account."""

    __slots__ = (
        "client_id",
        "client_secret",
        "redirect_uri",
        "access_token",
        "user_id",
        "is_initialized",
    )

    def __init__(self) -> None:
        self.client_id: Optional[str] = None
        self.client_secret: Optional[str] = None
        self.redirect_uri: Optional[str] = None
        self.access_token: Optional[str] = None
        self.user_id: Optional[str] = None
        self.is_initialized: bool = False

    @property
    def is_authorized(self) -> bool:
        return self.access_token is not None

    def configure(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        access_token: Optional[str] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        if access_token:
            self.access_token = access_token

        self.is_initialized = True

    def connect_config(self) -> Dict[str, Optional[str]]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": "non-expiring",
        }

    def __repr__(self) -> str:
        return (
            f"<ClientState client_id={self.client_id!r} user_id={self.user_id!r} "
            f"initialized={self.is_initialized} authorized={self.is_authorized}>"
        )
