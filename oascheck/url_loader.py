"""Loaders that fetch JSON schema documents by URL."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit

_DEFAULT_TIMEOUT = 15.0


@dataclass
class HTTPURLLoader:
    """Fetches and decodes JSON documents over HTTP and HTTPS."""

    timeout: float = _DEFAULT_TIMEOUT
    insecure: bool = False

    @property
    def ssl_context(self) -> ssl.SSLContext | None:
        """A context that skips certificate checks when insecure, otherwise None."""
        if not self.insecure:
            return None
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    def load(self, url: str) -> Any:
        """Fetch the document at url and decode it as JSON.

        Raises OSError when the request fails or the status is not 200,
        and ValueError when the body is not valid JSON.
        """
        context = self.ssl_context
        handlers = [urllib.request.HTTPSHandler(context=context)] if context else []
        opener = urllib.request.build_opener(*handlers)
        try:
            with opener.open(url, timeout=self.timeout) as response:
                status = response.status
                body = response.read()
        except urllib.error.HTTPError as exc:
            exc.close()
            raise OSError(f"{url} returned status code {exc.code}") from None
        if status != 200:
            raise OSError(f"{url} returned status code {status}")
        return json.loads(body)


class _FileLoader:
    """Reads and decodes JSON documents from file URLs."""

    def load(self, url: str) -> Any:
        path = urllib.request.url2pathname(unquote(urlsplit(url).path))
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)


def new_http_url_loader(insecure: bool) -> HTTPURLLoader:
    """Create an HTTP loader with a 15 second timeout."""
    return HTTPURLLoader(timeout=_DEFAULT_TIMEOUT, insecure=insecure)


def new_compiler_loader() -> dict[str, Any]:
    """Loaders keyed by URL scheme: file, http and https."""
    return {
        "file": _FileLoader(),
        "http": new_http_url_loader(False),
        "https": new_http_url_loader(False),
    }