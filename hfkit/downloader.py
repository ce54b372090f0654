"""HTTP downloads with a shared parallelism limit and progress callbacks."""

from __future__ import annotations

import os
import threading
from typing import Callable, Mapping, Optional

import requests

from hfkit.fileutils import replace_tilde_in_dir
from hfkit.semaphore import Semaphore

ProgressCallback = Callable[[int, int], None]
"""Called with (downloaded_bytes, total_bytes); total is -1 if unknown."""

_CHUNK_SIZE = 1024 * 1024


class DownloadError(Exception):
    """A download or header request failed."""


class DownloadCancelledError(DownloadError):
    """A download was interrupted through its cancel event."""

    def __init__(self, message: str = "download cancelled") -> None:
        super().__init__(message)


def _is_cancelled(cancel_event: Optional[threading.Event]) -> bool:
    return cancel_event is not None and cancel_event.is_set()


def _content_length(headers: Mapping[str, str]) -> int:
    try:
        return int(headers.get("Content-Length", ""))
    except ValueError:
        return -1


class Manager:
    """Runs downloads, at most 20 in parallel by default."""

    def __init__(self) -> None:
        self._semaphore = Semaphore(20)
        self._auth_token = ""
        self._user_agent = ""

    def max_parallel(self, n: int) -> "Manager":
        """Set how many transfers may run at once; <= 0 means unlimited."""
        self._semaphore.resize(n)
        return self

    def with_auth_token(self, auth_token: str) -> "Manager":
        """Send ``Authorization: Bearer <auth_token>``; empty disables it."""
        self._auth_token = auth_token
        return self

    def with_user_agent(self, user_agent: str) -> "Manager":
        """Set the User-Agent sent with requests."""
        self._user_agent = user_agent
        return self

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        return headers

    def download(
        self,
        url: str,
        file_path: str,
        callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Download ``url`` into ``file_path``, reporting progress to ``callback``.

        Blocks while the parallelism limit is reached. Setting ``cancel_event``
        interrupts the transfer with DownloadCancelledError.
        """
        with self._semaphore:
            try:
                file_path = replace_tilde_in_dir(file_path)
            except LookupError as err:
                raise DownloadError(
                    f"failed to resolve user name in tilde (~) expansion: {file_path!r}"
                ) from err
            directory = os.path.dirname(file_path) or "."
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as err:
                raise DownloadError(
                    f"failed to create the directory for the path: {directory!r}"
                ) from err
            try:
                out = open(file_path, "wb")
            except OSError as err:
                raise DownloadError(f"failed creating file {file_path!r}") from err
            with out:
                self._transfer(url, file_path, out, callback, cancel_event)

    def _transfer(self, url, file_path, out, callback, cancel_event) -> None:
        if _is_cancelled(cancel_event):
            raise DownloadCancelledError()
        try:
            response = requests.get(url, headers=self._headers(), stream=True)
        except requests.RequestException as err:
            raise DownloadError(f"failed downloading {url!r}: {err}") from err
        with response:
            if response.status_code != 200:
                message = response.headers.get("X-Error-Message", "")
                raise DownloadError(
                    f"bad status code {response.status_code}: {message!r}"
                )
            total = _content_length(response.headers)
            if callback is not None:
                callback(0, total)
            downloaded = 0
            chunks = response.iter_content(chunk_size=_CHUNK_SIZE)
            while True:
                if _is_cancelled(cancel_event):
                    raise DownloadCancelledError()
                try:
                    chunk = next(chunks, None)
                except requests.RequestException as err:
                    if _is_cancelled(cancel_event):
                        raise DownloadCancelledError() from err
                    raise DownloadError(f"failed downloading {url!r}: {err}") from err
                if chunk is None:
                    break
                try:
                    out.write(chunk)
                except OSError as err:
                    raise DownloadError(
                        f"failed writing {url!r} to {file_path!r}"
                    ) from err
                downloaded += len(chunk)
                if callback is not None:
                    callback(downloaded, total)

    def fetch_header(
        self, url: str, cancel_event: Optional[threading.Event] = None
    ) -> tuple[Mapping[str, str], int]:
        """Issue a HEAD request, returning (headers, content_length).

        The content length is -1 when the server does not report it.
        """
        with self._semaphore:
            if _is_cancelled(cancel_event):
                raise DownloadCancelledError()
            headers = self._headers()
            headers["Accept-Encoding"] = "identity"
            try:
                response = requests.head(url, headers=headers, allow_redirects=True)
            except requests.RequestException as err:
                raise DownloadError(f"failed request for metadata: {err}") from err
            with response:
                if response.status_code != 200:
                    status = f"{response.status_code} {response.reason}".strip()
                    raise DownloadError(
                        f"request for metadata from {url!r} failed with the "
                        f"following message: {status!r}"
                    )
                return response.headers, _content_length(response.headers)