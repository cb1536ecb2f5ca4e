"""
Input sources: file, URL, standard input and clipboard.
"""

from pathlib import Path
from typing import BinaryIO, Optional

import httpx
from loguru import logger

from .clipboard import Clipboard
from .types import ClipboardError, InputError, NoInputError


def read_file(path: str | Path) -> bytes:
    """Read a file as raw bytes."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputError(f"{path}: {e.strerror or e}") from e


def fetch_url(url: str, timeout: Optional[float] = None) -> bytes:
    """
    Fetch a URL with a blocking GET and return the response body.

    Non-2xx responses are returned as-is; the body then goes through the
    normal JSON error path.

    Raises:
        InputError: On connection or protocol failure
    """
    logger.debug(f"Fetching {url}")
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise InputError(f"{url}: {e}") from e

    if response.is_error:
        logger.warning(f"{url} returned HTTP {response.status_code}")
    return response.content


def read_stdin(stream: BinaryIO) -> bytes:
    """Read all of standard input."""
    try:
        return stream.read()
    except OSError as e:
        raise InputError(f"stdin: {e}") from e


def is_url(target: str) -> bool:
    return target.startswith("http")


def acquire_input(
    target: Optional[str],
    stdin: BinaryIO,
    clipboard: Clipboard,
    http_timeout: Optional[float] = None,
) -> bytes:
    """
    Read the document from the first applicable source.

    Order: URL target, file target, ``-`` or piped stdin, clipboard.

    Args:
        target: Positional argument from the command line, if any
        stdin: Binary standard input stream
        clipboard: Clipboard backend used when nothing else applies
        http_timeout: Timeout for URL fetches (None waits indefinitely)

    Returns:
        Raw input bytes

    Raises:
        InputError: If the selected source cannot be read
        NoInputError: If no source applies and the clipboard is empty or unavailable
    """
    if target and is_url(target):
        return fetch_url(target, timeout=http_timeout)
    if target and target != "-":
        return read_file(target)
    if target == "-" or not stdin.isatty():
        return read_stdin(stdin)

    try:
        data = clipboard.read()
    except ClipboardError as e:
        logger.warning(f"Could not read clipboard: {e}")
        raise NoInputError("no input given and clipboard is unavailable") from e

    if not data.strip():
        raise NoInputError("no input given and clipboard is empty")
    logger.debug(f"Read {len(data)} bytes from clipboard")
    return data
