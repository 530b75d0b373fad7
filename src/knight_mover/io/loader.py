from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import httpx

from knight_mover.config import DEFAULT_TIMEOUT
from knight_mover.engine.board import Board

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Raised when a board or command document cannot be retrieved or decoded."""


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_document(
    source: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Fetch ``source`` (URL or local path) and decode it as JSON."""
    if is_remote(source):
        text = _fetch_remote(source, client, timeout)
    else:
        text = _read_local(source)

    try:
        return json.loads(text)
    # RecursionError: nesting deeper than the decoder can follow
    except (ValueError, RecursionError) as exc:
        raise LoaderError(f"Invalid JSON in {source}: {exc}") from exc


def load_board(
    source: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Board:
    data = load_document(source, client=client, timeout=timeout)
    try:
        board = Board.from_dict(data)
    except ValueError as exc:
        raise LoaderError(f"Invalid board descriptor in {source}: {exc}") from exc
    logger.info("Loaded %r from %s", board, source)
    return board


def load_commands(
    source: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[str]:
    """Return the raw command strings from ``{"commands": [...]}`` or a bare list."""
    data = load_document(source, client=client, timeout=timeout)
    entries = data.get("commands") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise LoaderError(f"Command document {source} has no 'commands' list")
    for idx, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise LoaderError(f"Command #{idx} in {source} is not a string: {entry!r}")
    logger.info("Loaded %d commands from %s", len(entries), source)
    return entries


def _fetch_remote(url: str, client: Optional[httpx.Client], timeout: float) -> str:
    logger.debug("GET %s", url)
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.get(url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise LoaderError(f"Failed to fetch {url}: {exc}") from exc
    return response.text


def _read_local(path: str) -> str:
    logger.debug("Reading %s", path)
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoaderError(f"Failed to read {path}: {exc}") from exc
