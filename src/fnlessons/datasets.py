"""
Dataset acquisition: fetch a CSV once, then parse it into a Table.

The local path acts as the cache. If the file is already there it is used
as-is; nothing checks whether the remote copy changed.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import requests

from fnlessons.csv_parser import parse_table_file
from fnlessons.table import Table

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_local_copy(url: str, local_path: PathLike, timeout: float = 60) -> Path:
    """
    Make sure local_path exists, downloading it from url if it does not.

    Raises:
        requests.HTTPError: If the server answers with an error status
        requests.RequestException: On connection problems
    """
    local_path = Path(local_path)
    if local_path.exists():
        logger.debug(f"Using cached dataset {local_path}")
        return local_path

    logger.info(f"Downloading {url} -> {local_path}")
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()

    local_path.parent.mkdir(parents=True, exist_ok=True)
    local_path.write_bytes(r.content)
    return local_path


def load_table(url: str, local_path: PathLike, timeout: float = 60) -> Table:
    """Fetch the CSV if needed and parse it into a Table."""
    path = ensure_local_copy(url, local_path, timeout=timeout)
    return parse_table_file(str(path))


__all__ = ["ensure_local_copy", "load_table"]
