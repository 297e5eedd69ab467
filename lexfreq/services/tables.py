"""
Frequency table files.

Each wordlist is stored as `<wordlist>_<language>.msgpack.gz`: a gzipped
msgpack array whose first element is a header `{"format": "cB", "version": 1}`
and whose remaining elements are buckets of words. Bucket `i` holds the
words with frequency 10 ** (-i / 100). Files whose name starts with an
underscore hold auxiliary data and are not wordlists.
"""
from __future__ import annotations

import gzip
import threading
from pathlib import Path

import msgpack

from lexfreq.paths import logger

TABLE_SUFFIX = ".msgpack.gz"
CBPACK_FORMAT = "cB"
CBPACK_VERSION = 1


def load_msgpack(path: str | Path):
    """Decode a gzipped msgpack file."""
    with gzip.open(path, "rb") as infile:
        return msgpack.load(infile, raw=False, strict_map_key=False)


def read_cbpack(path: str | Path) -> list[list[str]]:
    """
    Read a cBpack file and return its frequency buckets.

    Raises ValueError when the header is missing or names another format or
    version, rather than guessing at an incompatible structure.
    """
    data = load_msgpack(path)
    if not isinstance(data, list) or not data:
        raise ValueError(f"{path} is not a cBpack file: expected a non-empty array")

    header, *buckets = data
    if (
        not isinstance(header, dict)
        or header.get("format") != CBPACK_FORMAT
        or header.get("version") != CBPACK_VERSION
    ):
        raise ValueError(
            f"Unexpected cBpack header in {path}: {header!r}. "
            f"Expected format {CBPACK_FORMAT!r}, version {CBPACK_VERSION}",
        )
    return buckets


def normalize_wordlist(wordlist: str) -> str:
    """Map deprecated wordlist names to their current equivalents."""
    if wordlist == "combined":
        return "small"
    return wordlist


class WordlistIndex:
    """Lists which languages each wordlist covers, scanning the data directory once."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)
        self._index: dict[str, dict[str, str]] | None = None
        self._lock = threading.Lock()

    def _build_index(self) -> dict[str, dict[str, str]]:
        index: dict[str, dict[str, str]] = {}
        if not self._data_dir.is_dir():
            logger.warning(f"Data directory {self._data_dir} does not exist, no wordlists available")
            return index

        for path in sorted(self._data_dir.glob(f"*{TABLE_SUFFIX}")):
            if path.name.startswith("_"):
                continue
            stem = path.name[: -len(TABLE_SUFFIX)]
            if "_" not in stem:
                continue
            list_name, lang = stem.split("_", 1)
            index.setdefault(list_name, {})[lang] = str(path)
        logger.debug(f"Indexed wordlists in {self._data_dir}: {sorted(index)}")
        return index

    def _get_index(self) -> dict[str, dict[str, str]]:
        if self._index is None:
            with self._lock:
                if self._index is None:
                    self._index = self._build_index()
        return self._index

    def available_languages(self, wordlist: str) -> dict[str, str]:
        """
        Return a mapping from language tag to table path for a wordlist.

        "best" overlays the "large" languages on top of "small", so each
        language uses its largest available table.
        """
        wordlist = normalize_wordlist(wordlist)
        if wordlist == "best":
            available = self.available_languages("small")
            available.update(self.available_languages("large"))
            return available
        return dict(self._get_index().get(wordlist, {}))
