"""Filesystem probes: stat-like queries behind one small interface."""

import os
import stat
from dataclasses import dataclass

from bytestring import ByteString, InvalidInputError, _require
from pathname import SEPARATOR


@dataclass(frozen=True)
class ProbeInfo:
    """What a probe learned about a path."""
    exists: bool
    is_dir: bool = False
    is_regular: bool = False


MISSING = ProbeInfo(exists=False)


class Probe:
    """Abstract filesystem probe.

    probe() never raises for a path that doesn't exist; it reports
    exists=False instead. Invalid input raises InvalidInputError.
    """

    def probe(self, path: ByteString) -> ProbeInfo:
        raise NotImplementedError


class OsProbe(Probe):
    """Probe the real filesystem with os.stat, following symlinks."""

    def probe(self, path: ByteString) -> ProbeInfo:
        raw = _require(path, "path").to_bytes()
        try:
            st = os.stat(raw)
        except (OSError, ValueError):
            # ValueError: embedded NUL byte
            return MISSING
        return ProbeInfo(
            exists=True,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_regular=stat.S_ISREG(st.st_mode),
        )


class MemoryProbe(Probe):
    """In-memory probe backed by a nested dict.

    Structure: nested dicts are directories, bytes/str values are files.
    Paths are split on the path separator; empty segments are ignored.

    Example:
        MemoryProbe({
            "readme.txt": "Hello, world!",
            "docs": {
                "guide.txt": b"A guide",
            }
        })
    """

    def __init__(self, tree: dict):
        if not isinstance(tree, dict):
            raise InvalidInputError("MemoryProbe tree must be a dict")
        self._tree = tree

    def _resolve(self, raw: bytes):
        """Walk the tree to the node at raw. Returns None if there isn't one."""
        node = self._tree
        for part in raw.split(SEPARATOR):
            if not part:
                continue
            if not isinstance(node, dict):
                return None
            key = part.decode("utf-8", errors="surrogateescape")
            if key not in node:
                return None
            node = node[key]
        return node

    def probe(self, path: ByteString) -> ProbeInfo:
        raw = _require(path, "path").to_bytes()
        if not raw:
            return MISSING
        node = self._resolve(raw)
        if node is None:
            return MISSING
        if isinstance(node, dict):
            return ProbeInfo(exists=True, is_dir=True)
        return ProbeInfo(exists=True, is_regular=True)


def _probe(path: ByteString, probe: Probe | None) -> ProbeInfo:
    return (probe or OsProbe()).probe(path)


def exists(path: ByteString, probe: Probe | None = None) -> bool:
    return _probe(path, probe).exists


def is_directory(path: ByteString, probe: Probe | None = None) -> bool:
    return _probe(path, probe).is_dir


def is_file(path: ByteString, probe: Probe | None = None) -> bool:
    """True if path exists and is a regular file."""
    return _probe(path, probe).is_regular
