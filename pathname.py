"""Path component functions modeled on Ruby's File.basename, dirname, extname and join.

Paths are ByteStrings delimited by a single separator byte. Nothing here
touches the filesystem.
"""

import enum
import os

from bytestring import ByteString, ContractViolationError, InvalidInputError, _require
from bytestring_list import ByteStringList

SEPARATOR = b"\\" if os.sep == "\\" else b"/"
_SEP = SEPARATOR[0]


def _last_non_separator(path: ByteString) -> int:
    """Index of the last byte that is not a separator, or -1 if there is none."""
    i = path.length() - 1
    while i >= 0 and path.char_at(i) == _SEP:
        i -= 1
    return i


def _last_separator_at_or_before(path: ByteString, pos: int) -> int:
    i = pos
    while i >= 0 and path.char_at(i) != _SEP:
        i -= 1
    return i


def basename(path: ByteString) -> ByteString:
    """Return the final component of path, ignoring trailing separators.

    A path made only of separators has a single separator as its basename.
    """
    _require(path, "path")
    if path.length() == 0:
        return ByteString.new(b"")

    end = _last_non_separator(path)
    if end < 0:
        return ByteString.new(SEPARATOR)

    start = _last_separator_at_or_before(path, end) + 1
    return path.slice(start, end - start + 1)


def dirname(path: ByteString) -> ByteString:
    """Return everything before the last separator.

    "apple" gives ".", "/apple" gives the root separator. A run of
    separators directly before the last component is dropped as a whole.
    """
    _require(path, "path")
    if path.length() == 0:
        return ByteString.new(b"")

    last = _last_separator_at_or_before(path, path.length() - 1)
    if last < 0:
        return ByteString.new(b".")

    run_start = last
    while run_start > 0 and path.char_at(run_start - 1) == _SEP:
        run_start -= 1
    if run_start == 0:
        return ByteString.new(SEPARATOR)
    return path.slice(0, run_start)


class Dot(enum.Enum):
    """Where the last dot of a basename sits."""
    NONE = "none"
    LEADING = "leading"
    TRAILING = "trailing"
    EXTENSION = "extension"


def classify_dot(name: ByteString) -> tuple[Dot, int]:
    """Classify the last '.' in name. Returns (kind, index), index -1 if absent."""
    _require(name, "name")
    last_dot = name.to_bytes().rfind(b".")
    if last_dot < 0:
        return Dot.NONE, last_dot
    if last_dot == 0:
        return Dot.LEADING, last_dot
    if last_dot == name.length() - 1:
        return Dot.TRAILING, last_dot
    return Dot.EXTENSION, last_dot


def extname(path: ByteString) -> ByteString:
    """Return the extension of the last path component, including the dot.

    Dotfiles without a further dot (".profile") and names ending in a dot
    ("foo.") have no extension.
    """
    name = basename(path)
    kind, last_dot = classify_dot(name)
    if kind is not Dot.EXTENSION:
        return ByteString.new(b"")
    return name.slice(last_dot, name.length() - last_dot)


def join(segments) -> ByteString:
    """Join segments with SEPARATOR, collapsing repeated separators to one.

    Accepts a ByteStringList or any iterable of ByteStrings.
    """
    if segments is None:
        raise InvalidInputError("Cannot join None")
    if not isinstance(segments, ByteStringList):
        try:
            items = list(segments)
        except TypeError as e:
            raise InvalidInputError(f"Cannot join {type(segments).__name__}") from e
        segments = ByteStringList()
        for item in items:
            segments.push(item)

    if segments.count == 0:
        raise ContractViolationError("Cannot join zero segments")

    joined = segments.join(ByteString.new(SEPARATOR)).to_bytes()
    out = bytearray()
    for b in joined:
        if b == _SEP and out and out[-1] == _SEP:
            continue
        out.append(b)
    return ByteString.new(out)
