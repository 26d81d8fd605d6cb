"""Ordered, growable list of ByteStrings."""

from bytestring import (
    ByteString, InvalidInputError, AllocationError, MAX_LENGTH, _require,
)


class ByteStringList:
    """Owns its entries. Pushing a ByteString hands it over to the list."""

    def __init__(self):
        self._entries: list[ByteString] | None = []

    @classmethod
    def from_iterable(cls, items) -> "ByteStringList":
        """Build a list from ByteStrings or raw bytes/str values."""
        if items is None:
            raise InvalidInputError("Cannot build a ByteStringList from None")
        result = cls()
        for item in items:
            if isinstance(item, ByteString):
                result.push(item)
            else:
                result.push_bytes(item)
        return result

    def is_bad(self) -> bool:
        return self._entries is None

    def _check(self):
        if self.is_bad():
            raise InvalidInputError("Bad ByteStringList")

    @property
    def count(self) -> int:
        self._check()
        return len(self._entries)

    def __len__(self) -> int:
        return self.count

    def __iter__(self):
        self._check()
        return iter(list(self._entries))

    def __repr__(self) -> str:
        if self.is_bad():
            return "ByteStringList(<bad>)"
        return f"ByteStringList({[e.to_bytes() for e in self._entries]!r})"

    def push(self, item: ByteString):
        """Append item. Raises InvalidInputError for anything but a valid ByteString."""
        self._check()
        _require(item, "item")
        try:
            self._entries.append(item)
        except MemoryError as e:
            raise AllocationError("Cannot grow ByteStringList") from e

    def push_bytes(self, data):
        self.push(ByteString.new(data))

    def get(self, index: int) -> ByteString | None:
        """Return the entry at index, or None when index is negative or past the end."""
        self._check()
        if index < 0 or index >= len(self._entries):
            return None
        return self._entries[index]

    def join(self, separator: ByteString) -> ByteString:
        """Concatenate the entries with separator between each pair."""
        self._check()
        _require(separator, "separator")
        parts = [_require(e, "entry").to_bytes() for e in self._entries]
        try:
            raw = separator.to_bytes().join(parts)
        except MemoryError as e:
            raise AllocationError("Cannot allocate joined string") from e
        if len(raw) > MAX_LENGTH:
            raise AllocationError(f"Joined string of {len(raw)} bytes exceeds {MAX_LENGTH}")
        return ByteString.new(raw)

    def eql(self, other: "ByteStringList") -> bool:
        """Same count and pairwise equal entries."""
        self._check()
        if not isinstance(other, ByteStringList):
            raise InvalidInputError(f"Expected ByteStringList, got {type(other).__name__}")
        other._check()
        if len(self._entries) != len(other._entries):
            return False
        return all(a.eql(b) for a, b in zip(self._entries, other._entries))

    def __eq__(self, other):
        if isinstance(other, ByteStringList):
            return self.eql(other)
        return NotImplemented

    __hash__ = None

    def free(self):
        """Free every entry, then the list itself."""
        self._check()
        for entry in self._entries:
            if not entry.is_bad():
                entry.free()
        self._entries = None
