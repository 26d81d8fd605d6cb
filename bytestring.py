"""Length-tracked byte string value type and the errors shared by the library.

Operations never modify the receiver; each one returns a new ByteString.
"""

MAX_LENGTH = 2**31 - 1
WHITESPACE = b" \t\n\v\f\r"

CR = 0x0D
LF = 0x0A


class RStringError(Exception):
    """Base error for byte string and path operations."""
    pass


class InvalidInputError(RStringError):
    """Input is absent, of the wrong type, or a released/corrupt ByteString."""
    pass


class OutOfRangeError(RStringError):
    """Index or slice bounds fall outside the string."""
    pass


class ContractViolationError(RStringError):
    """Arguments are well-formed but not allowed, e.g. an empty gsub pattern."""
    pass


class AllocationError(RStringError):
    """Storage could not be grown."""
    pass


class SubstringNotFoundError(RStringError):
    """index() or index_from() found no match."""
    pass


def _to_raw(data, what: str = "input") -> bytes:
    """Coerce bytes-like or str input to bytes. Raises InvalidInputError otherwise."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InvalidInputError(f"Expected bytes for {what}, got {type(data).__name__}")


def _require(value, what: str) -> "ByteString":
    """Check that value is a valid ByteString and return it."""
    if not isinstance(value, ByteString):
        raise InvalidInputError(f"Expected ByteString for {what}, got {type(value).__name__}")
    if value.is_bad():
        raise InvalidInputError(f"Bad ByteString for {what}")
    return value


class ByteString:
    """An owned byte buffer with a logical length.

    The buffer may be larger than the logical length; only the first
    `length` bytes are content. Bytes are not required to be NUL-free.

    Example:
        s = ByteString.new(b"apple\\n")
        s.chomp().upcase().to_bytes()  # b"APPLE"
    """

    __slots__ = ("_buf", "_length")

    def __init__(self, buf: bytearray, length: int):
        self._buf = buf
        self._length = length

    @classmethod
    def new(cls, data) -> "ByteString":
        """Build a ByteString from bytes-like data or a str (encoded UTF-8)."""
        if data is None:
            raise InvalidInputError("Cannot build a ByteString from None")
        raw = _to_raw(data)
        if len(raw) > MAX_LENGTH:
            raise InvalidInputError(f"Input of {len(raw)} bytes exceeds {MAX_LENGTH}")
        return cls(bytearray(raw), len(raw))

    @classmethod
    def format(cls, fmt, *args) -> "ByteString":
        """Build a ByteString with %-style formatting, e.g. format(b"%s pie", b"apple")."""
        raw = _to_raw(fmt, "format")
        try:
            return cls.new(raw % args)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Cannot format: {e}") from e

    def _from_content(self, raw: bytes) -> "ByteString":
        return ByteString(bytearray(raw), len(raw))

    def _content(self) -> bytes:
        return bytes(self._buf[:self._length])

    # -- validity and lifecycle ---------------------------------------------

    @property
    def capacity(self) -> int:
        return -1 if self._buf is None else len(self._buf)

    def is_bad(self) -> bool:
        """True for a released buffer, a negative length, or capacity below length."""
        return self._buf is None or self._length < 0 or self.capacity < self._length

    def _check(self):
        if self.is_bad():
            raise InvalidInputError("Bad ByteString")

    def free(self):
        """Release the buffer. The ByteString is invalid afterwards."""
        self._check()
        self._buf = None
        self._length = 0

    def copy(self) -> "ByteString":
        self._check()
        return self._from_content(self._content())

    def to_bytes(self) -> bytes:
        self._check()
        return self._content()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        if self.is_bad():
            return "ByteString(<bad>)"
        return f"ByteString({self._content()!r})"

    # -- info ---------------------------------------------------------------

    def length(self) -> int:
        self._check()
        return self._length

    def __len__(self) -> int:
        return self.length()

    def char_at(self, index: int) -> int:
        """Return the byte value at index. Raises OutOfRangeError outside [0, length)."""
        self._check()
        if index < 0 or index >= self._length:
            raise OutOfRangeError(f"Index {index} out of range for length {self._length}")
        return self._buf[index]

    def eql(self, other: "ByteString") -> bool:
        self._check()
        _require(other, "other")
        return self._length == other._length and self._content() == other._content()

    def eql_literal(self, literal) -> bool:
        self._check()
        if literal is None:
            raise InvalidInputError("Cannot compare against None")
        return self._content() == _to_raw(literal, "literal")

    def __eq__(self, other):
        if isinstance(other, ByteString):
            return self.eql(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.eql_literal(other)
        return NotImplemented

    __hash__ = None

    def include(self, substring: "ByteString") -> bool:
        self._check()
        _require(substring, "substring")
        return substring._content() in self._content()

    def index(self, substring: "ByteString") -> int:
        """Return the offset of the first occurrence of substring.

        Raises SubstringNotFoundError when there is none. Both that and
        InvalidInputError are RStringErrors.
        """
        return self.index_from(substring, 0)

    def index_from(self, substring: "ByteString", offset: int) -> int:
        """Return the offset of the first occurrence at or after offset.

        An empty substring matches at offset itself.
        """
        self._check()
        _require(substring, "substring")
        if offset < 0 or offset > self._length:
            raise OutOfRangeError(f"Offset {offset} out of range for length {self._length}")
        found = self._content().find(substring._content(), offset)
        if found < 0:
            raise SubstringNotFoundError(f"{substring!r} not found in {self!r}")
        return found

    # -- slicing ------------------------------------------------------------

    def slice(self, start: int, length: int) -> "ByteString":
        """Return up to `length` bytes beginning at `start`.

        A start equal to the string length gives an empty string rather than
        an error, as Ruby's String#slice does. A negative start counts back
        from the end. The length is clamped to the bytes available.
        """
        self._check()
        if length < 0:
            raise OutOfRangeError(f"Negative slice length {length}")
        if start == self._length:
            return self._from_content(b"")
        if start < 0:
            start = self._length + start
            if start < 0:
                raise OutOfRangeError(f"Slice start out of range for length {self._length}")
        if start > self._length:
            raise OutOfRangeError(f"Slice start {start} out of range for length {self._length}")
        return self._from_content(self._buf[start:min(start + length, self._length)])

    def slice_one(self, index: int) -> "ByteString":
        self._check()
        if index < 0 or index >= self._length:
            raise OutOfRangeError(f"Index {index} out of range for length {self._length}")
        return self._from_content(self._buf[index:index + 1])

    # -- transformations ----------------------------------------------------

    def chomp(self) -> "ByteString":
        """Remove one trailing \\r, \\r\\n or \\n."""
        self._check()
        n = self._length
        if n >= 1 and self._buf[n - 1] == CR:
            return self.slice(0, n - 1)
        if n >= 2 and self._buf[n - 1] == LF and self._buf[n - 2] == CR:
            return self.slice(0, n - 2)
        if n >= 1 and self._buf[n - 1] == LF:
            return self.slice(0, n - 1)
        return self.copy()

    def downcase(self) -> "ByteString":
        self._check()
        return self._from_content(self._content().lower())

    def upcase(self) -> "ByteString":
        self._check()
        return self._from_content(self._content().upper())

    def strip(self) -> "ByteString":
        self._check()
        return self._from_content(self._content().strip(WHITESPACE))

    def lstrip(self) -> "ByteString":
        self._check()
        return self._from_content(self._content().lstrip(WHITESPACE))

    def rstrip(self) -> "ByteString":
        self._check()
        return self._from_content(self._content().rstrip(WHITESPACE))

    def reverse(self) -> "ByteString":
        self._check()
        buf = bytearray(self._content())
        n = len(buf)
        for i in range(n // 2):
            buf[i], buf[n - 1 - i] = buf[n - 1 - i], buf[i]
        return ByteString(buf, n)

    def gsub(self, pattern: "ByteString", replacement: "ByteString") -> "ByteString":
        """Replace every non-overlapping occurrence of pattern, left to right.

        Raises ContractViolationError for an empty pattern.
        """
        self._check()
        _require(pattern, "pattern")
        _require(replacement, "replacement")
        if pattern._length == 0:
            raise ContractViolationError("gsub pattern must not be empty")

        content = self._content()
        pat = pattern._content()
        rep = replacement._content()
        out = bytearray()
        pos = 0
        while True:
            found = content.find(pat, pos)
            if found < 0:
                break
            out += content[pos:found]
            out += rep
            pos = found + len(pat)
        out += content[pos:]
        if len(out) > MAX_LENGTH:
            raise AllocationError(f"Result of {len(out)} bytes exceeds {MAX_LENGTH}")
        return ByteString(out, len(out))

    def split(self, separator: "ByteString"):
        """Split on every occurrence of separator into a ByteStringList.

        An empty separator splits into single bytes.
        """
        from bytestring_list import ByteStringList

        self._check()
        _require(separator, "separator")
        content = self._content()
        sep = separator._content()
        if not sep and content:
            parts = [content[i:i + 1] for i in range(len(content))]
        else:
            parts = content.split(sep) if sep else [content]

        result = ByteStringList()
        for part in parts:
            result.push(self._from_content(part))
        return result
