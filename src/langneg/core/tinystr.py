"""Compact ASCII subtag values packed into fixed-width integers.

A subtag of up to 4 (TinyStr4) or 8 (TinyStr8) ASCII characters is stored as
a single unsigned integer so that equality, ordering, hashing and case
transforms are integer operations with no per-character loop.

Encoding:
    Byte order is little-endian: the first character occupies the lowest
    byte. Unused high bytes are zero (padding). Because ASCII never sets
    bit 7, the high bit of each byte is reserved for the masks below, and
    a stored word is never zero (empty strings and NUL are rejected).

    For "en" in a TinyStr4: 0x00006e65

Mask constants (shown for 4 bytes, repeated per byte for 8):
    0x80808080  high bit of every byte
    0x7f7f7f7f  adding it sets the high bit of every non-zero byte
    0x1f1f1f1f  adding it sets the high bit of bytes >= 'a' (0x61)
    0x05050505  adding it sets the high bit of bytes >= '{' (0x7b)
    0x3f3f3f3f  adding it sets the high bit of bytes >= 'A' (0x41)
    0x25252525  adding it sets the high bit of bytes >= '[' (0x5b)
    0x50505050  adding it sets the high bit of bytes >= '0' (0x30)
    0x46464646  adding it sets the high bit of bytes >= ':' (0x3a)

    No byte of a stored word exceeds 0x7f, so none of these additions carries
    into the neighbouring byte. A range test "lo <= b < hi" is
    "(w + add_lo) & ~(w + add_hi) & 0x80..". Shifting the resulting high bit
    right by 2 yields 0x20, the ASCII case bit.

Thread Safety:
    Values are immutable. Safe for concurrent use across multiple threads.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from langneg.diagnostics import ErrorTemplate, TinyStrError
from langneg.enums import TinyStrErrorKind

__all__ = ["TinyStr4", "TinyStr8"]


def _repeat(byte: int, width: int) -> int:
    """Return an integer with ``byte`` in each of its ``width`` low bytes."""
    return int.from_bytes(bytes((byte,)) * width, "little")


@dataclass(frozen=True, slots=True)
class _Masks:
    """Per-capacity mask constants (see module docstring)."""

    high: int
    nonzero: int
    case_bits: int
    lower_lo: int
    lower_hi: int
    upper_lo: int
    upper_hi: int
    digit_lo: int
    digit_hi: int
    title_lo: int
    title_hi: int

    @classmethod
    def for_capacity(cls, width: int) -> _Masks:
        upper_lo = _repeat(0x3F, width)
        upper_hi = _repeat(0x25, width)
        return cls(
            high=_repeat(0x80, width),
            nonzero=_repeat(0x7F, width),
            case_bits=_repeat(0x20, width),
            lower_lo=_repeat(0x1F, width),
            lower_hi=_repeat(0x05, width),
            upper_lo=upper_lo,
            upper_hi=upper_hi,
            digit_lo=_repeat(0x50, width),
            digit_hi=_repeat(0x46, width),
            # First byte tests for lowercase, the rest for uppercase.
            title_lo=(upper_lo & ~0xFF) | 0x1F,
            title_hi=(upper_hi & ~0xFF) | 0x05,
        )


_MASKS: dict[int, _Masks] = {4: _Masks.for_capacity(4), 8: _Masks.for_capacity(8)}


@dataclass(frozen=True, slots=True, order=True, repr=False)
class _TinyStr:
    """Shared implementation of the packed subtag value.

    Subclasses only set CAPACITY.
    """

    word: int

    CAPACITY: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if not 0 < self.word < (1 << (8 * self.CAPACITY)):
            msg = f"{type(self).__name__} word out of range: {self.word:#x}"
            raise ValueError(msg)

    @classmethod
    def new(cls, text: str) -> Self:
        """Pack ``text`` into a compact value.

        Args:
            text: 1 to CAPACITY ASCII characters, no NUL

        Returns:
            Packed value

        Raises:
            TinyStrError: If the input is empty, too long, non-ASCII,
                or contains NUL

        Example:
            >>> TinyStr4.new("en").word == 0x6E65
            True
        """
        data = text.encode("utf-8", "surrogatepass")
        length = len(data)
        if not 1 <= length <= cls.CAPACITY:
            raise TinyStrError(
                ErrorTemplate.tinystr_invalid_size(text, cls.CAPACITY),
                kind=TinyStrErrorKind.INVALID_SIZE,
            )
        word = int.from_bytes(data, "little")
        used = _repeat(0x80, length)
        if word & used:
            raise TinyStrError(
                ErrorTemplate.tinystr_non_ascii(text), kind=TinyStrErrorKind.NON_ASCII
            )
        # 0x80 - b borrows into the high bit only when b == 0.
        if (used - word) & used:
            raise TinyStrError(
                ErrorTemplate.tinystr_invalid_null(text), kind=TinyStrErrorKind.INVALID_NULL
            )
        return cls(word)

    @property
    def _masks(self) -> _Masks:
        return _MASKS[self.CAPACITY]

    def __len__(self) -> int:
        # Padding bytes are the zero high bytes of the word.
        return (self.word.bit_length() + 7) // 8

    def as_str(self) -> str:
        """Decode the packed value back to text."""
        return self.word.to_bytes(len(self), "little").decode("ascii")

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_str()!r})"

    def _used(self) -> int:
        m = self._masks
        return (self.word + m.nonzero) & m.high

    def to_ascii_uppercase(self) -> Self:
        """Clear the case bit of every byte in 'a'..'z'."""
        m = self._masks
        w = self.word
        lower = (w + m.lower_lo) & ~(w + m.lower_hi) & m.high
        return type(self)(w & ~(lower >> 2))

    def to_ascii_lowercase(self) -> Self:
        """Set the case bit of every byte in 'A'..'Z'."""
        m = self._masks
        w = self.word
        upper = (w + m.upper_lo) & ~(w + m.upper_hi) & m.high
        return type(self)(w | (upper >> 2))

    def to_ascii_titlecase(self) -> Self:
        """Uppercase the first character and lowercase the rest.

        Example:
            >>> TinyStr4.new("lATN").to_ascii_titlecase().as_str()
            'Latn'
        """
        m = self._masks
        w = self.word
        flip = ((w + m.title_lo) & ~(w + m.title_hi) & m.high) >> 2
        # Lowercase letters in byte 0 lose 0x20; uppercase ones elsewhere gain it.
        return type(self)((w | flip) & ~(flip & 0x20))

    def _alpha_bits(self) -> int:
        m = self._masks
        folded = self.word | m.case_bits
        return (folded + m.lower_lo) & ~(folded + m.lower_hi) & m.high

    def _digit_bits(self) -> int:
        m = self._masks
        w = self.word
        return (w + m.digit_lo) & ~(w + m.digit_hi) & m.high

    def is_all_ascii_alpha(self) -> bool:
        """Check that every character is an ASCII letter."""
        return self._alpha_bits() == self._used()

    def is_all_ascii_numeric(self) -> bool:
        """Check that every character is an ASCII digit."""
        return self._digit_bits() == self._used()

    def is_all_ascii_alphanumeric(self) -> bool:
        """Check that every character is an ASCII letter or digit."""
        return (self._alpha_bits() | self._digit_bits()) == self._used()


class TinyStr4(_TinyStr):
    """A compact string of 1 to 4 non-NUL ASCII characters.

    Used for language, script and region subtags.

    Example:
        >>> TinyStr4.new("us").to_ascii_uppercase()
        TinyStr4('US')
    """

    __slots__ = ()
    CAPACITY = 4


class TinyStr8(_TinyStr):
    """A compact string of 1 to 8 non-NUL ASCII characters.

    Used for variant and extension subtags.

    Example:
        >>> TinyStr8.new("Valencia").to_ascii_lowercase()
        TinyStr8('valencia')
    """

    __slots__ = ()
    CAPACITY = 8
