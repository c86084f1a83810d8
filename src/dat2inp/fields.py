"""Low-level field extraction from a raw ``.DAT`` buffer.

The ``.DAT`` export stores its header as packed little-endian
numbers and Pascal-style strings (one length byte followed by that
many characters, no terminator).  The functions here turn a slice of
such a buffer into a Python value and raise a typed
:class:`~dat2inp.errors.DecodeError` when the bytes are not there.

All functions are pure: they never keep a reference to the buffer and
every value they return is a copy.
"""

import struct
from typing import Dict, Optional, Union

from dat2inp.errors import FieldTooLong, TruncatedRecord

#: Field kind names understood by :func:`read_fixed_numeric`.
FLOAT32 = "float32"
INT32 = "int32"
INT16 = "int16"

#: Field kinds handled by the other readers in this module.
CHAR = "char"
PSTRING = "pstring"

_NUMERIC_FORMATS: Dict[str, struct.Struct] = {
    FLOAT32: struct.Struct("<f"),
    INT32: struct.Struct("<i"),
    INT16: struct.Struct("<h"),
}

# C ``isspace`` in the "C" locale, plus NUL padding.
_TRAILING_NOISE = b" \t\n\v\f\r\x00"

#: Character set used to map raw bytes to ``str`` and back.
ENCODING = "latin-1"

Buffer = Union[bytes, bytearray, memoryview]


def numeric_width(kind: str) -> int:
    """Return the width in bytes of a numeric field kind.

    Raises:
        KeyError: If *kind* is not a numeric kind.
    """
    return _NUMERIC_FORMATS[kind].size


def _check_bounds(
    buffer: Buffer,
    offset: int,
    width: int,
    field: Optional[str],
) -> None:
    if offset < 0 or offset + width > len(buffer):
        raise TruncatedRecord(
            f"field {field or '?'} needs bytes {offset}..{offset + width - 1} "
            f"but the buffer holds {len(buffer)}",
            field=field,
            offset=offset,
        )


def read_fixed_numeric(
    buffer: Buffer,
    offset: int,
    kind: str,
    field: Optional[str] = None,
) -> Union[int, float]:
    """Decode a little-endian number of the given kind at *offset*.

    The value is returned unchecked: NaN or otherwise meaningless
    floats written by the instrument pass straight through.

    Args:
        buffer: The raw record bytes.
        offset: Byte offset of the first byte of the value.
        kind: One of :data:`FLOAT32`, :data:`INT32`, :data:`INT16`.
        field: Optional field name used in error messages.

    Returns:
        ``float`` for :data:`FLOAT32`, ``int`` otherwise.

    Raises:
        TruncatedRecord: If the value extends past the buffer end.
    """
    fmt = _NUMERIC_FORMATS[kind]
    _check_bounds(buffer, offset, fmt.size, field)
    return fmt.unpack_from(buffer, offset)[0]


def read_char(
    buffer: Buffer,
    offset: int,
    field: Optional[str] = None,
) -> str:
    """Return the single raw byte at *offset* as a one-character string.

    The byte is kept verbatim, including NUL.

    Raises:
        TruncatedRecord: If *offset* is past the buffer end.
    """
    _check_bounds(buffer, offset, 1, field)
    return bytes(buffer[offset:offset + 1]).decode(ENCODING)


def trim_field(raw: bytes) -> str:
    """Trim a raw Pascal-string payload the way the instrument pads it.

    The payload is cut at its first NUL, then trailing whitespace and
    NUL bytes are stripped.  Interior whitespace is kept, so
    multi-word values survive.  Trimming a trimmed value is a no-op.

    Args:
        raw: The declared-length character bytes (without the length
            byte).

    Returns:
        The trimmed value, possibly ``""``.
    """
    value = raw.split(b"\x00", 1)[0]
    return value.rstrip(_TRAILING_NOISE).decode(ENCODING)


def read_length_prefixed_string(
    buffer: Buffer,
    offset: int,
    max_capacity: int,
    field: Optional[str] = None,
) -> str:
    """Decode a Pascal-style string stored at *offset*.

    The byte at *offset* gives the declared length ``n``; the next
    ``n`` bytes are the characters.  Bytes beyond ``n`` are never
    inspected, whatever padding they hold.

    Args:
        buffer: The raw record bytes.
        offset: Byte offset of the length byte.
        max_capacity: Size of the field slot, length byte included.
            The declared length must be strictly smaller.
        field: Optional field name used in error messages.

    Returns:
        The trimmed string (see :func:`trim_field`).

    Raises:
        TruncatedRecord: If the length byte or the declared characters
            run past the buffer end.
        FieldTooLong: If the declared length is ``>= max_capacity``.
    """
    _check_bounds(buffer, offset, 1, field)
    length = buffer[offset]
    if length >= max_capacity:
        raise FieldTooLong(
            f"field {field or '?'} declares {length} characters "
            f"but holds at most {max_capacity - 1}",
            field=field,
            offset=offset,
        )
    _check_bounds(buffer, offset + 1, length, field)
    start = offset + 1
    return trim_field(bytes(buffer[start:start + length]))
