"""Typed decode failures raised by the field extractor and decoder.

Both concrete errors derive from :class:`DecodeError`, itself a
``ValueError``, so callers converting whole directories can catch a
single type per input file.
"""

from typing import Optional


class DecodeError(ValueError):
    """A ``.DAT`` buffer could not be decoded into a record.

    Attributes:
        field: Name of the field being extracted, if known.
        offset: Byte offset of that field in the buffer.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.offset = offset


class TruncatedRecord(DecodeError):
    """The buffer ends before a field's bytes do."""


class FieldTooLong(DecodeError):
    """A length prefix declares more characters than the field holds."""
