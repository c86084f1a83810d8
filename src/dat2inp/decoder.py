"""Record decoder for the fixed ``.DAT`` header layout.

The layout is described once, declaratively, by :data:`FIELD_TABLE`.
:func:`decode_record` walks that table against a buffer, hands every
entry to the matching reader in :mod:`dat2inp.fields`, applies the
detection-limit library fallback and finally derives the dead time.

Example:
    >>> from dat2inp.decoder import decode_record
    >>> with open("SPEC0001.DAT", "rb") as fh:
    ...     record = decode_record(fh.read(), default_lim_file="MDA01.LIB")
"""

import math
import struct
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from dat2inp.errors import TruncatedRecord
from dat2inp.fields import (
    CHAR,
    FLOAT32,
    INT16,
    INT32,
    PSTRING,
    Buffer,
    numeric_width,
    read_char,
    read_fixed_numeric,
    read_length_prefixed_string,
)
from dat2inp.models import Record

_FLOAT32 = struct.Struct("<f")


@dataclass(frozen=True)
class FieldSpec:
    """Position and type of one field in the ``.DAT`` header.

    Attributes:
        name: Attribute name on :class:`~dat2inp.models.Record`.
        offset: Byte offset of the field.
        kind: One of the kind constants from :mod:`dat2inp.fields`.
        capacity: Slot size for :data:`~dat2inp.fields.PSTRING`
            fields, length byte included; ``0`` for other kinds.
    """

    name: str
    offset: int
    kind: str
    capacity: int = 0

    @property
    def width(self) -> int:
        """Number of bytes the field occupies in the buffer."""
        if self.kind == PSTRING:
            return self.capacity
        if self.kind == CHAR:
            return 1
        return numeric_width(self.kind)

    @property
    def end(self) -> int:
        """Offset one past the last byte of the field."""
        return self.offset + self.width


def _series(prefix: str, start: int, kind: str) -> List[FieldSpec]:
    step = numeric_width(kind)
    return [
        FieldSpec(f"{prefix}{i + 1}", start + i * step, kind)
        for i in range(6)
    ]


FIELD_TABLE: List[FieldSpec] = [
    FieldSpec("spectrum_identifier", 0, PSTRING, 5),
    FieldSpec("sample_identifier", 5, PSTRING, 41),
    FieldSpec("project", 46, PSTRING, 5),
    FieldSpec("sample_location", 51, PSTRING, 31),
    FieldSpec("latitude", 82, FLOAT32),
    FieldSpec("latitude_unit", 86, CHAR),
    FieldSpec("longitude", 87, FLOAT32),
    FieldSpec("longitude_unit", 91, CHAR),
    FieldSpec("sample_height", 92, FLOAT32),
    FieldSpec("sample_weight", 96, FLOAT32),
    FieldSpec("sample_density", 100, FLOAT32),
    FieldSpec("sample_volume", 104, FLOAT32),
    FieldSpec("sample_quantity", 108, FLOAT32),
    FieldSpec("sample_uncertainty", 112, FLOAT32),
    FieldSpec("sample_unit", 116, PSTRING, 3),
    FieldSpec("detector_identifier", 119, PSTRING, 3),
    FieldSpec("year", 122, PSTRING, 3),
    FieldSpec("beaker_identifier", 125, PSTRING, 3),
    FieldSpec("sampling_start", 128, PSTRING, 13),
    FieldSpec("sampling_stop", 141, PSTRING, 13),
    FieldSpec("reference_time", 154, PSTRING, 13),
    FieldSpec("measurement_start", 167, PSTRING, 13),
    FieldSpec("measurement_stop", 180, PSTRING, 13),
    FieldSpec("real_time", 193, INT32),
    FieldSpec("live_time", 197, INT32),
    FieldSpec("measurement_time", 201, INT32),
    FieldSpec("nuclide_library", 209, PSTRING, 13),
    FieldSpec("lim_file", 222, PSTRING, 13),
    FieldSpec("channel_count", 235, INT32),
    FieldSpec("format", 239, PSTRING, 3),
    FieldSpec("record_length", 243, INT16),
    FieldSpec("FWHMPS", 245, FLOAT32),
    FieldSpec("FWHMAN", 249, FLOAT32),
    FieldSpec("THRESH", 253, FLOAT32),
    FieldSpec("BSTF", 257, FLOAT32),
    FieldSpec("ETOL", 261, FLOAT32),
    FieldSpec("LOCH", 265, FLOAT32),
    FieldSpec("ICA", 269, INT16),
    FieldSpec("energy_file", 271, PSTRING, 13),
    FieldSpec("pef_file", 284, PSTRING, 13),
    FieldSpec("tef_file", 297, PSTRING, 13),
    FieldSpec("background_file", 310, PSTRING, 13),
    *_series("PA", 323, INT32),
    FieldSpec("print_out", 347, INT16),
    FieldSpec("plot_out", 349, INT16),
    FieldSpec("disk_out", 351, INT16),
    FieldSpec("ex_print_out", 353, INT16),
    FieldSpec("ex_disk_out", 355, INT16),
    *_series("PO", 357, INT32),
    FieldSpec("complete", 381, INT16),
    FieldSpec("analysed", 383, INT16),
    *_series("ST", 385, INT16),
]

#: Minimum buffer length covering every field in :data:`FIELD_TABLE`.
RECORD_SIZE: int = max(spec.end for spec in FIELD_TABLE)


def _to_float32(value: float) -> float:
    """Round a Python float to the nearest float32 value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def compute_dead_time(real_time: int, live_time: int) -> float:
    """Return the dead time in percent: ``(real - live) / live * 100``.

    Every intermediate is rounded to float32, reproducing the
    instrument software's arithmetic.  A zero *live_time* is not an
    error: like the IEEE division it mirrors, the result is ``inf``,
    ``-inf`` or ``nan`` depending on the sign of ``real - live``.
    Downstream tools expect that value, so it is kept.

    Args:
        real_time: Real (clock) time in seconds.
        live_time: Live time in seconds.

    Returns:
        The dead time percentage as a float32-valued ``float``.
    """
    live = _to_float32(live_time)
    numerator = _to_float32(_to_float32(real_time) - live)
    if live == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    ratio = _to_float32(numerator / live)
    return _to_float32(ratio * 100.0)


def _extract(buffer: Buffer, spec: FieldSpec) -> Union[str, int, float]:
    if spec.kind == PSTRING:
        return read_length_prefixed_string(
            buffer, spec.offset, spec.capacity, field=spec.name
        )
    if spec.kind == CHAR:
        return read_char(buffer, spec.offset, field=spec.name)
    return read_fixed_numeric(buffer, spec.offset, spec.kind, field=spec.name)


def decode_record(
    buffer: Buffer,
    default_lim_file: Optional[str] = None,
) -> Record:
    """Decode one ``.DAT`` buffer into a :class:`~dat2inp.models.Record`.

    The buffer length is checked against :data:`RECORD_SIZE` before
    any field is read, so a short buffer never yields a partially
    filled record.  Extraction stops at the first failing field.

    Args:
        buffer: The complete file contents.  Only borrowed for the
            duration of the call.
        default_lim_file: Detection-limit library used verbatim when
            the record's own ``lim_file`` is empty.

    Returns:
        The decoded record, with ``dead_time`` derived from
        ``real_time`` and ``live_time``.

    Raises:
        TruncatedRecord: If the buffer is shorter than the layout, or
            a string's declared length runs past the buffer end.
        FieldTooLong: If a string's declared length does not fit its
            slot.
    """
    if len(buffer) < RECORD_SIZE:
        raise TruncatedRecord(
            f"record needs {RECORD_SIZE} bytes but the buffer holds "
            f"{len(buffer)}"
        )

    values: Dict[str, Union[str, int, float]] = {
        spec.name: _extract(buffer, spec) for spec in FIELD_TABLE
    }

    if not values["lim_file"] and default_lim_file is not None:
        values["lim_file"] = default_lim_file

    values["dead_time"] = compute_dead_time(
        values["real_time"], values["live_time"]
    )
    return Record(**values)
