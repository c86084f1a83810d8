"""Text renderers for decoded records.

This module turns a :class:`~dat2inp.models.Record` into the two text
forms the converter writes:

* the ``.INP`` record read by gamma10, one value per line in a fixed
  order with floats in 14-digit scientific notation, and
* a labelled dump meant for humans debugging a ``.DAT`` file.

Both orders are part of the downstream contract and must not change.
"""

from typing import List, Tuple, Union

from dat2inp.models import Record

#: Attribute order of the ``.INP`` format, one value per line.
INP_FIELDS: Tuple[str, ...] = (
    "spectrum_identifier",
    "sample_identifier",
    "project",
    "sample_location",
    "latitude",
    "latitude_unit",
    "longitude",
    "longitude_unit",
    "sample_height",
    "sample_weight",
    "sample_density",
    "sample_volume",
    "sample_quantity",
    "sample_uncertainty",
    "sample_unit",
    "detector_identifier",
    "year",
    "beaker_identifier",
    "sampling_start",
    "sampling_stop",
    "reference_time",
    "measurement_start",
    "measurement_stop",
    "real_time",
    "live_time",
    "measurement_time",
    "dead_time",
    "nuclide_library",
    "lim_file",
    "channel_count",
    "format",
    "record_length",
    "FWHMPS",
    "FWHMAN",
    "THRESH",
    "BSTF",
    "ETOL",
    "LOCH",
    "ICA",
    "energy_file",
    "pef_file",
    "tef_file",
    "background_file",
    "PA1", "PA2", "PA3", "PA4", "PA5", "PA6",
    "print_out",
    "plot_out",
    "disk_out",
    "ex_print_out",
    "ex_disk_out",
    "PO1", "PO2", "PO3", "PO4", "PO5", "PO6",
    "complete",
    "analysed",
    "ST1", "ST2", "ST3", "ST4", "ST5", "ST6",
)

#: ``(label, attribute)`` pairs of the debug dump, in output order.
DUMP_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("spectrum identifier", "spectrum_identifier"),
    ("sample identifier", "sample_identifier"),
    ("project", "project"),
    ("sample location", "sample_location"),
    ("latitude", "latitude"),
    ("latitude unit", "latitude_unit"),
    ("longitude", "longitude"),
    ("longitude unit", "longitude_unit"),
    ("sample height", "sample_height"),
    ("sample weight", "sample_weight"),
    ("sample density", "sample_density"),
    ("sample volume", "sample_volume"),
    ("sample quantity", "sample_quantity"),
    ("sample uncertainty", "sample_uncertainty"),
    ("sampling start", "sampling_start"),
    ("sampling stop", "sampling_stop"),
    ("reference time", "reference_time"),
    ("measurement start", "measurement_start"),
    ("measurement stop", "measurement_stop"),
    ("format", "format"),
    ("FWHMPS", "FWHMPS"),
    ("FWHMAN", "FWHMAN"),
    ("THRESH", "THRESH"),
    ("BSTF", "BSTF"),
    ("ETOL", "ETOL"),
    ("LOCH", "LOCH"),
    ("ICA", "ICA"),
    ("live time", "live_time"),
    ("real time", "real_time"),
    ("dead time", "dead_time"),
    ("measurement time", "measurement_time"),
    ("channel count", "channel_count"),
    ("record length", "record_length"),
    ("sample unit", "sample_unit"),
    ("detector id", "detector_identifier"),
    ("year", "year"),
    ("beaker id", "beaker_identifier"),
    ("nuclide library", "nuclide_library"),
    ("energy file", "energy_file"),
    ("pef file", "pef_file"),
    ("tef file", "tef_file"),
    ("background file", "background_file"),
    ("LIM file", "lim_file"),
)


def format_inp_value(value: Union[str, int, float]) -> str:
    """Format one field value for the ``.INP`` format.

    * ``float`` → scientific notation with 14 digits after the point
      (``"1.50000000000000e+00"``); non-finite values render as
      ``inf``, ``-inf`` or ``nan``.
    * ``int`` → plain decimal.
    * ``str`` → unchanged.

    Args:
        value: A field value taken from a :class:`Record`.

    Returns:
        The rendered value, without line terminator.
    """
    if isinstance(value, float):
        return f"{value:.14e}"
    return str(value)


def format_dump_value(value: Union[str, int, float]) -> str:
    """Format one field value for the debug dump.

    Floats use general notation with 6 significant digits
    (``"%g"``), everything else is rendered as-is.
    """
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def render_inp(record: Record) -> str:
    """Render a record in ``.INP`` format.

    Args:
        record: The decoded record.

    Returns:
        One line per entry of :data:`INP_FIELDS`, each terminated
        by ``"\\n"``.
    """
    lines: List[str] = [
        format_inp_value(getattr(record, name)) for name in INP_FIELDS
    ]
    return "".join(f"{line}\n" for line in lines)


def render_dump(record: Record) -> str:
    """Render a record as a labelled debug listing.

    Returns:
        ``"label: value"`` lines in :data:`DUMP_FIELDS` order,
        followed by one empty line.
    """
    lines = [
        f"{label}: {format_dump_value(getattr(record, name))}\n"
        for label, name in DUMP_FIELDS
    ]
    return "".join(lines) + "\n"
