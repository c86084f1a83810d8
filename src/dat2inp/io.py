"""File I/O for ``.DAT`` exports and ``.INP`` records.

This module provides functions to discover ``.DAT`` files in a
directory, load one into a :class:`~dat2inp.models.Record` and write
records back out in ``.INP`` format.
"""

from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from dat2inp.decoder import decode_record
from dat2inp.fields import ENCODING
from dat2inp.formatters import render_dump, render_inp
from dat2inp.models import Record

#: Default suffix of instrument exports (matched case-insensitively).
DEFAULT_INPUT_SUFFIX: str = ".DAT"

#: Default suffix of converted records.
DEFAULT_OUTPUT_SUFFIX: str = ".INP"


def find_dat_files(
    directory: Union[str, Path],
    suffix: str = DEFAULT_INPUT_SUFFIX,
) -> List[Path]:
    """List the export files in *directory*.

    A file matches when its name ends with *suffix* regardless of
    case and has a non-empty stem.  Subdirectories are not searched.

    Args:
        directory: Directory to scan.
        suffix: File name ending to match, e.g. ``".DAT"``.

    Returns:
        Matching paths sorted by file name.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        NotADirectoryError: If *directory* is not a directory.
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    wanted = suffix.upper()
    matches = [
        p for p in directory.iterdir()
        if p.is_file()
        and len(p.name) > len(wanted)
        and p.name.upper().endswith(wanted)
    ]
    return sorted(matches, key=lambda p: p.name)


def inp_path_for(
    path: Union[str, Path],
    input_suffix: str = DEFAULT_INPUT_SUFFIX,
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> Path:
    """Return the ``.INP`` path written next to a ``.DAT`` file.

    The last ``len(input_suffix)`` characters of the name are replaced
    by *output_suffix*, so ``SPEC01.dat`` becomes ``SPEC01.INP``.
    """
    path = Path(path)
    stem = path.name[: len(path.name) - len(input_suffix)]
    return path.with_name(stem + output_suffix)


def load_dat(
    path: Union[str, Path],
    default_lim_file: Optional[str] = None,
) -> Record:
    """Read a ``.DAT`` file and decode it.

    The whole file is read into a fresh buffer owned by this call.

    Args:
        path: Path to the ``.DAT`` file.
        default_lim_file: Fallback detection-limit library, see
            :func:`~dat2inp.decoder.decode_record`.

    Returns:
        The decoded :class:`~dat2inp.models.Record`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        OSError: If the file cannot be read.
        DecodeError: If the contents do not match the layout.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"DAT file not found: {path}")

    with open(path, "rb") as fh:
        buffer = fh.read()
    return decode_record(buffer, default_lim_file=default_lim_file)


def write_inp(record: Record, stream: BinaryIO) -> None:
    """Write a record in ``.INP`` format to an open binary stream.

    Raises:
        UnicodeEncodeError: If a value holds a character that has no
            single-byte form.
    """
    stream.write(render_inp(record).encode(ENCODING))


def write_dump(record: Record, stream: BinaryIO) -> None:
    """Write the labelled debug listing to an open binary stream."""
    stream.write(render_dump(record).encode(ENCODING))


def save_inp(record: Record, path: Union[str, Path]) -> None:
    """Save a record to an ``.INP`` file.

    Characters are written back as the single bytes they were read
    from, with ``"\\n"`` line endings on every platform.

    Args:
        record: The decoded record.
        path: Destination file path.

    Raises:
        OSError: If the file cannot be written.
        UnicodeEncodeError: If a value has no single-byte form.
    """
    path = Path(path)
    data = render_inp(record).encode(ENCODING)
    with open(path, "wb") as fh:
        fh.write(data)
