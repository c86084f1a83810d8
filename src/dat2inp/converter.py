"""Batch conversion of a directory of ``.DAT`` exports.

:func:`convert_directory` decodes every export found in a directory
and writes each one out, either as an ``.INP`` file next to its
source or as latin-1 bytes on a binary stream.  A file that cannot be
opened, read or decoded is recorded in the returned
:class:`ConversionReport` and skipped; the remaining files are still
converted.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from dat2inp.config import ConverterConfig
from dat2inp.errors import DecodeError
from dat2inp.io import (
    find_dat_files,
    inp_path_for,
    load_dat,
    save_inp,
    write_dump,
    write_inp,
)
from dat2inp.progress import ProgressReporter

#: Write an ``.INP`` file next to every ``.DAT`` file.
MODE_FILE = "file"
#: Write ``.INP`` records to the output stream.
MODE_STDOUT = "stdout"
#: Write the labelled debug dump to the output stream.
MODE_DUMP = "dump"

MODES = (MODE_FILE, MODE_STDOUT, MODE_DUMP)


@dataclass
class ConversionReport:
    """Outcome of a batch conversion.

    Attributes:
        files: Every export file found, in processing order.
        converted: Number of files converted successfully.
        errors: One message per file that was skipped.
    """

    files: List[Path] = field(default_factory=list)
    converted: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        """The closing status line printed after a batch."""
        return (
            f"Of {len(self.files)} DAT files, {self.converted} "
            "was successfully converted"
        )


def convert_directory(
    directory: Union[str, Path],
    config: Optional[ConverterConfig] = None,
    mode: str = MODE_FILE,
    stream: Optional[BinaryIO] = None,
    progress: Optional[ProgressReporter] = None,
) -> ConversionReport:
    """Convert every ``.DAT`` file in *directory*.

    Each file is read into its own buffer and decoded independently.
    Failures are never retried: a file that fails once is reported
    and skipped.

    Args:
        directory: Directory holding the exports.
        config: Converter settings; defaults apply when ``None``.
        mode: One of :data:`MODES`.
        stream: Destination for :data:`MODE_STDOUT` and
            :data:`MODE_DUMP` output, opened in binary mode.  Required
            for those modes.
        progress: Optional reporter told about each converted file.

    Returns:
        A :class:`ConversionReport` for the batch.

    Raises:
        ValueError: If *mode* is unknown or a stream mode has no
            *stream*.
        FileNotFoundError: If *directory* does not exist.
        OSError: If an ``.INP`` file cannot be written.  The batch
            stops at that file.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown conversion mode: {mode!r}")
    if mode != MODE_FILE and stream is None:
        raise ValueError(f"Mode {mode!r} needs an output stream")

    config = config or ConverterConfig()
    files = find_dat_files(directory, config.input_suffix)
    report = ConversionReport(files=files)

    for index, path in enumerate(files):
        try:
            record = load_dat(
                path,
                default_lim_file=config.default_detection_limit_library,
            )
        except (FileNotFoundError, PermissionError):
            report.errors.append(f"UNABLE TO OPEN FILE: {path.name}")
            continue
        except OSError:
            report.errors.append(f"UNABLE TO READ FILE: {path.name}")
            continue
        except DecodeError as exc:
            report.errors.append(f"UNABLE TO DECODE FILE: {path.name}: {exc}")
            continue

        if mode == MODE_DUMP:
            write_dump(record, stream)
        elif mode == MODE_STDOUT:
            write_inp(record, stream)
        else:
            out_path = inp_path_for(
                path, config.input_suffix, config.output_suffix
            )
            try:
                save_inp(record, out_path)
            except OSError as exc:
                raise OSError(
                    f"FAILED TO OPEN FILE FOR WRITING: {out_path}"
                ) from exc

        report.converted += 1
        if progress:
            progress.file_done(
                index, len(files), f"{path.name} converted successfully"
            )

    return report
