"""Command-line interface for dat2inp.

Provides a ``click``-based CLI that converts gamma spectrum ``.DAT``
exports into the ``.INP`` records read by gamma10.

Status messages go to stderr so that ``--stdout`` and ``--dump``
output can be piped.

Usage::

    dat2inp convert
    dat2inp convert path/to/exports --default-detection-limit-library mdalib01.lib
    dat2inp convert --stdout
    dat2inp convert --dump
    dat2inp convert --config dat2inp.yaml
    dat2inp inspect SPEC0001.DAT
"""

from typing import Optional

import click

from dat2inp.config import ConverterConfig, check_library_name, load_config
from dat2inp.converter import (
    MODE_DUMP,
    MODE_FILE,
    MODE_STDOUT,
    convert_directory,
)
from dat2inp.errors import DecodeError
from dat2inp.fields import ENCODING
from dat2inp.formatters import render_dump, render_inp
from dat2inp.io import load_dat
from dat2inp.progress import ProgressReporter

CONTEXT_SETTINGS = {"help_option_names": ["--help", "--usage"]}


def _validate_library_name(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[str]:
    """Reject library names that cannot be written to an .INP file."""
    if value is not None:
        try:
            check_library_name(value)
        except ValueError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param)
    return value


def _load_settings(
    config_file: Optional[str],
    default_lib: Optional[str],
) -> ConverterConfig:
    """Merge the optional settings file with command-line overrides."""
    config = ConverterConfig()
    if config_file:
        try:
            config = load_config(config_file)
        except FileNotFoundError as exc:
            raise click.ClickException(str(exc))
        except ValueError as exc:
            raise click.ClickException(str(exc))
    return config.with_overrides(default_detection_limit_library=default_lib)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="dat2inp")
def cli() -> None:
    """dat2inp: convert gamma spectrum .DAT files into gamma10 .INP files."""


@cli.command()
@click.argument("directory", default=".",
                type=click.Path(exists=True, file_okay=False))
@click.option("--stdout", "use_stdout", is_flag=True, default=False,
              help="Write results to standard output instead of .INP files.")
@click.option("--dump", "use_dump", is_flag=True, default=False,
              help="Write a debug friendly listing to standard output.")
@click.option("--default-detection-limit-library", "default_lib",
              metavar="FILENAME", default=None,
              callback=_validate_library_name,
              help="Detection limit library used where a DAT file leaves it empty.")
@click.option("--config", "-c", "config_file", type=click.Path(), default=None,
              help="YAML settings file.")
def convert(
    directory: str,
    use_stdout: bool,
    use_dump: bool,
    default_lib: Optional[str],
    config_file: Optional[str],
) -> None:
    """Convert every .DAT file in DIRECTORY (default: current directory)."""
    config = _load_settings(config_file, default_lib)

    if use_dump:
        mode = MODE_DUMP
    elif use_stdout:
        mode = MODE_STDOUT
    else:
        mode = MODE_FILE

    reporter = ProgressReporter(
        callback=lambda msg, _progress: click.echo(msg, err=True)
    )
    try:
        report = convert_directory(
            directory,
            config=config,
            mode=mode,
            stream=click.get_binary_stream("stdout"),
            progress=reporter,
        )
    except OSError as exc:
        raise click.ClickException(str(exc))

    if not report.files:
        click.echo(
            f"No {config.input_suffix} files found in {directory}. Exiting...",
            err=True,
        )
        return

    for message in report.errors:
        click.echo(message, err=True)
    click.echo(report.summary, err=True)


@cli.command()
@click.argument("dat_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--inp", "as_inp", is_flag=True, default=False,
              help="Print the .INP record instead of the debug listing.")
@click.option("--default-detection-limit-library", "default_lib",
              metavar="FILENAME", default=None,
              callback=_validate_library_name,
              help="Detection limit library used if the file leaves it empty.")
def inspect(dat_file: str, as_inp: bool, default_lib: Optional[str]) -> None:
    """Decode a single .DAT file and print it."""
    try:
        record = load_dat(dat_file, default_lim_file=default_lib)
    except DecodeError as exc:
        raise click.ClickException(f"{dat_file}: {exc}")
    except OSError as exc:
        raise click.ClickException(str(exc))

    text = render_inp(record) if as_inp else render_dump(record)
    click.echo(text.encode(ENCODING), nl=False)


if __name__ == "__main__":
    cli()
