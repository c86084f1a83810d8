"""Tests for the click command line."""

import textwrap

import pytest
from click.testing import CliRunner

from dat2inp.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def accented_dir(tmp_path, dat_builder):
    """A directory holding one export with a non-ASCII sample location."""
    data = (
        dat_builder()
        .pstring(0, "N001")
        .pstring(51, "Østeras")
        .number(193, "<i", 10)
        .number(197, "<i", 8)
        .to_bytes()
    )
    (tmp_path / "NORD.DAT").write_bytes(data)
    return tmp_path


class TestConvertCommand:
    """dat2inp convert."""

    def test_convert_directory(self, runner, dat_dir) -> None:
        """Files are written and status goes to the console."""
        result = runner.invoke(cli, ["convert", str(dat_dir)])

        assert result.exit_code == 0
        assert (dat_dir / "SPEC0001.INP").exists()
        assert "SPEC0001.DAT converted successfully" in result.output
        assert "UNABLE TO DECODE FILE: BROKEN.DAT" in result.output
        assert "Of 3 DAT files, 2 was successfully converted" in result.output

    def test_stdout(self, runner, dat_dir) -> None:
        """--stdout prints records and writes no files."""
        result = runner.invoke(cli, ["convert", str(dat_dir), "--stdout"])

        assert result.exit_code == 0
        assert "S001\nSoil sample 17\n" in result.output
        assert not (dat_dir / "SPEC0001.INP").exists()

    def test_stdout_bytes_match_inp_file(self, runner, accented_dir) -> None:
        """--stdout emits the same single-byte text as the .INP file."""
        result = runner.invoke(cli, ["convert", str(accented_dir), "--stdout"])
        assert result.exit_code == 0
        assert not (accented_dir / "NORD.INP").exists()

        runner.invoke(cli, ["convert", str(accented_dir)])
        expected = (accented_dir / "NORD.INP").read_bytes()

        assert b"\n\xd8steras\n" in expected
        assert expected in result.stdout_bytes
        assert "Ø".encode("utf-8") not in result.stdout_bytes

    def test_dump_is_single_byte(self, runner, accented_dir) -> None:
        """--dump writes accented text as latin-1 bytes."""
        result = runner.invoke(cli, ["convert", str(accented_dir), "--dump"])

        assert result.exit_code == 0
        assert b"\xd8steras" in result.stdout_bytes
        assert "Ø".encode("utf-8") not in result.stdout_bytes

    def test_dump_wins_over_stdout(self, runner, dat_dir) -> None:
        """--dump takes precedence when both flags are given."""
        result = runner.invoke(cli, ["convert", str(dat_dir), "--stdout", "--dump"])

        assert result.exit_code == 0
        assert "spectrum identifier: S001" in result.output

    def test_default_library_option(self, runner, dat_dir) -> None:
        """The option fills an empty lim_file."""
        result = runner.invoke(cli, [
            "convert", str(dat_dir),
            "--default-detection-limit-library", "mdalib01.lib",
        ])

        assert result.exit_code == 0
        lines = (dat_dir / "SPEC0001.INP").read_text(encoding="latin-1").split("\n")
        assert lines[28] == "mdalib01.lib"

    def test_multibyte_library_option_rejected(self, runner, dat_dir) -> None:
        """A library name outside latin-1 is refused before converting."""
        result = runner.invoke(cli, [
            "convert", str(dat_dir),
            "--default-detection-limit-library", "MDA€1.LIB",
        ])

        assert result.exit_code == 2
        assert "cannot be written to an .INP file" in result.output
        assert not (dat_dir / "SPEC0001.INP").exists()

    def test_multibyte_library_in_config_rejected(
        self, runner, dat_dir, tmp_path_factory
    ) -> None:
        """A library name outside latin-1 in the settings file is refused."""
        cfg = tmp_path_factory.mktemp("cfg") / "dat2inp.yaml"
        cfg.write_text(
            "default_detection_limit_library: MDA€1.LIB\n", encoding="utf-8"
        )

        result = runner.invoke(cli, ["convert", str(dat_dir), "-c", str(cfg)])

        assert result.exit_code == 1
        assert "Invalid config YAML" in result.output
        assert not (dat_dir / "SPEC0001.INP").exists()

    def test_option_overrides_config(self, runner, dat_dir, tmp_path_factory) -> None:
        """The command line wins over the settings file."""
        cfg = tmp_path_factory.mktemp("cfg") / "dat2inp.yaml"
        cfg.write_text(
            "default_detection_limit_library: FROMFILE.LIB\n", encoding="utf-8"
        )

        result = runner.invoke(cli, [
            "convert", str(dat_dir), "--config", str(cfg),
            "--default-detection-limit-library", "CLI.LIB",
        ])

        assert result.exit_code == 0
        lines = (dat_dir / "SPEC0001.INP").read_text(encoding="latin-1").split("\n")
        assert lines[28] == "CLI.LIB"

    def test_config_file(self, runner, dat_dir, tmp_path_factory) -> None:
        """Settings file values are applied."""
        cfg = tmp_path_factory.mktemp("cfg") / "dat2inp.yaml"
        cfg.write_text(textwrap.dedent("""\
            default_detection_limit_library: FROMFILE.LIB
            output_suffix: .OUT
        """), encoding="utf-8")

        result = runner.invoke(cli, ["convert", str(dat_dir), "-c", str(cfg)])

        assert result.exit_code == 0
        lines = (dat_dir / "SPEC0001.OUT").read_text(encoding="latin-1").split("\n")
        assert lines[28] == "FROMFILE.LIB"

    def test_invalid_config(self, runner, dat_dir, tmp_path_factory) -> None:
        """A malformed settings file exits with status 1."""
        cfg = tmp_path_factory.mktemp("cfg") / "bad.yaml"
        cfg.write_text("- just\n- a list\n", encoding="utf-8")

        result = runner.invoke(cli, ["convert", str(dat_dir), "-c", str(cfg)])

        assert result.exit_code == 1
        assert "expected a mapping" in result.output

    def test_missing_config(self, runner, dat_dir) -> None:
        """A missing settings file exits with status 1."""
        result = runner.invoke(
            cli, ["convert", str(dat_dir), "-c", str(dat_dir / "none.yaml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_no_files(self, runner, tmp_path) -> None:
        """An empty directory is reported and is not an error."""
        result = runner.invoke(cli, ["convert", str(tmp_path)])

        assert result.exit_code == 0
        assert "No .DAT files found" in result.output

    def test_unwritable_output(self, runner, dat_dir) -> None:
        """A failed .INP write exits with status 1."""
        (dat_dir / "SPEC0001.INP").mkdir()
        result = runner.invoke(cli, ["convert", str(dat_dir)])

        assert result.exit_code == 1
        assert "FAILED TO OPEN FILE FOR WRITING" in result.output

    def test_usage_alias(self, runner) -> None:
        """--usage prints the help text."""
        result = runner.invoke(cli, ["convert", "--usage"])

        assert result.exit_code == 0
        assert "--default-detection-limit-library" in result.output


class TestInspectCommand:
    """dat2inp inspect."""

    def test_dump(self, runner, dat_dir) -> None:
        """The debug listing is the default output."""
        result = runner.invoke(cli, ["inspect", str(dat_dir / "SPEC0001.DAT")])

        assert result.exit_code == 0
        assert result.output.startswith("spectrum identifier: S001\n")

    def test_inp(self, runner, dat_dir) -> None:
        """--inp prints the 68-line record."""
        result = runner.invoke(
            cli, ["inspect", str(dat_dir / "SPEC0001.DAT"), "--inp"]
        )

        assert result.exit_code == 0
        assert result.output.count("\n") == 68

    def test_inp_bytes_match_file(self, runner, accented_dir) -> None:
        """inspect --inp prints exactly the bytes convert writes."""
        result = runner.invoke(
            cli, ["inspect", str(accented_dir / "NORD.DAT"), "--inp"]
        )
        runner.invoke(cli, ["convert", str(accented_dir)])

        assert result.exit_code == 0
        assert result.stdout_bytes == (accented_dir / "NORD.INP").read_bytes()

    def test_multibyte_library_option_rejected(self, runner, dat_dir) -> None:
        """inspect refuses the same library names as convert."""
        result = runner.invoke(cli, [
            "inspect", str(dat_dir / "SPEC0001.DAT"),
            "--default-detection-limit-library", "MDA€1.LIB",
        ])
        assert result.exit_code == 2

    def test_truncated(self, runner, dat_dir) -> None:
        """A short file exits with status 1 and names the problem."""
        result = runner.invoke(cli, ["inspect", str(dat_dir / "BROKEN.DAT")])

        assert result.exit_code == 1
        assert "record needs 397 bytes" in result.output
