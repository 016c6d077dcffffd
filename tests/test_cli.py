from click.testing import CliRunner

from import_canonicalizer.cli import cli


CANONICAL = "from __future__ import annotations\nimport os\nimport sys\n\n\nrun()\n"


def test_show_reads_stdin(tmp_path):
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["show"], input="import sys, os\nrun()\n")
    assert result.exit_code == 0
    assert result.output == CANONICAL


def test_show_with_required_import(tmp_path):
    source = tmp_path / "f.py"
    source.write_text("import os\n")
    result = CliRunner().invoke(cli, ["show", str(source), "--required-import", "import sys"])
    assert result.exit_code == 0
    assert result.output == "import os\nimport sys\n\n\n"


def test_check_then_fix(tmp_path):
    source = tmp_path / "f.py"
    source.write_text("import sys, os\nrun()\n")
    runner = CliRunner()

    result = runner.invoke(cli, ["check", str(source)])
    assert result.exit_code == 1
    assert source.read_text() == "import sys, os\nrun()\n"

    result = runner.invoke(cli, ["fix", str(tmp_path)])
    assert result.exit_code == 1
    assert source.read_text() == CANONICAL

    result = runner.invoke(cli, ["check", str(tmp_path)])
    assert result.exit_code == 0


def test_check_reports_invalid_input(tmp_path):
    source = tmp_path / "f.py"
    source.write_bytes(b"import os\n\xff\n")
    result = CliRunner().invoke(cli, ["check", str(source)])
    assert result.exit_code == 2


def test_invalid_required_import(tmp_path):
    source = tmp_path / "f.py"
    source.write_text("import os\n")
    result = CliRunner().invoke(cli, ["check", str(source), "--required-import", "x = 1"])
    assert result.exit_code == 2
