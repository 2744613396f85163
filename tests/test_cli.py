"""
Test the boxsize command line
"""
import pytest

from boxsize.main import main


def test_cli_default_format(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "1.000 m × 2.000 m × 3.000 m\n"


def test_cli_unit_and_format(capsys):
    assert main(["1200", "800", "450", "--unit", "mm", "--format", "cm"]) == 0
    assert capsys.readouterr().out == "120.0 cm × 80.0 cm × 45.0 cm\n"


def test_cli_fills_missing_dimensions(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out == "1.000 m × 0.100 m × 0.100 m\n"


def test_cli_out_of_range(capsys):
    assert main(["11"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_cli_unsupported_format(capsys):
    assert main(["1", "--format", "ft"]) == 1
    assert "not supported" in capsys.readouterr().err


def test_cli_too_many_dimensions():
    with pytest.raises(SystemExit) as exc_info:
        main(["1", "2", "3", "4"])
    assert exc_info.value.code == 2


def test_cli_rejects_unknown_unit():
    with pytest.raises(SystemExit):
        main(["1", "--unit", "ft"])


def test_cli_verbose_logs(capsys):
    assert main(["1", "1", "1", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "Logging initialized." in out
    assert out.endswith("1.000 m × 1.000 m × 1.000 m\n")
