"""
tests/test_cli.py
=================
Command-line entry point: number-wordify AMOUNT [options].
"""
import os
import time

import pytest

from number_wordify import __version__
from number_wordify.cli import EXIT_INVALID_INPUT, EXIT_OK, main
from number_wordify.version import APP_NAME, VERSION


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out.strip(), err


class TestCli:

    def test_default_currency_and_scale(self, capsys):
        code, out, _ = run(capsys, "27.29")
        assert code == EXIT_OK
        assert out == "Twenty Seven Rupees And Twenty Nine Paisa Only"

    def test_indian_scale(self, capsys):
        code, out, _ = run(capsys, "1000000", "--scale", "Indian")
        assert code == EXIT_OK
        assert out == "Ten Lakh Rupees Only"

    def test_decimal_input_is_exact(self, capsys):
        _, out, _ = run(capsys, "999999999.99", "--scale", "indian")
        assert out == ("Ninety Nine Crore Ninety Nine Lakh Ninety Nine Thousand Nine Hundred "
                       "Ninety Nine Rupees And Ninety Nine Paisa Only")

    def test_thousands_separators_accepted(self, capsys):
        _, out, _ = run(capsys, "1,000,000")
        assert out == "One Million Rupees Only"

    def test_currency_and_singular(self, capsys):
        _, out, _ = run(capsys, "1.01", "--currency", "usd", "--singular")
        assert out == "One Dollar And One Cent Only"

    def test_custom_units_and_factor(self, capsys):
        _, out, _ = run(capsys, "7.125", "--main-unit", "Dinars", "--sub-unit", "Fils",
                        "--factor", "1000")
        assert out == "Seven Dinars And One Hundred Twenty Five Fils Only"

    def test_defaults_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("WORDIFY_SCALE", "indian")
        monkeypatch.setenv("WORDIFY_CURRENCY", "BDT")
        _, out, _ = run(capsys, "100000")
        assert out == "One Lakh Taka Only"

    def test_negative_amount(self, capsys):
        code, out, err = run(capsys, "--", "-5")
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert "error:" in err and "negative" in err

    def test_not_a_number(self, capsys):
        code, out, err = run(capsys, "twelve")
        assert code == EXIT_INVALID_INPUT
        assert "not a number" in err

    def test_overflow(self, capsys):
        code, _, err = run(capsys, "1000000000000")
        assert code == EXIT_INVALID_INPUT
        assert "international" in err

    def test_overflow_huge_exponent(self, capsys):
        code, out, err = run(capsys, "1e999999999", "--scale", "indian")
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert "indian" in err

    def test_unknown_currency(self, capsys):
        code, _, err = run(capsys, "5", "--currency", "XYZ")
        assert code == EXIT_INVALID_INPUT
        assert "XYZ" in err

    def test_invalid_configuration(self, capsys, monkeypatch):
        monkeypatch.setenv("WORDIFY_SCALE", "roman")
        code, _, err = run(capsys, "5")
        assert code == EXIT_INVALID_INPUT
        assert "WORDIFY_SCALE" in err

    def test_units_must_come_in_pairs(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["5", "--main-unit", "Dinars"])
        assert exc.value.code == 2

    def test_unknown_scale_choice(self, capsys):
        with pytest.raises(SystemExit):
            main(["5", "--scale", "roman"])

    def test_log_dir_writes_log_file(self, capsys, tmp_path):
        log_dir = tmp_path / "logs"
        code, out, _ = run(capsys, "5", "--log-dir", str(log_dir), "--log-level", "DEBUG")
        assert code == EXIT_OK
        assert out == "Five Rupees Only"
        files = list(log_dir.glob("log_*.log"))
        assert len(files) == 1
        assert "Logging initialized." in files[0].read_text(encoding="utf-8")

    def test_no_log_file_by_default(self, capsys, tmp_path):
        run(capsys, "5")
        assert not list(tmp_path.rglob("*.log"))

    def test_log_dir_prunes_old_logs(self, capsys, tmp_path, monkeypatch):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        old = log_dir / "log_20200101.log"
        old.write_text("x", encoding="utf-8")
        ten_days_ago = time.time() - 10 * 24 * 3600
        os.utime(old, (ten_days_ago, ten_days_ago))

        monkeypatch.setenv("WORDIFY_LOG_DIR", str(log_dir))
        monkeypatch.setenv("WORDIFY_LOG_RETENTION_DAYS", "7")
        code, _, _ = run(capsys, "5")
        assert code == EXIT_OK
        assert not old.exists()
        assert len(list(log_dir.glob("log_*.log"))) == 1

    def test_log_retention_keeps_recent_logs(self, capsys, tmp_path):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        recent = log_dir / "log_20200101.log"
        recent.write_text("x", encoding="utf-8")
        ten_days_ago = time.time() - 10 * 24 * 3600
        os.utime(recent, (ten_days_ago, ten_days_ago))

        run(capsys, "5", "--log-dir", str(log_dir))
        assert recent.exists()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


def test_package_version_matches_version_module():
    assert __version__ == VERSION
    assert APP_NAME == "number-wordify"
