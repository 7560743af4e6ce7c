"""
Tests for wordrng.diagnostics.logging
"""

from wordrng.diagnostics.logging import create_logger


class TestCreateLogger:
    """The logger prints a summary and appends every metrics dict."""

    def test_writes_log_file(self, tmp_path):
        log = create_logger(tmp_path)
        log({"engine": "pcg32", "check": "bytes_chi2", "statistic": 250.0,
             "p_value": 0.5, "passed": True})
        log({"engine": "pcg32", "n_checks": 1, "n_passed": 1})

        lines = (tmp_path / "logs" / "diagnostics.log").read_text().splitlines()
        assert len(lines) == 2
        assert "bytes_chi2" in lines[0]
        assert "n_checks" in lines[1]

    def test_appends_across_loggers(self, tmp_path):
        create_logger(tmp_path)({"note": "first"})
        create_logger(tmp_path)({"note": "second"})
        lines = (tmp_path / "logs" / "diagnostics.log").read_text().splitlines()
        assert len(lines) == 2

    def test_prints_check_summary(self, tmp_path, capsys):
        log = create_logger(str(tmp_path))
        log({"check": "gaussian_mean", "statistic": 0.5, "p_value": 0.6, "passed": False})
        out = capsys.readouterr().out
        assert "gaussian_mean" in out
        assert "FAIL" in out

    def test_prints_battery_summary(self, tmp_path, capsys):
        log = create_logger(tmp_path)
        log({"engine": "sfc64", "n_checks": 7, "n_passed": 7})
        assert "sfc64: 7/7 checks passed" in capsys.readouterr().out
