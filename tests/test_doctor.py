"""Tests for the ``utf16conv doctor`` command (cli/doctor.py).

Terminal state is mocked — no dependency on the real stdout encoding.

Coverage:
* Doctor runs and returns SUCCESS when everything is present.
* Doctor returns GENERAL_ERROR when the self-test fails.
* Individual check functions return correct tuples.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from array import array
from unittest.mock import MagicMock, patch

import pytest

from utf16conv.cli import exit_codes
from utf16conv.infra.terminal import TerminalStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _terminal(encoding: str) -> TerminalStatus:
    return TerminalStatus(
        stream_name="<stdout>",
        encoding=encoding,
        reconfigured=False,
        detail=f"writing {encoding}",
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from utf16conv.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestByteOrderCheck:
    @patch("utf16conv.cli.doctor.sys.byteorder", "big")
    def test_reports_byte_order(self) -> None:
        from utf16conv.cli.doctor import _byte_order_check

        label, value, status = _byte_order_check()
        assert label == "Byte order"
        assert value == "big-endian"
        assert "OK" in status


class TestTerminalCheck:
    @patch("utf16conv.cli.doctor.detect_terminal")
    def test_unicode(self, mock_detect: MagicMock) -> None:
        from utf16conv.cli.doctor import _terminal_check

        mock_detect.return_value = _terminal("utf-8")
        label, value, status = _terminal_check()
        assert label == "stdout"
        assert value == "utf-8"
        assert "OK" in status

    @patch("utf16conv.cli.doctor.detect_terminal")
    def test_legacy_is_warning(self, mock_detect: MagicMock) -> None:
        from utf16conv.cli.doctor import _terminal_check

        mock_detect.return_value = _terminal("cp437")
        _label, _value, status = _terminal_check()
        assert "WARN" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from utf16conv.cli.doctor import _rich_check

        label, _value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None, "rich.console": None})
    def test_not_installed(self) -> None:
        from utf16conv.cli.doctor import _rich_check

        _label, value, status = _rich_check()
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestSelfTestCheck:
    def test_passes(self) -> None:
        from utf16conv.cli.doctor import _self_test_check

        label, value, status = _self_test_check()
        assert label == "Self-test"
        assert value == "0x65E5 0x672C"
        assert "OK" in status

    @patch("utf16conv.cli.doctor.Utf16Converter")
    def test_wrong_units_fail(self, mock_cls: MagicMock) -> None:
        from utf16conv.cli.doctor import _self_test_check

        mock_cls.return_value.convert.return_value = array("H", [0x65E5])
        _label, value, status = _self_test_check()
        assert value == "0x65E5"
        assert "FAIL" in status

    @patch("utf16conv.cli.doctor.Utf16Converter")
    def test_accepting_truncated_input_fails(self, mock_cls: MagicMock) -> None:
        from utf16conv.cli.doctor import _self_test_check

        mock_cls.return_value.convert.return_value = array("H", [0x65E5, 0x672C])
        _label, value, status = _self_test_check()
        assert value == "truncated input accepted"
        assert "FAIL" in status


class TestUtf16convVersionCheck:
    def test_returns_current_version(self) -> None:
        from utf16conv.cli.doctor import _utf16conv_version_check
        from utf16conv.version import __version__

        label, value, status = _utf16conv_version_check()
        assert label == "utf16conv"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("utf16conv.cli.doctor.detect_terminal")
    def test_all_pass_returns_success(self, mock_detect: MagicMock) -> None:
        from utf16conv.cli.doctor import run_doctor

        mock_detect.return_value = _terminal("utf-8")
        assert run_doctor() == exit_codes.SUCCESS

    @patch("utf16conv.cli.doctor.detect_terminal")
    def test_legacy_terminal_still_succeeds(
        self,
        mock_detect: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A legacy stdout encoding is a WARN, not a FAIL."""
        from utf16conv.cli.doctor import run_doctor

        mock_detect.return_value = _terminal("ascii")
        assert run_doctor() == exit_codes.SUCCESS
        assert "PYTHONIOENCODING" in capsys.readouterr().err

    @patch("utf16conv.cli.doctor._self_test_check")
    @patch("utf16conv.cli.doctor.detect_terminal")
    def test_self_test_failure_returns_error(
        self,
        mock_detect: MagicMock,
        mock_self_test: MagicMock,
    ) -> None:
        from utf16conv.cli.doctor import run_doctor

        mock_detect.return_value = _terminal("utf-8")
        mock_self_test.return_value = ("Self-test", "broken", "[red]FAIL[/red]")
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("utf16conv.cli.doctor.detect_terminal")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output(
        self,
        mock_detect: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from utf16conv.cli.doctor import run_doctor

        mock_detect.return_value = _terminal("utf-8")
        _ = run_doctor()

        captured = capsys.readouterr()
        assert "utf16conv doctor" in captured.err
        assert "Self-test" in captured.err
        assert "All checks passed." in captured.err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("utf16conv.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from utf16conv.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("utf16conv.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from utf16conv.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
