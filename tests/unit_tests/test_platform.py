"""
System logger output tests.
"""

from __future__ import annotations

import io
import re
from datetime import datetime

from scarlet_logger import Level, SystemLogger, platform
from scarlet_logger.config import Settings
from scarlet_logger.platform import format_line, format_timestamp

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] \[(?P<label>.{5})/(?P<tag>[^\]]*)\] (?P<msg>.*)$")


class TestFormatting:
    def test_timestamp_milliseconds(self) -> None:
        moment = datetime(2026, 10, 19, 8, 15, 2, 113456)
        assert format_timestamp(moment, "%Y-%m-%d %H:%M:%S.%f") == "2026-10-19 08:15:02.113"

    def test_timestamp_without_fraction(self) -> None:
        moment = datetime(2026, 10, 19, 8, 15, 2, 113456)
        assert format_timestamp(moment, "%H:%M:%S") == "08:15:02"

    def test_labels_padded(self) -> None:
        assert format_line("ts", Level.INFO, "net", "up") == "[ts] [INFO /net] up"
        assert format_line("ts", Level.DEBUG, "net", "up") == "[ts] [DEBUG/net] up"
        assert format_line("ts", Level.WARN, "", "") == "[ts] [WARN /] "


class TestSystemLogger:
    def test_debug_and_info_to_out(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        logger = SystemLogger(out=out, err=err)

        logger.debug("app", "starting")
        logger.info("app", "ready")

        lines = out.getvalue().splitlines()
        assert [LINE.match(line).group("label") for line in lines] == ["DEBUG", "INFO "]
        assert err.getvalue() == ""

    def test_warn_and_error_to_err(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        logger = SystemLogger(out=out, err=err)

        logger.warn("net", "conn lost")
        logger.error("db", "timeout")

        matches = [LINE.match(line) for line in err.getvalue().splitlines()]
        assert [(m.group("label"), m.group("tag"), m.group("msg")) for m in matches] == [
            ("WARN ", "net", "conn lost"),
            ("ERROR", "db", "timeout"),
        ]
        assert out.getvalue() == ""

    def test_cause_traceback_follows_line(self) -> None:
        err = io.StringIO()
        logger = SystemLogger(err=err)
        try:
            try:
                raise TimeoutError("5s")
            except TimeoutError as exc:
                raise RuntimeError("query failed") from exc
        except RuntimeError as exc:
            logger.error("db", "timeout", exc)

        output = err.getvalue()
        assert output.splitlines()[0].endswith("[ERROR/db] timeout")
        assert "Traceback (most recent call last)" in output
        assert "TimeoutError: 5s" in output
        assert "RuntimeError: query failed" in output

    def test_streams_resolved_at_call_time(self, capsys) -> None:
        logger = SystemLogger()
        logger.info("t", "to stdout")
        logger.error("t", "to stderr")

        captured = capsys.readouterr()
        assert "[INFO /t] to stdout" in captured.out
        assert "[ERROR/t] to stderr" in captured.err

    def test_custom_timestamp_format(self) -> None:
        out = io.StringIO()
        SystemLogger(out=out, timestamp_format="%H:%M").info("t", "m")
        assert re.match(r"^\[\d{2}:\d{2}\] \[INFO /t\] m$", out.getvalue().strip())

    def test_timestamp_format_read_from_settings_at_call_time(self, monkeypatch) -> None:
        out = io.StringIO()
        logger = SystemLogger(out=out)
        monkeypatch.setattr(platform, "settings", Settings(_env_file=None))
        monkeypatch.setenv("SCARLET_LOG_SYSTEM_TIMESTAMP_FORMAT", "at %H")

        logger.info("t", "m")

        assert re.match(r"^\[at \d{2}\] \[INFO /t\] m$", out.getvalue().strip())

    def test_repr(self) -> None:
        assert repr(SystemLogger()) == "SystemLogger"
