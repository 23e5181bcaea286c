"""Tests for grcat/stream.py"""

import io

import pytest

from grcat.parser import parse_config
from grcat.stream import StreamStats, run

RED = "\x1b[31m"
RESET = "\x1b[0m"


def _run(config: str, text: str):
    out = io.StringIO()
    stats = run(parse_config(config), io.StringIO(text), out)
    return out.getvalue(), stats


class TestRun:
    def test_colourises_each_line(self):
        output, stats = _run(
            "regexp=ERROR\ncolours=red\n",
            "ERROR: disk full\nINFO: ok\n",
        )
        assert output == f"{RED}ERROR{RESET}: disk full\nINFO: ok\n"
        assert stats == StreamStats(lines_read=2, lines_written=2, lines_suppressed=0)

    def test_empty_input(self):
        output, stats = _run("regexp=x\n", "")
        assert output == ""
        assert stats.lines_read == 0

    def test_last_line_without_newline(self):
        output, _ = _run("", "a\nb")
        assert output == "a\nb\n"

    def test_crlf_terminators_trimmed(self):
        output, _ = _run("", "a\r\nb\r\n")
        assert output == "a\nb\n"

    def test_trailing_spaces_preserved(self):
        output, _ = _run("", "a  \n")
        assert output == "a  \n"

    def test_blank_lines_pass_through(self):
        output, stats = _run("regexp=x\ncolours=red\n", "\n\n")
        assert output == "\n\n"
        assert stats.lines_written == 2

    def test_skip_suppresses_all_lines(self):
        output, stats = _run("skip=yes\n", "one\ntwo\nthree\n")
        assert output == ""
        assert stats.lines_read == 3
        assert stats.lines_suppressed == 3
        assert stats.lines_written == 0

    def test_read_error_propagates(self):
        class BrokenInput:
            def readline(self):
                raise OSError("device gone")

        with pytest.raises(OSError, match="device gone"):
            run(parse_config(""), BrokenInput(), io.StringIO())

    def test_flushes_each_line(self):
        class CountingOutput(io.StringIO):
            flushes = 0

            def flush(self):
                self.flushes += 1
                super().flush()

        out = CountingOutput()
        run(parse_config(""), io.StringIO("a\nb\n"), out)
        assert out.flushes == 2

    def test_no_flush_when_disabled(self):
        class CountingOutput(io.StringIO):
            flushes = 0

            def flush(self):
                self.flushes += 1
                super().flush()

        out = CountingOutput()
        run(parse_config(""), io.StringIO("a\nb\n"), out, flush=False)
        assert out.flushes == 0
        assert out.getvalue() == "a\nb\n"
