"""Tests for progress indicator utilities."""

from io import StringIO

import pytest
from rich.console import Console

from paasctl.core.progress import ProgressDots


def make_console() -> tuple[Console, StringIO]:
    output = StringIO()
    return Console(file=output, force_terminal=False), output


class TestProgressDots:
    """Tests for ProgressDots."""

    def test_tick_writes_marker(self):
        console, output = make_console()
        dots = ProgressDots(console)
        dots.tick()
        dots.tick()
        assert output.getvalue() == ".."
        assert dots.count == 2

    def test_close_ends_line_once(self):
        console, output = make_console()
        dots = ProgressDots(console)
        dots.tick()
        dots.close()
        dots.close()
        assert output.getvalue() == ".\n"

    def test_close_without_ticks_writes_nothing(self):
        console, output = make_console()
        ProgressDots(console).close()
        assert output.getvalue() == ""

    def test_ticks_after_close_are_ignored(self):
        console, output = make_console()
        dots = ProgressDots(console)
        dots.tick()
        dots.close()
        dots.tick()
        assert output.getvalue() == ".\n"
        assert dots.count == 1

    def test_custom_marker(self):
        console, output = make_console()
        with ProgressDots(console, marker="*") as dots:
            dots.tick()
        assert output.getvalue() == "*\n"

    def test_context_closes_on_error(self):
        console, output = make_console()
        with pytest.raises(ValueError):
            with ProgressDots(console) as dots:
                dots.tick()
                raise ValueError("boom")
        assert output.getvalue() == ".\n"

