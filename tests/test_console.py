"""Tests for the console loop, driven by scripted input."""

import io
from datetime import datetime

import pytest

from process_booster.config import APP_NAME
from process_booster.console import ConsoleUserInterface
from process_booster.models import PriorityLevel

from tests.fakes import FakeProcessService, make_record


class Scripted:
    """input() stand-in: replays answers, records prompts, EOF when empty."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def out():
    return io.StringIO()


def make_ui(service, activity_log, out, *answers):
    return ConsoleUserInterface(service, activity_log, "http://localhost:8080/",
                                input_fn=Scripted(*answers), output=out)


def test_quit_immediately(service, activity_log, out):
    ui = make_ui(service, activity_log, out, "q")
    ui.run()
    text = out.getvalue()
    assert text.startswith(APP_NAME + "\n" + "=" * len(APP_NAME))
    assert "Visit http://localhost:8080/ in your browser." in text
    assert "Current Running Processes:" in text
    assert ui.keep_running is False
    assert len(ui.input_fn.prompts) == 1


def test_table_rows(activity_log, out):
    svc = FakeProcessService(
        [
            make_record(1, name="short", mb=2048.5, cpu_s=62.003, start=datetime(2024, 5, 6, 7, 8, 9)),
            make_record(2, name="n" * 40, start=datetime(2020, 1, 1)),
        ],
        priorities={1: PriorityLevel.HIGH},
    )
    make_ui(svc, activity_log, out, "Q").run()
    lines = out.getvalue().splitlines()
    assert any("Priority" in line for line in lines)
    row1 = next(line for line in lines if "short" in line)
    assert "| 1 " in row1
    assert "2,048.50" in row1
    assert "00:01:02.003" in row1
    assert "2024-05-06 07:08:09" in row1
    assert "| High " in row1
    row2 = next(line for line in lines if "n" * 27 + "..." in line)
    assert row2.rstrip().endswith("|              |")
    # newest first
    assert lines.index(row1) < lines.index(row2)


def test_boost_success_then_pause(service, activity_log, out):
    ui = make_ui(service, activity_log, out, "42", "", "q")
    ui.run()
    assert service.boosted == [(42, PriorityLevel.HIGH)]
    text = out.getvalue()
    assert "Successfully boosted process with PID: 42 to High priority" in text
    assert f"Action logged to {activity_log.path}" in text
    assert "Press Enter to continue..." in ui.input_fn.prompts[1]
    assert text.count("Current Running Processes:") == 2


def test_boost_failure(activity_log, out):
    svc = FakeProcessService(boost_ok=False)
    make_ui(svc, activity_log, out, "42", "", "q").run()
    assert "Failed to boost process with PID: 42" in out.getvalue()


@pytest.mark.parametrize("answer", ["hello", "99999999999999999999"])
def test_invalid_input(service, activity_log, out, answer):
    make_ui(service, activity_log, out, answer, "", "q").run()
    assert "Invalid PID format. Please enter a valid number." in out.getvalue()
    assert service.boosted == []


def test_cycle_error_is_logged_and_loop_continues(activity_log, out):
    class Flaky(FakeProcessService):
        calls = 0

        def list_all(self):
            self.calls += 1
            if self.calls == 1:
                raise RuntimeError("display broke")
            return []

    svc = Flaky()
    make_ui(svc, activity_log, out, "", "q").run()
    assert "Error: display broke" in out.getvalue()
    assert "ERROR: display broke" in activity_log.read_text()
    assert svc.calls == 2


def test_eof_ends_loop(service, activity_log, out):
    make_ui(service, activity_log, out).run()
    assert "Current Running Processes:" in out.getvalue()


def test_eof_at_pause_ends_loop(service, activity_log, out):
    ui = make_ui(service, activity_log, out, "42")
    ui.run()
    assert service.boosted == [(42, PriorityLevel.HIGH)]
    assert out.getvalue().count("Current Running Processes:") == 1
