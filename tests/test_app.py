import io
import json

import pytest

from conftest import messages
from game_state_machine import app


def test_main_runs_session(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"update_duration": 0, "prompt": "# "}))
    stdout = io.StringIO()

    code = app.main(["--config", str(config)], stdin=io.StringIO("start_game\nupdate --package foo\nstatus\nexit\n"),
                    stdout=stdout)

    assert code == 0
    assert messages(stdout)[0] == "System initialized. Current state: IDLE"
    assert messages(stdout)[-2:] == ["Current state: IDLE", "System shutting down."]
    assert "# " in stdout.getvalue()


def test_update_duration_flag_overrides_config(monkeypatch):
    durations = []
    monkeypatch.setattr(app.StateMachine, "__init__", _recording_init(durations))

    code = app.main(["--update-duration", "0"], stdin=io.StringIO("exit\n"), stdout=io.StringIO())

    assert code == 0
    assert durations == [0.0]


def test_negative_update_duration_flag_fails():
    assert app.main(["--update-duration", "-2"], stdin=io.StringIO(), stdout=io.StringIO()) == 1


@pytest.mark.parametrize("value", ["nan", "inf"])
def test_non_finite_update_duration_flag_fails(value):
    stdout = io.StringIO()

    assert app.main(["--update-duration", value], stdin=io.StringIO("update --package foo\n"), stdout=stdout) == 1
    assert stdout.getvalue() == ""


def test_non_finite_config_value_fails(tmp_path):
    config = tmp_path / "config.json"
    config.write_text('{"update_duration": NaN}')

    assert app.main(["--config", str(config)], stdin=io.StringIO(), stdout=io.StringIO()) == 1


def test_config_that_is_not_utf8_fails(tmp_path):
    config = tmp_path / "config.json"
    config.write_bytes(b'{"prompt": "\xff"}')
    stdout = io.StringIO()

    assert app.main(["--config", str(config)], stdin=io.StringIO(), stdout=stdout) == 1
    assert stdout.getvalue() == ""


def test_missing_config_exits_with_error(tmp_path):
    stdout = io.StringIO()

    assert app.main(["--config", str(tmp_path / "nope.json")], stdin=io.StringIO(), stdout=stdout) == 1
    assert stdout.getvalue() == ""


def test_keyboard_interrupt_shuts_down():
    class InterruptingInput:
        def readline(self):
            raise KeyboardInterrupt

    stdout = io.StringIO()

    assert app.main([], stdin=InterruptingInput(), stdout=stdout) == 0
    assert messages(stdout)[-1] == "System shutting down."


def _recording_init(durations):
    original = app.StateMachine.__init__

    def init(self, event_logger, update_duration=1.0, sleep=None):
        durations.append(update_duration)
        original(self, event_logger, update_duration=update_duration, sleep=lambda seconds: None)

    return init
