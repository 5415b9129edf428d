import pytest

import study
from flashdeck.common import logging as flog
from flashdeck.common.errors import EmptyResponse


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


def test_missing_api_key_exits_1(capsys, deck_file):
    assert study.main(["--file", str(deck_file)]) == 1
    assert "Please provide an API key" in capsys.readouterr().out


def test_unloadable_deck_exits_1(capsys, tmp_path):
    assert study.main(["--api-key", "sk-test", "--file", str(tmp_path / "missing.jsonl")]) == 1
    assert "Error loading deck" in capsys.readouterr().out


def test_malformed_deck_exits_1(capsys, tmp_path):
    path = tmp_path / "bad.jsonl"
    path.write_text("{oops\n", encoding="utf-8")
    assert study.main(["--api-key", "sk-test", "--file", str(path)]) == 1
    assert "Error loading deck" in capsys.readouterr().out


class FakeApp:
    """Records what the CLI would have shown instead of opening a terminal."""

    error = None
    runs = []

    def __init__(self, controller, exit_on_error=False):
        self.state = controller.state
        self.exit_on_error = exit_on_error

    def run(self):
        FakeApp.runs.append(len(self.state.deck))
        if FakeApp.error is not None:
            raise FakeApp.error


@pytest.fixture(autouse=True)
def reset_fake_app():
    FakeApp.error = None
    FakeApp.runs = []


def test_runs_ui_and_exits_0(monkeypatch, deck_file):
    monkeypatch.setattr(study, "FlashcardApp", FakeApp)
    assert study.main(["--api-key", "sk-test", "--file", str(deck_file)]) == 0
    assert FakeApp.runs == [3]


def test_ui_failure_exits_1(monkeypatch, capsys, deck_file):
    monkeypatch.setattr(study, "FlashcardApp", FakeApp)
    FakeApp.error = RuntimeError("no terminal")
    assert study.main(["--api-key", "sk-test", "--file", str(deck_file)]) == 1
    assert "Error running application: no terminal" in capsys.readouterr().out


def test_fatal_submit_exits_1(monkeypatch, capsys, deck_file):
    monkeypatch.setattr(study, "FlashcardApp", FakeApp)
    FakeApp.error = EmptyResponse("no response from OpenAI API")
    assert study.main(["--api-key", "sk-test", "--file", str(deck_file), "--exit-on-error"]) == 1
    assert "Error adding card: no response" in capsys.readouterr().out


def test_log_file_receives_tagged_lines(monkeypatch, tmp_path, deck_file):
    monkeypatch.setattr(study, "FlashcardApp", FakeApp)
    log_path = tmp_path / "flashdeck.log"
    assert study.main(["--api-key", "sk-test", "--file", str(deck_file), "--log-file", str(log_path)]) == 0
    assert "[deck]" in log_path.read_text(encoding="utf-8")


def test_hold_stdout_replays_after_block(capsys):
    with flog.hold_stdout() as held:
        flog.log("api", "inside")
        assert capsys.readouterr().out == ""
    assert len(held) == 1
    assert "[api]" in capsys.readouterr().out


def test_unopenable_log_file_exits_1(monkeypatch, capsys, tmp_path, deck_file):
    monkeypatch.setattr(study, "FlashcardApp", FakeApp)
    log_path = tmp_path / "no" / "flashdeck.log"
    assert study.main(["--api-key", "sk-test", "--file", str(deck_file), "--log-file", str(log_path)]) == 1
    assert "Cannot open log file" in capsys.readouterr().out
    assert FakeApp.runs == []


def test_missing_config_file_exits_1(capsys, tmp_path, deck_file):
    assert study.main(["--api-key", "sk-test", "--config", str(tmp_path / "nope.json")]) == 1
    assert "not found" in capsys.readouterr().out
