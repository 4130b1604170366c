from __future__ import annotations

from pathlib import Path

import pytest

from command_source.adapters.batch_source import BatchCommandSource
from command_source.domain.errors import SourceUnavailable


def _script(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "commands.txt"
    path.write_text(text, encoding="utf-8")
    return path


class _FailingReader:
    # Stand-in reader whose release fails with an I/O error.
    def __init__(self) -> None:
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        raise OSError("disk went away")


def test_blank_lines_never_surface(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Whitespace-only and empty lines are skipped; exhaustion yields the sentinel forever.
    source = BatchCommandSource(_script(tmp_path, "command1\n  \n\ncommand2\n"))
    assert source.get_command() == "command1"
    assert source.get_command() == "command2"
    assert source.get_command() == "exit"
    assert source.get_command() == "exit"
    assert source.get_command() == "exit"
    source.close()
    assert capsys.readouterr().out == "> command1\n> command2\n"


def test_only_blank_lines_returns_exit_immediately(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # A script of blanks is exhausted on the first read, without echoing anything.
    source = BatchCommandSource(_script(tmp_path, "\n   \n\t\n\n"))
    assert source.get_command() == "exit"
    assert source.get_command() == "exit"
    assert source.exhausted
    source.close()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_empty_file_returns_exit(tmp_path: Path) -> None:
    # An empty script is exhausted on the first read.
    source = BatchCommandSource(_script(tmp_path, ""))
    assert source.get_command() == "exit"
    source.close()


def test_returns_untrimmed_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Trimming only decides blankness; the command keeps its surrounding spaces.
    source = BatchCommandSource(_script(tmp_path, "  create event  \nlast-without-newline"))
    assert source.get_command() == "  create event  "
    assert source.get_command() == "last-without-newline"
    assert source.get_command() == "exit"
    source.close()
    assert capsys.readouterr().out == ">   create event  \n> last-without-newline\n"


def test_missing_file_raises_source_unavailable(tmp_path: Path) -> None:
    # Construction fails synchronously; no source is returned.
    missing = tmp_path / "nope.txt"
    with pytest.raises(SourceUnavailable) as excinfo:
        BatchCommandSource(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_path_raises_source_unavailable(tmp_path: Path) -> None:
    # Paths that exist but cannot be read as text are unavailable too.
    with pytest.raises(SourceUnavailable):
        BatchCommandSource(tmp_path)


def test_display_message_writes_line_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Messages go to stdout with a line terminator and nothing else.
    source = BatchCommandSource(_script(tmp_path, "x\n"))
    source.display_message("Test message")
    source.close()
    captured = capsys.readouterr()
    assert captured.out == "Test message\n"
    assert captured.err == ""


def test_display_error_exits_with_status_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Any reported error is fatal to a headless run.
    source = BatchCommandSource(_script(tmp_path, "x\n"))
    with pytest.raises(SystemExit) as excinfo:
        source.display_error("Test error")
    assert excinfo.value.code == 1
    source.close()
    captured = capsys.readouterr()
    assert captured.err == "Error: Test error\n"
    assert captured.out == ""


def test_display_error_uses_injected_exit_hook(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Embedding hosts can intercept the fatal exit.
    statuses: list[int] = []
    source = BatchCommandSource(_script(tmp_path, "x\n"), exit_hook=statuses.append)
    source.display_error("boom")
    source.close()
    assert statuses == [1]
    assert capsys.readouterr().err == "Error: boom\n"


def test_close_twice_is_safe(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Repeated close calls are silent no-ops.
    source = BatchCommandSource(_script(tmp_path, "a\n"))
    source.close()
    source.close()
    assert capsys.readouterr().err == ""


def test_get_command_after_close_returns_exit(tmp_path: Path) -> None:
    # A closed source behaves as exhausted.
    source = BatchCommandSource(_script(tmp_path, "a\nb\n"))
    source.close()
    assert source.get_command() == "exit"


def test_close_failure_is_reported_not_raised(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Release failures are written to stderr; close still returns and stays safe to repeat.
    source = BatchCommandSource(_script(tmp_path, "a\n"))
    real_reader = source._reader
    failing = _FailingReader()
    monkeypatch.setattr(source, "_reader", failing)

    source.close()
    source.close()

    assert failing.close_calls == 1
    assert capsys.readouterr().err == "Error closing file: disk went away\n"
    assert real_reader is not None
    real_reader.close()


def test_context_manager_closes_source(tmp_path: Path) -> None:
    # Leaving the with-block releases the script.
    with BatchCommandSource(_script(tmp_path, "a\n")) as source:
        assert source.get_command() == "a"
    assert source.get_command() == "exit"


def test_honors_explicit_encoding(tmp_path: Path) -> None:
    # Scripts are decoded with the configured encoding.
    path = tmp_path / "commands.txt"
    path.write_text("créer\n", encoding="latin-1")
    source = BatchCommandSource(path, encoding="latin-1")
    assert source.get_command() == "créer"
    source.close()


def test_malformed_bytes_are_replaced_by_default(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Invalid bytes mid-script decode to U+FFFD instead of aborting the replay.
    path = tmp_path / "commands.txt"
    path.write_bytes(b"first\ncr\xe9er\nlast\n")
    source = BatchCommandSource(path)
    assert source.get_command() == "first"
    assert source.get_command() == "cr�er"
    assert source.get_command() == "last"
    assert source.get_command() == "exit"
    source.close()
    assert capsys.readouterr().out == "> first\n> cr�er\n> last\n"


def test_strict_decode_errors_raise_on_malformed_bytes(tmp_path: Path) -> None:
    # Strict decoding is opt-in and surfaces the decode failure to the caller.
    path = tmp_path / "commands.txt"
    path.write_bytes(b"cr\xe9er\n")
    source = BatchCommandSource(path, decode_errors="strict")
    with pytest.raises(UnicodeDecodeError):
        source.get_command()
    source.close()


def test_rejects_unknown_decode_errors_policy(tmp_path: Path) -> None:
    # Unsupported decode policy fails fast during construction.
    with pytest.raises(ValueError, match="decode_errors"):
        BatchCommandSource(_script(tmp_path, "a\n"), decode_errors="skip")


def test_rejects_unknown_encoding(tmp_path: Path) -> None:
    # An unknown codec fails fast during construction rather than escaping as LookupError.
    with pytest.raises(ValueError, match="Unknown encoding: bogus"):
        BatchCommandSource(_script(tmp_path, "a\n"), encoding="bogus")
