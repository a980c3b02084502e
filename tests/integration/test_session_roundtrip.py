"""
Integration Tests for the shell over a real store.

Drives InteractiveShell.execute line by line with a real SQLite-backed
Session and checks the console output.
"""

import pytest

from kvrepl.shell.loop import InteractiveShell
from kvrepl.shell.session import SessionState


@pytest.fixture
def shell(session, console) -> InteractiveShell:
    return InteractiveShell(session=session, console=console)


def _lines(shell: InteractiveShell) -> list[str]:
    return shell.console.file.getvalue().splitlines()


class TestRoundTrip:
    """Open, write, read, dump and close against a real store."""

    def test_write_then_read_returns_value_exactly(self, shell, store_path):
        for line in (f"open {store_path}", "write k v", "read k"):
            shell.execute(line)

        assert _lines(shell) == ["OK", "OK", "v"]

    def test_quoted_values(self, shell, store_path):
        for line in (f"open {store_path}", "write 'my key' \"it's here\"", "read 'my key'"):
            shell.execute(line)

        assert _lines(shell)[-1] == "it's here"

    def test_dump_is_ordered_and_repeatable(self, shell, store_path):
        for line in (f"open {store_path}", "write b 2", "write a 1", "dump", "dump"):
            shell.execute(line)

        assert _lines(shell) == ["OK", "OK", "OK", "a: 1", "b: 2", "a: 1", "b: 2"]

    def test_missing_key(self, shell, store_path):
        shell.execute(f"open {store_path}")
        shell.execute("read nope")

        assert _lines(shell)[-1] == "error: read nope status='NotFound: '"

    def test_close_then_close_again(self, shell, store_path):
        shell.execute(f"open {store_path}")
        shell.execute("close")
        shell.execute("close")

        assert _lines(shell) == ["OK", "OK", "error: close requires Opened Database"]
        assert shell.session.state is SessionState.CLOSED

    def test_reopen_switches_store(self, shell, tmp_path):
        first, second = tmp_path / "one.db", tmp_path / "two.db"

        for line in (f"open {first}", "write k one", f"open {second}", "read k"):
            shell.execute(line)

        assert _lines(shell)[-1] == "error: read k status='NotFound: '"
        assert shell.session.store.path == str(second)

    def test_failed_open_keeps_current_store(self, shell, store_path, tmp_path):
        shell.execute(f"open {store_path}")
        shell.execute("write k v")
        shell.execute(f"open {tmp_path / 'missing' / 'dir' / 'db'}")
        shell.execute("read k")

        lines = _lines(shell)
        assert lines[2].startswith("error: open ")
        assert "status='IO error: " in lines[2]
        assert lines[3] == "v"
