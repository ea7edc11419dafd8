"""Unit tests for the CLI output module."""

import errno
import signal
from unittest.mock import patch

import pytest

from boxtree.cli.output import EXIT_BROKEN_PIPE, Interrupts, LineWriter, open_output

requires_sigpipe = pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE not available")


@pytest.fixture
def mock_signal():
    """Patch signal.signal so no real handler is installed."""
    with patch("signal.signal", autospec=True) as mock:
        mock.return_value = signal.SIG_DFL
        yield mock


@pytest.fixture
def recorded_writes():
    """Patch os.write to record everything written and report full writes."""
    written = []

    def fake_write(fd, data):
        written.append((fd, bytes(data)))
        return len(data)

    with patch("os.write", side_effect=fake_write):
        yield written


def test_interrupts_initial_state():
    interrupts = Interrupts()
    assert not interrupts
    assert interrupts.received is None
    assert interrupts.exit_code is None
    assert signal.SIGINT in interrupts.signals


def test_interrupts_install_and_restore(mock_signal):
    previous = object()
    mock_signal.return_value = previous

    with Interrupts([signal.SIGINT]) as interrupts:
        mock_signal.assert_called_once_with(signal.SIGINT, interrupts._catch)

    mock_signal.assert_called_with(signal.SIGINT, previous)
    assert mock_signal.call_count == 2


def test_interrupts_installs_real_handler():
    before = signal.getsignal(signal.SIGINT)
    with Interrupts([signal.SIGINT]) as interrupts:
        assert signal.getsignal(signal.SIGINT) == interrupts._catch
    assert signal.getsignal(signal.SIGINT) == before


def test_sigint_records_exit_code_and_restores_handler(mock_signal):
    with Interrupts([signal.SIGINT]) as interrupts:
        interrupts._catch(signal.SIGINT, None)
        mock_signal.assert_called_with(signal.SIGINT, signal.SIG_DFL)

    assert interrupts
    assert interrupts.received == signal.SIGINT
    assert interrupts.exit_code == 130


@requires_sigpipe
def test_sigpipe_exit_code(mock_signal):
    with Interrupts() as interrupts:
        interrupts._catch(signal.SIGPIPE, None)
    assert interrupts.exit_code == 141 == EXIT_BROKEN_PIPE


@requires_sigpipe
def test_first_signal_wins(mock_signal):
    with Interrupts() as interrupts:
        interrupts._catch(signal.SIGINT, None)
        interrupts._catch(signal.SIGPIPE, None)
    assert interrupts.exit_code == 130


def test_write_line_encodes_utf8(recorded_writes):
    LineWriter(3).write_line("└── données")
    assert recorded_writes == [(3, "└── données\n".encode("utf-8"))]


def test_write_line_without_text_writes_newline(recorded_writes):
    LineWriter(3).write_line()
    assert recorded_writes == [(3, b"\n")]


def test_write_lines(recorded_writes):
    LineWriter(3).write_lines([".", "└── src"])
    assert [data for _, data in recorded_writes] == [b".\n", "└── src\n".encode("utf-8")]


def test_write_line_retries_partial_writes():
    chunks = []

    def partial_write(fd, data):
        chunks.append(bytes(data[:2]))
        return min(2, len(data))

    with patch("os.write", side_effect=partial_write):
        LineWriter(3).write_line("abcde")
    assert b"".join(chunks) == b"abcde\n"


def test_write_line_after_interrupt(mock_signal):
    interrupts = Interrupts([signal.SIGINT])
    interrupts._catch(signal.SIGINT, None)

    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            LineWriter(3, interrupts).write_line("data")
    mock_write.assert_not_called()


def test_epipe_becomes_broken_pipe():
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            LineWriter(3).write_line("data")


def test_other_os_error_propagates():
    with patch("os.write", side_effect=OSError(errno.EIO, "Input/output error")):
        with pytest.raises(OSError) as excinfo:
            LineWriter(3).write_line("data")
    assert not isinstance(excinfo.value, BrokenPipeError)
    assert excinfo.value.errno == errno.EIO


def test_open_output_file(tmp_path):
    output_path = tmp_path / "tree.txt"
    output_path.write_text("previous content\n")

    with open_output(output_path) as writer:
        writer.write_line(".")
        writer.write_line("└── données")

    assert output_path.read_text(encoding="utf-8") == ".\n└── données\n"


def test_open_output_stdout(capfd):
    with open_output() as writer:
        writer.write_line("└── src")
    assert capfd.readouterr().out == "└── src\n"


def test_open_output_passes_interrupts(tmp_path):
    interrupts = Interrupts()
    with open_output(tmp_path / "tree.txt", interrupts) as writer:
        assert writer.interrupts is interrupts


def test_open_output_missing_directory(tmp_path):
    with pytest.raises(OSError):
        with open_output(tmp_path / "no" / "such" / "tree.txt"):
            pass
