import io
import signal
from types import SimpleNamespace
from unittest import mock

from sigtalk.protocol import encode_bits
from sigtalk.server import SignalServer, main


def _signal_for(bit):
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def test_handle_prints_message_and_acknowledges():
    stream = io.StringIO()
    server = SignalServer(stream)
    bits = list(encode_bits(b"hi"))
    with mock.patch("os.kill") as kill:
        results = [server.handle(_signal_for(bit), 777) for bit in bits]
    assert stream.getvalue() == "hi"
    assert results[-1] == b"hi"
    sent = [c.args for c in kill.call_args_list]
    assert len(sent) == len(bits) + 1
    assert sent[-2:] == [(777, signal.SIGUSR1), (777, signal.SIGUSR2)]
    assert all(args == (777, signal.SIGUSR2) for args in sent[:-2])


def test_handle_incomplete_returns_none():
    stream = io.StringIO()
    server = SignalServer(stream)
    with mock.patch("os.kill") as kill:
        result = server.handle(signal.SIGUSR1, 5)
    assert result is None
    assert stream.getvalue() == ""
    assert kill.call_args_list == [mock.call(5, signal.SIGUSR2)]


def test_install_blocks_message_signals_and_server_still_decodes():
    stream = io.StringIO()
    server = SignalServer(stream)
    with mock.patch("signal.pthread_sigmask") as mask:
        server.install()
    how, signals = mask.call_args.args
    assert how == signal.SIG_BLOCK
    assert set(signals) == {signal.SIGUSR1, signal.SIGUSR2}
    with mock.patch("os.kill"):
        results = [server.handle(_signal_for(bit), 11) for bit in encode_bits(b"ok")]
    assert results[-1] == b"ok"
    assert all(result is None for result in results[:-1])
    assert stream.getvalue() == "ok"


def test_main_serves_until_interrupted(capsys):
    infos = [SimpleNamespace(si_signo=_signal_for(b), si_pid=9) for b in encode_bits(b"yo")]
    with mock.patch("signal.pthread_sigmask"), mock.patch("os.kill"), mock.patch(
        "os.getpid", return_value=4242
    ), mock.patch("signal.sigwaitinfo", side_effect=infos + [KeyboardInterrupt()]):
        code = main(["extra"])
    assert code == 0
    assert capsys.readouterr().out == "Usage: ./server\nPID -> 4242\nyo"