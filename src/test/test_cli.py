import pytest

from eth_vanity.cli import main
from eth_vanity.coordinator import Coordinator


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in (
        "VANITY_PREFIXES",
        "VANITY_SUFFIXES",
        "VANITY_THREADS",
        "VANITY_PROGRESS_INTERVAL",
        "VANITY_BACKEND",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-p", "xy"], "is not a valid hexadecimal"),
        (["-s", "a" * 41], "more than 40 characters"),
        (["-p", "12,13", "-s", "89"], "doesn't match"),
        ([], "At least one of prefixes or suffixes"),
        (["-p", "a", "-t", "0"], "positive integer"),
    ],
)
def test_invalid_input_exits_1(capsys, argv, message):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert "Address:" not in captured.out


def test_successful_search(capsys):
    code = main(["-p", "A", "-t", "2", "--backend", "thread", "--progress-interval", "0"])
    out = capsys.readouterr().out

    assert code == 0
    lines = out.splitlines()
    assert "Finding matches with prefixes = ['a'] and suffixes = ['']" in lines
    assert any(line.startswith("It will take 16.0 attempts") for line in lines)
    assert (
        "Overall number of attempts across all pairs is 8 for 100% probability "
        "and 4 for 50% probability"
    ) in lines
    address = next(line for line in lines if line.startswith("Address: "))
    assert address.startswith("Address: 0xa")
    assert len(address) == len("Address: 0x") + 40
    assert any(line.startswith("PrivateKey: ") for line in lines)


def test_banner_is_printed_before_search(capsys):
    assert main(["-p", "a", "-t", "1", "--backend", "thread", "--progress-interval", "0"]) == 0
    out = capsys.readouterr().out
    assert out.index("Ethereum Vanity Address Search") < out.index("Finding matches")


def test_ctrl_c_exits_130(capsys, monkeypatch):
    def interrupted(self, constraints):
        raise KeyboardInterrupt

    monkeypatch.setattr(Coordinator, "run", interrupted)

    assert main(["-p", "a", "-t", "2", "--backend", "thread"]) == 130
    out = capsys.readouterr().out
    assert "Aborted by user." in out
    assert "Address:" not in out
