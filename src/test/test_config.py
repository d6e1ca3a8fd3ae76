import pytest

from eth_vanity.config import SearchConfig, load_config
from eth_vanity.constraints import ConstraintPair
from eth_vanity.errors import InvalidWorkerCount


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults(no_dotenv):
    config = load_config(["-p", "ab"], env_file=no_dotenv, environ={})
    assert config == SearchConfig(prefixes="ab")
    assert config.worker_count == 16
    assert config.backend == "process"


def test_flags(no_dotenv):
    config = load_config(
        ["-p", "12,13", "-s", "89,678", "-t", "4", "--progress-interval", "0", "--backend", "thread", "-v"],
        env_file=no_dotenv,
        environ={},
    )
    assert config.constraints().pairs == (ConstraintPair("12", "89"), ConstraintPair("13", "678"))
    assert config.worker_count == 4
    assert config.progress_interval == 0
    assert config.backend == "thread"
    assert config.verbose


def test_environment_supplies_defaults(no_dotenv):
    environ = {
        "VANITY_SUFFIXES": "dead",
        "VANITY_THREADS": "3",
        "VANITY_PROGRESS_INTERVAL": "1000",
        "VANITY_BACKEND": "thread",
    }
    config = load_config([], env_file=no_dotenv, environ=environ)
    assert config.prefixes is None
    assert config.suffixes == "dead"
    assert config.worker_count == 3
    assert config.progress_interval == 1000
    assert config.backend == "thread"


def test_flags_override_environment(no_dotenv):
    environ = {"VANITY_PREFIXES": "aa", "VANITY_THREADS": "3"}
    config = load_config(["-p", "bb", "-t", "5"], env_file=no_dotenv, environ=environ)
    assert config.prefixes == "bb"
    assert config.worker_count == 5


def test_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("VANITY_PREFIXES=cafe\nVANITY_THREADS=2\n")
    config = load_config([], env_file=str(env_file), environ={"VANITY_THREADS": "6"})
    assert config.prefixes == "cafe"
    # the process environment wins over the file
    assert config.worker_count == 6


def test_empty_environment_values_are_ignored(no_dotenv):
    config = load_config([], env_file=no_dotenv, environ={"VANITY_THREADS": ""})
    assert config.worker_count == 16


@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_invalid_thread_count(no_dotenv, value):
    with pytest.raises(InvalidWorkerCount):
        load_config(["-p", "a", "-t", value], env_file=no_dotenv, environ={})


def test_invalid_backend_in_environment(no_dotenv):
    with pytest.raises(ValueError):
        load_config([], env_file=no_dotenv, environ={"VANITY_BACKEND": "gpu"})


def test_invalid_progress_interval(no_dotenv):
    with pytest.raises(ValueError):
        load_config(["--progress-interval", "often"], env_file=no_dotenv, environ={})
