"""Tests for the command-line interface."""

import json
import logging

import pytest

from prime_toolkit.cli import main
from prime_toolkit.utils.logging import LOGGER_NAME, setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestCommands:
    """Tests for each subcommand."""

    def test_primes(self, capsys):
        """List primes up to a bound."""
        assert main(["primes", "30"]) == 0
        assert capsys.readouterr().out.strip() == "2 3 5 7 11 13 17 19 23 29"

    def test_primes_empty(self, capsys):
        """Bound below 2 prints an empty line."""
        assert main(["primes", "1"]) == 0
        assert capsys.readouterr().out.strip() == ""

    def test_is_prime(self, capsys):
        """Trial division verdicts."""
        assert main(["is-prime", "7919"]) == 0
        assert capsys.readouterr().out.strip() == "True"
        assert main(["is-prime", "1"]) == 0
        assert capsys.readouterr().out.strip() == "False"

    def test_fermat(self, capsys):
        """Seeded Fermat verdicts."""
        assert main(["fermat", "7919", "--rounds", "5", "--seed", "1"]) == 0
        assert capsys.readouterr().out.strip() == "True"
        assert main(["fermat", "1001", "--rounds", "40", "--seed", "1"]) == 0
        assert capsys.readouterr().out.strip() == "False"

    def test_fermat_invalid_rounds(self, capsys):
        """Core ValueError becomes exit code 2."""
        assert main(["fermat", "97", "--rounds", "0"]) == 2
        assert "rounds must be >= 1" in capsys.readouterr().err

    def test_modexp(self, capsys):
        """Modular exponentiation."""
        assert main(["modexp", "4", "13", "497"]) == 0
        assert capsys.readouterr().out.strip() == "445"

    def test_count(self, capsys):
        """Prime counting."""
        assert main(["count", "1000"]) == 0
        assert capsys.readouterr().out.strip() == "168"

    def test_nth(self, capsys):
        """nth prime, and an invalid index."""
        assert main(["nth", "100"]) == 0
        assert capsys.readouterr().out.strip() == "541"
        assert main(["nth", "0"]) == 2

    def test_no_command(self, capsys):
        """Help and exit code 1."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestConfigOption:
    """Tests for --config."""

    def test_rounds_from_config(self, tmp_path, capsys):
        """Config supplies rounds and seed when flags are absent."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fermat_rounds": 30, "seed": 3}))

        assert main(["--config", str(path), "fermat", "91"]) == 0
        assert capsys.readouterr().out.strip() == "False"

    def test_bad_config(self, tmp_path, capsys):
        """Invalid config values are reported."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fermat_rounds": 0}))

        assert main(["--config", str(path), "primes", "10"]) == 2
        assert "could not load config" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        """A missing file is reported."""
        assert main(["--config", str(tmp_path / "nope.json"), "primes", "10"]) == 2


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_verbose_logs_to_stderr(self, capsys):
        """--verbose enables info messages."""
        assert main(["--verbose", "primes", "10"]) == 0
        captured = capsys.readouterr()
        assert "4 primes <= 10" in captured.err

    def test_log_file(self, tmp_path):
        """File handler writes debug records."""
        log_path = tmp_path / "run.log"
        logger = setup_logger(logging.WARNING, log_path=log_path)
        logging.getLogger(f"{LOGGER_NAME}.core.sieve").debug("sieved 10 values")
        for handler in logger.handlers:
            handler.flush()

        assert "sieved 10 values" in log_path.read_text()

    def test_handlers_replaced(self):
        """Repeated setup does not stack handlers."""
        setup_logger()
        logger = setup_logger()
        assert len(logger.handlers) == 1
