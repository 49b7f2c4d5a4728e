"""Unit tests for the command-line entry point."""

import pytest

from pocketcalc import __version__
from pocketcalc.__main__ import main, split_keys


class TestSplitKeys:
    def test_plain_characters(self):
        assert split_keys("5+3=") == ["5", "+", "3", "="]

    def test_named_keys(self):
        assert split_keys("12{Backspace}{Enter}") == ["1", "2", "Backspace", "Enter"]


class TestMain:
    def test_prints_final_display(self, capsys):
        assert main(["5+3=="]) == 0
        assert capsys.readouterr().out == "8 + 3 =\n11\n"

    def test_trace(self, capsys):
        assert main(["12{Backspace}", "--trace"]) == 0
        assert capsys.readouterr().out == "\n1\n\n12\n\n1\n"

    def test_max_length(self, capsys):
        main(["1/3=", "--max-length", "5"])
        assert capsys.readouterr().out.splitlines()[-1] == "0.333"

    def test_error_exit_code(self, capsys):
        assert main(["8/0=", "--fail-on-error"]) == 1
        assert "Error [error]" in capsys.readouterr().out

    def test_error_without_flag_succeeds(self, capsys):
        assert main(["8/0="]) == 0

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out
