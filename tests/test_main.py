"""
==============================================================================
Console Tests
==============================================================================

End-to-end tests for the console loop, entry point and settings.

==============================================================================
"""

import pytest
from pydantic import ValidationError

from market.config import Settings
from market.main import main


class TestApplication:
    """Tests for the console loop."""

    def test_session(self, run_console):
        """One output line per command, nothing after end."""
        output = run_console([
            "add A 10 food",
            "add B 5 food",
            "",
            "filter by type food",
            "end",
            "add C 1 food",
        ])
        assert output == [
            "Ok: Product A added successfully",
            "Ok: Product B added successfully",
            "Ok: B(5), A(10)",
        ]

    def test_duplicate_and_missing_category(self, run_console):
        output = run_console([
            "add A 10 food",
            "add A 20 toys",
            "filter by type toys",
            "filter by type drinks",
            "end",
        ])
        assert output == [
            "Ok: Product A added successfully",
            "Error: Product A already exists",
            "Error: Type toys does not exists",
            "Error: Type drinks does not exists",
        ]

    def test_price_range_capped(self, run_console):
        """15 products priced 1..15; a wide range returns prices 5..14."""
        lines = [f"add n{price} {price} x" for price in range(1, 16)]
        lines += ["filter by price from 5 to 100", "end"]

        output = run_console(lines)

        assert len(output) == 16
        assert output[-1] == "Ok: " + ", ".join(f"n{price}({price})" for price in range(5, 15))

    def test_cap_fixed_under_environment(self, run_console, monkeypatch):
        """MARKET_MAX_RESULTS does not change the number of results."""
        monkeypatch.setenv("MARKET_MAX_RESULTS", "3")
        lines = [f"add n{price} {price} x" for price in range(1, 16)]
        lines += ["filter by type x", "end"]

        output = run_console(lines)

        assert output[-1] == "Ok: " + ", ".join(f"n{price}({price})" for price in range(1, 11))

    def test_stops_at_end_of_input(self, run_console):
        """A missing end line is treated as end of input."""
        assert run_console(["add A 1 x", "filter by price to 1"]) == [
            "Ok: Product A added successfully",
            "Ok: A(1)",
        ]


class TestMain:
    """Tests for the command-line entry point."""

    def test_reads_input_file(self, tmp_path, capsys):
        commands = tmp_path / "commands.txt"
        commands.write_text(
            "add A 10 food\nadd B 5 food\nfilter by price from 0 to 10\nend\n",
            encoding="utf-8"
        )

        assert main(["--input", str(commands), "--log-level", "error"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Ok: Product A added successfully",
            "Ok: Product B added successfully",
            "Ok: B(5), A(10)",
        ]


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self, settings: Settings):
        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "WARNING"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level=" info ").log_level == "INFO"

    def test_debug_overrides_log_level(self):
        assert Settings(_env_file=None, debug=True).effective_log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MARKET_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_cap_not_a_setting(self, monkeypatch):
        """MARKET_MAX_RESULTS is not read."""
        monkeypatch.setenv("MARKET_MAX_RESULTS", "3")
        assert not hasattr(Settings(_env_file=None), "max_results")
