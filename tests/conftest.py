"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, store, parser, dispatcher and console fixtures.

==============================================================================
"""

import io
from typing import Callable, List

import pytest

from market.catalog import ProductStore
from market.commands import CommandDispatcher, CommandParser
from market.config import Settings
from market.main import Application


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def store() -> ProductStore:
    """Empty store with the standard cap of 10."""
    return ProductStore()


@pytest.fixture
def numbered_store(store: ProductStore) -> ProductStore:
    """Store with products n1..n15 priced 1..15 in category x."""
    for price in range(1, 16):
        store.add(f"n{price}", price, "x")
    return store


# ============================================================================
# COMMAND FIXTURES
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


@pytest.fixture
def dispatcher(store: ProductStore) -> CommandDispatcher:
    return CommandDispatcher(store)


@pytest.fixture
def run_console(settings: Settings) -> Callable[[List[str]], List[str]]:
    """Run the console over input lines and return the output lines."""
    def _run(lines: List[str]) -> List[str]:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        exit_code = Application(settings, stdin=stdin, stdout=stdout).run()
        assert exit_code == 0
        return stdout.getvalue().splitlines()

    return _run
