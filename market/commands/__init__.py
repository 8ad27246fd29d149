"""
==============================================================================
Commands Package - Console Command Handling
==============================================================================

Parsing, dispatching and output formatting for the line-oriented console.

Classes:
--------
- CommandParser: Raw line -> typed command
- CommandDispatcher: Typed command -> ProductStore call -> output line
- OutputFormatter: Ok/Error line templates

==============================================================================
"""

from .models import (
    AddCommand,
    Command,
    EndCommand,
    FilterByCategoryCommand,
    FilterByPriceRangeCommand,
    FilterFromCommand,
    FilterToCommand,
)
from .parser import CommandParser
from .formatter import OutputFormatter
from .dispatcher import CommandDispatcher

__all__ = [
    "AddCommand",
    "Command",
    "EndCommand",
    "FilterByCategoryCommand",
    "FilterByPriceRangeCommand",
    "FilterFromCommand",
    "FilterToCommand",
    "CommandParser",
    "OutputFormatter",
    "CommandDispatcher",
]
