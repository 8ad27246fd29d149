"""
==============================================================================
Command Parser Module
==============================================================================

Turns one whitespace-separated input line into a typed command.

Grammar (positional, by token count):
------------------------------------
    add <name> <price> <category>
    filter by type <category>              (<= 4 tokens)
    filter <category>                      (short form)
    filter by price from <min> to <max>    (>= 7 tokens)
    filter by price from <min>             (token 3 is "from")
    filter by price to <max>               (any other 5-6 token form)
    end

Only the token positions matter for filters; the words "by", "type" and
"price" are not checked.

==============================================================================
"""

from __future__ import annotations

import logging
import math
from typing import List

from market.core import exceptions

from .models import (
    AddCommand,
    Command,
    EndCommand,
    FilterByCategoryCommand,
    FilterByPriceRangeCommand,
    FilterFromCommand,
    FilterToCommand,
)


# Module logger
logger = logging.getLogger(__name__)


class CommandParser:
    """
    Parser for console command lines.

    Example:
        >>> parser = CommandParser()
        >>> parser.parse("filter by price from 5 to 100")
        FilterByPriceRangeCommand(kind='filter_by_price_range', min_price=5.0, max_price=100.0)
    """

    ADD = "add"
    FILTER = "filter"
    END = "end"
    FROM = "from"

    CATEGORY_MAX_TOKENS = 4
    RANGE_MIN_TOKENS = 7
    ADD_TOKENS = 4

    def parse(self, line: str) -> Command:
        """
        Parse a command line.

        Args:
            line: Raw input line

        Returns:
            Typed command variant

        Raises:
            AppException: INVALID_COMMAND for empty lines, unknown verbs,
                missing arguments or non-numeric prices
        """
        tokens = line.split()
        if not tokens:
            raise exceptions.invalid_command(line, "empty command")

        verb = tokens[0]

        if verb == self.END:
            return EndCommand()

        if verb == self.ADD:
            return self._parse_add(line, tokens)

        if verb == self.FILTER:
            return self._parse_filter(line, tokens)

        raise exceptions.invalid_command(line, f"unknown command '{verb}'")

    def _parse_add(self, line: str, tokens: List[str]) -> AddCommand:
        if len(tokens) < self.ADD_TOKENS:
            raise exceptions.invalid_command(line, "expected add <name> <price> <category>")

        return AddCommand(
            name=tokens[1],
            price=self._parse_price(line, tokens[2]),
            category=tokens[3],
        )

    def _parse_filter(self, line: str, tokens: List[str]) -> Command:
        count = len(tokens)
        if count < 2:
            raise exceptions.invalid_command(line, "missing filter arguments")

        if count <= self.CATEGORY_MAX_TOKENS:
            # "filter by type" names no category
            if count == 3:
                raise exceptions.invalid_command(line, "expected filter by type <category>")
            return FilterByCategoryCommand(category=tokens[-1])

        if count >= self.RANGE_MIN_TOKENS:
            return FilterByPriceRangeCommand(
                min_price=self._parse_price(line, tokens[4]),
                max_price=self._parse_price(line, tokens[6]),
            )

        value = self._parse_price(line, tokens[4])
        if tokens[3] == self.FROM:
            return FilterFromCommand(min_price=value)
        return FilterToCommand(max_price=value)

    @staticmethod
    def _parse_price(line: str, token: str) -> float:
        # float() also takes digit separators such as "1_0"
        if "_" in token:
            raise exceptions.invalid_command(line, f"'{token}' is not a number")

        try:
            value = float(token)
        except ValueError:
            logger.debug(f"Rejected price token {token!r}")
            raise exceptions.invalid_command(line, f"'{token}' is not a number") from None

        if not math.isfinite(value):
            raise exceptions.invalid_command(line, f"'{token}' is not a finite number")

        return value
