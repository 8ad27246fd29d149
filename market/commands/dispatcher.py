"""
==============================================================================
Command Dispatcher Module
==============================================================================

Routes typed commands to ProductStore operations and renders the outcome.

Each handled line yields exactly one output line. Recoverable catalog
errors (duplicate product, unknown category) and malformed commands are
reported as "Error: ..." lines; any other exception propagates.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from market.catalog import ProductStore
from market.core import AppException

from .formatter import OutputFormatter
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


# Module logger
logger = logging.getLogger(__name__)


class CommandDispatcher:
    """
    Dispatcher between the console and the product store.

    Attributes:
        _store: Store every command is applied to
        _parser: Parser for raw lines
        _formatter: Renderer for output lines

    Example:
        >>> dispatcher = CommandDispatcher(ProductStore())
        >>> dispatcher.handle_line("add A 10 food")
        'Ok: Product A added successfully'
        >>> dispatcher.handle_line("filter by type drinks")
        'Error: Type drinks does not exists'
    """

    def __init__(
        self,
        store: ProductStore,
        parser: Optional[CommandParser] = None,
        formatter: Optional[OutputFormatter] = None
    ) -> None:
        self._store = store
        self._parser = parser or CommandParser()
        self._formatter = formatter or OutputFormatter()
        self._handlers: Dict[str, Callable[[Command], str]] = {
            "add": self._handle_add,
            "filter_by_category": self._handle_filter_by_category,
            "filter_by_price_range": self._handle_filter_by_price_range,
            "filter_from": self._handle_filter_from,
            "filter_to": self._handle_filter_to,
        }

    @property
    def store(self) -> ProductStore:
        return self._store

    def handle_line(self, line: str) -> Optional[str]:
        """
        Parse and execute one input line.

        Returns:
            The output line, or None when the line is an end command
        """
        try:
            command = self._parser.parse(line)
        except AppException as exc:
            logger.info(f"{exc.code}: {exc.message}")
            return self._formatter.error(exc)

        if isinstance(command, EndCommand):
            return None

        return self.dispatch(command)

    def dispatch(self, command: Command) -> str:
        """
        Apply a parsed command to the store.

        Raises:
            ValueError: If the command has no handler (e.g. EndCommand)
        """
        handler = self._handlers.get(command.kind)
        if handler is None:
            raise ValueError(f"Command '{command.kind}' cannot be dispatched")

        logger.debug(f"Dispatching {command!r}")
        try:
            return handler(command)
        except AppException as exc:
            logger.info(f"{exc.code}: {exc.message}")
            return self._formatter.error(exc)

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def _handle_add(self, command: AddCommand) -> str:
        product = self._store.add(command.name, command.price, command.category)
        return self._formatter.added(product)

    def _handle_filter_by_category(self, command: FilterByCategoryCommand) -> str:
        return self._formatter.products(self._store.filter_by_category(command.category))

    def _handle_filter_by_price_range(self, command: FilterByPriceRangeCommand) -> str:
        products = self._store.filter_by_price_range(command.min_price, command.max_price)
        return self._formatter.products(products)

    def _handle_filter_from(self, command: FilterFromCommand) -> str:
        return self._formatter.products(self._store.filter_from(command.min_price))

    def _handle_filter_to(self, command: FilterToCommand) -> str:
        return self._formatter.products(self._store.filter_to(command.max_price))
