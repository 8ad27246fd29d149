"""
==============================================================================
Command Models Module
==============================================================================

Typed command variants produced by the parser.

Each variant is a frozen Pydantic model with a literal ``kind`` used by
the dispatcher to pick a handler.

==============================================================================
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _BaseCommand(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddCommand(_BaseCommand):
    """add <name> <price> <category>"""

    kind: Literal["add"] = "add"
    name: str = Field(..., min_length=1)
    price: float
    category: str = Field(..., min_length=1)


class FilterByCategoryCommand(_BaseCommand):
    """filter by type <category>"""

    kind: Literal["filter_by_category"] = "filter_by_category"
    category: str = Field(..., min_length=1)


class FilterByPriceRangeCommand(_BaseCommand):
    """filter by price from <min> to <max>"""

    kind: Literal["filter_by_price_range"] = "filter_by_price_range"
    min_price: float
    max_price: float


class FilterFromCommand(_BaseCommand):
    """filter by price from <min>"""

    kind: Literal["filter_from"] = "filter_from"
    min_price: float


class FilterToCommand(_BaseCommand):
    """filter by price to <max>"""

    kind: Literal["filter_to"] = "filter_to"
    max_price: float


class EndCommand(_BaseCommand):
    """end"""

    kind: Literal["end"] = "end"


Command = Union[
    AddCommand,
    FilterByCategoryCommand,
    FilterByPriceRangeCommand,
    FilterFromCommand,
    FilterToCommand,
    EndCommand,
]
