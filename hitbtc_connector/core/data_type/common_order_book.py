from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class SymbolOrderBookEntry(Protocol):
    """
    A single price level of an order book ladder, independent of the exchange it comes from.
    """

    @property
    def price(self) -> Decimal:
        ...

    @property
    def quantity(self) -> Decimal:
        ...


class CommonOrderBook(ABC):
    """
    Two-sided order book view consumed by exchange agnostic tooling.
    """

    @property
    @abstractmethod
    def common_bids(self) -> Sequence[SymbolOrderBookEntry]:
        ...

    @property
    @abstractmethod
    def common_asks(self) -> Sequence[SymbolOrderBookEntry]:
        ...
