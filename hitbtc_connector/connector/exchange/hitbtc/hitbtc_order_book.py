import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, NamedTuple, Optional, Sequence, Tuple

from hitbtc_connector.connector.exchange.hitbtc.hitbtc_converters import (
    FieldSpec,
    datetime_to_str,
    decimal_to_str,
    from_json_dict,
    list_decoder,
    list_encoder,
    register_fields,
    str_to_datetime,
    str_to_decimal,
    to_json_dict,
)
from hitbtc_connector.core.data_type.common_order_book import CommonOrderBook, SymbolOrderBookEntry
from hitbtc_connector.exceptions import HitbtcAPIError, HitbtcConversionError
from hitbtc_connector.logger import HitbtcLogger


class HitbtcOrderBookEntry(NamedTuple):
    price: Decimal
    size: Decimal

    @property
    def quantity(self) -> Decimal:
        return self.size


@dataclass(frozen=True)
class HitbtcOrderBook(CommonOrderBook):
    """
    Order book snapshot as returned by GET /api/2/public/orderbook/{symbol}

    Example:
    {
        "ask": [{"price": "0.046002", "size": "0.088"}, {"price": "0.046800", "size": "0.200"}],
        "bid": [{"price": "0.046001", "size": "0.005"}, {"price": "0.046000", "size": "0.200"}],
        "timestamp": "2018-11-19T05:00:28.193Z",
        "askAveragePrice": "0.046002",
        "bidAveragePrice": "0.046001"
    }
    The average prices are only sent when a volume is requested.
    """
    _logger: ClassVar[Optional[HitbtcLogger]] = None

    symbol: Optional[str]
    asks: Tuple[HitbtcOrderBookEntry, ...]
    bids: Tuple[HitbtcOrderBookEntry, ...]
    timestamp: datetime
    ask_average_price: Optional[Decimal] = None
    bid_average_price: Optional[Decimal] = None

    @classmethod
    def logger(cls) -> HitbtcLogger:
        if cls._logger is None:
            cls._logger = logging.getLogger(__name__)
        return cls._logger

    def __post_init__(self):
        object.__setattr__(self, "asks", tuple(self.asks))
        object.__setattr__(self, "bids", tuple(self.bids))

    # Sides are wired crosswise: asks feed common_bids and bids feed common_asks.
    @property
    def common_bids(self) -> Sequence[SymbolOrderBookEntry]:
        return self.asks

    @property
    def common_asks(self) -> Sequence[SymbolOrderBookEntry]:
        return self.bids

    @property
    def best_ask(self) -> Optional[HitbtcOrderBookEntry]:
        return self.asks[0] if self.asks else None

    @property
    def best_bid(self) -> Optional[HitbtcOrderBookEntry]:
        return self.bids[0] if self.bids else None

    @classmethod
    def from_json(cls, data: Dict[str, Any], symbol: Optional[str] = None) -> "HitbtcOrderBook":
        """
        :param data: order book json data from the API
        :param symbol: exchange symbol, used when the payload does not carry one
        :return: the decoded order book snapshot
        """
        if not isinstance(data, dict):
            raise HitbtcConversionError(f"Cannot build {cls.__name__} from {type(data).__name__}.")
        if "error" in data:
            raise HitbtcAPIError(data)
        data = dict(data)
        if symbol is not None:
            data["symbol"] = symbol
        data.setdefault("symbol", None)
        order_book = from_json_dict(cls, data)
        cls.logger().debug(f"Decoded {order_book.symbol} order book with {len(order_book.asks)} asks and "
                           f"{len(order_book.bids)} bids.")
        return order_book

    @classmethod
    def from_exchange_response(cls, response: Dict[str, Dict[str, Any]]) -> Dict[str, "HitbtcOrderBook"]:
        """
        Decodes the multi symbol form of GET /api/2/public/orderbook, where books are keyed by symbol
        """
        if not isinstance(response, dict):
            raise HitbtcConversionError(f"Cannot build order books from {type(response).__name__}.")
        if "error" in response:
            raise HitbtcAPIError(response)
        return {symbol: cls.from_json(data, symbol=symbol) for symbol, data in response.items()}

    def to_json_dict(self) -> Dict[str, Any]:
        return to_json_dict(self)


register_fields(
    HitbtcOrderBookEntry,
    FieldSpec("price", "price", decimal_to_str, str_to_decimal, omit_if_none=False),
    FieldSpec("size", "size", decimal_to_str, str_to_decimal, omit_if_none=False),
)

register_fields(
    HitbtcOrderBook,
    FieldSpec("symbol", "symbol"),
    FieldSpec("asks", "ask", list_encoder(HitbtcOrderBookEntry), list_decoder(HitbtcOrderBookEntry),
              omit_if_none=False),
    FieldSpec("bids", "bid", list_encoder(HitbtcOrderBookEntry), list_decoder(HitbtcOrderBookEntry),
              omit_if_none=False),
    FieldSpec("timestamp", "timestamp", datetime_to_str, str_to_datetime, omit_if_none=False),
    FieldSpec("ask_average_price", "askAveragePrice", decimal_to_str, str_to_decimal),
    FieldSpec("bid_average_price", "bidAveragePrice", decimal_to_str, str_to_decimal),
)
