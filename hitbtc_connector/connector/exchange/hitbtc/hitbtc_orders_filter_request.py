import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional

from hitbtc_connector.connector.exchange.hitbtc.hitbtc_constants import Constants
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_converters import (
    FieldSpec,
    datetime_to_str,
    register_fields,
    str_to_datetime,
    to_json_dict,
)
from hitbtc_connector.exceptions import HitbtcInvalidArgumentError
from hitbtc_connector.logger import HitbtcLogger


@dataclass(frozen=True)
class HitbtcOrdersFilterRequest:
    """
    Filter for the historical orders query (GET /api/2/history/order).

    symbol: Optional parameter to filter orders by symbol.
    from_: Interval initial value (optional parameter).
    till: Interval end value (optional parameter).
    limit: Default value: 100. Max value: 1000.
    offset: Default value: 0. Max value: 100000.
    client_order_id: If set, other parameters will be ignored, including limit and offset.
    """
    _logger: ClassVar[Optional[HitbtcLogger]] = None

    symbol: Optional[str] = None
    from_: Optional[datetime] = None
    till: Optional[datetime] = None
    limit: int = Constants.HISTORY_DEFAULT_LIMIT
    offset: int = Constants.HISTORY_DEFAULT_OFFSET
    client_order_id: Optional[str] = None

    @classmethod
    def logger(cls) -> HitbtcLogger:
        if cls._logger is None:
            cls._logger = logging.getLogger(__name__)
        return cls._logger

    def __post_init__(self):
        for name in ("limit", "offset"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise HitbtcInvalidArgumentError(f"{name} must be an integer, got {value!r}.")
        if not 0 <= self.limit <= Constants.HISTORY_MAX_LIMIT:
            raise HitbtcInvalidArgumentError(f"Accepted range: 0 - {Constants.HISTORY_MAX_LIMIT}")
        if not 0 <= self.offset <= Constants.HISTORY_MAX_OFFSET:
            raise HitbtcInvalidArgumentError(f"Accepted range: 0 - {Constants.HISTORY_MAX_OFFSET}")
        if self.client_order_id is not None and any(v is not None for v in (self.symbol, self.from_, self.till)):
            self.logger().warning(f"Filtering by client order id {self.client_order_id}, "
                                  f"symbol and time interval will be ignored.")

    @classmethod
    def by_client_order_id(cls, client_order_id: str) -> "HitbtcOrdersFilterRequest":
        return cls(client_order_id=client_order_id)

    @property
    def is_client_order_id_filter(self) -> bool:
        return self.client_order_id is not None

    def to_query_params(self) -> Dict[str, Any]:
        params = to_json_dict(self)
        if self.is_client_order_id_filter:
            return {"clientOrderId": params["clientOrderId"]}
        return params


register_fields(
    HitbtcOrdersFilterRequest,
    FieldSpec("symbol", "symbol"),
    FieldSpec("from_", "from", datetime_to_str, str_to_datetime),
    FieldSpec("till", "till", datetime_to_str, str_to_datetime),
    FieldSpec("limit", "limit", omit_if_none=False),
    FieldSpec("offset", "offset", omit_if_none=False),
    FieldSpec("client_order_id", "clientOrderId"),
)
