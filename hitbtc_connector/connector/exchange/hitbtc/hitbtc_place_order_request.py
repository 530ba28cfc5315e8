import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional

from hitbtc_connector.connector.exchange.hitbtc.hitbtc_constants import Constants
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_converters import (
    ORDER_TYPE,
    TIME_IN_FORCE,
    TRADE_SIDE,
    FieldSpec,
    datetime_to_str,
    decimal_to_str,
    dumps,
    register_fields,
    str_to_datetime,
    str_to_decimal,
    to_json_dict,
)
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_enums import (
    HitbtcOrderTimeInForce,
    HitbtcOrderType,
    HitbtcTradeSide,
)
from hitbtc_connector.logger import HitbtcLogger


@dataclass(frozen=True)
class HitbtcPlaceOrderRequest:
    """
    Fields needed to place the different types of orders (POST /api/2/order).

    Prefer the builders (`limit_order`, `market_order`, `stop_market_order`, `stop_limit_order`), each of them asks
    only for the fields its order family needs and fills in the rest. The request is not validated against the
    exchange rules, requests breaking the usual conventions are logged and left for the exchange to reject.

    client_order_id: Order unique identifier as assigned by trader. Uniqueness must be guaranteed within a single
        trading day, including all active orders.
    time_in_force: How long the order remains active before it is executed or expired. GTD requires expire_time.
    price: Required for limit and stop-limit orders.
    stop_price: Required for stop-limit and stop-market orders.
    strict_validate: Price and quantity will be checked for incrementation within the symbol's tick size and
        quantity step.
    post_only: If the order causes a match with a pre-existing order as a taker, then the order will be cancelled.
    """
    _logger: ClassVar[Optional[HitbtcLogger]] = None

    symbol: str
    side: HitbtcTradeSide
    quantity: Decimal
    order_type: HitbtcOrderType
    price: Optional[Decimal] = None
    client_order_id: Optional[str] = None
    post_only: Optional[bool] = False
    strict_validate: Optional[bool] = False
    time_in_force: Optional[HitbtcOrderTimeInForce] = HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED
    expire_time: Optional[datetime] = None
    stop_price: Optional[Decimal] = None

    @classmethod
    def logger(cls) -> HitbtcLogger:
        if cls._logger is None:
            cls._logger = logging.getLogger(__name__)
        return cls._logger

    def __post_init__(self):
        type_name = self.order_type.name if self.order_type is not None else "UNTYPED"
        for issue in self.convention_issues():
            self.logger().warning(f"{type_name} order for {self.symbol}: {issue}")

    def convention_issues(self) -> List[str]:
        if self.order_type is None:
            return ["order_type is required."]
        issues = []
        if self.order_type.has_price() and self.price is None:
            issues.append("price is required for this order type.")
        if self.order_type.has_stop_price() and self.stop_price is None:
            issues.append("stop_price is required for this order type.")
        if self.time_in_force == HitbtcOrderTimeInForce.GOOD_TILL_DATE and self.expire_time is None:
            issues.append("expire_time is required when time in force is GTD.")
        if self.post_only and not self.order_type.has_price():
            issues.append("post_only only applies to limit and stop-limit orders.")
        return issues

    @classmethod
    def limit_order(cls,
                    symbol: str,
                    side: HitbtcTradeSide,
                    quantity: Decimal,
                    price: Decimal,
                    client_order_id: Optional[str] = None,
                    post_only: bool = False,
                    time_in_force: Optional[HitbtcOrderTimeInForce] = HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED,
                    expire_time: Optional[datetime] = None,
                    strict_validate: bool = False) -> "HitbtcPlaceOrderRequest":
        return cls(symbol=symbol,
                   side=side,
                   quantity=quantity,
                   order_type=HitbtcOrderType.LIMIT,
                   price=price,
                   client_order_id=client_order_id,
                   post_only=post_only,
                   strict_validate=strict_validate,
                   time_in_force=time_in_force,
                   expire_time=expire_time)

    @classmethod
    def market_order(cls,
                     symbol: str,
                     side: HitbtcTradeSide,
                     quantity: Decimal,
                     client_order_id: Optional[str] = None,
                     time_in_force: Optional[HitbtcOrderTimeInForce] = HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED,
                     expire_time: Optional[datetime] = None,
                     strict_validate: bool = False) -> "HitbtcPlaceOrderRequest":
        return cls(symbol=symbol,
                   side=side,
                   quantity=quantity,
                   order_type=HitbtcOrderType.MARKET,
                   price=None,
                   client_order_id=client_order_id,
                   post_only=False,
                   strict_validate=strict_validate,
                   time_in_force=time_in_force,
                   expire_time=expire_time)

    @classmethod
    def stop_market_order(cls,
                          symbol: str,
                          side: HitbtcTradeSide,
                          quantity: Decimal,
                          stop_price: Decimal,
                          client_order_id: Optional[str] = None,
                          time_in_force: Optional[HitbtcOrderTimeInForce] = HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED,
                          expire_time: Optional[datetime] = None,
                          strict_validate: bool = False) -> "HitbtcPlaceOrderRequest":
        return cls(symbol=symbol,
                   side=side,
                   quantity=quantity,
                   order_type=HitbtcOrderType.STOP_MARKET,
                   price=None,
                   client_order_id=client_order_id,
                   post_only=False,
                   strict_validate=strict_validate,
                   time_in_force=time_in_force,
                   expire_time=expire_time,
                   stop_price=stop_price)

    @classmethod
    def stop_limit_order(cls,
                         symbol: str,
                         side: HitbtcTradeSide,
                         quantity: Decimal,
                         price: Decimal,
                         stop_price: Decimal,
                         client_order_id: Optional[str] = None,
                         post_only: bool = False,
                         time_in_force: Optional[HitbtcOrderTimeInForce] = HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED,
                         expire_time: Optional[datetime] = None,
                         strict_validate: bool = False) -> "HitbtcPlaceOrderRequest":
        return cls(symbol=symbol,
                   side=side,
                   quantity=quantity,
                   order_type=HitbtcOrderType.STOP_LIMIT,
                   price=price,
                   client_order_id=client_order_id,
                   post_only=post_only,
                   strict_validate=strict_validate,
                   time_in_force=time_in_force,
                   expire_time=expire_time,
                   stop_price=stop_price)

    def to_payload(self) -> Dict[str, Any]:
        """
        :return: the request body expected by the order creation endpoint
        """
        payload = to_json_dict(self)
        self.logger().payload(logging.DEBUG, f"{Constants.ENDPOINT['ORDER_CREATE']} payload:", payload)
        return payload

    def to_json(self) -> str:
        return dumps(self)


register_fields(
    HitbtcPlaceOrderRequest,
    FieldSpec("client_order_id", "clientOrderId"),
    FieldSpec("symbol", "symbol", omit_if_none=False),
    FieldSpec("side", "side", TRADE_SIDE.encode, TRADE_SIDE.decode, omit_if_none=False),
    FieldSpec("order_type", "type", ORDER_TYPE.encode, ORDER_TYPE.decode, omit_if_none=False),
    FieldSpec("time_in_force", "timeInForce", TIME_IN_FORCE.encode, TIME_IN_FORCE.decode),
    FieldSpec("quantity", "quantity", decimal_to_str, str_to_decimal, omit_if_none=False),
    FieldSpec("price", "price", decimal_to_str, str_to_decimal),
    FieldSpec("expire_time", "expireTime", datetime_to_str, str_to_datetime),
    FieldSpec("strict_validate", "strictValidate"),
    FieldSpec("stop_price", "stopPrice", decimal_to_str, str_to_decimal),
    FieldSpec("post_only", "postOnly"),
)
