from enum import Enum


class HitbtcTradeSide(Enum):
    BUY = 1
    SELL = 2


class HitbtcOrderType(Enum):
    LIMIT = 1
    MARKET = 2
    STOP_LIMIT = 3
    STOP_MARKET = 4

    def has_price(self) -> bool:
        return self in (HitbtcOrderType.LIMIT, HitbtcOrderType.STOP_LIMIT)

    def has_stop_price(self) -> bool:
        return self in (HitbtcOrderType.STOP_LIMIT, HitbtcOrderType.STOP_MARKET)


class HitbtcOrderTimeInForce(Enum):
    """
    GTC - Good-Till-Cancelled order won't be closed until it is filled.
    IOC - Immediate-Or-Cancel, any part of the order that cannot be filled immediately is cancelled.
    FOK - Fill-Or-Kill, the order is executed immediately and completely or not at all.
    Day - keeps the order active until the end of the trading day (UTC).
    GTD - Good-Till-Date, the date is specified in expireTime.
    """
    GOOD_TILL_CANCELLED = 1
    IMMEDIATE_OR_CANCEL = 2
    FILL_OR_KILL = 3
    DAY = 4
    GOOD_TILL_DATE = 5
