"""
Wire conversion for HitBTC objects.

Enum tokens are kept in `bidict` tables, and every object that travels over the wire registers one table of
`FieldSpec` entries (attribute name, JSON key, encoder, decoder, omission rule) in a single registry. Encoding and
decoding walk that table, so no object carries its own serialization logic.
"""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple, Type, TypeVar

import ujson
from bidict import bidict
from dateutil.parser import isoparse

from hitbtc_connector.connector.exchange.hitbtc.hitbtc_enums import (
    HitbtcOrderTimeInForce,
    HitbtcOrderType,
    HitbtcTradeSide,
)
from hitbtc_connector.exceptions import HitbtcConversionError

T = TypeVar("T")

TRADE_SIDE_TOKENS: bidict = bidict({
    HitbtcTradeSide.BUY: "buy",
    HitbtcTradeSide.SELL: "sell",
})

ORDER_TYPE_TOKENS: bidict = bidict({
    HitbtcOrderType.LIMIT: "limit",
    HitbtcOrderType.MARKET: "market",
    HitbtcOrderType.STOP_LIMIT: "stopLimit",
    HitbtcOrderType.STOP_MARKET: "stopMarket",
})

TIME_IN_FORCE_TOKENS: bidict = bidict({
    HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED: "GTC",
    HitbtcOrderTimeInForce.IMMEDIATE_OR_CANCEL: "IOC",
    HitbtcOrderTimeInForce.FILL_OR_KILL: "FOK",
    HitbtcOrderTimeInForce.DAY: "Day",
    HitbtcOrderTimeInForce.GOOD_TILL_DATE: "GTD",
})


class EnumConverter:
    def __init__(self, tokens: bidict):
        self._tokens = tokens

    @property
    def tokens(self) -> bidict:
        return self._tokens

    def encode(self, value: Enum) -> str:
        try:
            return self._tokens[value]
        except KeyError as e:
            raise HitbtcConversionError(f"{value!r} has no HitBTC token.") from e

    def decode(self, token: str) -> Enum:
        try:
            return self._tokens.inverse[token]
        except KeyError as e:
            raise HitbtcConversionError(f"Unknown HitBTC token '{token}'.") from e


TRADE_SIDE = EnumConverter(TRADE_SIDE_TOKENS)
ORDER_TYPE = EnumConverter(ORDER_TYPE_TOKENS)
TIME_IN_FORCE = EnumConverter(TIME_IN_FORCE_TOKENS)


def decimal_to_str(value: Any) -> str:
    try:
        return f"{Decimal(str(value)):f}"
    except InvalidOperation as e:
        raise HitbtcConversionError(f"'{value}' is not a valid decimal number.") from e


def str_to_decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise HitbtcConversionError(f"'{value}' is not a valid decimal number.") from e


def datetime_to_str(value: datetime) -> str:
    """
    Formats a datetime the way HitBTC does, e.g. 2017-10-20T12:20:05.952Z. Naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 1000:03d}Z"


def str_to_datetime(value: str) -> datetime:
    try:
        return isoparse(value)
    except (TypeError, ValueError) as e:
        raise HitbtcConversionError(f"'{value}' is not a valid ISO 8601 timestamp.") from e


def _identity(value: Any) -> Any:
    return value


class FieldSpec(NamedTuple):
    attr: str
    key: str
    encoder: Callable[[Any], Any] = _identity
    decoder: Callable[[Any], Any] = _identity
    # Optional fields holding None are left out of the payload, required ones are written as null
    omit_if_none: bool = True


_FIELD_MAPPINGS: Dict[type, Tuple[FieldSpec, ...]] = {}


def register_fields(cls: Type[T], *fields: FieldSpec) -> Type[T]:
    _FIELD_MAPPINGS[cls] = tuple(fields)
    return cls


def field_mapping(cls: type) -> Tuple[FieldSpec, ...]:
    try:
        return _FIELD_MAPPINGS[cls]
    except KeyError as e:
        raise HitbtcConversionError(f"No field mapping registered for {cls.__name__}.") from e


def to_json_dict(obj: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for field in field_mapping(type(obj)):
        value = getattr(obj, field.attr)
        if value is None:
            if not field.omit_if_none:
                result[field.key] = None
        else:
            result[field.key] = field.encoder(value)
    return result


def from_json_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    if not isinstance(data, dict):
        raise HitbtcConversionError(f"Cannot build {cls.__name__} from {type(data).__name__}.")
    kwargs: Dict[str, Any] = {}
    for field in field_mapping(cls):
        if field.key not in data:
            continue
        value = data[field.key]
        try:
            kwargs[field.attr] = None if value is None else field.decoder(value)
        except HitbtcConversionError:
            raise
        except (TypeError, AttributeError, ValueError) as e:
            raise HitbtcConversionError(f"Invalid '{field.key}' value for {cls.__name__}: {value!r}") from e
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise HitbtcConversionError(f"Incomplete {cls.__name__} data: {e}") from e


def list_encoder(cls: type) -> Callable[[Iterable[Any]], List[Dict[str, Any]]]:
    def encode(values: Iterable[Any]) -> List[Dict[str, Any]]:
        return [to_json_dict(value) for value in values]
    return encode


def list_decoder(cls: Type[T]) -> Callable[[Iterable[Dict[str, Any]]], Tuple[T, ...]]:
    def decode(values: Iterable[Dict[str, Any]]) -> Tuple[T, ...]:
        if not isinstance(values, (list, tuple)):
            raise HitbtcConversionError(f"Expected a list of {cls.__name__}, got {type(values).__name__}.")
        return tuple(from_json_dict(cls, value) for value in values)
    return decode


def dumps(obj: Any) -> str:
    return ujson.dumps(to_json_dict(obj))


def loads(cls: Type[T], raw: str) -> T:
    try:
        data = ujson.loads(raw)
    except ValueError as e:
        raise HitbtcConversionError(f"Invalid JSON for {cls.__name__}: {e}") from e
    return from_json_dict(cls, data)
