import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import NamedTuple, Optional

from hitbtc_connector.connector.exchange.hitbtc import hitbtc_converters as converters
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_enums import (
    HitbtcOrderTimeInForce,
    HitbtcOrderType,
    HitbtcTradeSide,
)
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_place_order_request import HitbtcPlaceOrderRequest
from hitbtc_connector.exceptions import HitbtcConversionError


class _Sample(NamedTuple):
    name: str
    amount: Optional[Decimal] = None
    note: Optional[str] = None


converters.register_fields(
    _Sample,
    converters.FieldSpec("name", "name", omit_if_none=False),
    converters.FieldSpec("amount", "amount", converters.decimal_to_str, converters.str_to_decimal),
    converters.FieldSpec("note", "note", omit_if_none=False),
)


class HitbtcConvertersTests(unittest.TestCase):

    def test_token_tables(self):
        self.assertEqual("buy", converters.TRADE_SIDE.encode(HitbtcTradeSide.BUY))
        self.assertEqual("sell", converters.TRADE_SIDE.encode(HitbtcTradeSide.SELL))
        self.assertEqual("limit", converters.ORDER_TYPE.encode(HitbtcOrderType.LIMIT))
        self.assertEqual("market", converters.ORDER_TYPE.encode(HitbtcOrderType.MARKET))
        self.assertEqual("stopLimit", converters.ORDER_TYPE.encode(HitbtcOrderType.STOP_LIMIT))
        self.assertEqual("stopMarket", converters.ORDER_TYPE.encode(HitbtcOrderType.STOP_MARKET))
        self.assertEqual("GTC", converters.TIME_IN_FORCE.encode(HitbtcOrderTimeInForce.GOOD_TILL_CANCELLED))
        self.assertEqual("IOC", converters.TIME_IN_FORCE.encode(HitbtcOrderTimeInForce.IMMEDIATE_OR_CANCEL))
        self.assertEqual("FOK", converters.TIME_IN_FORCE.encode(HitbtcOrderTimeInForce.FILL_OR_KILL))
        self.assertEqual("Day", converters.TIME_IN_FORCE.encode(HitbtcOrderTimeInForce.DAY))
        self.assertEqual("GTD", converters.TIME_IN_FORCE.encode(HitbtcOrderTimeInForce.GOOD_TILL_DATE))

    def test_every_enum_member_has_a_token(self):
        for converter, enum_type in ((converters.TRADE_SIDE, HitbtcTradeSide),
                                     (converters.ORDER_TYPE, HitbtcOrderType),
                                     (converters.TIME_IN_FORCE, HitbtcOrderTimeInForce)):
            for member in enum_type:
                self.assertEqual(member, converter.decode(converter.encode(member)))

    def test_unknown_token_raises(self):
        with self.assertRaises(HitbtcConversionError):
            converters.TRADE_SIDE.decode("bid")
        with self.assertRaises(HitbtcConversionError):
            converters.TIME_IN_FORCE.decode("gtc")
        with self.assertRaises(HitbtcConversionError):
            converters.ORDER_TYPE.encode(HitbtcTradeSide.BUY)

    def test_decimal_to_str(self):
        self.assertEqual("20000", converters.decimal_to_str(Decimal("20000")))
        self.assertEqual("20000", converters.decimal_to_str(Decimal("2E+4")))
        self.assertEqual("1.5", converters.decimal_to_str(Decimal("1.5")))
        self.assertEqual("0.00000001", converters.decimal_to_str(Decimal("1E-8")))
        self.assertEqual("1.5", converters.decimal_to_str(1.5))
        self.assertEqual("3", converters.decimal_to_str(3))

    def test_invalid_decimal_raises(self):
        with self.assertRaises(HitbtcConversionError):
            converters.decimal_to_str("abc")
        with self.assertRaises(HitbtcConversionError):
            converters.str_to_decimal("abc")

    def test_datetime_to_str(self):
        self.assertEqual("2017-10-20T12:20:05.952Z",
                         converters.datetime_to_str(datetime(2017, 10, 20, 12, 20, 5, 952000, tzinfo=timezone.utc)))
        self.assertEqual("2017-10-20T12:20:05.000Z", converters.datetime_to_str(datetime(2017, 10, 20, 12, 20, 5)))
        self.assertEqual(
            "2017-10-20T12:20:05.000Z",
            converters.datetime_to_str(datetime(2017, 10, 20, 14, 20, 5, tzinfo=timezone(timedelta(hours=2)))))

    def test_str_to_datetime(self):
        self.assertEqual(datetime(2017, 10, 20, 12, 20, 5, 952000, tzinfo=timezone.utc),
                         converters.str_to_datetime("2017-10-20T12:20:05.952Z"))
        with self.assertRaises(HitbtcConversionError):
            converters.str_to_datetime("yesterday")

    def test_to_json_dict_omission_rules(self):
        self.assertEqual({"name": "a", "note": None}, converters.to_json_dict(_Sample("a")))
        self.assertEqual({"name": "a", "amount": "1.25", "note": "n"},
                         converters.to_json_dict(_Sample("a", Decimal("1.25"), "n")))

    def test_from_json_dict(self):
        self.assertEqual(_Sample("a", Decimal("1.25")),
                         converters.from_json_dict(_Sample, {"name": "a", "amount": "1.25", "note": None}))
        self.assertEqual(_Sample("a"), converters.from_json_dict(_Sample, {"name": "a", "unknown": 1}))

    def test_from_json_dict_with_missing_required_field_raises(self):
        with self.assertRaises(HitbtcConversionError):
            converters.from_json_dict(_Sample, {"amount": "1"})

    def test_from_json_dict_with_non_dict_raises(self):
        with self.assertRaises(HitbtcConversionError):
            converters.from_json_dict(_Sample, ["a"])

    def test_unregistered_type_raises(self):
        with self.assertRaises(HitbtcConversionError):
            converters.to_json_dict(object())

    def test_dumps_and_loads(self):
        raw = converters.dumps(_Sample("a", Decimal("2")))

        self.assertEqual(_Sample("a", Decimal("2")), converters.loads(_Sample, raw))
        with self.assertRaises(HitbtcConversionError):
            converters.loads(_Sample, "{not json")

    def test_order_request_decodes_from_exchange_payload(self):
        payload = {
            "clientOrderId": "d8574207d9e3b16a4a5511753eeef175",
            "symbol": "ETHBTC",
            "side": "sell",
            "type": "stopLimit",
            "timeInForce": "GTD",
            "quantity": "0.063",
            "price": "0.046016",
            "stopPrice": "0.046",
            "expireTime": "2021-06-01T00:00:00.000Z",
            "postOnly": False,
        }

        request = converters.from_json_dict(HitbtcPlaceOrderRequest, payload)

        self.assertEqual(HitbtcTradeSide.SELL, request.side)
        self.assertEqual(HitbtcOrderType.STOP_LIMIT, request.order_type)
        self.assertEqual(HitbtcOrderTimeInForce.GOOD_TILL_DATE, request.time_in_force)
        self.assertEqual(Decimal("0.046"), request.stop_price)
        self.assertEqual(datetime(2021, 6, 1, tzinfo=timezone.utc), request.expire_time)
        self.assertFalse(request.strict_validate)

    def test_order_request_with_null_type_decodes_and_reports_missing_type(self):
        request = converters.loads(HitbtcPlaceOrderRequest,
                                   '{"symbol":"ETHBTC","side":"buy","type":null,"quantity":"1"}')

        self.assertIsNone(request.order_type)
        self.assertEqual(["order_type is required."], request.convention_issues())

    def test_unhashable_token_raises_conversion_error(self):
        with self.assertRaises(HitbtcConversionError):
            converters.from_json_dict(
                HitbtcPlaceOrderRequest,
                {"symbol": "ETHBTC", "side": ["buy"], "type": "limit", "quantity": "1", "price": "1"})

    def test_list_decoder_rejects_non_list(self):
        decode = converters.list_decoder(_Sample)

        self.assertEqual((_Sample("a"),), decode([{"name": "a"}]))
        with self.assertRaises(HitbtcConversionError):
            decode(5)
        with self.assertRaises(HitbtcConversionError):
            decode({"name": "a"})

    def test_nested_decoding_failure_raises_conversion_error(self):
        class _Holder(NamedTuple):
            samples: tuple

        converters.register_fields(
            _Holder,
            converters.FieldSpec("samples", "samples", converters.list_encoder(_Sample), converters.list_decoder(_Sample)))

        with self.assertRaises(HitbtcConversionError):
            converters.from_json_dict(_Holder, {"samples": 5})
        with self.assertRaises(HitbtcConversionError):
            converters.from_json_dict(_Holder, {"samples": [1, 2]})
