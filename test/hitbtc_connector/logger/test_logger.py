import logging
import unittest
from decimal import Decimal

from hitbtc_connector.connector.exchange.hitbtc.hitbtc_enums import HitbtcTradeSide
from hitbtc_connector.logger import HitbtcLogger, log_encoder


class HitbtcLoggerTests(unittest.TestCase):
    level = 0

    def setUp(self) -> None:
        super().setUp()
        self.log_records = []
        self.logger = logging.getLogger("hitbtc_connector.test_logger")
        self.logger.setLevel(1)
        self.logger.addHandler(self)

    def tearDown(self) -> None:
        self.logger.removeHandler(self)
        super().tearDown()

    def handle(self, record):
        self.log_records.append(record)

    def test_package_loggers_are_hitbtc_loggers(self):
        self.assertIsInstance(self.logger, HitbtcLogger)

    def test_payload_log(self):
        self.logger.payload(logging.INFO, "Placing order", {"side": "buy", "quantity": "1"})

        self.assertEqual(1, len(self.log_records))
        self.assertEqual("INFO", self.log_records[0].levelname)
        self.assertTrue(self.log_records[0].getMessage().startswith("Placing order {"))
        self.assertIn('"side":"buy"', self.log_records[0].getMessage())

    def test_payload_log_below_level_is_skipped(self):
        self.logger.setLevel(logging.WARNING)

        self.logger.payload(logging.DEBUG, "Placing order", {"side": "buy"})

        self.assertEqual(0, len(self.log_records))

    def test_log_encoder(self):
        self.assertEqual("1.5", log_encoder(Decimal("1.5")))
        self.assertEqual("BUY", log_encoder(HitbtcTradeSide.BUY))
        with self.assertRaises(TypeError):
            log_encoder(object())
