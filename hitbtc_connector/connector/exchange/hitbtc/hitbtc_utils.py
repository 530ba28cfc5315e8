import os
import platform
import re
from hashlib import md5
from typing import Optional, Tuple

from dateutil.parser import parse as dateparse
from pydantic import ConfigDict, Field, SecretStr

from hitbtc_connector.client.config.config_data_types import BaseConnectorConfigMap
from hitbtc_connector.connector.exchange.hitbtc.hitbtc_constants import Constants
from hitbtc_connector.core.utils.tracking_nonce import get_tracking_nonce

TRADING_PAIR_SPLITTER = re.compile(Constants.TRADING_PAIR_SPLITTER)


# convert date string to timestamp
def str_date_to_ts(date: str) -> int:
    return int(dateparse(date).timestamp())


def split_trading_pair(trading_pair: str) -> Optional[Tuple[str, str]]:
    m = TRADING_PAIR_SPLITTER.match(trading_pair)
    if m is None:
        return None
    return m.group(1), m.group(2)


def convert_from_exchange_trading_pair(ex_trading_pair: str) -> Optional[str]:
    regex_match = split_trading_pair(ex_trading_pair)
    if regex_match is None:
        return None
    # HitBTC uses uppercase without separator (BTCUSD)
    base_asset, quote_asset = regex_match
    return f"{base_asset.upper()}-{quote_asset.upper()}"


def convert_to_exchange_trading_pair(hb_trading_pair: str) -> str:
    return hb_trading_pair.replace("-", "").upper()


def _client_instance_id() -> str:
    return md5(f"{platform.uname()}_pid:{os.getpid()}_ppid:{os.getppid()}".encode("utf-8")).hexdigest()


def get_new_client_order_id(is_buy: bool,
                            trading_pair: str,
                            hbot_order_id_prefix: str = Constants.HBOT_BROKER_ID,
                            max_id_len: Optional[int] = Constants.MAX_ORDER_ID_LEN) -> str:
    """
    Creates a client order id for a new order
    :param is_buy: True if the order is a buy order, False otherwise
    :param trading_pair: the trading pair the order will be operating with, e.g. ETH-BTC
    :param hbot_order_id_prefix: the prefix the exchange uses to attribute orders to the broker
    :param max_id_len: the maximum length accepted by the exchange, None for no limit
    :return: an identifier for the new order to be used in the client
    """
    side = "B" if is_buy else "S"
    base, quote = trading_pair.upper().split("-")
    id_prefix = f"{hbot_order_id_prefix}{side}{base[0]}{base[-1]}{quote[0]}{quote[-1]}"
    ts_hex = hex(get_tracking_nonce())[2:]
    client_instance_id = _client_instance_id()
    client_order_id = f"{id_prefix}{ts_hex}{client_instance_id}"

    if max_id_len is not None and len(client_order_id) > max_id_len:
        suffix_max_length = max_id_len - len(id_prefix)
        if suffix_max_length < len(ts_hex):
            id_suffix = md5(f"{ts_hex}{client_instance_id}".encode()).hexdigest()
            client_order_id = f"{id_prefix}{id_suffix[:suffix_max_length]}"
        else:
            client_order_id = client_order_id[:max_id_len]
    return client_order_id


class HitbtcConfigMap(BaseConnectorConfigMap):
    connector: str = "hitbtc"
    hitbtc_api_key: SecretStr = Field(
        default=...,
        json_schema_extra={
            "prompt": f"Enter your {Constants.EXCHANGE_NAME} API key",
            "is_secure": True,
            "is_connect_key": True,
            "prompt_on_new": True,
        }
    )
    hitbtc_secret_key: SecretStr = Field(
        default=...,
        json_schema_extra={
            "prompt": f"Enter your {Constants.EXCHANGE_NAME} secret key",
            "is_secure": True,
            "is_connect_key": True,
            "prompt_on_new": True,
        }
    )
    model_config = ConfigDict(title="hitbtc")


KEYS = HitbtcConfigMap.model_construct()
