# A single source of truth for constant variables related to the exchange
class Constants:
    EXCHANGE_NAME = "hitbtc"
    REST_URL = "https://api.hitbtc.com/api/2"

    HBOT_BROKER_ID = "refzzz48"
    # clientOrderId accepted by the exchange is at most 32 characters long
    MAX_ORDER_ID_LEN = 32

    ENDPOINT = {
        # Public Endpoints
        "ORDER_BOOK_SINGLE": "public/orderbook/{symbol}",
        # Private Endpoints
        "ORDER_CREATE": "order",
        "ORDERS_HISTORY": "history/order",
    }

    # History filter bounds
    HISTORY_DEFAULT_LIMIT = 100
    HISTORY_MAX_LIMIT = 1000
    HISTORY_DEFAULT_OFFSET = 0
    HISTORY_MAX_OFFSET = 100000

    # Trading pair splitter regex
    TRADING_PAIR_SPLITTER = r"^(\w+?)(BTC|BCH|DAI|DDRST|EOSDT|EOS|ETH|EURS|HIT|IDRT|PAX|BUSD|GUSD|TUSD|USDC|USDT|USD)$"
