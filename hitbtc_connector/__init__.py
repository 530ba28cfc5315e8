import logging
from os.path import join, realpath

from hitbtc_connector.logger import HitbtcLogger

logging.setLoggerClass(HitbtcLogger)


def version() -> str:
    with open(realpath(join(__file__, "../VERSION"))) as fd:
        return fd.read().strip()
