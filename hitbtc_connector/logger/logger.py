#!/usr/bin/env python

from logging import Logger as PythonLogger
from typing import Any, Dict

import ujson


class HitbtcLogger(PythonLogger):
    def __init__(self, name: str):
        super().__init__(name)

    def payload(self, level: int, msg: str, payload: Dict[str, Any], *args, **kwargs):
        """
        Logs a message followed by the JSON form of a request payload.
        """
        if self.isEnabledFor(level):
            from . import log_encoder
            self.log(level, f"{msg} {ujson.dumps(payload, default=log_encoder)}", *args, **kwargs)
