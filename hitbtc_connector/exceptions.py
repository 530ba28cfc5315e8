"""
Exceptions used in the HitBTC connector.
"""
from typing import Any, Dict


class HitbtcBaseException(Exception):
    """
    Most errors raised by the connector should inherit this class so we can
    differentiate them from errors that come from dependencies.
    """


class HitbtcInvalidArgumentError(HitbtcBaseException, ValueError):
    """
    A request parameter is outside of the range accepted by the exchange
    """


class HitbtcConversionError(HitbtcBaseException, ValueError):
    """
    A value could not be converted to or from its HitBTC wire representation
    """


class HitbtcAPIError(IOError):
    """
    Error body returned by the exchange, e.g.
    {"error": {"code": 20001, "message": "Insufficient funds", "description": "..."}}
    """
    def __init__(self, error_payload: Dict[str, Any]):
        super().__init__(str(error_payload))
        self.error_payload = error_payload

    @property
    def _error(self) -> Dict[str, Any]:
        error = self.error_payload.get("error", self.error_payload)
        return error if isinstance(error, dict) else {"message": str(error)}

    @property
    def code(self) -> int:
        return self._error.get("code", -1)

    @property
    def message(self) -> str:
        return self._error.get("message", "")

    @property
    def description(self) -> str:
        return self._error.get("description", "")
