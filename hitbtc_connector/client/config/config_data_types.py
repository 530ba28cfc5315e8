from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

KNOWN_CONNECTORS = ["hitbtc"]


class BaseClientModel(BaseModel):
    model_config = ConfigDict(validate_assignment=True, title=None, extra="forbid")

    def is_required(self, attr: str) -> bool:
        field = self.__class__.model_fields[attr]
        return field.is_required()

    def is_secure(self, attr: str) -> bool:
        extra = self.__class__.model_fields[attr].json_schema_extra or {}
        return bool(extra.get("is_secure", False))

    def connect_keys(self) -> List[str]:
        return [
            attr for attr, field in self.__class__.model_fields.items()
            if (field.json_schema_extra or {}).get("is_connect_key", False)
        ]

    def secret_values(self) -> Dict[str, Any]:
        """
        Returns the connect keys with their secrets revealed, as expected by the exchange auth layer.
        """
        values = {}
        for attr in self.connect_keys():
            value = getattr(self, attr)
            values[attr] = value.get_secret_value() if isinstance(value, SecretStr) else value
        return values


class BaseConnectorConfigMap(BaseClientModel):
    connector: str = Field(
        default=...,
        json_schema_extra={
            "prompt": "What is your connector?",
            "prompt_on_new": True,
        },
    )

    @field_validator("connector", mode="before")
    @classmethod
    def validate_connector(cls, v: str):
        if v not in KNOWN_CONNECTORS:
            raise ValueError(f"Invalid connector. {v} does not exist.")
        return v
