from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    IRC_DEFAULT_ENCODING,
    IRC_DEFAULT_HOST,
    IRC_DEFAULT_PORT,
    IRC_IDLE_TIMEOUT,
)


class BotConfig(BaseModel):
    """Static configuration for one bot connection.

    Attributes:
        host: IRC server hostname.
        port: IRC server port.
        nickname: Nickname used for registration.
        realname: Real name sent in the USER directive.
        prefix: Character that marks a chat message as a bot command.
        channel: Channel to join, without the leading '#'.
        timeout: Idle timeout in seconds before a timeout event is reported.
        encoding: Text encoding for the wire.
    """

    model_config = ConfigDict(frozen=True)

    host: str = IRC_DEFAULT_HOST
    port: int = Field(default=IRC_DEFAULT_PORT, ge=1, le=65535)
    nickname: str = Field(min_length=1)
    realname: str = ""
    prefix: str = Field(default="!", min_length=1, max_length=1)
    channel: str = Field(min_length=1)
    timeout: float = Field(default=IRC_IDLE_TIMEOUT, gt=0)
    encoding: str = IRC_DEFAULT_ENCODING

    @field_validator("channel", mode="before")
    @classmethod
    def validate_channel(cls, v: Any) -> str:
        """Strip whitespace and any leading '#'; the connection adds it back."""
        if not isinstance(v, str):
            raise ValueError("channel must be a string")
        return v.strip().lstrip("#")

    @field_validator("nickname", mode="before")
    @classmethod
    def validate_nickname(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("nickname must be a string")
        return v.strip()

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        """Create a BotConfig from a plain dictionary.

        Args:
            data: Dictionary containing configuration data.

        Returns:
            BotConfig instance.
        """
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
