"""IRC line decoding."""

from __future__ import annotations

from .models import DecodedMessage


def _token(tokens: list[str], index: int) -> str:
    return tokens[index] if index < len(tokens) else ""


def parse_line(line: str) -> DecodedMessage:
    """Split a raw server line into command, sender, channel and message.

    Two space-separated tokens are read as a keep-alive probe
    (``PING :server``); anything else as ``:sender COMMAND #channel :text``.
    Never raises: missing tokens come back as empty strings.

    The first character of the sender (probe) and of the rejoined trailing
    text is always dropped, whether or not it is the ':' sentinel.
    """
    tokens = line.split(" ")

    if len(tokens) == 2:
        return DecodedMessage(command=tokens[0], sender=tokens[1][1:])

    return DecodedMessage(
        command=_token(tokens, 1),
        channel=_token(tokens, 2),
        message=" ".join(tokens[3:])[1:],
    )
