"""Parsing of the comma-delimited validator lists sent by dashboard clients."""

from __future__ import annotations

from .errors import MalformedIdentifier, TooManyIdentifiers

MAX_IDENTIFIER = 2**64 - 1
DELIMITER = ","


def parse_identifiers(raw: str, limit: int) -> tuple[int, ...]:
    """Return the unique validator indices in ``raw`` in first-seen order.

    The token count is checked against ``limit`` before de-duplication, so
    ``"1,1,1"`` counts as three validators. Any token that is not a base-10
    unsigned 64-bit integer rejects the whole list.
    """

    if raw == "":
        return ()

    tokens = raw.split(DELIMITER)
    if len(tokens) > limit:
        raise TooManyIdentifiers(len(tokens), limit)

    seen: set[int] = set()
    identifiers: list[int] = []
    for token in tokens:
        value = _parse_token(token)
        if value in seen:
            continue
        seen.add(value)
        identifiers.append(value)
    return tuple(identifiers)


def _parse_token(token: str) -> int:
    # int() accepts whitespace, signs and underscores; the wire format does not.
    if not token or not token.isascii() or not token.isdigit():
        raise MalformedIdentifier(token)
    value = int(token)
    if value > MAX_IDENTIFIER:
        raise MalformedIdentifier(token)
    return value


__all__ = ["parse_identifiers", "MAX_IDENTIFIER"]
