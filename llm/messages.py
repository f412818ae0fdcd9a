"""Turn (instructions, input) pairs into role-tagged conversation turns.

Input is normally plain text and becomes a single user turn. A flow can opt in
to multi-turn conversations by shaping its input as a JSON object::

    {"messages": [{"role": "system", "content": "..."},
                  {"role": "user", "content": "..."},
                  {"role": "assistant", "content": "..."}]}

Such payloads are expanded turn by turn. Anything that does not decode to at
least one message falls back to plain text; decoding never raises.
"""

import json
from dataclasses import dataclass

from llm.models import ConversationTurn, Role

# Roles not listed here (including "user") become user turns.
_ROLE_MAP = {
    "system": Role.SYSTEM,
    "assistant": Role.ASSISTANT,
}


@dataclass(frozen=True)
class StructuredInput:
    """Input that decoded to one or more (role, content) messages."""

    messages: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class PlainTextInput:
    """Input to be sent verbatim as a single user turn."""

    text: str


ParsedInput = StructuredInput | PlainTextInput


def _decode_message(entry: object) -> tuple[str, str] | None:
    """Decode one messages[] entry; None means the payload has the wrong shape."""
    if entry is None:
        return "", ""
    if not isinstance(entry, dict):
        return None
    role = entry.get("role")
    content = entry.get("content")
    if role is not None and not isinstance(role, str):
        return None
    if content is not None and not isinstance(content, str):
        return None
    return role or "", content or ""


def decode_structured_input(input_text: str) -> ParsedInput:
    """Classify input as a structured multi-turn payload or plain text."""
    trimmed = input_text.strip()
    if not trimmed.startswith("{"):
        return PlainTextInput(input_text)

    try:
        payload = json.loads(trimmed)
    except (ValueError, RecursionError):
        return PlainTextInput(input_text)

    if not isinstance(payload, dict):
        return PlainTextInput(input_text)
    raw_messages = payload.get("messages")
    if not isinstance(raw_messages, list) or not raw_messages:
        return PlainTextInput(input_text)

    messages = []
    for entry in raw_messages:
        decoded = _decode_message(entry)
        if decoded is None:
            return PlainTextInput(input_text)
        messages.append(decoded)
    return StructuredInput(tuple(messages))


def role_for(name: str) -> Role:
    """Map a payload role name onto the closed Role set."""
    return _ROLE_MAP.get(name, Role.USER)


def build_messages(instructions: str, input_text: str) -> list[ConversationTurn]:
    """Build the ordered turn sequence for one completion call."""
    turns: list[ConversationTurn] = []

    if instructions.strip():
        turns.append(ConversationTurn(Role.SYSTEM, instructions))

    parsed = decode_structured_input(input_text)
    if isinstance(parsed, StructuredInput):
        for role, content in parsed.messages:
            turns.append(ConversationTurn(role_for(role), content))
    elif parsed.text.strip():
        turns.append(ConversationTurn(Role.USER, parsed.text))

    return turns
