"""Message file decoding for Bundle.

Turns the bytes of a message file into message templates and the language
tag they belong to. The file format is taken from the path suffix and
dispatched to a registered unmarshal function; JSON, TOML and YAML are
registered by default.

A message file maps message ids to either a string (the "other" form) or a
mapping of plural category names to strings:

    {
        "HelloWorld": "Hello World!",
        "Cats": {"description": "Cat count", "one": "1 cat", "other": "{{Count}} cats"}
    }

Components:
    default_unmarshalers - Built-in format registry
    parse_format - Format suffix of a path
    parse_raw_messages - Validate unmarshaled data into MessageTemplates
    decode_message_file - Full pipeline from bytes to (tag, templates)
    FallbackInfo - Immutable record of a language fallback event

Python 3.13+. External dependency: PyYAML (YAML message files).
"""

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass

import yaml

from i18nbundle.diagnostics import ErrorTemplate, MessageFileError, UnsupportedFormatError
from i18nbundle.locale_utils import extract_language_tag
from i18nbundle.runtime.message import MessageTemplate

from .types import LanguageTag, MessageId, UnmarshalFunc

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unmarshalers
    "default_unmarshalers",
    # Decoding
    "parse_format",
    "parse_raw_messages",
    "decode_message_file",
    # Fallback observability
    "FallbackInfo",
]

logger = logging.getLogger(__name__)


def _unmarshal_json(buf: bytes) -> object:
    return json.loads(buf)


def _unmarshal_toml(buf: bytes) -> object:
    return tomllib.loads(buf.decode("utf-8"))


def _unmarshal_yaml(buf: bytes) -> object:
    return yaml.safe_load(buf)


def default_unmarshalers() -> dict[str, UnmarshalFunc]:
    """Return a fresh registry of the built-in unmarshal functions.

    Returns:
        Mapping of format suffix to unmarshal function for json, toml,
        yaml and yml
    """
    return {
        "json": _unmarshal_json,
        "toml": _unmarshal_toml,
        "yaml": _unmarshal_yaml,
        "yml": _unmarshal_yaml,
    }


def parse_format(path: str) -> str:
    """Return the file format of a path.

    The format is everything after the last "." of the last path component,
    or "" when that component has no ".".

    Example:
        >>> parse_format("locales/active.en-US.json")
        'json'
        >>> parse_format("locales.d/README")
        ''
    """
    name = os.path.basename(path)
    _, dot, file_format = name.rpartition(".")
    return file_format if dot else ""


def _message_data(path: str, message_id: object, value: object) -> dict[str, str]:
    """Validate one raw message value into category -> text data."""
    if isinstance(value, str):
        return {"other": value}
    if not isinstance(value, Mapping):
        reason = f"message {message_id!r} has invalid value {value!r}"
        raise MessageFileError(
            ErrorTemplate.message_file_invalid(path, reason, message_id=str(message_id))
        )
    data: dict[str, str] = {}
    for key, text in value.items():
        if not isinstance(key, str):
            reason = f"[{message_id}] has a non-string key {key!r}"
            raise MessageFileError(
                ErrorTemplate.message_file_invalid(path, reason, message_id=str(message_id))
            )
        if not isinstance(text, str):
            reason = f"[{message_id}][{key}] has a non-string value {text!r}"
            raise MessageFileError(
                ErrorTemplate.message_file_invalid(path, reason, message_id=str(message_id))
            )
        data[key] = text
    return data


def parse_raw_messages(raw: object, path: str) -> list[MessageTemplate]:
    """Validate unmarshaled message file data into MessageTemplates.

    Args:
        raw: Value returned by an unmarshal function
        path: Path of the message file (used in errors)

    Returns:
        MessageTemplates in file order

    Raises:
        MessageFileError: If the data does not have the message file shape
        UnknownPluralCategoryError: If a message uses an unknown category key
        TemplateSyntaxError: If a template fails to compile
    """
    if raw is None:
        return []
    if not isinstance(raw, Mapping):
        reason = f"expected a mapping of message ids, got {type(raw).__name__}"
        raise MessageFileError(ErrorTemplate.message_file_invalid(path, reason))

    templates: list[MessageTemplate] = []
    for message_id, value in raw.items():
        if not isinstance(message_id, str):
            reason = f"message id {message_id!r} is not a string"
            raise MessageFileError(ErrorTemplate.message_file_invalid(path, reason))
        data = _message_data(path, message_id, value)
        templates.append(MessageTemplate.from_mapping(message_id, data))
    return templates


def decode_message_file(
    buf: bytes,
    path: str,
    unmarshalers: Mapping[str, UnmarshalFunc],
) -> tuple[LanguageTag, list[MessageTemplate]]:
    """Decode message file bytes into a language tag and its templates.

    Args:
        buf: File contents (must not be empty)
        path: File path; supplies the format and the language tag
        unmarshalers: Registry of format suffix to unmarshal function

    Returns:
        Tuple of (language tag as written in the path, templates)

    Raises:
        UnsupportedFormatError: If no unmarshaler handles the format
        MessageFileError: If decoding fails or the data has the wrong shape
        NoLanguageTagError: If the path contains no language tag
    """
    file_format = parse_format(path)
    unmarshal = unmarshalers.get(file_format)
    if unmarshal is None:
        raise UnsupportedFormatError(ErrorTemplate.unsupported_format(file_format, path))

    try:
        raw = unmarshal(buf)
    except (ValueError, yaml.YAMLError) as e:
        reason = f"cannot decode {file_format}: {e}"
        raise MessageFileError(ErrorTemplate.message_file_invalid(path, reason)) from e

    templates = parse_raw_messages(raw, path)
    language_tag = extract_language_tag(path[: len(path) - len(file_format)])
    return language_tag, templates


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a language fallback event.

    Provided to the on_fallback callback when a Localizer resolves a message
    from a language other than its first preference, or from the default
    message.

    Attributes:
        requested_language: The first language tag in the chain ("" if empty)
        resolved_language: The language tag whose content was rendered
        message_id: The message identifier that was resolved
        from_default: True if the default message content was rendered

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_id} resolved from "
        ...           f"{info.resolved_language} (requested {info.requested_language})")
        >>> localizer = Localizer(bundle, "lv, en", on_fallback=log_fallback)
    """

    requested_language: LanguageTag
    resolved_language: LanguageTag
    message_id: MessageId
    from_default: bool = False
