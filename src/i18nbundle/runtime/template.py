"""Message text templates with named field substitution.

Template text contains placeholders of the form ``{{Name}}``. The leading
dot form ``{{.Name}}`` and dotted paths into nested values
(``{{Person.Name}}``) are accepted. Whitespace inside the braces is
ignored. There are no conditionals, loops or filters.

Rendering never fails: a missing field, or a field whose value is None,
renders as empty text.

Python 3.13+. Zero external dependencies.
"""

import dataclasses
import re
from collections.abc import Mapping
from dataclasses import dataclass

from i18nbundle.diagnostics import ErrorTemplate, InvalidInvocationError, TemplateSyntaxError

__all__ = ["CompiledTemplate", "template_fields"]

_OPEN = "{{"
_CLOSE = "}}"

_FIELD_PATH_PATTERN = re.compile(r"\.?([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)")

type TemplatePart = str | tuple[str, ...]


def template_fields(data: object) -> dict[str, object]:
    """Project caller data into a template field mapping.

    Projection is one level deep: nested values are kept as they are and
    reached through dotted placeholders.

    Accepted data:
        - None (no fields)
        - any Mapping
        - an object with a ``template_fields()`` method returning a Mapping
        - a dataclass instance (public fields)
        - a named tuple

    Args:
        data: Caller-supplied substitution data

    Returns:
        A new dict of field name to value

    Raises:
        InvalidInvocationError: For any other kind of data
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    provider = getattr(data, "template_fields", None)
    if callable(provider):
        return dict(provider())
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {
            field.name: getattr(data, field.name)
            for field in dataclasses.fields(data)
            if not field.name.startswith("_")
        }
    if isinstance(data, tuple) and hasattr(data, "_asdict"):
        return dict(data._asdict())
    reason = (
        f"data must be a mapping, dataclass, named tuple or define template_fields(), "
        f"not {type(data).__name__}"
    )
    raise InvalidInvocationError(
        ErrorTemplate.invalid_invocation("template_fields", (data,), reason)
    )


def _lookup(fields: Mapping[str, object], path: tuple[str, ...]) -> object:
    value: object = fields.get(path[0])
    for name in path[1:]:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(name)
        else:
            value = getattr(value, name, None)
    return value


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Template text split into literal text and field paths.

    Attributes:
        source: Original template text
        parts: Literal strings and field paths, in order
    """

    source: str
    parts: tuple[TemplatePart, ...]

    @classmethod
    def compile(cls, source: str) -> "CompiledTemplate":
        """Compile template text.

        Args:
            source: Template text

        Returns:
            CompiledTemplate

        Raises:
            TemplateSyntaxError: If a placeholder is unterminated or is not
                a field path

        Example:
            >>> CompiledTemplate.compile("Hello {{Name}}!").parts
            ('Hello ', ('Name',), '!')
        """
        parts: list[TemplatePart] = []
        pos = 0
        while (start := source.find(_OPEN, pos)) != -1:
            end = source.find(_CLOSE, start + len(_OPEN))
            if end == -1:
                raise TemplateSyntaxError(
                    ErrorTemplate.template_syntax(source, start, "unterminated placeholder"),
                    position=start,
                )
            inner = source[start + len(_OPEN) : end].strip()
            match = _FIELD_PATH_PATTERN.fullmatch(inner)
            if match is None:
                reason = f"invalid field reference {inner!r}"
                raise TemplateSyntaxError(
                    ErrorTemplate.template_syntax(source, start, reason), position=start
                )
            if start > pos:
                parts.append(source[pos:start])
            parts.append(tuple(match.group(1).split(".")))
            pos = end + len(_CLOSE)
        if pos < len(source):
            parts.append(source[pos:])
        return cls(source=source, parts=tuple(parts))

    @property
    def field_names(self) -> frozenset[str]:
        """Top-level field names referenced by the template."""
        return frozenset(part[0] for part in self.parts if isinstance(part, tuple))

    def render(self, fields: Mapping[str, object] | None = None) -> str:
        """Substitute fields into the template.

        Args:
            fields: Field name to value mapping

        Returns:
            Rendered text; missing or None fields render as ""
        """
        if fields is None:
            fields = {}
        chunks: list[str] = []
        for part in self.parts:
            if isinstance(part, str):
                chunks.append(part)
                continue
            value = _lookup(fields, part)
            if value is not None:
                chunks.append(str(value))
        return "".join(chunks)

    def __str__(self) -> str:
        return self.source
