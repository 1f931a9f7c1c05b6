"""Editor host contract and an in-memory host implementation.

The highlighting core only talks to the editor through :class:`EditorHost`.
:class:`MemoryHost` implements it without an editor, for the CLI preview and
for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, TypedDict

from .exceptions import HostMutationError, HostQueryError

BackgroundPreference = Literal["dark", "light"]


class StyleAttrs(TypedDict, total=False):
    """Attributes of a named style.

    Attributes:
        background: Background color, as '#rrggbb' or a 24-bit integer
        overridable: True when the definition yields to an explicit user definition
    """

    background: str | int
    overridable: bool


class MarkOptions(TypedDict):
    """Options for a full-line background mark."""

    style_name: str
    priority: int


class EditorHost(Protocol):
    """Capabilities the highlighting core requires from the editor."""

    def get_style(self, name: str) -> StyleAttrs:
        """Return the resolved attributes of a named style (empty if unset)."""
        ...

    def get_global_background(self) -> BackgroundPreference:
        """Return the editor-wide light/dark preference."""
        ...

    def define_style(self, name: str, attrs: StyleAttrs) -> None:
        """Create or replace a named style."""
        ...

    def create_namespace(self, tag: str) -> int:
        """Return the marking namespace for a tag, creating it on first use."""
        ...

    def mark_line_range(
        self,
        buffer: int,
        namespace: int,
        start_line: int,
        end_line: int,
        opts: MarkOptions,
    ) -> None:
        """Paint a full-line background over 0-based lines [start_line, end_line)."""
        ...

    def clear_namespace(self, buffer: int, namespace: int) -> None:
        """Remove every mark of a namespace from a buffer."""
        ...

    def warn(self, message: str) -> None:
        """Show a non-fatal notification to the user."""
        ...


@dataclass(frozen=True, slots=True)
class LineMark:
    """A full-line background mark stored by :class:`MemoryHost`."""

    namespace: int
    start_line: int
    end_line: int
    style_name: str
    priority: int


@dataclass
class MemoryHost:
    """In-memory :class:`EditorHost` recording every mutation.

    Buffers must be registered with :meth:`add_buffer` before they can be
    marked. Marks reaching past the end of a buffer are clipped rather than
    rejected.
    """

    background: BackgroundPreference = "dark"
    styles: dict[str, StyleAttrs] = field(default_factory=dict)
    define_calls: list[tuple[str, StyleAttrs]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    marks: dict[int, list[LineMark]] = field(default_factory=dict)
    line_counts: dict[int, int] = field(default_factory=dict)
    namespaces: dict[str, int] = field(default_factory=dict)

    def add_buffer(self, buffer: int, line_count: int) -> None:
        """Register a buffer holding ``line_count`` lines."""
        self.line_counts[buffer] = line_count
        self.marks.setdefault(buffer, [])

    def set_user_style(self, name: str, background: str | int | None) -> None:
        """Set a style the way a colorscheme or user would (not overridable)."""
        if background is None:
            self.styles[name] = {}
        else:
            self.styles[name] = {"background": background, "overridable": False}

    def get_style(self, name: str) -> StyleAttrs:
        return StyleAttrs(**self.styles.get(name, {}))

    def get_global_background(self) -> BackgroundPreference:
        return self.background

    def define_style(self, name: str, attrs: StyleAttrs) -> None:
        self.define_calls.append((name, StyleAttrs(**attrs)))
        existing = self.styles.get(name)
        if (
            attrs.get("overridable")
            and existing is not None
            and existing.get("overridable") is False
        ):
            # Explicit user definitions win over default ones
            return
        self.styles[name] = StyleAttrs(**attrs)

    def create_namespace(self, tag: str) -> int:
        if not tag:
            raise HostQueryError("Namespace tag must not be empty")
        return self.namespaces.setdefault(tag, len(self.namespaces) + 1)

    def mark_line_range(
        self,
        buffer: int,
        namespace: int,
        start_line: int,
        end_line: int,
        opts: MarkOptions,
    ) -> None:
        if buffer not in self.line_counts:
            raise HostMutationError(f"Invalid buffer: {buffer}")
        line_count = self.line_counts[buffer]
        if start_line < 0 or start_line >= line_count:
            raise HostMutationError(
                f"Start line {start_line} outside buffer {buffer} ({line_count} lines)"
            )
        self.marks[buffer].append(
            LineMark(
                namespace=namespace,
                start_line=start_line,
                end_line=min(end_line, line_count),
                style_name=opts["style_name"],
                priority=opts["priority"],
            )
        )

    def clear_namespace(self, buffer: int, namespace: int) -> None:
        if buffer not in self.line_counts:
            raise HostMutationError(f"Invalid buffer: {buffer}")
        self.marks[buffer] = [m for m in self.marks[buffer] if m.namespace != namespace]

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def line_styles(self, buffer: int) -> list[str | None]:
        """Return the winning style name for every line of a buffer.

        The highest-priority mark wins; among equal priorities the latest one does.
        """
        result: list[str | None] = [None] * self.line_counts.get(buffer, 0)
        best: list[int] = [-1] * len(result)
        for mark in self.marks.get(buffer, []):
            for line in range(mark.start_line, mark.end_line):
                if mark.priority >= best[line]:
                    best[line] = mark.priority
                    result[line] = mark.style_name
        return result
