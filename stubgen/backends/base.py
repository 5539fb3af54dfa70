"""Shared machinery for rendering GeneratedOperation records into source text.

A backend owns three things: how IR types and bindings are spelled in its
target language, the Jinja2 template that assembles one output unit, and
the formatter that turns the assembled text into its canonical form.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Sequence

import jinja2

from ..model import ArgumentBinding, GeneratedOperation, ScalarType, TypeRef

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class Backend:
    """Base class for target-language renderers."""

    name: str = ""
    unit_name: str = ""
    template_name: str = ""
    # Empty declaration placed between generated items; stripped after formatting.
    marker: str = ""
    max_line_width: int = 100
    max_blank_lines: int = 1
    indent: str = "    "

    scalar_names: dict[ScalarType, str] = {}

    def __init__(self) -> None:
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )

    # -- naming / types --------------------------------------------------

    def identifier(self, name: str) -> str:
        raise NotImplementedError

    def optional(self, inner: str) -> str:
        raise NotImplementedError

    def render_type(self, type_ref: TypeRef) -> str:
        inner = self.scalar_names[type_ref.scalar]
        return self.optional(inner) if type_ref.optional else inner

    # -- signatures ------------------------------------------------------

    def render_arguments(self, binding: ArgumentBinding) -> list[str]:
        """Spell one binding as zero or more parameter declarations."""
        raise NotImplementedError

    def render_signature(self, operation: GeneratedOperation) -> str:
        raise NotImplementedError

    def render_body(self, operation: GeneratedOperation) -> str:
        raise NotImplementedError

    def layout_signature(self, head: str, arguments: Sequence[str], tail: str) -> str:
        """One line when it fits, otherwise one argument per line."""
        single = f"{head}({', '.join(arguments)}){tail}"
        if len(single) <= self.max_line_width or not arguments:
            return single
        lines = [f"{head}("]
        lines.extend(f"{self.indent}{arg}," for arg in arguments)
        lines.append(f"){tail}")
        return "\n".join(lines)

    # -- assembly --------------------------------------------------------

    def operation_context(self, operation: GeneratedOperation) -> dict[str, Any]:
        return {
            "name": self.identifier(operation.name),
            "doc_lines": list(operation.doc_lines),
            "signature": self.render_signature(operation),
            "body": self.render_body(operation),
        }

    def render(self, operations: Sequence[GeneratedOperation]) -> str:
        """Assemble every operation into one unit, items separated by the marker."""
        template = self.env.get_template(self.template_name)
        return template.render(
            operations=[self.operation_context(op) for op in operations],
            marker=self.marker,
        )

    def format(self, text: str) -> str:
        """Trim trailing whitespace and cap runs of blank lines."""
        text = "\n".join(line.rstrip() for line in text.splitlines())
        limit = self.max_blank_lines + 1
        text = re.sub(r"\n{%d,}" % (limit + 1), "\n" * limit, text)
        return text.strip("\n") + "\n"
