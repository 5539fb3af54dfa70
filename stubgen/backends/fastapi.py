"""Python backend: FastAPI handler skeletons with keyword-only parameters."""

from __future__ import annotations

import ast
import keyword

from ..errors import FormatterError
from ..model import ArgumentBinding, BindingKind, BoundField, GeneratedOperation, ScalarType
from .base import Backend

_MARKERS = {
    BindingKind.PATH: "Path",
    BindingKind.QUERY: "Query",
    BindingKind.JSON: "Body",
    BindingKind.FORM: "Form",
}


class FastApiBackend(Backend):
    name = "fastapi"
    unit_name = "handlers.py"
    template_name = "fastapi.py.j2"
    marker = "newline = None"
    max_line_width = 88
    max_blank_lines = 2

    state_argument = "state: Annotated[ApiState, Depends(get_api_state)]"

    scalar_names = {
        ScalarType.TEXT: "str",
        ScalarType.FLOAT: "float",
        ScalarType.INTEGER: "int",
        ScalarType.BOOLEAN: "bool",
        ScalarType.PLACEHOLDER: "Any",
    }

    def identifier(self, name: str) -> str:
        if keyword.iskeyword(name):
            return f"{name}_"
        if name[:1].isdigit():
            return f"_{name}"
        return name

    def optional(self, inner: str) -> str:
        return f"Optional[{inner}]"

    def _field(self, kind: BindingKind, field: BoundField) -> str:
        ident = self.identifier(field.name)
        marker = _MARKERS[kind]
        if kind in (BindingKind.PATH, BindingKind.QUERY) and ident != field.source:
            marker = f"{marker}(alias={field.source!r})"
        else:
            marker = f"{marker}()"
        declaration = f"{ident}: Annotated[{self.render_type(field.type)}, {marker}]"
        if field.type.optional:
            declaration += " = None"
        return declaration

    def render_arguments(self, binding: ArgumentBinding) -> list[str]:
        if binding.kind is BindingKind.STATE:
            return [self.state_argument]
        return [self._field(binding.kind, f) for f in binding.fields]

    def render_signature(self, operation: GeneratedOperation) -> str:
        arguments: list[str] = []
        for binding in operation.arguments:
            rendered = self.render_arguments(binding)
            if binding.kind is not BindingKind.STATE and "*" not in arguments:
                # Keyword-only, so optional parameters may precede required ones.
                arguments.append("*")
            arguments.extend(rendered)
        asyncness = "async " if operation.is_async else ""
        head = f"{asyncness}def {self.identifier(operation.name)}"
        return self.layout_signature(head, arguments, " -> Any:")

    def render_body(self, operation: GeneratedOperation) -> str:
        return "raise NotImplementedError"

    def operation_context(self, operation: GeneratedOperation) -> dict:
        context = super().operation_context(operation)
        doc_lines = [
            line.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
            for line in operation.doc_lines
        ]
        # A one-line docstring closes right after its text.
        if doc_lines[-1].endswith('"'):
            doc_lines[-1] = doc_lines[-1][:-1] + '\\"'
        context["doc_lines"] = doc_lines
        return context

    def format(self, text: str) -> str:
        text = super().format(text)
        try:
            ast.parse(text)
        except SyntaxError as exc:
            raise FormatterError(f"generated {self.unit_name} is not valid Python: {exc}") from exc
        return text
