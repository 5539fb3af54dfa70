"""Rust backend: axum handler skeletons.

  State(state): State<ApiState>
  Path((id,)): Path<(i64,)>
  Query(limit): Query<Option<i64>>
  Json(request): Json<TODO>
"""

from __future__ import annotations

from ..model import ArgumentBinding, BindingKind, GeneratedOperation, ScalarType
from .base import Backend

_RUST_KEYWORDS = {
    "as", "async", "await", "break", "const", "continue", "dyn", "else", "enum",
    "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop", "match",
    "mod", "move", "mut", "pub", "ref", "return", "static", "struct", "trait",
    "true", "type", "unsafe", "use", "where", "while", "abstract", "become",
    "box", "do", "final", "macro", "override", "priv", "try", "typeof",
    "unsized", "virtual", "yield",
}

# Keywords that cannot be written as raw identifiers.
_NON_RAW_KEYWORDS = {"crate", "self", "super"}

_EXTRACTORS = {
    BindingKind.QUERY: "Query",
    BindingKind.JSON: "Json",
    BindingKind.FORM: "Form",
}


class AxumBackend(Backend):
    name = "axum"
    unit_name = "handlers.rs"
    template_name = "axum.rs.j2"
    marker = "type newline = ();"
    max_line_width = 100
    max_blank_lines = 1

    state_type = "ApiState"
    placeholder = "TODO"

    scalar_names = {
        ScalarType.TEXT: "String",
        ScalarType.FLOAT: "f64",
        ScalarType.INTEGER: "i64",
        ScalarType.BOOLEAN: "bool",
        ScalarType.PLACEHOLDER: placeholder,
    }

    def identifier(self, name: str) -> str:
        if name in _NON_RAW_KEYWORDS:
            return f"{name}_"
        if name in _RUST_KEYWORDS:
            return f"r#{name}"
        if name[:1].isdigit():
            return f"_{name}"
        return name

    def optional(self, inner: str) -> str:
        return f"Option<{inner}>"

    @staticmethod
    def _tuple(items: list[str]) -> str:
        if len(items) == 1:
            return f"({items[0]},)"
        return f"({', '.join(items)})"

    def render_arguments(self, binding: ArgumentBinding) -> list[str]:
        if binding.kind is BindingKind.STATE:
            return [f"State(state): State<{self.state_type}>"]
        if binding.kind is BindingKind.PATH:
            names = self._tuple([self.identifier(f.name) for f in binding.fields])
            types = self._tuple([self.render_type(f.type) for f in binding.fields])
            return [f"Path({names}): Path<{types}>"]

        extractor = _EXTRACTORS[binding.kind]
        return [
            f"{extractor}({self.identifier(f.name)}): {extractor}<{self.render_type(f.type)}>"
            for f in binding.fields
        ]

    def render_signature(self, operation: GeneratedOperation) -> str:
        arguments = [a for b in operation.arguments for a in self.render_arguments(b)]
        asyncness = "async " if operation.is_async else ""
        returns = (
            f" -> Result<{self.render_type(operation.returns.success)}, "
            f"{self.render_type(operation.returns.error)}>"
        )
        head = f"pub {asyncness}fn {self.identifier(operation.name)}"
        return self.layout_signature(head, arguments, returns)

    def render_body(self, operation: GeneratedOperation) -> str:
        return "todo!();"
