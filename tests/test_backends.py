"""Tests for backend rendering and unit emission."""

import ast

import pytest

from stubgen.backends import BACKENDS, DEFAULT_BACKEND, get_backend
from stubgen.backends.axum import AxumBackend
from stubgen.backends.fastapi import FastApiBackend
from stubgen.emitter import emit, strip_marker
from stubgen.engine import build_registry
from stubgen.errors import FormatterError, UnknownBackendError
from stubgen.model import (
    ApiDocument,
    ArgumentBinding,
    BindingKind,
    BoundField,
    GeneratedOperation,
    ScalarType,
    TypeRef,
)

_PATHS = {
    "/users/{id}": {
        "parameters": [
            {"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}},
        ],
        "get": {
            "operationId": "getUser",
            "summary": "Fetch one user",
            "parameters": [{"name": "verbose", "in": "query", "schema": {"type": "boolean"}}],
        },
        "delete": {"operationId": "deleteUser"},
    },
    "/health": {"get": {"operationId": "health"}},
}

_EXPECTED_RUST = """\
use axum::extract::{Form, Json, Path, Query, State};

/// [DELETE] /users/{id}
pub async fn delete_user(
    State(state): State<ApiState>,
    Path((id,)): Path<(i64,)>,
) -> Result<TODO, TODO> {
    todo!();
}

/// [GET] /users/{id}
/// Fetch one user
pub async fn get_user(
    State(state): State<ApiState>,
    Path((id,)): Path<(i64,)>,
    Query(verbose): Query<Option<bool>>,
) -> Result<TODO, TODO> {
    todo!();
}

/// [GET] /health
pub async fn health(State(state): State<ApiState>) -> Result<TODO, TODO> {
    todo!();
}
"""


@pytest.fixture
def registry(make_spec):
    return build_registry(ApiDocument.from_dict(make_spec(_PATHS)))


def _field(name, scalar=ScalarType.TEXT, optional=False, source=None):
    return BoundField(name, TypeRef(scalar, optional), source or name)


class TestGetBackend:

    def test_default_is_axum(self):
        assert DEFAULT_BACKEND == "axum"
        assert isinstance(get_backend(DEFAULT_BACKEND), AxumBackend)

    def test_all_registered(self):
        assert set(BACKENDS) == {"axum", "fastapi"}

    def test_unknown(self):
        with pytest.raises(UnknownBackendError, match="cobol"):
            get_backend("cobol")


class TestAxumBackend:

    def setup_method(self):
        self.backend = AxumBackend()

    def test_full_unit(self, registry):
        assert emit(registry, self.backend) == {"handlers.rs": _EXPECTED_RUST}

    def test_marker_stripped(self, registry):
        text = emit(registry, self.backend)["handlers.rs"]
        assert self.backend.marker not in text

    def test_scalar_types(self):
        assert self.backend.render_type(TypeRef(ScalarType.TEXT)) == "String"
        assert self.backend.render_type(TypeRef(ScalarType.FLOAT)) == "f64"
        assert self.backend.render_type(TypeRef(ScalarType.INTEGER)) == "i64"
        assert self.backend.render_type(TypeRef(ScalarType.BOOLEAN)) == "bool"
        assert self.backend.render_type(TypeRef(ScalarType.TEXT, optional=True)) == "Option<String>"

    def test_multi_field_path_tuple(self):
        binding = ArgumentBinding(BindingKind.PATH, (
            _field("org", ScalarType.TEXT),
            _field("repo_id", ScalarType.INTEGER, optional=True),
        ))
        assert self.backend.render_arguments(binding) == [
            "Path((org, repo_id)): Path<(String, Option<i64>)>"
        ]

    def test_body_extractors(self):
        json = ArgumentBinding(BindingKind.JSON, (_field("request", ScalarType.PLACEHOLDER),))
        form = ArgumentBinding(BindingKind.FORM, (_field("request", ScalarType.PLACEHOLDER),))
        assert self.backend.render_arguments(json) == ["Json(request): Json<TODO>"]
        assert self.backend.render_arguments(form) == ["Form(request): Form<TODO>"]

    def test_keyword_identifiers(self):
        assert self.backend.identifier("type") == "r#type"
        assert self.backend.identifier("self") == "self_"
        assert self.backend.identifier("user_id") == "user_id"

    def test_empty_unit(self):
        text = emit(build_registry(ApiDocument.from_dict({"paths": {}})), self.backend)["handlers.rs"]
        assert text == "use axum::extract::{Form, Json, Path, Query, State};\n"


class TestFastApiBackend:

    def setup_method(self):
        self.backend = FastApiBackend()

    def test_unit_is_valid_python(self, registry):
        text = emit(registry, self.backend)["handlers.py"]
        tree = ast.parse(text)
        functions = [n for n in tree.body if isinstance(n, ast.AsyncFunctionDef)]
        assert [f.name for f in functions] == ["delete_user", "get_user", "health"]

    def test_docstrings(self, registry):
        tree = ast.parse(emit(registry, self.backend)["handlers.py"])
        docs = {
            n.name: ast.get_docstring(n)
            for n in tree.body
            if isinstance(n, ast.AsyncFunctionDef)
        }
        assert docs["get_user"].splitlines() == ["[GET] /users/{id}", "Fetch one user"]
        assert docs["health"] == "[GET] /health"

    def test_marker_stripped(self, registry):
        text = emit(registry, self.backend)["handlers.py"]
        assert self.backend.marker not in text
        assert "\n\n\nasync def get_user(" in text

    def test_optional_query_defaults_to_none(self):
        binding = ArgumentBinding(BindingKind.QUERY, (_field("page_size", ScalarType.INTEGER, True, "pageSize"),))
        assert self.backend.render_arguments(binding) == [
            "page_size: Annotated[Optional[int], Query(alias='pageSize')] = None"
        ]

    def test_keyword_parameter_aliased(self):
        binding = ArgumentBinding(BindingKind.QUERY, (_field("from", source="from"),))
        assert self.backend.render_arguments(binding) == [
            "from_: Annotated[str, Query(alias='from')]"
        ]

    def test_keyword_only_parameters(self, registry):
        tree = ast.parse(emit(registry, self.backend)["handlers.py"])
        get_user = next(n for n in tree.body if getattr(n, "name", None) == "get_user")
        assert [a.arg for a in get_user.args.args] == ["state"]
        assert [a.arg for a in get_user.args.kwonlyargs] == ["id", "verbose"]

    def test_docstring_quotes_escaped(self, make_spec):
        spec = make_spec({"/q": {"get": {"operationId": "q", "summary": 'Say """hi""" \\o/'}}})
        text = emit(build_registry(ApiDocument.from_dict(spec)), self.backend)["handlers.py"]
        tree = ast.parse(text)
        assert ast.get_docstring(tree.body[-1]).splitlines()[1] == 'Say """hi""" \\o/'

    def test_one_line_docstring_closes_on_same_line(self, registry):
        text = emit(registry, self.backend)["handlers.py"]
        assert '    """[GET] /health"""\n    raise NotImplementedError' in text

    def test_docstring_ending_in_quote(self, make_spec):
        spec = make_spec({'/say/"hi"': {"get": {"operationId": "say"}}})
        text = emit(build_registry(ApiDocument.from_dict(spec)), self.backend)["handlers.py"]
        tree = ast.parse(text)
        assert ast.get_docstring(tree.body[-1]) == '[GET] /say/"hi"'

    def test_invalid_unit_rejected(self):
        operation = GeneratedOperation(
            name="not an identifier",
            method="get",
            path="/bad",
            doc_lines=("[GET] /bad",),
            arguments=(ArgumentBinding(BindingKind.STATE),),
        )
        with pytest.raises(FormatterError):
            self.backend.format(self.backend.render([operation]))


class TestStripMarker:

    def test_only_whole_lines(self):
        text = "a\ntype newline = ();\n/// type newline = ();\n"
        assert strip_marker(text, "type newline = ();") == "a\n\n/// type newline = ();\n"
