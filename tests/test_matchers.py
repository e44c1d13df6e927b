"""Tests for match predicate decoding (gwapi._matchers)."""

from __future__ import annotations

import json

import pytest

from gwapi import (
    DuplicateFieldError,
    GrpcHeaderMatch,
    GrpcMethodMatch,
    HeaderExact,
    HeaderRegularExpression,
    HttpHeaderMatch,
    HttpPathMatch,
    HttpQueryParamMatch,
    InvalidDiscriminantError,
    InvalidTypeError,
    MethodExact,
    MethodRegularExpression,
    MissingFieldError,
    PathExact,
    PathPrefix,
    PathRegularExpression,
    QueryParamExact,
    QueryParamRegularExpression,
    decode,
    encode,
    is_empty,
    loads_json,
    loads_yaml,
)


def _method(text: str) -> GrpcMethodMatch | None:
    return decode(GrpcMethodMatch, loads_json(text))


class TestGrpcMethodMatchDiscriminant:
    def test_absent_type_is_exact(self) -> None:
        assert _method('{"service": "com.example.User", "method": "Login"}') == MethodExact(
            service="com.example.User", method="Login"
        )

    def test_explicit_exact(self) -> None:
        assert _method('{"type": "Exact", "method": "Logout"}') == MethodExact(method="Logout")

    def test_regular_expression_never_falls_back(self) -> None:
        result = _method('{"type": "RegularExpression", "method": "Update.*"}')
        assert result == MethodRegularExpression(method="Update.*")
        assert not isinstance(result, MethodExact)

    def test_empty_type_is_exact(self) -> None:
        assert _method('{"type": "", "service": "svc"}') == MethodExact(service="svc")

    def test_null_type_is_exact(self) -> None:
        assert _method('{"type": null, "service": "svc"}') == MethodExact(service="svc")

    def test_unknown_type_names_value_and_allowed(self) -> None:
        with pytest.raises(InvalidDiscriminantError) as exc_info:
            _method('{"type": "Prefix", "method": "Login"}')
        err = exc_info.value
        assert err.value == "Prefix"
        assert err.allowed == ("Exact", "RegularExpression")
        assert "'Prefix'" in str(err)
        assert "'Exact', 'RegularExpression'" in str(err)

    def test_unknown_type_is_case_sensitive(self) -> None:
        with pytest.raises(InvalidDiscriminantError):
            _method('{"type": "exact", "method": "Login"}')

    def test_non_string_type(self) -> None:
        with pytest.raises(InvalidTypeError) as exc_info:
            _method('{"type": 3, "method": "Login"}')
        assert exc_info.value.path == "type"


class TestGrpcMethodMatchNormalization:
    def test_empty_service_is_absent(self) -> None:
        assert _method('{"service": "", "method": "Login"}') == _method('{"method": "Login"}')

    def test_empty_method_is_absent(self) -> None:
        assert _method('{"service": "svc", "method": ""}') == MethodExact(service="svc")

    def test_null_fields_are_absent(self) -> None:
        assert _method('{"service": null, "method": "Login"}') == MethodExact(method="Login")

    @pytest.mark.parametrize(
        "text",
        [
            "{}",
            '{"type": "Exact"}',
            '{"type": "RegularExpression"}',
            '{"service": "", "method": ""}',
            '{"type": "RegularExpression", "service": "", "method": ""}',
            '{"service": null}',
        ],
    )
    def test_vacuous_match_folds_to_none(self, text: str) -> None:
        assert _method(text) is None

    def test_unknown_type_checked_before_fold(self) -> None:
        with pytest.raises(InvalidDiscriminantError):
            _method('{"type": "Bogus"}')

    def test_is_empty(self) -> None:
        assert is_empty(MethodExact())
        assert is_empty(MethodRegularExpression(service="", method=""))
        assert not is_empty(MethodExact(service="svc"))
        assert not is_empty(MethodRegularExpression(method="m"))


class TestDuplicateFields:
    def test_duplicate_type_json(self) -> None:
        with pytest.raises(DuplicateFieldError) as exc_info:
            _method('{"type": "Exact", "type": "RegularExpression", "method": "Login"}')
        assert exc_info.value.name == "type"

    def test_duplicate_type_same_value(self) -> None:
        with pytest.raises(DuplicateFieldError):
            _method('{"type": "Exact", "type": "Exact", "method": "Login"}')

    def test_duplicate_payload_field(self) -> None:
        with pytest.raises(DuplicateFieldError) as exc_info:
            _method('{"method": "A", "method": "B"}')
        assert exc_info.value.name == "method"

    def test_duplicate_type_yaml(self) -> None:
        data = loads_yaml("type: Exact\ntype: RegularExpression\nname: env\nvalue: x\n")
        with pytest.raises(DuplicateFieldError):
            decode(HttpHeaderMatch, data)

    def test_duplicate_unrecognized_key_ignored(self) -> None:
        assert _method('{"extra": 1, "extra": 2, "method": "Login"}') == MethodExact(
            method="Login"
        )


class TestHttpPathMatch:
    def test_absent_type_is_path_prefix(self) -> None:
        assert decode(HttpPathMatch, {"value": "/api"}) == PathPrefix(value="/api")

    def test_absent_value_is_root(self) -> None:
        assert decode(HttpPathMatch, {}) == PathPrefix(value="/")
        assert decode(HttpPathMatch, {"type": "Exact"}) == PathExact(value="/")

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("Exact", PathExact("/x")),
            ("PathPrefix", PathPrefix("/x")),
            ("RegularExpression", PathRegularExpression("/x")),
        ],
    )
    def test_variants(self, tag: str, expected: object) -> None:
        assert decode(HttpPathMatch, {"type": tag, "value": "/x"}) == expected

    def test_unknown_type(self) -> None:
        with pytest.raises(InvalidDiscriminantError) as exc_info:
            decode(HttpPathMatch, {"type": "Prefix", "value": "/"})
        assert exc_info.value.allowed == ("Exact", "PathPrefix", "RegularExpression")

    def test_encode_writes_type(self) -> None:
        assert encode(PathPrefix()) == {"type": "PathPrefix", "value": "/"}


class TestHttpHeaderMatch:
    def test_canary_scenario(self) -> None:
        text = '{"type":"Exact","name":"env","value":"canary"}'
        match = decode(HttpHeaderMatch, loads_json(text))
        assert match == HeaderExact(name="env", value="canary")
        assert json.dumps(encode(match), separators=(",", ":")) == text

    def test_absent_type_is_exact(self) -> None:
        assert decode(HttpHeaderMatch, {"name": "env", "value": "x"}) == HeaderExact("env", "x")

    def test_regular_expression(self) -> None:
        result = decode(HttpHeaderMatch, {"type": "RegularExpression", "name": "a", "value": "b.*"})
        assert result == HeaderRegularExpression("a", "b.*")

    def test_missing_value(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode(HttpHeaderMatch, {"type": "Exact", "name": "env"})
        assert exc_info.value.name == "value"

    def test_grpc_header_match_is_http_header_match(self) -> None:
        data = {"type": "Exact", "name": "magic", "value": "foo"}
        assert decode(GrpcHeaderMatch, data) == decode(HttpHeaderMatch, data)


class TestHttpQueryParamMatch:
    def test_default_exact(self) -> None:
        assert decode(HttpQueryParamMatch, {"name": "q", "value": "1"}) == QueryParamExact("q", "1")

    def test_regular_expression(self) -> None:
        data = {"type": "RegularExpression", "name": "q", "value": ".*"}
        result = decode(HttpQueryParamMatch, data)
        assert result == QueryParamRegularExpression("q", ".*")

    def test_not_an_object(self) -> None:
        with pytest.raises(InvalidTypeError):
            decode(HttpQueryParamMatch, ["q"])


class TestEncoding:
    def test_method_match_omits_absent_fields(self) -> None:
        assert encode(MethodExact(method="Login")) == {"type": "Exact", "method": "Login"}

    def test_method_match_round_trip(self) -> None:
        match = MethodRegularExpression(service="com\\.example\\..*", method="Get.*")
        assert decode(GrpcMethodMatch, encode(match)) == match
