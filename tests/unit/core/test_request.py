"""Unit tests for core/request.py: builders, value formatting and status checks."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Self

import pytest

from azrest.core.client import BaseClient
from azrest.core.exceptions import HttpStatusError, InvalidUrlError
from azrest.core.request import RequestBuilder, format_value, path_segment, path_segments
from azrest.core.response import Response
from azrest.core.serialization import JSON_CONTENT_TYPE, wire

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Color(str, Enum):
    RED = "red"


@dataclass
class _Widget:
    name: str | None = wire("name")
    size: int | None = wire("size")


@dataclass
class _WidgetErrorDetail:
    code: str | None = wire("code")
    message: str | None = wire("message")


@dataclass
class _WidgetError:
    error: _WidgetErrorDetail | None = wire("error")


class _GetWidget(RequestBuilder):
    query_names = ("$top", "flag")
    header_names = ("x-test",)
    responses = {200: _Widget, 204: None}
    error_model = _WidgetError

    def __init__(self, client: BaseClient, widget_id: str) -> None:
        super().__init__(client)
        self.widget_id = widget_id

    def _path(self) -> str:
        return f"/widgets/{path_segment(self.widget_id, 'widget_id')}"

    def _fixed_query(self) -> list[tuple[str, str]]:
        return [("api-version", "2020-05-01")]

    def top(self, top: int) -> Self:
        return self._set("$top", top)

    def flag(self, flag: bool) -> Self:
        return self._set("flag", flag)

    def tag(self, value: str) -> Self:
        return self._set("x-test", value)


class _PutWidget(_GetWidget):
    method = "PUT"
    content_type = JSON_CONTENT_TYPE

    def __init__(self, client: BaseClient, widget_id: str, widget: _Widget) -> None:
        super().__init__(client, widget_id)
        self.widget = widget

    def _body(self) -> _Widget:
        return self.widget


def _make_client(pipeline: Any, credential: Any) -> BaseClient:
    return BaseClient(credential, "https://example.test", pipeline=pipeline)


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


class TestFormatValue:
    def test_booleans_are_lowercase(self) -> None:
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_integers_are_decimal(self) -> None:
        assert format_value(50) == "50"

    def test_enums_use_wire_value(self) -> None:
        assert format_value(_Color.RED) == "red"

    def test_lists_are_comma_joined(self) -> None:
        assert format_value([_Color.RED, "blue"]) == "red,blue"

    def test_datetimes_are_iso8601(self) -> None:
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format_value(value) == "2024-01-02T03:04:05+00:00"


class TestPathSegments:
    def test_single_segment_escapes_slashes(self) -> None:
        assert path_segment("a b/c", "name") == "a%20b%2Fc"

    def test_empty_required_segment_raises(self) -> None:
        with pytest.raises(InvalidUrlError, match="'name'"):
            path_segment("", "name")

    def test_multi_segment_keeps_slashes(self) -> None:
        assert path_segments("/dir/sub dir/file.txt", "path") == "dir/sub%20dir/file.txt"

    def test_empty_multi_segment_raises(self) -> None:
        with pytest.raises(InvalidUrlError):
            path_segments("/", "path")


# ---------------------------------------------------------------------------
# build_request()
# ---------------------------------------------------------------------------


class TestBuildRequest:
    def test_unset_options_never_reach_the_wire(self, pipeline: Any, credential: Any) -> None:
        request = _GetWidget(_make_client(pipeline, credential), "w1").build_request()
        assert request.method == "GET"
        assert request.url == "https://example.test/widgets/w1?api-version=2020-05-01"
        assert "x-test" not in request.headers

    def test_set_options_appear_in_declared_order(self, pipeline: Any, credential: Any) -> None:
        builder = _GetWidget(_make_client(pipeline, credential), "w1").flag(False).top(10)
        request = builder.tag("value").build_request()
        assert request.url == "https://example.test/widgets/w1?api-version=2020-05-01&$top=10&flag=false"
        assert request.headers["x-test"] == "value"

    def test_required_parameter_is_always_in_path(self, pipeline: Any, credential: Any) -> None:
        request = _GetWidget(_make_client(pipeline, credential), "my widget").build_request()
        assert "/widgets/my%20widget?" in request.url

    def test_empty_required_parameter_raises(self, pipeline: Any, credential: Any) -> None:
        with pytest.raises(InvalidUrlError):
            _GetWidget(_make_client(pipeline, credential), "").build_request()

    def test_body_encoded_by_declared_content_type(self, pipeline: Any, credential: Any) -> None:
        builder = _PutWidget(_make_client(pipeline, credential), "w1", _Widget(name="gear"))
        request = builder.build_request()
        assert request.method == "PUT"
        assert request.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert json.loads(request.content) == {"name": "gear"}

    def test_setters_return_the_builder(self, pipeline: Any, credential: Any) -> None:
        builder = _GetWidget(_make_client(pipeline, credential), "w1")
        assert builder.top(1) is builder


# ---------------------------------------------------------------------------
# send() / await
# ---------------------------------------------------------------------------


class TestSend:
    async def test_send_authorizes_and_wraps_response(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        pipeline.queue(make_response(200, b'{"name": "gear", "size": 3}'))
        response = await _GetWidget(_make_client(pipeline, credential), "w1").send()
        assert isinstance(response, Response)
        assert response.status_code == 200
        sent = pipeline.requests[0]
        assert sent.headers["Authorization"] == "Bearer fake-token-abc"
        assert credential.scopes == [("https://example.test/",)]
        assert await response.into_body() == _Widget(name="gear", size=3)

    async def test_await_returns_decoded_body(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        pipeline.queue(make_response(200, b'{"name": "gear"}'))
        widget = await _GetWidget(_make_client(pipeline, credential), "w1")
        assert widget == _Widget(name="gear")

    async def test_bodiless_status_awaits_to_none(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        pipeline.queue(make_response(204, b""))
        assert await _GetWidget(_make_client(pipeline, credential), "w1") is None

    async def test_unexpected_status_raises_with_error_code(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        body = b'{"error": {"code": "NotFound", "message": "no such widget"}}'
        pipeline.queue(make_response(404, body, reason="Not Found"))
        with pytest.raises(HttpStatusError) as exc_info:
            await _GetWidget(_make_client(pipeline, credential), "w1").send()
        assert exc_info.value.status_code == 404
        assert exc_info.value.error_code == "NotFound"
        assert exc_info.value.expected == (200, 204)
        assert exc_info.value.response is not None
        assert exc_info.value.model == _WidgetError(
            error=_WidgetErrorDetail(code="NotFound", message="no such widget")
        )

    async def test_undecodable_error_body_leaves_code_unset(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        pipeline.queue(make_response(500, b"upstream exploded"))
        with pytest.raises(HttpStatusError) as exc_info:
            await _GetWidget(_make_client(pipeline, credential), "w1").send()
        assert exc_info.value.status_code == 500
        assert exc_info.value.error_code is None

    async def test_error_code_header_wins_over_body(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        pipeline.queue(make_response(409, b"<Error/>", headers={"x-ms-error-code": "ShareAlreadyExists"}))
        with pytest.raises(HttpStatusError) as exc_info:
            await _GetWidget(_make_client(pipeline, credential), "w1").send()
        assert exc_info.value.error_code == "ShareAlreadyExists"


# ---------------------------------------------------------------------------
# clone()
# ---------------------------------------------------------------------------


class TestClone:
    async def test_clones_send_identical_independent_requests(
        self, pipeline: Any, credential: Any, make_response: Any
    ) -> None:
        builder = _GetWidget(_make_client(pipeline, credential), "w1").top(5).tag("h")
        pipeline.queue(make_response(204), make_response(204))
        await builder.clone().send()
        await builder.clone().send()
        first, second = pipeline.requests
        assert first is not second
        assert (first.method, first.url) == (second.method, second.url)
        assert dict(first.headers) == dict(second.headers)

    def test_clone_does_not_share_options(self, pipeline: Any, credential: Any) -> None:
        builder = _GetWidget(_make_client(pipeline, credential), "w1").top(5)
        other = builder.clone().top(7)
        assert "$top=5" in builder.build_request().url
        assert "$top=7" in other.build_request().url

    def test_clone_shares_client(self, pipeline: Any, credential: Any) -> None:
        builder = _GetWidget(_make_client(pipeline, credential), "w1")
        assert builder.clone()._client is builder._client
