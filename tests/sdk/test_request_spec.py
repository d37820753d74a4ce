import dataclasses

import pytest

from matrixsdk._utils import RequestSpec
from matrixsdk.models.errors import InvalidArgumentError


class TestRequestSpec:
    def test_defaults(self) -> None:
        spec = RequestSpec(method="GET", base_url="https://matrix.org", path="/")

        assert spec.query_params == ()
        assert spec.headers == ()
        assert spec.body == {}

    def test_default_containers_are_not_shared(self) -> None:
        first = RequestSpec(method="GET", base_url="https://matrix.org", path="/a")
        second = RequestSpec(method="GET", base_url="https://matrix.org", path="/b")

        assert first.body is not second.body

    def test_method_is_normalized(self) -> None:
        spec = RequestSpec(method="post", base_url="https://matrix.org", path="/")

        assert spec.method == "POST"

    @pytest.mark.parametrize(
        "method", ["GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "TRACE", "PATCH"]
    )
    def test_accepts_all_http_methods(self, method: str) -> None:
        assert RequestSpec(method=method, base_url="https://x.org", path="/").method == method

    def test_rejects_unknown_method(self) -> None:
        with pytest.raises(InvalidArgumentError, match="method"):
            RequestSpec(method="FETCH", base_url="https://matrix.org", path="/")

    def test_rejects_empty_base_url(self) -> None:
        with pytest.raises(InvalidArgumentError, match="base_url"):
            RequestSpec(method="GET", base_url="", path="/")

    @pytest.mark.parametrize("path", ["", "_matrix/client/versions"])
    def test_rejects_relative_path(self, path: str) -> None:
        with pytest.raises(InvalidArgumentError, match="path"):
            RequestSpec(method="GET", base_url="https://matrix.org", path=path)

    def test_rejects_nested_query_value(self) -> None:
        with pytest.raises(InvalidArgumentError, match="query_params"):
            RequestSpec(
                method="GET",
                base_url="https://matrix.org",
                path="/",
                query_params=[("filter", {"room": {}})],
            )

    def test_rejects_two_authorization_headers(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Authorization"):
            RequestSpec(
                method="GET",
                base_url="https://matrix.org",
                path="/",
                headers=[("Authorization", "Bearer a"), ("authorization", "Bearer b")],
            )

    def test_is_frozen(self) -> None:
        spec = RequestSpec(method="GET", base_url="https://matrix.org", path="/")

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.path = "/other"  # type: ignore[misc]

    def test_containers_are_read_only(self) -> None:
        spec = RequestSpec(
            method="GET",
            base_url="https://matrix.org",
            path="/",
            query_params=[("since", "s1")],
            headers=[("Authorization", "Bearer a")],
            body={"auth": {"type": "m.login.dummy"}},
        )

        with pytest.raises(AttributeError):
            spec.headers.append(("Authorization", "Bearer b"))  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            spec.query_params.append(("filter", {"nested": 1}))  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            spec.body["auth"] = {}  # type: ignore[index]

        assert spec.headers == (("Authorization", "Bearer a"),)
        assert spec.query_params == (("since", "s1"),)

    def test_does_not_share_inputs(self) -> None:
        query_params = [("since", "s1")]
        headers = [("Authorization", "Bearer a")]
        body = {"auth": {"type": "m.login.dummy"}}

        spec = RequestSpec(
            method="POST",
            base_url="https://matrix.org",
            path="/",
            query_params=query_params,
            headers=headers,
            body=body,
        )
        query_params.append(("filter", "x"))
        headers.append(("Authorization", "Bearer b"))
        body["auth"]["type"] = "m.login.password"

        assert spec.query_params == (("since", "s1"),)
        assert spec.headers == (("Authorization", "Bearer a"),)
        assert spec.body == {"auth": {"type": "m.login.dummy"}}

    def test_structural_equality(self) -> None:
        kwargs = dict(
            method="GET",
            base_url="https://matrix.org",
            path="/_matrix/client/r0/sync",
            query_params=[("since", "s1")],
            headers=[("Authorization", "Bearer t")],
        )

        assert RequestSpec(**kwargs) == RequestSpec(**kwargs)

    def test_url_joins_base_url_and_path(self) -> None:
        spec = RequestSpec(
            method="POST",
            base_url="https://matrix.org",
            path="/_matrix/client/r0/register?kind=guest",
        )

        assert spec.url == "https://matrix.org/_matrix/client/r0/register?kind=guest"
