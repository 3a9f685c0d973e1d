"""Tests for the HTTP transport."""

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from ytm_innertube.config import APIConfig, Locale, RequestContext
from ytm_innertube.exceptions import (
    HTTPStatusError,
    MalformedResponseError,
    NetworkError,
    TransportErrorKind,
)
from ytm_innertube.transport import EndpointKind, InnerTubeTransport

LOGGED_IN = RequestContext(cookie="SID=abc; SAPISID=sapisid123", data_sync_id="sync1")


def make_session(
    payload: Any = None, status_code: int = 200, json_error: bool = False
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason = "Reason"
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = {} if payload is None else payload
    session = MagicMock(spec=requests.Session)
    session.post.return_value = response
    return session


def post_kwargs(session: MagicMock) -> dict[str, Any]:
    return session.post.call_args.kwargs


class TestRequest:
    """Tests for InnerTubeTransport.request."""

    def test_posts_json_body(self) -> None:
        session = make_session({"contents": {}})
        transport = InnerTubeTransport(
            context=RequestContext(
                locale=Locale(hl="de", gl="DE"), visitor_data="vis1"
            ),
            session=session,
        )

        result = transport.request(EndpointKind.BROWSE, {"browseId": "FEmusic_home"})

        assert result == {"contents": {}}
        url = session.post.call_args.args[0]
        assert url == "https://music.youtube.com/youtubei/v1/browse"
        kwargs = post_kwargs(session)
        assert kwargs["params"] == {"prettyPrint": "false"}
        assert kwargs["json"]["browseId"] == "FEmusic_home"
        client = kwargs["json"]["context"]["client"]
        assert client["clientName"] == "WEB_REMIX"
        assert client["hl"] == "de"
        assert client["gl"] == "DE"
        assert client["visitorData"] == "vis1"
        assert kwargs["headers"]["X-Goog-Visitor-Id"] == "vis1"
        assert kwargs["timeout"] == 15.0
        assert kwargs["proxies"] is None

    def test_endpoint_paths(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(session=session)

        transport.request(EndpointKind.SUGGESTIONS, {"input": "daft"})

        url = session.post.call_args.args[0]
        assert url.endswith("/youtubei/v1/music/get_search_suggestions")

    def test_continuation_query(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(session=session)

        transport.request(EndpointKind.BROWSE, {}, continuation="tok")

        assert post_kwargs(session)["params"] == {
            "prettyPrint": "false",
            "ctoken": "tok",
            "continuation": "tok",
            "type": "next",
        }

    def test_per_call_context_overrides_default(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(session=session)

        transport.request(
            EndpointKind.SEARCH, {}, RequestContext(proxy="http://proxy:8080")
        )

        assert post_kwargs(session)["proxies"] == {
            "http": "http://proxy:8080",
            "https": "http://proxy:8080",
        }

    def test_client_version_override(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(
            APIConfig(client_version="1.2.3"), session=session
        )

        transport.request(EndpointKind.BROWSE, {})

        kwargs = post_kwargs(session)
        assert kwargs["json"]["context"]["client"]["clientVersion"] == "1.2.3"
        assert kwargs["headers"]["X-YouTube-Client-Version"] == "1.2.3"


class TestLogin:
    """Tests for cookie handling."""

    def test_login_request_is_signed(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(context=LOGGED_IN, session=session)

        transport.request(EndpointKind.FEEDBACK, {}, login=True)

        kwargs = post_kwargs(session)
        assert kwargs["headers"]["Authorization"].startswith("SAPISIDHASH ")
        assert kwargs["headers"]["Cookie"] == LOGGED_IN.cookie
        assert kwargs["json"]["context"]["user"]["onBehalfOfUser"] == "sync1"

    def test_anonymous_request_has_no_cookie(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(context=LOGGED_IN, session=session)

        transport.request(EndpointKind.BROWSE, {"browseId": "FEmusic_home"})

        kwargs = post_kwargs(session)
        assert "Cookie" not in kwargs["headers"]
        assert "Authorization" not in kwargs["headers"]
        assert "onBehalfOfUser" not in kwargs["json"]["context"].get("user", {})

    def test_use_login_for_browse(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(
            context=LOGGED_IN.replace(use_login_for_browse=True), session=session
        )

        transport.request(EndpointKind.BROWSE, {})
        assert "Authorization" in post_kwargs(session)["headers"]

        transport.request(EndpointKind.SEARCH, {})
        assert "Authorization" not in post_kwargs(session)["headers"]

    def test_login_without_cookie_stays_anonymous(self) -> None:
        session = make_session()
        transport = InnerTubeTransport(session=session)

        transport.request(EndpointKind.BROWSE, {}, login=True)

        assert "Cookie" not in post_kwargs(session)["headers"]


class TestErrors:
    """Tests for failure classification."""

    def test_network_error(self) -> None:
        session = make_session()
        session.post.side_effect = requests.ConnectionError("refused")
        transport = InnerTubeTransport(session=session)

        with pytest.raises(NetworkError) as exc_info:
            transport.request(EndpointKind.BROWSE, {})

        assert exc_info.value.kind is TransportErrorKind.NETWORK
        assert "refused" in exc_info.value.message

    def test_timeout_is_network_error(self) -> None:
        session = make_session()
        session.post.side_effect = requests.Timeout("slow")
        transport = InnerTubeTransport(session=session)

        with pytest.raises(NetworkError):
            transport.request(EndpointKind.BROWSE, {})

    def test_http_status_error(self) -> None:
        session = make_session(
            {"error": {"code": 404, "message": "Requested entity was not found."}},
            status_code=404,
        )
        transport = InnerTubeTransport(session=session)

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.request(EndpointKind.BROWSE, {"browseId": "MPREb_missing"})

        assert exc_info.value.http_status == 404
        assert "Requested entity was not found." in exc_info.value.message

    def test_http_status_error_without_json(self) -> None:
        session = make_session(status_code=500, json_error=True)
        transport = InnerTubeTransport(session=session)

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.request(EndpointKind.BROWSE, {})

        assert exc_info.value.http_status == 500

    def test_non_json_body(self) -> None:
        transport = InnerTubeTransport(session=make_session(json_error=True))

        with pytest.raises(MalformedResponseError) as exc_info:
            transport.request(EndpointKind.BROWSE, {})

        assert exc_info.value.kind is TransportErrorKind.MALFORMED_ENVELOPE

    def test_non_object_body(self) -> None:
        transport = InnerTubeTransport(session=make_session(["not", "an", "object"]))

        with pytest.raises(MalformedResponseError, match="list"):
            transport.request(EndpointKind.BROWSE, {})


class TestVisitorData:
    """Tests for fetch_visitor_data."""

    def test_reads_visitor_id_from_page(self) -> None:
        session = make_session()
        page = MagicMock()
        page.text = 'ytcfg.set({"VISITOR_DATA": "vis123"});'
        session.get.return_value = page
        transport = InnerTubeTransport(session=session)

        assert transport.fetch_visitor_data() == "vis123"
        assert session.get.call_args.args[0] == "https://music.youtube.com"

    def test_missing_visitor_id(self) -> None:
        session = make_session()
        page = MagicMock()
        page.text = "<html></html>"
        session.get.return_value = page
        transport = InnerTubeTransport(session=session)

        assert transport.fetch_visitor_data() is None

    def test_network_error(self) -> None:
        session = make_session()
        session.get.side_effect = requests.ConnectionError("down")
        transport = InnerTubeTransport(session=session)

        with pytest.raises(NetworkError):
            transport.fetch_visitor_data()
