"""HTTP transport for the InnerTube JSON API.

One call performs exactly one POST and returns the decoded JSON object.
There are no retries here: callers decide whether a failure is worth
repeating. Failures are mapped onto the TransportError hierarchy.
"""

import logging
from enum import StrEnum
from typing import Any, Protocol

import requests
from ytmusicapi.constants import USER_AGENT, YTM_BASE_API, YTM_DOMAIN
from ytmusicapi.helpers import get_visitor_id, initialize_context

from ytm_innertube.config import APIConfig, RequestContext
from ytm_innertube.exceptions import (
    HTTPStatusError,
    MalformedResponseError,
    NetworkError,
)
from ytm_innertube.utils.cookies import auth_headers

logger = logging.getLogger(__name__)

# X-YouTube-Client-Name of the WEB_REMIX client
WEB_REMIX_CLIENT_ID = "67"


class EndpointKind(StrEnum):
    """InnerTube endpoints, valued by their path under /youtubei/v1/."""

    SEARCH = "search"
    BROWSE = "browse"
    NEXT = "next"
    PLAYER = "player"
    FEEDBACK = "feedback"
    ACCOUNT = "account/account_menu"
    SUGGESTIONS = "music/get_search_suggestions"
    QUEUE = "music/get_queue"
    LIKE = "like/like"
    REMOVE_LIKE = "like/removelike"
    SUBSCRIBE = "subscription/subscribe"
    UNSUBSCRIBE = "subscription/unsubscribe"
    EDIT_PLAYLIST = "browse/edit_playlist"
    CREATE_PLAYLIST = "playlist/create"
    DELETE_PLAYLIST = "playlist/delete"


class TransportProtocol(Protocol):
    """Protocol for InnerTube transports.

    Implement this protocol to replay canned responses in tests.
    """

    def request(
        self,
        kind: EndpointKind,
        params: dict[str, Any],
        context: RequestContext | None = None,
        *,
        continuation: str | None = None,
        login: bool = False,
    ) -> dict[str, Any]:
        """POST one request and return the decoded JSON object."""
        ...

    def fetch_visitor_data(self, context: RequestContext | None = None) -> str | None:
        """Fetch a fresh visitor id for anonymous sessions."""
        ...


class InnerTubeTransport:
    """Production transport over a shared ``requests.Session``.

    The session is safe to share between threads for independent requests;
    all per-request state travels in the RequestContext.
    """

    def __init__(
        self,
        config: APIConfig | None = None,
        context: RequestContext | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Optional API configuration. Uses defaults if not provided.
            context: Default request context for calls that pass none.
            session: Optional session, e.g. with custom adapters.
        """
        self._config = config or APIConfig()
        self._context = context or RequestContext()
        self._session = session or requests.Session()

    @property
    def default_context(self) -> RequestContext:
        return self._context

    def request(
        self,
        kind: EndpointKind,
        params: dict[str, Any],
        context: RequestContext | None = None,
        *,
        continuation: str | None = None,
        login: bool = False,
    ) -> dict[str, Any]:
        """POST one InnerTube request.

        Args:
            kind: Endpoint to call.
            params: Body fields merged next to the client context.
            context: Per-call override of the default context.
            continuation: Continuation token, sent as query parameters.
            login: Attach cookie and SAPISIDHASH if the context has a cookie.

        Returns:
            Decoded JSON object.

        Raises:
            NetworkError: If no response arrived (connection, TLS, timeout).
            HTTPStatusError: If the server answered 4xx or 5xx.
            MalformedResponseError: If the body is not a JSON object.
        """
        ctx = context or self._context
        logged_in = bool(ctx.cookie) and (
            login or (kind is EndpointKind.BROWSE and ctx.use_login_for_browse)
        )

        query: dict[str, str] = {"prettyPrint": "false"}
        if continuation:
            query.update(ctoken=continuation, continuation=continuation, type="next")

        url = YTM_BASE_API + kind.value
        logger.debug(
            "POST %s (login=%s, continuation=%s)",
            kind.value,
            logged_in,
            bool(continuation),
        )
        try:
            response = self._session.post(
                url,
                params=query,
                json=self._build_body(params, ctx, logged_in),
                headers=self._build_headers(ctx, logged_in),
                proxies=self._proxies(ctx),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("InnerTube %s request failed: %s", kind.value, e)
            raise NetworkError(f"Request to {kind.value} failed: {e}") from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.warning(
                "InnerTube %s returned HTTP %d: %s",
                kind.value,
                response.status_code,
                message,
            )
            raise HTTPStatusError(
                f"{kind.value} returned HTTP {response.status_code}: {message}",
                http_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"{kind.value} returned a non-JSON body"
            ) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"{kind.value} returned {type(data).__name__}, expected an object"
            )
        return data

    def fetch_visitor_data(self, context: RequestContext | None = None) -> str | None:
        """Read a visitor id from the music home page.

        Raises:
            NetworkError: If the page could not be fetched.
        """
        ctx = context or self._context

        def get(url: str) -> requests.Response:
            return self._session.get(
                url,
                headers={"User-Agent": USER_AGENT},
                proxies=self._proxies(ctx),
                timeout=self._config.timeout,
            )

        try:
            headers = get_visitor_id(get)
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch visitor data: {e}") from e
        return headers.get("X-Goog-Visitor-Id") or None

    def _build_body(
        self, params: dict[str, Any], ctx: RequestContext, logged_in: bool
    ) -> dict[str, Any]:
        body = initialize_context()
        client = body["context"]["client"]
        client["hl"] = ctx.locale.hl
        client["gl"] = ctx.locale.gl
        if self._config.client_version:
            client["clientVersion"] = self._config.client_version
        if ctx.visitor_data:
            client["visitorData"] = ctx.visitor_data
        if logged_in and ctx.data_sync_id:
            body["context"].setdefault("user", {})["onBehalfOfUser"] = ctx.data_sync_id
        body.update(params)
        return body

    def _build_headers(self, ctx: RequestContext, logged_in: bool) -> dict[str, str]:
        headers = {
            "Accept": "*/*",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Origin": YTM_DOMAIN,
            "X-Origin": YTM_DOMAIN,
            "Referer": f"{YTM_DOMAIN}/",
            "X-YouTube-Client-Name": WEB_REMIX_CLIENT_ID,
        }
        if self._config.client_version:
            headers["X-YouTube-Client-Version"] = self._config.client_version
        if ctx.visitor_data:
            headers["X-Goog-Visitor-Id"] = ctx.visitor_data
        if logged_in and ctx.cookie:
            headers.update(auth_headers(ctx.cookie) or {"Cookie": ctx.cookie})
        return headers

    @staticmethod
    def _proxies(ctx: RequestContext) -> dict[str, str] | None:
        if not ctx.proxy:
            return None
        return {"http": ctx.proxy, "https": ctx.proxy}

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.reason or "no details"
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return response.reason or "no details"
