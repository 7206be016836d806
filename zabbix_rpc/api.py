import itertools
import logging
import threading
import time
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from .config import Config
from .envelope import RPCResponse, decode_response, encode_request
from .errors import APIError, DecodeError
from .log import get_logger
from .transport import HTTPTransport

T = TypeVar("T")

# The server refuses an "auth" field on these
NO_AUTH_METHODS = frozenset({"apiinfo.version", "user.login", "user.checkAuthentication"})


class API:
    """
    Zabbix JSON-RPC client.

    Every wrapper goes through one of three layers:
        call                  -> raw envelope (may carry an error object)
        call_with_error       -> envelope, APIError raised for error objects
        call_with_error_parse -> result validated into a target type

    Safe to share between threads: the request id counter and the auth
    token are the only mutable state and both are lock-protected.
    """

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.logger = logger or get_logger(__name__)
        self.transport = HTTPTransport(
            config.url,
            session=session,
            verify_ssl=config.verify_ssl,
            timeout=config.timeout,
        )
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()
        self._auth = config.token
        self._auth_lock = threading.Lock()

    # --- state ---

    @property
    def url(self) -> str:
        return self.transport.url

    @property
    def auth(self) -> Optional[str]:
        with self._auth_lock:
            return self._auth

    def set_auth(self, token: Optional[str]) -> None:
        with self._auth_lock:
            self._auth = token

    def set_session(self, session: requests.Session) -> None:
        """Replace the underlying HTTP session (proxies, adapters, custom TLS...)."""
        self.transport.set_session(session)

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    # --- calls ---

    def call(self, method: str, params: Any = None) -> RPCResponse:
        """
        Send one request and return the decoded envelope.

        Transport and decode failures raise; a server-side error object
        does not, it comes back in the envelope's `error` field.
        """
        request_id = self._next_id()
        token = None if method in NO_AUTH_METHODS else self.auth

        headers: Dict[str, str] = {}
        body_auth = token
        if token and self.config.auth_header:
            headers["Authorization"] = f"Bearer {token}"
            body_auth = None

        body = encode_request(method, params, request_id, auth=body_auth)

        started = time.monotonic()
        raw = self.transport.post(body, headers=headers)
        response = decode_response(raw)
        self.logger.debug(
            "%s id=%s took %.3fs", method, request_id, time.monotonic() - started
        )

        # null ids are what the server sends back for unparseable requests
        if response.id is not None and str(response.id) != str(request_id):
            raise DecodeError(
                f"response id {response.id!r} does not match request id {request_id!r}"
            )
        return response

    def call_with_error(self, method: str, params: Any = None) -> RPCResponse:
        response = self.call(method, params)
        if response.error is not None:
            e = response.error
            self.logger.warning("%s failed: %s", method, e)
            raise APIError(e.code, e.message, e.data)
        return response

    def call_with_error_parse(self, method: str, params: Any, target: Type[T]) -> T:
        """
        Like call_with_error, then validate the result into `target`
        (a model, List[Model], str, ...). A shape mismatch raises DecodeError.
        """
        response = self.call_with_error(method, params)
        try:
            return TypeAdapter(target).validate_python(response.result)
        except ValidationError as exc:
            raise DecodeError(f"{method}: unexpected result shape: {exc}") from exc

    # --- session ---

    def login(self, user: str, password: str) -> str:
        """
        Log in and keep the session token for all subsequent calls.
        """
        token = self.call_with_error_parse(
            "user.login", {"username": user, "password": password}, str
        )
        self.set_auth(token)
        self.logger.info("Logged in to %s as %s", self.url, user)
        return token

    def logout(self) -> bool:
        ok = self.call_with_error_parse("user.logout", [], bool)
        if ok:
            self.set_auth(None)
        return ok

    def version(self) -> str:
        return self.call_with_error_parse("apiinfo.version", [], str)
