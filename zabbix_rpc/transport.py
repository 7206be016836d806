import warnings
from typing import Dict, Optional, Tuple

import requests
import urllib3

from .errors import TransportError
from .log import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json-rpc"}


def _silence_insecure_warnings() -> None:
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    # SubjectAltNameWarning exists only in older urllib3; make it optional
    SubjectAltNameWarning = getattr(urllib3.exceptions, "SubjectAltNameWarning", None)
    if SubjectAltNameWarning is not None:
        warnings.simplefilter("ignore", SubjectAltNameWarning)


class HTTPTransport:
    """
    One POST per call against the api_jsonrpc.php endpoint.

    Failures below the JSON layer are raised as TransportError right away;
    there is no retry here.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        verify_ssl: bool = True,
        timeout: Tuple[float, float] = (10, 60),
    ):
        self.url = url
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.session = session or requests.Session()
        if not verify_ssl:
            _silence_insecure_warnings()

    def set_session(self, session: requests.Session) -> None:
        self.session = session

    def post(self, body: bytes, headers: Optional[Dict[str, str]] = None) -> bytes:
        h = dict(DEFAULT_HEADERS)
        if headers:
            h.update(headers)

        logger.debug("POST %s (%d bytes)", self.url, len(body))
        try:
            r = self.session.post(
                self.url,
                data=body,
                headers=h,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
            r.raise_for_status()
            # raise_for_status lets an unfollowed 3xx through
            if r.status_code >= 300:
                raise TransportError(f"HTTP {r.status_code} from {self.url}", status_code=r.status_code)
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(f"HTTP {status} from {self.url}", status_code=status) from exc
        except requests.RequestException as exc:
            raise TransportError(f"request to {self.url} failed: {exc}") from exc

        return r.content
