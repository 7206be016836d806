from typing import Optional


class ZabbixError(Exception):
    """Base class for everything the client raises."""


class TransportError(ZabbixError):
    """
    The HTTP exchange itself failed: DNS, connect, TLS, timeout or a
    non-2xx status. Never retried by the client.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ZabbixError):
    """
    The response could not be understood: not JSON, not a JSON-RPC
    envelope, or a result that does not fit the requested type.
    """


class APIError(ZabbixError):
    """Error object returned by the Zabbix server."""

    def __init__(self, code: int, message: str, data: str = ""):
        super().__init__(f"Zabbix API error {code}: {message} - {data}")
        self.code = code
        self.message = message
        self.data = data


class ExpectedOneResult(ZabbixError):
    """A lookup by id matched zero or several objects."""

    def __init__(self, count: int):
        super().__init__(f"Expected exactly one result, got {count}.")
        self.count = count


class ExpectedMore(ZabbixError):
    """A delete call removed a different number of objects than requested."""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Expected {expected}, got {got}.")
        self.expected = expected
        self.got = got
