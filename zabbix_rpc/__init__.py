"""
Typed client for the Zabbix JSON-RPC API.

    from zabbix_rpc import API, Config
    from zabbix_rpc.resources import proxy

    api = API(Config(url="https://zabbix.example.se/api_jsonrpc.php"))
    api.login("Admin", "zabbix")
    for p in proxy.get(api):
        print(p.proxyid, p.host)
"""
from .api import API
from .config import Config
from .envelope import Params, RPCError, RPCRequest, RPCResponse
from .errors import (
    APIError,
    DecodeError,
    ExpectedMore,
    ExpectedOneResult,
    TransportError,
    ZabbixError,
)

__version__ = "0.1.0"

__all__ = [
    "API",
    "Config",
    "Params",
    "RPCError",
    "RPCRequest",
    "RPCResponse",
    "APIError",
    "DecodeError",
    "ExpectedMore",
    "ExpectedOneResult",
    "TransportError",
    "ZabbixError",
]
