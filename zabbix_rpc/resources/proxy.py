# proxy.py
# https://www.zabbix.com/documentation/current/en/manual/api/reference/proxy/object
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from .base import (
    StrInt,
    ZabbixObject,
    create_objects,
    delete_ids,
    delete_objects,
    get_objects,
    get_one,
    update_objects,
)

if TYPE_CHECKING:
    from ..api import API


class ProxyStatus(IntEnum):
    ACTIVE = 5
    PASSIVE = 6


class Proxy(ZabbixObject):
    proxyid: Optional[str] = None
    host: str
    status: StrInt
    description: Optional[str] = None
    tls_connect: Optional[StrInt] = None
    tls_accept: Optional[StrInt] = None
    tls_issuer: Optional[str] = None
    tls_subject: Optional[str] = None
    tls_psk_identity: Optional[str] = None
    tls_psk: Optional[str] = None
    proxy_address: Optional[str] = None


def get(api: "API", params: Optional[Dict[str, Any]] = None) -> List[Proxy]:
    return get_objects(api, "proxy.get", Proxy, params)


def get_by_id(api: "API", proxy_id: str) -> Proxy:
    return get_one(api, "proxy.get", Proxy, {"proxyids": proxy_id})


def create(api: "API", proxies: Sequence[Proxy]) -> List[str]:
    return create_objects(api, "proxy.create", proxies, "proxyids", "proxyid")


def update(api: "API", proxies: Sequence[Proxy]) -> None:
    update_objects(api, "proxy.update", proxies)


def delete(api: "API", proxies: Sequence[Proxy]) -> None:
    """Clears proxyid on every proxy if the call succeeded."""
    delete_objects(api, "proxy.delete", proxies, "proxyids", "proxyid")


def delete_by_ids(api: "API", ids: Sequence[str]) -> List[str]:
    return delete_ids(api, "proxy.delete", ids, "proxyids")
