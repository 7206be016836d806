# lld.py
# Low-level discovery rules (discoveryrule.*)
# https://www.zabbix.com/documentation/current/en/manual/api/reference/discoveryrule/object
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Union

from pydantic import Field, field_validator

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


class ItemType(IntEnum):
    ZABBIX_AGENT = 0
    SNMPV1_AGENT = 1
    ZABBIX_TRAPPER = 2
    SIMPLE_CHECK = 3
    SNMPV2_AGENT = 4
    ZABBIX_INTERNAL = 5
    SNMPV3_AGENT = 6
    ZABBIX_AGENT_ACTIVE = 7
    ZABBIX_AGGREGATE = 8
    WEB_ITEM = 9
    EXTERNAL_CHECK = 10
    DATABASE_MONITOR = 11
    IPMI_AGENT = 12
    SSH_AGENT = 13
    TELNET_AGENT = 14
    CALCULATED = 15
    JMX_AGENT = 16
    SNMP_TRAP = 17
    DEPENDENT = 18
    HTTP_AGENT = 19
    SNMP_AGENT = 20
    SCRIPT = 21


class LLDEvalType(str, Enum):
    AND_OR = "0"
    AND = "1"
    OR = "2"
    CUSTOM = "3"


class LLDOperator(str, Enum):
    MATCH = "8"
    NOT_MATCH = "9"
    EXISTS = "12"
    NOT_EXISTS = "13"


class LLDRuleFilterCondition(ZabbixObject):
    macro: str
    value: str
    formulaid: Optional[str] = None
    # operators added by later server versions pass through as plain strings
    operator: Optional[Union[LLDOperator, str]] = Field(default=None, union_mode="left_to_right")


class LLDRuleFilter(ZabbixObject):
    conditions: List[LLDRuleFilterCondition] = Field(default_factory=list)
    evaltype: LLDEvalType = LLDEvalType.AND_OR
    eval_formula: Optional[str] = None
    formula: str = ""


class LLDMacroPath(ZabbixObject):
    lld_macro: str
    path: str


class Preprocessor(ZabbixObject):
    type: str = ""
    params: str = ""
    error_handler: str = ""
    error_handler_params: str = ""


class LLDRule(ZabbixObject):
    itemid: Optional[str] = None
    delay: str
    hostid: str
    interfaceid: Optional[str] = None
    key: str = Field(alias="key_")
    name: str
    type: StrInt
    authtype: Optional[str] = None
    delay_flex: Optional[str] = None
    description: str = ""
    error: Optional[str] = None
    ipmi_sensor: Optional[str] = None
    lifetime: Optional[str] = None
    params: Optional[str] = None
    privatekey: Optional[str] = None
    publickey: Optional[str] = None
    status: Optional[str] = None
    trapper_hosts: Optional[str] = None
    master_itemid: Optional[str] = None

    # ssh / telnet
    username: Optional[str] = None
    password: Optional[str] = None
    port: Optional[str] = None

    # HTTP agent
    url: Optional[str] = None
    request_method: Optional[str] = None
    allow_traps: Optional[str] = None
    post_type: Optional[str] = None
    retrieve_mode: Optional[str] = None
    posts: Optional[str] = None
    status_codes: Optional[str] = None
    timeout: Optional[str] = None
    verify_host: Optional[str] = None
    verify_peer: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    http_proxy: Optional[str] = None
    follow_redirects: Optional[str] = None

    # SNMP
    snmp_oid: Optional[str] = None
    snmp_community: Optional[str] = None
    snmpv3_authpassphrase: Optional[str] = None
    snmpv3_authprotocol: Optional[str] = None
    snmpv3_contextname: Optional[str] = None
    snmpv3_privpassphrase: Optional[str] = None
    snmpv3_privprotocol: Optional[str] = None
    snmpv3_securitylevel: Optional[str] = None
    snmpv3_securityname: Optional[str] = None

    preprocessing: Optional[List[Preprocessor]] = None
    # only present when requested with selectFilter
    filter: Optional[LLDRuleFilter] = None
    lld_macro_paths: Optional[List[LLDMacroPath]] = None

    @field_validator("headers", mode="before")
    @classmethod
    def parse_headers(cls, v: Any) -> Any:
        # The server sends [] when a rule has no headers, and newer
        # versions send a list of {"name": ..., "value": ...}
        if v is None:
            return {}
        if isinstance(v, list):
            out: Dict[str, str] = {}
            for h in v:
                if not isinstance(h, dict) or "name" not in h:
                    raise ValueError(f"unexpected header entry: {h!r}")
                out[h["name"]] = h.get("value", "")
            return out
        return v


def _prepare(rules: Sequence[LLDRule]) -> List[Dict[str, Any]]:
    out = []
    for rule in rules:
        d = rule.to_params()
        if not d.get("headers"):
            d.pop("headers", None)
        out.append(d)
    return out


def get(api: "API", params: Optional[Dict[str, Any]] = None) -> List[LLDRule]:
    return get_objects(api, "discoveryrule.get", LLDRule, params)


def get_by_id(api: "API", item_id: str) -> LLDRule:
    return get_one(api, "discoveryrule.get", LLDRule, {"itemids": item_id})


def create(api: "API", rules: Sequence[LLDRule]) -> List[str]:
    return create_objects(api, "discoveryrule.create", rules, "itemids", "itemid", payload=_prepare(rules))


def update(api: "API", rules: Sequence[LLDRule]) -> None:
    update_objects(api, "discoveryrule.update", rules, payload=_prepare(rules))


def delete(api: "API", rules: Sequence[LLDRule]) -> None:
    """Clears itemid on every rule if the call succeeded."""
    delete_objects(api, "discoveryrule.delete", rules, "ruleids", "itemid")


def delete_by_ids(api: "API", ids: Sequence[str]) -> List[str]:
    """
    Wrapper for discoveryrule.delete.
    "ruleids" comes back as a list or, on some server versions, a mapping.
    """
    return delete_ids(api, "discoveryrule.delete", ids, "ruleids")
