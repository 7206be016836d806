# usergroup.py
# https://www.zabbix.com/documentation/current/en/manual/api/reference/usergroup/object
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


class UserGroupID(ZabbixObject):
    usrgrpid: str


class UserGroupPermission(ZabbixObject):
    id: str
    permission: StrInt


class UserGroup(ZabbixObject):
    usrgrpid: Optional[str] = None
    name: str
    debug_mode: StrInt = 0
    gui_access: StrInt = 0
    users_status: StrInt = 0
    hostgroup_rights: Optional[List[UserGroupPermission]] = None


def get(api: "API", params: Optional[Dict[str, Any]] = None) -> List[UserGroup]:
    return get_objects(api, "usergroup.get", UserGroup, params)


def get_by_id(api: "API", usrgrp_id: str) -> UserGroup:
    return get_one(api, "usergroup.get", UserGroup, {"usrgrpids": usrgrp_id})


def create(api: "API", groups: Sequence[UserGroup]) -> List[str]:
    return create_objects(api, "usergroup.create", groups, "usrgrpids", "usrgrpid")


def update(api: "API", groups: Sequence[UserGroup]) -> None:
    update_objects(api, "usergroup.update", groups)


def delete(api: "API", groups: Sequence[UserGroup]) -> None:
    delete_objects(api, "usergroup.delete", groups, "usrgrpids", "usrgrpid")


def delete_by_ids(api: "API", ids: Sequence[str]) -> List[str]:
    return delete_ids(api, "usergroup.delete", ids, "usrgrpids")
