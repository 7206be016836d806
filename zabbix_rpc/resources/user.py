# user.py
# https://www.zabbix.com/documentation/current/en/manual/api/reference/user/object
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from .base import (
    ZabbixObject,
    create_objects,
    delete_ids,
    delete_objects,
    get_objects,
    get_one,
    update_objects,
)
from .usergroup import UserGroupID

if TYPE_CHECKING:
    from ..api import API


class User(ZabbixObject):
    userid: Optional[str] = None
    username: str
    # never returned by user.get
    passwd: Optional[str] = None
    roleid: Optional[str] = None
    name: str = ""
    surname: str = ""
    usrgrps: Optional[List[UserGroupID]] = None


def get(api: "API", params: Optional[Dict[str, Any]] = None) -> List[User]:
    return get_objects(api, "user.get", User, params)


def get_by_id(api: "API", user_id: str) -> User:
    return get_one(api, "user.get", User, {"userids": user_id})


def create(api: "API", users: Sequence[User]) -> List[str]:
    return create_objects(api, "user.create", users, "userids", "userid")


def update(api: "API", users: Sequence[User]) -> None:
    update_objects(api, "user.update", users)


def delete(api: "API", users: Sequence[User]) -> None:
    """Clears userid on every user if the call succeeded."""
    delete_objects(api, "user.delete", users, "userids", "userid")


def delete_by_ids(api: "API", ids: Sequence[str]) -> List[str]:
    return delete_ids(api, "user.delete", ids, "userids")
