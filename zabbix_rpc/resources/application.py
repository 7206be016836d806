# application.py
# https://www.zabbix.com/documentation/3.2/manual/api/reference/application/object
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

if TYPE_CHECKING:
    from ..api import API


class Application(ZabbixObject):
    applicationid: Optional[str] = None
    hostid: str
    name: str
    templateid: Optional[str] = None


def get(api: "API", params: Optional[Dict[str, Any]] = None) -> List[Application]:
    """Wrapper for application.get (output defaults to "extend")."""
    return get_objects(api, "application.get", Application, params)


def get_by_id(api: "API", application_id: str) -> Application:
    """
    Return the application with this id; ExpectedOneResult unless exactly
    one matches.
    """
    return get_one(api, "application.get", Application, {"applicationids": application_id})


def get_by_host_id_and_name(api: "API", host_id: str, name: str) -> Application:
    return get_one(
        api,
        "application.get",
        Application,
        {"hostids": host_id, "filter": {"name": name}},
    )


def create(api: "API", apps: Sequence[Application]) -> List[str]:
    """Wrapper for application.create; fills in applicationid on each app."""
    return create_objects(api, "application.create", apps, "applicationids", "applicationid")


def update(api: "API", apps: Sequence[Application]) -> None:
    update_objects(api, "application.update", apps)


def delete(api: "API", apps: Sequence[Application]) -> None:
    """
    Wrapper for application.delete.
    Clears applicationid on every app once the delete succeeded.
    """
    delete_objects(api, "application.delete", apps, "applicationids", "applicationid")


def delete_by_ids(api: "API", ids: Sequence[str]) -> List[str]:
    return delete_ids(api, "application.delete", ids, "applicationids")
