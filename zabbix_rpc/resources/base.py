"""
Shared plumbing for the per-object wrappers.

Every Zabbix object family follows the same get/create/update/delete
shape; the modules next to this one only name the method prefix, the
model and the id fields.
"""
from typing import TYPE_CHECKING, Annotated, Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer

from ..helpers import (
    assign_ids,
    check_deleted,
    clear_ids,
    collect_ids,
    expect_one,
    extract_ids,
    with_default_output,
)

if TYPE_CHECKING:
    from ..api import API

M = TypeVar("M", bound=BaseModel)

# Integers that Zabbix transmits as strings ("0", "5", ...)
StrInt = Annotated[int, PlainSerializer(lambda v: str(int(v)), return_type=str)]


class ZabbixObject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def get_objects(api: "API", method: str, model: Type[M], params: Optional[Dict[str, Any]] = None) -> List[M]:
    return api.call_with_error_parse(method, with_default_output(params), List[model])


def get_one(api: "API", method: str, model: Type[M], params: Dict[str, Any]) -> M:
    return expect_one(get_objects(api, method, model, params))


def create_objects(api: "API", method: str, objs: Sequence[ZabbixObject], key: str, attr: str, payload: Any = None) -> List[str]:
    response = api.call_with_error(method, payload if payload is not None else list(objs))
    ids = extract_ids(response.result, key)
    assign_ids(objs, ids, attr)
    return ids


def update_objects(api: "API", method: str, objs: Sequence[ZabbixObject], payload: Any = None) -> None:
    api.call_with_error(method, payload if payload is not None else list(objs))


def delete_ids(api: "API", method: str, ids: Sequence[str], key: str) -> List[str]:
    response = api.call_with_error(method, list(ids))
    deleted = extract_ids(response.result, key)
    check_deleted(ids, deleted)
    return deleted


def delete_objects(api: "API", method: str, objs: Sequence[ZabbixObject], key: str, attr: str) -> None:
    delete_ids(api, method, collect_ids(objs, attr), key)
    # only reached once the server confirmed every id
    clear_ids(objs, attr)
