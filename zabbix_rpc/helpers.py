from typing import Any, Dict, List, Optional, Sequence, TypeVar

from .errors import DecodeError, ExpectedMore, ExpectedOneResult

T = TypeVar("T")


def with_default_output(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Copy of params with output="extend" unless the caller chose an output.
    """
    p = dict(params or {})
    p.setdefault("output", "extend")
    return p


def expect_one(items: Sequence[T]) -> T:
    if len(items) != 1:
        raise ExpectedOneResult(len(items))
    return items[0]


def extract_ids(result: Any, key: str) -> List[str]:
    """
    Pull the id list out of a create/delete result such as
    {"applicationids": ["1", "2"]}.

    Some server versions return a mapping ({"0": "1", "1": "2"}) instead
    of a list; both are accepted.
    """
    if not isinstance(result, dict) or key not in result:
        raise DecodeError(f"result has no '{key}': {result!r}")

    ids = result[key]
    if isinstance(ids, dict):
        ids = list(ids.values())
    if not isinstance(ids, list):
        raise DecodeError(f"'{key}' is neither a list nor a mapping: {ids!r}")
    return [str(i) for i in ids]


def check_deleted(ids: Sequence[str], deleted: Sequence[Any]) -> None:
    if len(ids) != len(deleted):
        raise ExpectedMore(len(ids), len(deleted))


def assign_ids(objs: Sequence[Any], ids: Sequence[str], attr: str) -> None:
    for obj, new_id in zip(objs, ids):
        setattr(obj, attr, new_id)


def collect_ids(objs: Sequence[Any], attr: str) -> List[str]:
    return [getattr(obj, attr) for obj in objs]


def clear_ids(objs: Sequence[Any], attr: str) -> None:
    for obj in objs:
        setattr(obj, attr, None)
