"""
JSON-RPC 2.0 envelopes as spoken by api_jsonrpc.php.

Requests carry method, params, id and (optionally) the auth token.
Responses carry the same id and exactly one of "result" or "error".
"""
import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .errors import DecodeError

JSONRPC_VERSION = "2.0"

# Zabbix only accepts compound params
Params = Union[Dict[str, Any], List[Any]]
RequestID = Union[int, str]


class RPCRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Params
    id: RequestID
    auth: Optional[str] = None


class RPCError(BaseModel):
    code: int
    message: str
    data: str = ""

    @field_validator("data", mode="before")
    @classmethod
    def null_data(cls, v: Any) -> Any:
        return "" if v is None else v

    def __str__(self) -> str:
        return f"{self.code} ({self.message}): {self.data}"


class RPCResponse(BaseModel):
    jsonrpc: str
    id: Optional[RequestID]
    result: Any = None
    error: Optional[RPCError] = None

    @model_validator(mode="after")
    def check_result_or_error(self) -> "RPCResponse":
        has_result = "result" in self.model_fields_set
        has_error = "error" in self.model_fields_set and self.error is not None
        if has_result == has_error:
            raise ValueError("response must carry exactly one of 'result' or 'error'")
        return self


def dump_params(params: Any) -> Params:
    """
    Turn whatever a wrapper passes as params into a JSON object or array.

    Pydantic models are dumped by alias without unset optional fields;
    None becomes an empty object. Scalars are rejected.
    """
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(params, dict):
        return {k: _dump_value(v) for k, v in params.items()}
    if isinstance(params, (list, tuple)):
        return [_dump_value(v) for v in params]
    raise TypeError(f"params must be a mapping or a sequence, not {type(params).__name__}")


def _dump_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {k: _dump_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_dump_value(v) for v in value]
    return value


def encode_request(
    method: str,
    params: Any,
    request_id: RequestID,
    auth: Optional[str] = None,
) -> bytes:
    payload: Dict[str, Any] = {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": dump_params(params),
        "id": request_id,
    }
    if auth is not None:
        payload["auth"] = auth
    return json.dumps(payload).encode("utf-8")


def decode_request(raw: bytes) -> RPCRequest:
    try:
        return RPCRequest.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"malformed JSON-RPC request: {exc}") from exc


def decode_response(raw: Union[bytes, str]) -> RPCResponse:
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise DecodeError(f"response is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError(f"response is not a JSON-RPC envelope: {type(data).__name__}")

    try:
        return RPCResponse.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"malformed JSON-RPC response: {exc}") from exc
