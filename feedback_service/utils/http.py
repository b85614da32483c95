from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError

from feedback_service.utils.result import Ok


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: Optional[str], status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def envelope(result: Ok, schema: Optional[Schema] = None, status: int = 200):
    """Render a successful result as {success, error, result}, dumping the payload through schema."""
    payload = schema.dump(result.result) if schema is not None else result.result
    return ok(result.to_dict(payload), status)


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        return schema_cls().load(data), None
    except ValidationError as e:
        return None, e.messages
