from __future__ import annotations

import csv
import io
import re
from functools import wraps
from typing import Any, Iterable, Mapping, Sequence

from flask import current_app, jsonify, request, session

from ..core.exceptions import AuthenticationError, ValidationError
from ..users.model import Volunteer

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_keys(data: Mapping[str, Any]) -> dict:
    """``{"classLevel": ...}`` -> ``{"class_level": ...}`` (one level deep)."""

    return {_CAMEL_BOUNDARY.sub("_", str(k)).lower(): v for k, v in data.items()}


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return snake_keys(data)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def current_volunteer() -> Volunteer:
    v = session.get("volunteer")
    if not v:
        raise AuthenticationError("Please select your center to continue")
    return Volunteer(
        volunteer_id=v["volunteer_id"],
        name=v["name"],
        center_id=v["center_id"],
        center_name=v.get("center_name", ""),
    )


def volunteer_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "volunteer" not in session:
            return json_error("Please select your center to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def csv_response(*, rows: Iterable[dict], fieldnames: Sequence[str], filename: str):
    """Write rows to a CSV attachment.

    Shared helper used by the report and history exports.
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(fieldnames))
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    csv_bytes = out.getvalue().encode("utf-8-sig")
    return current_app.response_class(
        csv_bytes,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
