from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date, parse_month, today_local
from ..common.logging import get_logger
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import Role
from ..core.exceptions import (
    AuthorizationError,
    EntryRejected,
    NotFoundError,
    UnauthorizedStatusTransition,
    ValidationError,
)
from .model import TimeEntry

log = get_logger(__name__)


def entry_to_dict(e: TimeEntry) -> dict:
    return {
        "id": e.entry_id,
        "user_id": e.user_id,
        "project_id": e.project_id,
        "workplace_id": e.workplace_id,
        "date": e.work_date.strftime("%Y-%m-%d"),
        "start_time": e.start_time,
        "end_time": e.end_time,
        "total_hours": round(e.total_hours, 2),
        "day_hours": round(e.day_hours, 2),
        "evening_hours": round(e.evening_hours, 2),
        "night_hours": round(e.night_hours, 2),
        "is_split": e.is_split,
        "parent_entry_id": e.parent_entry_id,
        "status": e.status.value,
        "description": e.description or "No description provided.",
    }


def register(app: Flask, container) -> None:
    service = container.time_entry_service

    def _fail(message: str, code: int, **extra):
        return jsonify({"success": False, "message": message, **extra}), code

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return _fail("Unauthorized", 401)
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return _fail("Unauthorized", 401)
            if session.get("role") not in {Role.ADMIN.value, Role.SUPER_ADMIN.value}:
                return _fail("Forbidden", 403)
            return view(*args, **kwargs)

        return wrapper

    def _handle(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except EntryRejected as e:
                return _fail(str(e), 400, reason=e.reason.value)
            except ValidationError as e:
                return _fail(str(e), 400)
            except AuthorizationError as e:
                return _fail(str(e), 403)
            except NotFoundError as e:
                return _fail(str(e), 404)
            except UnauthorizedStatusTransition as e:
                return _fail(str(e), 409)
            except Exception:
                log.exception("time_entry_request_failed", path=request.path)
                return _fail("Internal Server Error", 500)

        return wrapper

    @app.route("/api/time-entries", methods=["POST"], endpoint="log_time")
    @login_required
    @_handle
    def log_time():
        data = request.get_json(silent=True) or {}
        result = service.log_time(
            user_id=int(session["user_id"]),
            work_date=parse_iso_date(str(data.get("date", ""))),
            start_time=str(data.get("start_time", "")),
            end_time=str(data.get("end_time", "")),
            project_id=data.get("project_id"),
            workplace_id=data.get("workplace_id"),
            description=data.get("description"),
        )
        return jsonify({
            "success": True,
            "message": result.message,
            "entry_ids": list(result.entry_ids),
            "status": result.status.value,
            "overlap_flagged": bool(result.overlaps),
        }), 201

    @app.route("/api/time-entries/<int:entry_id>/approve", methods=["POST"], endpoint="approve_time_entry")
    @admin_required
    @_handle
    def approve_time_entry(entry_id: int):
        entry = service.approve_entry(
            current_role=Role(session["role"]),
            company_id=session.get("company_id"),
            entry_id=entry_id,
        )
        return jsonify({"success": True, "entry": entry_to_dict(entry)})

    @app.route("/api/time-entries/<int:entry_id>/reject", methods=["POST"], endpoint="reject_time_entry")
    @admin_required
    @_handle
    def reject_time_entry(entry_id: int):
        entry = service.reject_entry(
            current_role=Role(session["role"]),
            company_id=session.get("company_id"),
            entry_id=entry_id,
        )
        return jsonify({"success": True, "entry": entry_to_dict(entry)})

    @app.route("/api/time-entries/pending", methods=["GET"], endpoint="pending_time_entries")
    @admin_required
    @_handle
    def pending_time_entries():
        rows = service.list_pending(current_role=Role(session["role"]), company_id=session.get("company_id"))
        return jsonify({"success": True, "entries": [entry_to_dict(e) for e in rows]})

    @app.route("/api/time-entries/me", methods=["GET"], endpoint="my_time_entries")
    @login_required
    @_handle
    def my_time_entries():
        user_id = int(session["user_id"])
        limit = request.args.get("limit", default=DEFAULT_HISTORY_LIMIT, type=int)
        month_arg = request.args.get("month")
        month = parse_month(month_arg) if month_arg else today_local().replace(day=1)
        rows = service.list_history(user_id=user_id, limit=limit)
        summary = service.month_summary(user_id=user_id, month=month)
        return jsonify({
            "success": True,
            "entries": [entry_to_dict(e) for e in rows],
            "summary": {"month": month.strftime("%Y-%m"), **summary.rounded()},
        })
