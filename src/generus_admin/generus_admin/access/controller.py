from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING

from flask import Flask, abort, current_app, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..common.validators import require_id, require_non_empty
from ..core.constants import KNOWN_FEATURES
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..students.model import OrgUnit, TransferRequest
from ..students.permissions import (
    can_archive_student,
    can_hard_delete_student,
    can_request_transfer,
    can_review_transfer_request,
    can_soft_delete_student,
    can_transfer_student,
    needs_approval,
)
from ..users.model import UserProfile
from .forms import (
    get_auto_filled_org_values,
    get_required_org_fields,
    should_show_daerah_filter,
    should_show_desa_filter,
    should_show_kelompok_filter,
)
from .policy import (
    allowed_features,
    can_access_feature,
    can_manage_materials,
    can_view_student,
    get_data_filter,
    get_scope_filter,
    is_material_coordinator,
)
from .scope import get_teacher_scope, resolve_org_scope

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

CONTAINER_KEY = "generus_admin.container"


def _container() -> "Container":
    return current_app.extensions[CONTAINER_KEY]


def current_profile() -> UserProfile:
    """Profile of the session user, loaded once per request."""
    cached = g.get("profile")
    if cached is not None:
        return cached

    user_id = session.get("user_id")
    if not user_id:
        abort(401)

    profile = _container().profiles_repo.get_by_id(str(user_id))
    if profile is None:
        logger.warning("Session user %s has no profile", user_id)
        abort(401)

    g.profile = profile
    return profile


def feature_required(feature: str):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            profile = current_profile()
            if not can_access_feature(profile, feature):
                raise AuthorizationError(f"Feature '{feature}' is not available for this account")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container: "Container") -> None:
    app.extensions[CONTAINER_KEY] = container

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e: AuthorizationError):
        return jsonify({"error": str(e)}), 403

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.route("/api/access/me", endpoint="access_me")
    def access_me():
        profile = current_profile()
        scope = resolve_org_scope(profile)
        teacher_scope = get_teacher_scope(profile)
        return jsonify(
            {
                "id": profile.id,
                "role": profile.role.value if profile.role else None,
                "scope": {
                    "level": scope.level.value if scope.level else None,
                    "org_id": scope.org_id,
                },
                "teacher_scope": teacher_scope.value if teacher_scope else None,
                "data_filter": get_data_filter(profile),
                "scope_filter": get_scope_filter(profile),
                "features": allowed_features(profile, KNOWN_FEATURES),
                "can_manage_materials": can_manage_materials(profile),
                "is_material_coordinator": is_material_coordinator(profile),
                "forms": {
                    "show_daerah_filter": should_show_daerah_filter(profile),
                    "show_desa_filter": should_show_desa_filter(profile),
                    "show_kelompok_filter": should_show_kelompok_filter(profile),
                    "required_org_fields": get_required_org_fields(profile),
                    "auto_filled": get_auto_filled_org_values(profile),
                },
            }
        )

    @app.route("/api/features/<feature>", endpoint="feature_check")
    def feature_check(feature: str):
        profile = current_profile()
        if not can_access_feature(profile, feature):
            raise AuthorizationError(f"Feature '{feature}' is not available for this account")
        return jsonify({"feature": feature, "allowed": True})

    @app.route("/api/dashboard/filter", endpoint="dashboard_filter")
    @feature_required("dashboard")
    def dashboard_filter():
        return jsonify({"data_filter": get_data_filter(current_profile())})

    @app.route("/api/meetings/<meeting_id>/permissions", endpoint="meeting_permissions")
    async def meeting_permissions(meeting_id: str):
        profile = current_profile()
        allowed = await container.meeting_access_service.can_edit_or_delete_meeting(meeting_id, profile.id)
        return jsonify({"meeting_id": meeting_id, "can_edit": allowed, "can_delete": allowed})

    @app.route("/api/meetings/<meeting_id>/attendance-permission", endpoint="attendance_permission")
    async def attendance_permission(meeting_id: str):
        profile = current_profile()
        class_id = require_non_empty(request.args.get("class_id"), "class_id")

        # missing and unreadable meetings look the same to the caller
        chain = await container.meeting_access_service.get_meeting_chain(meeting_id)
        if chain is None:
            raise NotFoundError("Meeting not found")

        allowed = await container.meeting_access_service.can_edit_attendance(profile, chain.teacher_id, class_id)
        return jsonify({"meeting_id": meeting_id, "class_id": class_id, "can_edit": allowed})

    @app.route("/api/students/<student_id>/permissions", endpoint="student_permissions")
    def student_permissions(student_id: str):
        profile = current_profile()
        student = container.students_repo.get_by_id(require_id(student_id, "student_id"))
        if student is None:
            raise NotFoundError("Student not found")

        return jsonify(
            {
                "student_id": student.id,
                "can_view": can_view_student(profile, student),
                "can_archive": can_archive_student(profile, student),
                "can_transfer": can_transfer_student(profile, student),
                "can_soft_delete": can_soft_delete_student(profile, student),
                "can_hard_delete": can_hard_delete_student(profile, student),
                "can_request_transfer": can_request_transfer(profile, student),
            }
        )

    @app.route("/api/students/<student_id>/transfer-check", endpoint="student_transfer_check")
    def student_transfer_check(student_id: str):
        profile = current_profile()
        student = container.students_repo.get_by_id(require_id(student_id, "student_id"))
        if student is None:
            raise NotFoundError("Student not found")

        destination = OrgUnit(
            daerah_id=require_non_empty(request.args.get("to_daerah_id"), "to_daerah_id"),
            desa_id=require_non_empty(request.args.get("to_desa_id"), "to_desa_id"),
            kelompok_id=require_non_empty(request.args.get("to_kelompok_id"), "to_kelompok_id"),
        )
        if not can_request_transfer(profile, student):
            raise AuthorizationError("Not allowed to transfer this student")

        transfer = TransferRequest.for_student(student, destination, profile.id)
        return jsonify(
            {
                "student_id": student.id,
                "needs_approval": needs_approval(profile, transfer),
                "can_self_review": can_review_transfer_request(profile, transfer),
            }
        )
