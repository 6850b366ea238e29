from __future__ import annotations

from functools import wraps

from flask import g, session

from ..common.responses import json_error
from ..core.enums import UserType
from ..core.exceptions import AuthorizationError
from .session import SessionContext


def current_session() -> SessionContext | None:
    return SessionContext.load(session)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_session()
        if ctx is None:
            return json_error("Please log in to continue", 401)
        g.session_context = ctx
        return view(*args, **kwargs)

    return wrapper


def role_required(*types: UserType):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = current_session()
            if ctx is None:
                return json_error("Please log in to continue", 401)
            if not ctx.has_role(*types):
                return json_error("You do not have access to this page", 403)
            g.session_context = ctx
            return view(*args, **kwargs)

        return wrapper

    return decorator


def ensure_student_access(ctx: SessionContext, student_id: str) -> None:
    """Students may only see their own records; staff accounts see any."""
    if ctx.user_type == UserType.STUDENT and str(student_id) != ctx.user_id:
        raise AuthorizationError("You can only view your own records")


def ensure_center_access(ctx: SessionContext, center_id: str) -> None:
    if ctx.user_type == UserType.CLIENT and str(center_id) != ctx.center_id:
        raise AuthorizationError("You can only view your own centre")
    if ctx.user_type == UserType.STUDENT:
        raise AuthorizationError("You do not have access to this page")
