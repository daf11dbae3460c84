"""
Shared FastAPI dependencies.
"""

from fastapi import Header, Request

from affiliate_ops.services.action_log import ActionLog


def get_action_log(request: Request) -> ActionLog:
    """The undo history owned by the running app."""
    return request.app.state.action_log


def get_current_user_id(x_user_id: str = Header(default="")) -> str:
    """
    Id of the user making the request.

    Authentication sits in front of this service and passes
    the user id along in X-User-Id. Missing means unknown,
    which is recorded as an empty string.
    """
    return x_user_id
