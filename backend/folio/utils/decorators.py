from functools import wraps
from flask import g
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from folio.domain.exceptions import Unauthenticated


def user_required(fn):
    """
    Requires a valid access token and exposes its identity (the user id
    issued by the session provider) as ``g.current_user_id``.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        identity = get_jwt_identity()
        if not identity:
            raise Unauthenticated("Token carries no user identity")

        g.current_user_id = str(identity)
        return fn(*args, **kwargs)
    return wrapper
