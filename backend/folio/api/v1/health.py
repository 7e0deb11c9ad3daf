from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from folio.extensions import db
from folio.models.base import utcnow
from . import v1_bp


@v1_bp.route('/health', methods=['GET'])
def health_check():
    """Liveness plus a round trip to the database."""
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        current_app.logger.exception("Health check could not reach the database")
        return jsonify({
            "status": "unhealthy",
            "service": "folio",
            "database": "unreachable",
            "timestamp": utcnow().isoformat(),
        }), 503

    return jsonify({
        "status": "ok",
        "service": "folio",
        "database": "connected",
        "timestamp": utcnow().isoformat(),
    })
