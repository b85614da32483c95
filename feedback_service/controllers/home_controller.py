from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from feedback_service.extensions import db


def home_index():
    return jsonify({
        "message": "Feedback service is running",
    })


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
