from functools import wraps

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db


class DatabaseError(Exception):
    """Storage failure, carrying the operation-named message shown to users."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


# ديكوريتور لتحويل أخطاء قاعدة البيانات إلى رسالة عامة
def database_operation(message):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except SQLAlchemyError as error:
                db.session.rollback()
                current_app.logger.error('Database Error in %s: %s', f.__name__, error)
                raise DatabaseError(message) from error
        return decorated_function
    return decorator
