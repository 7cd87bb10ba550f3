from flask import current_app
from flask_login import login_user
from werkzeug.datastructures import MultiDict

from data.errors import DatabaseError, database_operation
from forms.auth_forms import CredentialsForm
from models.user import User

CREDENTIALS_SIGNIN = 'CredentialsSignin'
CALLBACK_ROUTE_ERROR = 'CallbackRouteError'


class AuthError(Exception):
    def __init__(self, type, message=None):
        super().__init__(message or type)
        self.type = type


@database_operation('Failed to fetch user.')
def get_user(email):
    return User.query.filter_by(email=email).first()


def authorize(email, password):
    """Return the user whose stored hash matches ``password``, else None.

    An unknown email and a wrong password are indistinguishable here.
    """
    credentials = CredentialsForm(formdata=MultiDict({'email': email or '', 'password': password or ''}))
    if credentials.validate():
        user = get_user(credentials.email.data)
        if user and user.check_password(credentials.password.data):
            return user

    current_app.logger.info('Invalid credentials')
    return None


def sign_in(email, password):
    try:
        user = authorize(email, password)
    except DatabaseError as error:
        raise AuthError(CALLBACK_ROUTE_ERROR, error.message) from error
    if user is None:
        raise AuthError(CREDENTIALS_SIGNIN)
    login_user(user)
    return user


def authenticate(email, password):
    try:
        sign_in(email, password)
    except AuthError as error:
        if error.type == CREDENTIALS_SIGNIN:
            return 'Invalid credentials.'
        return 'Something went wrong.'
    return None
