"""
Tests for credential verification and the login exchange.
"""

import pytest

import data.auth
from data.auth import AuthError, CALLBACK_ROUTE_ERROR, authenticate, authorize, get_user, sign_in
from data.errors import DatabaseError


class TestAuthorize:

    def test_matching_password_returns_user(self, app):
        user = authorize('user@nextmail.com', '123456')
        assert user is not None
        assert user.name == 'User'

    def test_unknown_email(self, app):
        assert authorize('nobody@nextmail.com', '123456') is None

    def test_wrong_password(self, app):
        assert authorize('user@nextmail.com', 'wrong-password') is None

    def test_malformed_credentials(self, app):
        assert authorize('not-an-email', '123456') is None
        assert authorize('user@nextmail.com', '123') is None

    def test_password_is_stored_hashed(self, app):
        user = get_user('user@nextmail.com')
        assert user.password_hash != '123456'
        assert user.check_password('123456')

    def test_email_lookup_is_parameterised(self, app):
        assert get_user("x' OR '1'='1") is None


class TestAuthenticate:

    def test_success(self, app):
        with app.test_request_context():
            assert authenticate('user@nextmail.com', '123456') is None

    def test_bad_credentials_message(self, app):
        with app.test_request_context():
            assert authenticate('user@nextmail.com', 'nope-nope') == 'Invalid credentials.'
            assert authenticate('nobody@nextmail.com', '123456') == 'Invalid credentials.'

    def test_lookup_failure_is_generic(self, app, monkeypatch):
        def broken_lookup(email):
            raise DatabaseError('Failed to fetch user.')
        monkeypatch.setattr(data.auth, 'get_user', broken_lookup)

        with app.test_request_context():
            with pytest.raises(AuthError) as excinfo:
                sign_in('user@nextmail.com', '123456')
            assert excinfo.value.type == CALLBACK_ROUTE_ERROR
            assert authenticate('user@nextmail.com', '123456') == 'Something went wrong.'

    def test_unrecognised_errors_propagate(self, app, monkeypatch):
        def exploding_authorize(email, password):
            raise RuntimeError('boom')
        monkeypatch.setattr(data.auth, 'authorize', exploding_authorize)

        with app.test_request_context():
            with pytest.raises(RuntimeError):
                authenticate('user@nextmail.com', '123456')
