import base64
import logging

import pytest

from course_api.auth.credentials import (
    BadCredentials,
    MalformedCredentials,
    MissingCredentials,
    UserNotFound,
    authenticate,
    parse_basic_credentials,
    verify_credentials,
)


def _basic(raw: str) -> str:
    return 'Basic ' + base64.b64encode(raw.encode('utf-8')).decode('ascii')


def test_parse_basic_credentials_splits_name_and_password() -> None:
    assert parse_basic_credentials(_basic('joe@smith.com:joepassword')) == ('joe@smith.com', 'joepassword')


def test_parse_basic_credentials_keeps_colons_in_password() -> None:
    assert parse_basic_credentials(_basic('joe@smith.com:a:b:c')) == ('joe@smith.com', 'a:b:c')


def test_parse_basic_credentials_accepts_lowercase_scheme() -> None:
    header = 'basic ' + base64.b64encode(b'joe@smith.com:pw').decode('ascii')

    assert parse_basic_credentials(header) == ('joe@smith.com', 'pw')


@pytest.mark.parametrize('header', [None, ''])
def test_parse_basic_credentials_rejects_missing_header(header) -> None:
    with pytest.raises(MissingCredentials):
        parse_basic_credentials(header)


@pytest.mark.parametrize(
    'header',
    [
        'Bearer abc.def.ghi',
        'Basic',
        'Basic %%%not-base64%%%',
        _basic('no-separator-here'),
        'Basic ' + base64.b64encode(b'\xff\xfe:\xfd').decode('ascii'),
    ],
)
def test_parse_basic_credentials_rejects_malformed_header(header: str) -> None:
    with pytest.raises(MalformedCredentials):
        parse_basic_credentials(header)


def test_verify_credentials_returns_matching_user(db, make_user) -> None:
    user = make_user('joe@smith.com', 'joepassword')

    assert verify_credentials(db, 'joe@smith.com', 'joepassword').id == user.id


def test_verify_credentials_raises_user_not_found_for_unknown_email(db, make_user) -> None:
    make_user('joe@smith.com', 'joepassword')

    with pytest.raises(UserNotFound):
        verify_credentials(db, 'sally@jones.com', 'joepassword')


def test_verify_credentials_raises_bad_credentials_for_wrong_password(db, make_user) -> None:
    make_user('joe@smith.com', 'joepassword')

    with pytest.raises(BadCredentials):
        verify_credentials(db, 'joe@smith.com', 'not-it')


def test_verify_credentials_email_lookup_is_case_sensitive(db, make_user) -> None:
    make_user('joe@smith.com', 'joepassword')

    with pytest.raises(UserNotFound):
        verify_credentials(db, 'JOE@SMITH.COM', 'joepassword')


def test_verify_credentials_writes_audit_lines(db, make_user, caplog: pytest.LogCaptureFixture) -> None:
    make_user('joe@smith.com', 'joepassword')
    caplog.set_level(logging.INFO, logger='course_api.auth.credentials')

    verify_credentials(db, 'joe@smith.com', 'joepassword')
    with pytest.raises(BadCredentials):
        verify_credentials(db, 'joe@smith.com', 'wrong')
    with pytest.raises(UserNotFound):
        verify_credentials(db, 'ghost@smith.com', 'wrong')

    records = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.INFO, 'Authentication successful for email: joe@smith.com') in records
    assert (logging.WARNING, 'Authentication failure for email: joe@smith.com') in records
    assert (logging.WARNING, 'User not found for username: ghost@smith.com') in records


def test_authenticate_reads_authorization_header(db, make_user) -> None:
    user = make_user('joe@smith.com', 'joepassword')

    resolved = authenticate({'authorization': _basic('joe@smith.com:joepassword')}, db)

    assert resolved.id == user.id


def test_authenticate_without_header_raises_missing_credentials(db) -> None:
    with pytest.raises(MissingCredentials):
        authenticate({}, db)
