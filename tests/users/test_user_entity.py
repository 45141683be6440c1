"""
Tests for the user aggregate.
"""
from apps.users.domain.entities.user import User


def make_user():
    return User.create(
        email='asha@example.com',
        username='asha',
        hashed_password='hashed',
    )


def test_record_login_touches_timestamps():
    user = make_user()
    before = user.updated_at

    user.record_login()

    assert user.last_login is not None
    assert user.updated_at >= before


def test_create_records_signup_event():
    user = make_user()

    events = user.clear_domain_events()

    assert [event.event_type for event in events] == ['UserSignedUp']
    assert user.clear_domain_events() == []
