"""
Tests for the event registration endpoint.
"""
import pytest

from apps.events.infrastructure.models import EventModel
from apps.registrations.infrastructure.models import RegistrationModel
from apps.users.infrastructure.models import UserEventModel
from apps.users.infrastructure.repositories import DjangoUserHistoryRepository

URL = '/api/v1/events/evt42/registrations/'

FORM = {
    'name': 'Asha',
    'usn': '1AB21CS001',
    'email': 'asha@example.com',
    'semester': '5',
}


def counter():
    return EventModel.objects.get(id='evt42').registrations


@pytest.fixture
def failing_history(monkeypatch):
    def add_event(self, user_id, event_id):
        raise RuntimeError('user store unavailable')

    monkeypatch.setattr(DjangoUserHistoryRepository, 'add_event', add_event)


@pytest.mark.django_db
class TestRegister:

    def test_register(self, authenticated_client, event, student_user):
        response = authenticated_client.post(URL, FORM, format='json')

        assert response.status_code == 201
        assert response.data['registration_id'] == 'evt42_1AB21CS001'
        assert RegistrationModel.objects.filter(id='evt42_1AB21CS001').exists()
        assert counter() == 1
        assert UserEventModel.objects.filter(user=student_user, event_id='evt42').exists()

    def test_resubmission_overwrites(self, authenticated_client, event, student_user):
        authenticated_client.post(URL, FORM, format='json')

        response = authenticated_client.post(URL, {**FORM, 'name': 'Asha K'}, format='json')

        assert response.status_code == 200
        assert RegistrationModel.objects.get().name == 'Asha K'
        assert UserEventModel.objects.filter(user=student_user).count() == 1
        assert counter() == 2

    def test_email_defaults_to_account_email(self, authenticated_client, event):
        form = {key: value for key, value in FORM.items() if key != 'email'}

        response = authenticated_client.post(URL, form, format='json')

        assert response.status_code == 201
        assert response.data['email'] == 'student@example.com'

    def test_unauthenticated(self, api_client, event):
        response = api_client.post(URL, FORM, format='json')

        assert response.status_code == 401
        assert response.data['reason'] == 'unauthenticated'
        assert not RegistrationModel.objects.exists()

    def test_organizer_forbidden(self, api_client, event, organizer_user):
        api_client.force_authenticate(user=organizer_user)

        response = api_client.post(URL, FORM, format='json')

        assert response.status_code == 403
        assert response.data['reason'] == 'forbidden_role'
        assert counter() == 0

    def test_unknown_event(self, authenticated_client, db):
        response = authenticated_client.post(
            '/api/v1/events/missing/registrations/', FORM, format='json'
        )

        assert response.status_code == 404
        assert response.data['code'] == 'EVENT_NOT_FOUND'

    def test_blank_field(self, authenticated_client, event):
        response = authenticated_client.post(URL, {**FORM, 'usn': '  '}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_INPUT'
        assert response.data['field'] == 'usn'
        assert counter() == 0

    def test_partial_failure_keeps_earlier_writes(self, authenticated_client, event, failing_history):
        response = authenticated_client.post(URL, FORM, format='json')

        assert response.status_code == 500
        assert response.data == {
            'error': 'Failed to register. Please try again.',
            'code': 'PARTIAL_FAILURE',
        }
        assert RegistrationModel.objects.filter(id='evt42_1AB21CS001').exists()
        assert counter() == 1
        assert not UserEventModel.objects.exists()

    def test_atomic_writes_roll_back(self, authenticated_client, event, failing_history, settings):
        settings.REGISTRATION_ATOMIC_WRITES = True

        response = authenticated_client.post(URL, FORM, format='json')

        assert response.status_code == 500
        assert not RegistrationModel.objects.exists()
        assert counter() == 0

    def test_reject_policy(self, authenticated_client, event, settings):
        settings.REGISTRATION_DUPLICATE_POLICY = 'reject'
        authenticated_client.post(URL, FORM, format='json')

        response = authenticated_client.post(URL, {**FORM, 'name': 'Someone Else'}, format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'DUPLICATE_REGISTRATION'
        assert RegistrationModel.objects.get().name == 'Asha'
        assert counter() == 1


@pytest.mark.django_db
class TestListRegistrations:

    def test_staff_can_list(self, api_client, authenticated_client, event, staff_user):
        authenticated_client.post(URL, FORM, format='json')
        authenticated_client.post(URL, {**FORM, 'usn': '1AB21CS002'}, format='json')
        api_client.force_authenticate(user=staff_user)

        response = api_client.get(URL)

        assert response.status_code == 200
        assert response.data['count'] == 2
        assert {row['usn'] for row in response.data['results']} == {'1AB21CS001', '1AB21CS002'}

    def test_student_cannot_list(self, authenticated_client, event):
        response = authenticated_client.get(URL)

        assert response.status_code == 403

    def test_list_unknown_event(self, api_client, staff_user, db):
        api_client.force_authenticate(user=staff_user)

        response = api_client.get('/api/v1/events/missing/registrations/')

        assert response.status_code == 404


@pytest.mark.django_db
class TestRegisterCheckOrder:

    def test_anonymous_with_overlong_field_is_unauthenticated(self, api_client, event):
        response = api_client.post(URL, {**FORM, 'usn': 'X' * 65}, format='json')

        assert response.status_code == 401
        assert response.data['code'] == 'UNAUTHORIZED'

    def test_anonymous_with_non_text_field_on_unknown_event(self, api_client, db):
        response = api_client.post(
            '/api/v1/events/missing/registrations/', {**FORM, 'name': ['a']}, format='json'
        )

        assert response.status_code == 401

    def test_organizer_with_overlong_field_is_forbidden(self, api_client, event, organizer_user):
        api_client.force_authenticate(user=organizer_user)

        response = api_client.post(URL, {**FORM, 'usn': 'X' * 65}, format='json')

        assert response.status_code == 403

    def test_unknown_event_before_field_checks(self, authenticated_client, db):
        response = authenticated_client.post(
            '/api/v1/events/missing/registrations/', {**FORM, 'usn': 'X' * 65}, format='json'
        )

        assert response.status_code == 404
        assert response.data['code'] == 'EVENT_NOT_FOUND'

    def test_overlong_field_is_invalid_input(self, authenticated_client, event):
        response = authenticated_client.post(URL, {**FORM, 'usn': 'X' * 65}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_INPUT'
        assert response.data['field'] == 'usn'
        assert not RegistrationModel.objects.exists()
        assert counter() == 0

    def test_non_text_field_is_invalid_input(self, authenticated_client, event):
        response = authenticated_client.post(URL, {**FORM, 'name': ['a']}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_INPUT'
        assert response.data['field'] == 'name'

    def test_form_encoded_body(self, authenticated_client, event):
        response = authenticated_client.post(URL, FORM)

        assert response.status_code == 201
