"""
Tests for the registration write transaction against in-memory stores.
"""
from uuid import uuid4

import pytest

from apps.events.domain.entities.event import Event
from apps.registrations.application.dtos.registration_dto import RegistrationCreateDTO
from apps.registrations.application.use_cases import RegisterForEventUseCase
from apps.registrations.domain.value_objects.policies import DuplicatePolicy
from apps.users.domain.value_objects.identity import Identity
from tests.fakes import (
    InMemoryEventRepository,
    InMemoryRegistrationRepository,
    InMemoryUserHistoryRepository,
)


@pytest.fixture
def events():
    return InMemoryEventRepository([Event(id='evt42', name='Hackathon')])


@pytest.fixture
def records():
    return InMemoryRegistrationRepository()


@pytest.fixture
def history():
    return InMemoryUserHistoryRepository()


@pytest.fixture
def student():
    return Identity(uid=uuid4(), email='asha@example.com', role='student')


@pytest.fixture
def use_case(events, records, history):
    return RegisterForEventUseCase(
        event_repository=events,
        registration_repository=records,
        user_history_repository=history,
    )


def submission(identity, event_id='evt42', **overrides):
    fields = {
        'name': 'Asha',
        'usn': '1AB21CS001',
        'email': 'asha@example.com',
        'semester': '5',
    }
    fields.update(overrides)
    return RegistrationCreateDTO(event_id=event_id, identity=identity, **fields)


class TestSuccessfulRegistration:

    def test_all_three_writes_happen(self, use_case, events, records, history, student):
        result = use_case.execute(submission(student))

        assert result.success
        assert result.data.created is True
        assert records.exists('evt42_1AB21CS001')
        assert events.counter('evt42') == 1
        assert history.find_events(student.uid) == {'evt42'}

    def test_record_key_is_event_id_and_usn(self, use_case, records, student):
        result = use_case.execute(submission(student, usn='1AB21CS007'))

        assert result.data.registration_id == 'evt42_1AB21CS007'
        stored = records.find_by_id('evt42_1AB21CS007')
        assert stored.event_id == 'evt42'
        assert stored.usn == '1AB21CS007'
        assert stored.submitted_by == student.uid

    def test_fields_are_stored_trimmed(self, use_case, records, student):
        use_case.execute(submission(student, name='  Asha  ', usn=' 1AB21CS001 '))

        stored = records.find_by_id('evt42_1AB21CS001')
        assert stored.details.name == 'Asha'

    def test_resubmission_overwrites_record(self, use_case, records, student):
        use_case.execute(submission(student, name='Asha'))
        result = use_case.execute(submission(student, name='Asha K', semester='6'))

        assert result.success
        assert result.data.created is False
        assert records.count_by_event('evt42') == 1
        stored = records.find_by_id('evt42_1AB21CS001')
        assert stored.details.name == 'Asha K'
        assert stored.details.semester == '6'

    def test_resubmission_still_increments_counter(self, use_case, events, student):
        use_case.execute(submission(student))
        use_case.execute(submission(student))

        assert events.counter('evt42') == 2

    def test_counter_counts_each_usn(self, use_case, events, records, student):
        use_case.execute(submission(student, usn='1AB21CS001'))
        use_case.execute(submission(student, usn='1AB21CS002'))

        assert events.counter('evt42') == 2
        assert records.count_by_event('evt42') == 2

    def test_history_is_a_set(self, use_case, history, student):
        use_case.execute(submission(student, usn='1AB21CS001'))
        use_case.execute(submission(student, usn='1AB21CS002'))

        assert history.find_events(student.uid) == {'evt42'}

    def test_history_keeps_other_events(self, events, records, history, student):
        events.save(Event(id='evt43', name='Workshop'))
        use_case = RegisterForEventUseCase(events, records, history)

        use_case.execute(submission(student, event_id='evt42'))
        use_case.execute(submission(student, event_id='evt43'))

        assert history.find_events(student.uid) == {'evt42', 'evt43'}


class TestPreconditions:

    def assert_nothing_written(self, events, records, history, student):
        assert records.records == {}
        assert events.counter('evt42') == 0
        assert history.find_events(student.uid) == set()

    def test_unauthenticated(self, use_case, events, records, history, student):
        result = use_case.execute(submission(None))

        assert not result.success
        assert result.error_code == 'UNAUTHORIZED'
        assert result.details['reason'] == 'unauthenticated'
        self.assert_nothing_written(events, records, history, student)

    @pytest.mark.parametrize('role', ['organizer', 'admin'])
    def test_non_student_role(self, use_case, events, records, history, student, role):
        organizer = Identity(uid=uuid4(), email='org@example.com', role=role)

        result = use_case.execute(submission(organizer))

        assert result.error_code == 'UNAUTHORIZED'
        assert result.details['reason'] == 'forbidden_role'
        self.assert_nothing_written(events, records, history, student)

    def test_identity_checked_before_event(self, use_case):
        result = use_case.execute(submission(None, event_id='missing'))

        assert result.error_code == 'UNAUTHORIZED'

    def test_identity_checked_before_fields(self, use_case):
        result = use_case.execute(submission(None, usn='X' * 65, name=['a']))

        assert result.error_code == 'UNAUTHORIZED'

    def test_event_checked_before_fields(self, use_case, student):
        result = use_case.execute(submission(student, event_id='missing', usn='X' * 65))

        assert result.error_code == 'EVENT_NOT_FOUND'

    def test_overlong_field(self, use_case, events, records, history, student):
        result = use_case.execute(submission(student, usn='X' * 65))

        assert result.error_code == 'INVALID_INPUT'
        assert result.details['field'] == 'usn'
        self.assert_nothing_written(events, records, history, student)

    def test_unknown_event(self, use_case, records, history, student):
        result = use_case.execute(submission(student, event_id='missing'))

        assert result.error_code == 'EVENT_NOT_FOUND'
        assert records.records == {}
        assert history.find_events(student.uid) == set()

    @pytest.mark.parametrize('field', ['name', 'usn', 'email', 'semester'])
    @pytest.mark.parametrize('value', ['', '   '])
    def test_empty_field(self, use_case, events, records, history, student, field, value):
        result = use_case.execute(submission(student, **{field: value}))

        assert result.error_code == 'INVALID_INPUT'
        assert result.details['field'] == field
        self.assert_nothing_written(events, records, history, student)


class TestPartialFailure:

    def test_counter_failure_keeps_record(self, use_case, events, records, history, student):
        events.fail_increment = True

        result = use_case.execute(submission(student))

        assert not result.success
        assert result.error_code == 'PARTIAL_FAILURE'
        assert result.details['step'] == 'counter'
        assert result.details['completed_steps'] == ['record']
        assert result.details['rolled_back'] is False
        assert records.exists('evt42_1AB21CS001')
        assert events.counter('evt42') == 0
        assert history.find_events(student.uid) == set()

    def test_history_failure_keeps_record_and_counter(self, use_case, events, records, history, student):
        history.fail_add = True

        result = use_case.execute(submission(student))

        assert result.details['step'] == 'history'
        assert result.details['completed_steps'] == ['record', 'counter']
        assert records.exists('evt42_1AB21CS001')
        assert events.counter('evt42') == 1

    def test_record_failure_stops_pipeline(self, use_case, events, records, history, student):
        records.fail_write = True

        result = use_case.execute(submission(student))

        assert result.details['step'] == 'record'
        assert result.details['completed_steps'] == []
        assert events.counter('evt42') == 0
        assert history.find_events(student.uid) == set()

    def test_failure_is_logged(self, use_case, events, student, caplog):
        events.fail_increment = True

        with caplog.at_level('ERROR', logger='apps.registrations'):
            use_case.execute(submission(student))

        assert "failed at step 'counter'" in caplog.text


class TestRejectPolicy:

    @pytest.fixture
    def use_case(self, events, records, history):
        return RegisterForEventUseCase(
            event_repository=events,
            registration_repository=records,
            user_history_repository=history,
            duplicate_policy=DuplicatePolicy.REJECT,
        )

    def test_first_submission_succeeds(self, use_case, events, student):
        result = use_case.execute(submission(student))

        assert result.success
        assert events.counter('evt42') == 1

    def test_duplicate_is_rejected_without_writes(self, use_case, events, records, student):
        use_case.execute(submission(student, name='Asha'))

        result = use_case.execute(submission(student, name='Someone Else'))

        assert result.error_code == 'DUPLICATE_REGISTRATION'
        assert result.details['registration_id'] == 'evt42_1AB21CS001'
        assert records.find_by_id('evt42_1AB21CS001').details.name == 'Asha'
        assert events.counter('evt42') == 1
