"""
Pytest configuration and fixtures.
"""
import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def student_user(django_user_model):
    """A student account."""
    return django_user_model.objects.create_user(
        email='student@example.com',
        username='student',
        password='testpass123',
        role='student',
    )


@pytest.fixture
def organizer_user(django_user_model):
    """An organizer account; organizers may not register."""
    return django_user_model.objects.create_user(
        email='organizer@example.com',
        username='organizer',
        password='testpass123',
        role='organizer',
    )


@pytest.fixture
def staff_user(django_user_model):
    """A staff account allowed to list registrations."""
    return django_user_model.objects.create_superuser(
        email='admin@example.com',
        username='admin',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, student_user):
    """Create an API client authenticated as a student."""
    api_client.force_authenticate(user=student_user)
    return api_client


@pytest.fixture
def event(db):
    """A persisted event with a zero counter."""
    from apps.events.infrastructure.models import EventModel
    return EventModel.objects.create(id='evt42', name='Hackathon', venue='Main Hall')
