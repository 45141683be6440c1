#!/usr/bin/env python
"""Reset event registration counters to the number of distinct registration records.

Usage:
    python scripts/reconcile_registration_counts.py            # every event
    python scripts/reconcile_registration_counts.py EVT1 EVT2  # selected events
"""
import os
import sys

import django

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')
django.setup()

from apps.events.domain.exceptions import EventNotFoundError
from apps.events.infrastructure.models import EventModel
from apps.events.infrastructure.repositories import DjangoEventRepository
from apps.registrations.application.use_cases import ReconcileRegistrationCountUseCase
from apps.registrations.infrastructure.repositories import DjangoRegistrationRepository


def reconcile(event_ids):
    """Reconcile the given events; returns (checked, corrected, missing)."""
    use_case = ReconcileRegistrationCountUseCase(
        event_repository=DjangoEventRepository(),
        registration_repository=DjangoRegistrationRepository(),
    )
    checked = corrected = missing = 0
    for event_id in event_ids:
        try:
            result = use_case.execute(event_id)
        except EventNotFoundError:
            print(f"  {event_id}: not found")
            missing += 1
            continue
        checked += 1
        if result.data.changed:
            corrected += 1
            print(f"  {event_id}: {result.data.previous} -> {result.data.current}")
    return checked, corrected, missing


def main(argv):
    event_ids = argv or list(EventModel.objects.values_list('id', flat=True))
    print(f"Reconciling {len(event_ids)} event(s)...")
    checked, corrected, missing = reconcile(event_ids)
    print(f"Done: {checked} checked, {corrected} corrected, {missing} missing")
    return 1 if missing else 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
