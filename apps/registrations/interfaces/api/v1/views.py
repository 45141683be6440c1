"""
Registrations API v1 views.
"""
import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import StandardPagination
from apps.events.domain.exceptions import EventNotFoundError
from apps.events.infrastructure.repositories import DjangoEventRepository
from apps.users.infrastructure.identity import identity_from_user
from apps.users.infrastructure.repositories import DjangoUserHistoryRepository
from ....application.dtos.registration_dto import RegistrationCreateDTO, RegistrationDTO
from ....application.use_cases import RegisterForEventUseCase
from ....domain.value_objects.policies import DuplicatePolicy
from ....infrastructure.repositories import DjangoRegistrationRepository
from ...serializers.registration_serializer import (
    RegistrationSerializer,
    RegistrationCreateSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    'EVENT_NOT_FOUND': status.HTTP_404_NOT_FOUND,
    'INVALID_INPUT': status.HTTP_400_BAD_REQUEST,
    'DUPLICATE_REGISTRATION': status.HTTP_409_CONFLICT,
    'PARTIAL_FAILURE': status.HTTP_500_INTERNAL_SERVER_ERROR,
}

PARTIAL_FAILURE_MESSAGE = 'Failed to register. Please try again.'


def submitted_fields(data) -> dict:
    """Raw registration fields present in the request body."""
    if not hasattr(data, 'get'):
        return {}
    return {
        name: data.get(name)
        for name in RegistrationCreateSerializer().fields
        if name in data
    }


def build_register_use_case() -> RegisterForEventUseCase:
    """Wire the registration use case from settings."""
    return RegisterForEventUseCase(
        event_repository=DjangoEventRepository(),
        registration_repository=DjangoRegistrationRepository(),
        user_history_repository=DjangoUserHistoryRepository(),
        duplicate_policy=DuplicatePolicy(settings.REGISTRATION_DUPLICATE_POLICY),
        atomic=settings.REGISTRATION_ATOMIC_WRITES,
    )


def error_response(result) -> Response:
    """Map a failed registration result to an HTTP response."""
    if result.error_code == 'UNAUTHORIZED':
        reason = result.details.get('reason')
        status_code = (
            status.HTTP_401_UNAUTHORIZED if reason == 'unauthenticated'
            else status.HTTP_403_FORBIDDEN
        )
        return Response(
            {'error': result.error, 'code': result.error_code, 'reason': reason},
            status=status_code,
        )

    if result.error_code == 'PARTIAL_FAILURE':
        # Which steps committed is logged, not exposed.
        return Response(
            {'error': PARTIAL_FAILURE_MESSAGE, 'code': result.error_code},
            status=ERROR_STATUS['PARTIAL_FAILURE'],
        )

    return Response(
        {'error': result.error, 'code': result.error_code, **result.details},
        status=ERROR_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST),
    )


@extend_schema(tags=['Registrations'])
class EventRegistrationView(APIView):
    """Register for an event and list an event's registrations."""

    def get_permissions(self):
        if self.request.method == 'POST':
            # The use case owns the identity check.
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        request=RegistrationCreateSerializer,
        responses={201: RegistrationSerializer, 200: RegistrationSerializer},
        summary="Register the current student for an event",
    )
    def post(self, request, event_id: str):
        # Field checks belong to the use case, after identity and event.
        identity = identity_from_user(request.user)
        fields = submitted_fields(request.data)
        if identity is not None and 'email' not in fields:
            fields['email'] = identity.email

        result = build_register_use_case().execute(
            RegistrationCreateDTO(event_id=event_id, identity=identity, **fields)
        )
        if not result.success:
            return error_response(result)

        status_code = status.HTTP_201_CREATED if result.data.created else status.HTTP_200_OK
        return Response(RegistrationSerializer(result.data).data, status=status_code)

    @extend_schema(
        responses={200: RegistrationSerializer(many=True)},
        summary="List registrations for an event",
    )
    def get(self, request, event_id: str):
        if DjangoEventRepository().find_by_id(event_id) is None:
            raise EventNotFoundError(event_id)

        repository = DjangoRegistrationRepository()
        paginator = StandardPagination()
        page_size = paginator.get_page_size(request)
        page_number = self._page_number(request, paginator)
        registrations = repository.find_by_event(
            event_id,
            offset=(page_number - 1) * page_size,
            limit=page_size,
        )
        serializer = RegistrationSerializer(
            [RegistrationDTO.from_entity(registration) for registration in registrations],
            many=True,
        )
        return Response(
            {
                'count': repository.count_by_event(event_id),
                'page': page_number,
                'page_size': page_size,
                'results': serializer.data,
            }
        )

    def _page_number(self, request, paginator) -> int:
        try:
            return max(int(request.query_params.get(paginator.page_query_param, 1)), 1)
        except ValueError:
            return 1
