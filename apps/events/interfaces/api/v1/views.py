"""
Events API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.use_cases import GetEventUseCase
from ....infrastructure.repositories import DjangoEventRepository
from ...serializers.event_serializer import EventSerializer


@extend_schema(tags=['Events'])
class EventDetailView(APIView):
    """Event detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: EventSerializer},
        summary="Get event by ID",
    )
    def get(self, request, event_id: str):
        use_case = GetEventUseCase(event_repository=DjangoEventRepository())
        result = use_case.execute(event_id)
        return Response(EventSerializer(result.data).data)
