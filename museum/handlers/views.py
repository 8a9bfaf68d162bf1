"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave error mapping to museum_exception_handler
- Never contain business logic

Successful responses carry ``"success": true`` next to their payload.
"""

from django.http import HttpRequest, HttpResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from museum.container import get_container
from museum.handlers.permissions import IsAdminToken
from museum.handlers.serializers import (
    AdminLoginSerializer,
    BookingInputSerializer,
    BookingSerializer,
    DashboardStatsSerializer,
    IdentitySyncSerializer,
    PaymentOrderSerializer,
    SlotQuerySerializer,
    SlotSerializer,
    TicketTypeAvailabilitySerializer,
    TicketTypeInputSerializer,
    TicketTypeSerializer,
    VisitorSerializer,
)


def health(request: HttpRequest) -> HttpResponse:
    return HttpResponse("Museum booking API is running...", content_type="text/plain")


class PaymentOrderView(APIView):
    """Handler for POST /api/razorpay/order"""

    def post(self, request: Request) -> Response:
        serializer = PaymentOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = get_container().payments.create_order(**serializer.validated_data)
        return Response({"success": True, "order": order})


class IdentitySyncView(APIView):
    """Handler for POST /api/auth/sync"""

    def post(self, request: Request) -> Response:
        serializer = IdentitySyncSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = get_container().identity.sync(**serializer.validated_data)
        return Response({"success": True, "user": VisitorSerializer(identity).data})


class AdminLoginView(APIView):
    """Handler for POST /api/auth/admin-login"""

    def post(self, request: Request) -> Response:
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        token = get_container().admin_gate.login(**serializer.validated_data)
        return Response({"success": True, "token": token})


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_container().ledger.create_booking(serializer.to_draft())
        return Response(
            {"success": True, "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


class VisitorBookingListView(APIView):
    """Handler for GET /api/bookings/{uid}"""

    def get(self, request: Request, uid: str) -> Response:
        bookings = get_container().ledger.list_for_visitor(uid)
        return Response({"success": True, "bookings": BookingSerializer(bookings, many=True).data})


class AnalyticsView(APIView):
    """Handler for GET /api/analytics"""

    permission_classes = [IsAdminToken]

    def get(self, request: Request) -> Response:
        stats = get_container().analytics.compute_stats()
        return Response(
            {
                "success": True,
                "stats": DashboardStatsSerializer(stats).data,
                "recentBookings": BookingSerializer(stats.recent_bookings, many=True).data,
            }
        )


class TicketTypeListView(APIView):
    """Handler for GET/POST /api/ticket-types

    Listing is public; ``?date=`` adds remaining capacity per type.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAdminToken()]
        return [AllowAny()]

    def get(self, request: Request) -> Response:
        rows = get_container().availability.annotate_availability(
            request.query_params.get("date")
        )
        return Response(
            {"success": True, "types": TicketTypeAvailabilitySerializer(rows, many=True).data}
        )

    def post(self, request: Request) -> Response:
        serializer = TicketTypeInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket_type = get_container().catalog.create(serializer.to_draft())
        return Response(
            {"success": True, "type": TicketTypeSerializer(ticket_type).data},
            status=status.HTTP_201_CREATED,
        )


class TicketTypeDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/ticket-types/{ticket_type_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAdminToken()]

    def get(self, request: Request, ticket_type_id: str) -> Response:
        ticket_type = get_container().catalog.get(ticket_type_id)
        return Response({"success": True, "type": TicketTypeSerializer(ticket_type).data})

    def put(self, request: Request, ticket_type_id: str) -> Response:
        serializer = TicketTypeInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        ticket_type = get_container().catalog.update(ticket_type_id, serializer.validated_data)
        return Response({"success": True, "type": TicketTypeSerializer(ticket_type).data})

    def delete(self, request: Request, ticket_type_id: str) -> Response:
        get_container().catalog.delete(ticket_type_id)
        return Response({"success": True, "message": "Experience removed"})


class SlotProjectionView(APIView):
    """Handler for GET /api/ticket-types/{ticket_type_id}/slots"""

    permission_classes = [IsAdminToken]

    def get(self, request: Request, ticket_type_id: str) -> Response:
        query = SlotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        projection = get_container().availability.project_slots(
            ticket_type_id, horizon_days=query.validated_data["days"]
        )
        return Response(
            {
                "success": True,
                "slots": SlotSerializer(projection.slots, many=True).data,
                "experienceName": projection.experience_name,
            }
        )


class TicketVerificationView(APIView):
    """Handler for GET /api/verify-ticket/{booking_id}"""

    permission_classes = [IsAdminToken]

    def get(self, request: Request, booking_id: str) -> Response:
        verification = get_container().ledger.verify_ticket(booking_id)
        if verification.experience is not None:
            experience = TicketTypeSerializer(verification.experience).data
        else:
            experience = {"description": "General museum experience"}
        return Response(
            {
                "success": True,
                "booking": BookingSerializer(verification.booking).data,
                "experience": experience,
            }
        )
