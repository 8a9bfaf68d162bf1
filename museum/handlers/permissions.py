"""Permission classes for admin-only endpoints."""

from rest_framework import permissions

from museum.container import get_container

BEARER_PREFIX = "bearer"


def bearer_token(request) -> str | None:
    header = request.headers.get("Authorization", "")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX:
        return None
    return parts[1]


class IsAdminToken(permissions.BasePermission):
    """Require a bearer token carrying the admin claim.

    A failed check raises UnauthorizedError so the response is 401 before
    any store is touched. The verified capability is kept on
    ``request.admin``.
    """

    def has_permission(self, request, view) -> bool:
        request.admin = get_container().admin_gate.verify(bearer_token(request))
        return True
