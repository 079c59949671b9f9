"""
Middleware binding the tenant context to each request.
Supports both JWT (API clients) and Session (browser) authentication.
"""

import logging

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from core.context import TenantContext, activate, deactivate

logger = logging.getLogger(__name__)


def get_request_principal(request):
    """
    Returns the authenticated user of the request, or None.

    Session users are set by AuthenticationMiddleware. JWT users are only known
    to DRF views, so the bearer token is checked here as well.
    """
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user

    try:
        auth_result = JWTAuthentication().authenticate(request)
    except AuthenticationFailed:
        # Let the view answer 401 if it requires authentication
        logger.debug("Ignoring invalid bearer token while resolving tenant context")
        return None

    if auth_result is None:
        return None
    return auth_result[0]


class TenantContextMiddleware:
    """
    Gives every request its own TenantContext.

    The organization is resolved from the principal's memberships on first use
    and memoized for the rest of the request. The context is always unbound
    afterwards so nothing leaks into the next request served by this worker.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        context = TenantContext(principal=lambda: get_request_principal(request))
        request.tenant_context = context

        token = activate(context)
        try:
            return self.get_response(request)
        finally:
            deactivate(token)
