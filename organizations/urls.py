"""
URL routing for the organizations application API.
"""

from rest_framework.routers import SimpleRouter

from organizations.views import OrganizationViewSet

router = SimpleRouter()
router.register(r"organizations", OrganizationViewSet, basename="organizations")
urlpatterns = router.urls
