"""
URL routing for the league application API.
"""

from rest_framework.routers import DefaultRouter

from league.views import PlayerViewSet, SeasonViewSet, TeamViewSet

router = DefaultRouter()
router.register(r"seasons", SeasonViewSet, basename="seasons")
router.register(r"teams", TeamViewSet, basename="teams")
router.register(r"players", PlayerViewSet, basename="players")
urlpatterns = router.urls
