"""
API Views for the League application.
"""

from rest_framework import filters, viewsets
from rest_framework.permissions import IsAuthenticated

from core.permissions import HasCurrentOrganization
from league.models import Player, Season, Team
from league.serializers import PlayerSerializer, SeasonSerializer, TeamSerializer


class SeasonViewSet(viewsets.ModelViewSet):
    """
    API endpoint for Seasons.
    """

    permission_classes = [IsAuthenticated, HasCurrentOrganization]
    serializer_class = SeasonSerializer

    def get_queryset(self):
        """
        Return the seasons of the CURRENT tenant only.

        Season.objects is a TenantScopedManager, so the queryset is
        AUTOMATICALLY filtered by the current organization.
        """
        return Season.objects.all()


class TeamViewSet(viewsets.ModelViewSet):
    """
    API endpoint for Teams. Filter by season with ?season=<id>.
    """

    permission_classes = [IsAuthenticated, HasCurrentOrganization]
    serializer_class = TeamSerializer

    def get_queryset(self):
        queryset = Team.objects.select_related("season")
        season_id = self.request.query_params.get("season")
        if season_id and season_id.isdigit():
            queryset = queryset.filter(season_id=season_id)
        return queryset


class PlayerViewSet(viewsets.ModelViewSet):
    """
    API endpoint for Players. Filter by team with ?team=<id>, search by name with ?search=.
    """

    permission_classes = [IsAuthenticated, HasCurrentOrganization]
    serializer_class = PlayerSerializer

    filter_backends = [filters.SearchFilter]
    search_fields = ["first_name", "last_name"]

    def get_queryset(self):
        queryset = Player.objects.select_related("team")
        team_id = self.request.query_params.get("team")
        if team_id and team_id.isdigit():
            queryset = queryset.filter(team_id=team_id)
        return queryset
