"""
Serializers for the League application.
"""

from rest_framework import serializers

from league.models import Player, Season, Team


class SeasonSerializer(serializers.ModelSerializer):
    class Meta:
        model = Season
        fields = ["id", "name", "starts_on", "ends_on", "is_active"]
        read_only_fields = ["id"]

    def validate(self, data):
        starts_on = data.get("starts_on", getattr(self.instance, "starts_on", None))
        ends_on = data.get("ends_on", getattr(self.instance, "ends_on", None))
        if starts_on and ends_on and ends_on < starts_on:
            raise serializers.ValidationError({"ends_on": "A season cannot end before it starts."})
        return data


class TeamSerializer(serializers.ModelSerializer):
    # Pass the manager, not .all(): DRF re-evaluates it per request, inside the tenant scope.
    season = serializers.PrimaryKeyRelatedField(queryset=Season.objects)

    class Meta:
        model = Team
        fields = ["id", "season", "name", "color"]
        read_only_fields = ["id"]


class PlayerSerializer(serializers.ModelSerializer):
    team = serializers.PrimaryKeyRelatedField(queryset=Team.objects)

    class Meta:
        model = Player
        fields = ["id", "team", "first_name", "last_name", "date_of_birth", "jersey_number"]
        read_only_fields = ["id"]
