"""
Custom management command to generate demo data.
"""

import random
from datetime import date, timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from core.context import tenant_context
from league.models import Player, Season, Team
from organizations.models import Organization
from organizations.services import OrganizationInput, OrganizationService

User = get_user_model()

FIRST_NAMES = ["Alex", "Sam", "Jordan", "Taylor", "Casey", "Riley", "Morgan", "Jamie", "Avery", "Quinn"]
LAST_NAMES = ["Smith", "Garcia", "Nguyen", "Brown", "Kowalski", "Okafor", "Rossi", "Larsen", "Silva", "Khan"]
TEAM_NAMES = ["Hawks", "Tigers", "Comets", "Sharks", "Wolves", "Falcons", "Rockets", "Bears"]
COLORS = ["#114477", "#AA3322", "#228833", "#CCBB44", "#6633AA", "#EE7733"]


class Command(BaseCommand):
    help = "Generates demo data for the League Platform"

    def add_arguments(self, parser):
        parser.add_argument("--seasons", type=int, default=2, help="Number of seasons to generate")
        parser.add_argument("--teams", type=int, default=4, help="Number of teams per season")
        parser.add_argument("--players", type=int, default=12, help="Number of players per team")
        parser.add_argument("--owner-email", default="demo@example.com", help="Owner of the demo organization")

    def handle(self, *args, **options):
        num_seasons = options["seasons"]
        num_teams = options["teams"]
        num_players = options["players"]

        self.stdout.write(
            f" Starting demo data generation (Seasons: {num_seasons}, Teams: {num_teams}, Players: {num_players})..."
        )

        owner, created = User.objects.get_or_create(email=options["owner_email"])
        if created:
            owner.set_password("demo-password")
            owner.save()

        org = Organization.objects.filter(owner=owner).order_by("pk").first()
        if not org:
            org = OrganizationService().create_organization(
                owner, OrganizationInput(name="Demo League", primary_color="#114477")
            )

        # Pin the tenant so new rows are assigned to the demo organization
        with tenant_context(org):
            today = date.today()
            players_to_create = []

            for season_index in range(num_seasons):
                starts_on = today - timedelta(days=365 * season_index)
                season = Season.objects.create(
                    name=f"Season {starts_on.year}",
                    starts_on=starts_on,
                    ends_on=starts_on + timedelta(days=120),
                    is_active=season_index == 0,
                )

                for team_name in random.sample(TEAM_NAMES, k=min(num_teams, len(TEAM_NAMES))):
                    team = Team.objects.create(season=season, name=team_name, color=random.choice(COLORS))

                    for jersey_number in range(1, num_players + 1):
                        players_to_create.append(
                            Player(
                                organization=org,
                                team=team,
                                first_name=random.choice(FIRST_NAMES),
                                last_name=random.choice(LAST_NAMES),
                                jersey_number=jersey_number,
                            )
                        )

            # bulk_create skips save(), so the organization is set explicitly above
            Player.objects.bulk_create(players_to_create)

        self.stdout.write(
            self.style.SUCCESS(f" Done! Created {len(players_to_create)} players for organization '{org.name}'.")
        )
