from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="organization",
            name="primary_color",
            field=models.CharField(blank=True, max_length=255, null=True),
        ),
    ]
