import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("category", models.CharField(db_index=True, max_length=100)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("images", models.JSONField(blank=True, help_text="List of image URLs", null=True)),
                (
                    "attributes",
                    models.JSONField(blank=True, help_text="List of {name, value} attribute objects", null=True),
                ),
                (
                    "specifications",
                    models.JSONField(blank=True, help_text="Free-form specification object", null=True),
                ),
                (
                    "ratings",
                    models.JSONField(blank=True, help_text="Rating summary, e.g. {average, count}", null=True),
                ),
                ("reviews", models.JSONField(blank=True, help_text="List of review objects", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="products",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "products",
                "ordering": ["-created_at"],
            },
        ),
    ]
