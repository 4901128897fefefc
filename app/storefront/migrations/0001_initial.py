from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SiteSettings",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "site_name",
                    models.CharField(
                        default="OMEGA",
                        help_text="Site name shown to customers",
                        max_length=100,
                    ),
                ),
                (
                    "contact_email",
                    models.EmailField(
                        default="contact@omega.com",
                        help_text="Public contact email",
                        max_length=254,
                    ),
                ),
                (
                    "currency",
                    models.CharField(
                        choices=[
                            ("EUR", "Euro"),
                            ("USD", "US dollar"),
                            ("GBP", "Pound sterling"),
                        ],
                        default="EUR",
                        help_text="Shop currency",
                        max_length=3,
                    ),
                ),
            ],
            options={
                "verbose_name": "site settings",
                "verbose_name_plural": "site settings",
            },
        ),
    ]
