"""
Report the state of the database schema.

Lists the existing tables, checks that every table the billing models expect
is present, lists stored functions (PostgreSQL only) and optionally prints the
columns of the key tables.

Usage:
    python manage.py check_database
    python manage.py check_database --columns
    python manage.py check_database --database replica
"""

import logging

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, connections

logger = logging.getLogger(__name__)

# Apps whose tables must exist for billing and admin features to work
CHECKED_APPS = ("authentication", "payments", "storefront")

# Models whose column layout is printed with --columns
KEY_MODELS = (
    "authentication.Profile",
    "payments.Invoice",
    "payments.PaymentRecord",
    "payments.Refund",
)


class Command(BaseCommand):
    help = "Check which tables, columns and functions exist in the database"

    def add_arguments(self, parser):
        parser.add_argument(
            "--columns",
            action="store_true",
            help="Print the columns of the profile, invoice, payment and refund tables",
        )
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to inspect (default: %(default)s)",
        )

    def handle(self, *args, **options):
        connection = connections[options["database"]]

        self.stdout.write(self.style.MIGRATE_HEADING("Existing tables:"))
        existing_tables = sorted(connection.introspection.table_names())
        for table in existing_tables:
            self.stdout.write(f"  {table}")

        self.stdout.write(self.style.MIGRATE_HEADING("\nBilling tables:"))
        missing_tables = []
        for table in self.expected_tables():
            if table in existing_tables:
                self.stdout.write(f"  {self.style.SUCCESS('OK')}      {table}")
            else:
                missing_tables.append(table)
                self.stdout.write(f"  {self.style.ERROR('MISSING')} {table}")

        if connection.vendor == "postgresql":
            self.stdout.write(self.style.MIGRATE_HEADING("\nFunctions:"))
            for name in self.function_names(connection):
                self.stdout.write(f"  {name}()")

        if options["columns"]:
            self.stdout.write(self.style.MIGRATE_HEADING("\nKey table columns:"))
            for label in KEY_MODELS:
                table = apps.get_model(label)._meta.db_table
                if table not in existing_tables:
                    continue
                self.stdout.write(f"\n  {table}:")
                for column, field_type, nullable in self.table_columns(connection, table):
                    suffix = ", nullable" if nullable else ""
                    self.stdout.write(f"    - {column} ({field_type}{suffix})")

        self.stdout.write(self.style.MIGRATE_HEADING("\nSummary:"))
        self.stdout.write(f"  Tables found: {len(existing_tables)}")
        self.stdout.write(f"  Billing tables missing: {len(missing_tables)}")

        if missing_tables:
            logger.warning(
                "Database is missing tables",
                extra={"missing_tables": missing_tables, "database": options["database"]},
            )
            raise CommandError(
                f"Missing tables: {', '.join(missing_tables)}. Run 'manage.py migrate'."
            )

        self.stdout.write(self.style.SUCCESS("  Database schema looks complete."))

    @staticmethod
    def expected_tables():
        tables = []
        for app_label in CHECKED_APPS:
            for model in apps.get_app_config(app_label).get_models():
                tables.append(model._meta.db_table)
        return sorted(tables)

    @staticmethod
    def function_names(connection):
        with connection.cursor() as cursor:
            cursor.execute(
                "SELECT routine_name FROM information_schema.routines "
                "WHERE routine_schema = 'public' AND routine_type = 'FUNCTION' "
                "ORDER BY routine_name"
            )
            return [row[0] for row in cursor.fetchall()]

    @staticmethod
    def table_columns(connection, table):
        """Return (name, django field type, nullable) for each column of a table."""
        introspection = connection.introspection
        with connection.cursor() as cursor:
            description = introspection.get_table_description(cursor, table)
        columns = []
        for column in description:
            try:
                field_type = introspection.get_field_type(column.type_code, column)
            except KeyError:
                # No Django field equivalent, keep the backend type
                field_type = str(column.type_code)
            columns.append((column.name, field_type, bool(column.null_ok)))
        return columns
