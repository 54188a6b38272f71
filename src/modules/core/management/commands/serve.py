"""Open the database connection, then start the HTTP listener.

The listener only starts once the store answers; a failed connection is
logged and the command exits with a non-zero status.

The listener is Django's development server.  Production deployments
should serve ``config.wsgi.application`` from a WSGI server instead.
"""

from __future__ import annotations

import structlog
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import OperationalError, connections

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = (
        "Connect to the database and serve the product API with Django's "
        "development server. For production, run config.wsgi.application "
        "under a WSGI server."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--port",
            type=int,
            default=settings.SERVER_PORT,
            help="Port to listen on (default: SERVER_PORT).",
        )
        parser.add_argument(
            "--host",
            default="0.0.0.0",
            help="Interface to bind.",
        )

    def handle(self, *args, **options):
        connection = connections["default"]
        try:
            connection.ensure_connection()
        except OperationalError as exc:
            logger.error("database.connection_failed", error=str(exc))
            raise CommandError("Connection failed!") from exc

        logger.info("database.connected", vendor=connection.vendor)
        self.stdout.write(self.style.SUCCESS("Connected to database!"))

        addrport = f"{options['host']}:{options['port']}"
        logger.info("server.starting", address=addrport)
        call_command("runserver", addrport, use_reloader=False)
