"""Shops bounded context: venues with likes and rated comments.

A shop is a single consistency unit: likes and comments are embedded in the
shop record and every mutation is a command whose write is guarded by the
shop's aggregate version. Ratings are derived from the embedded comments.
"""

import structlog
from protean.domain import Domain

from shops.utils.logging import configure_logging

configure_logging()

shops = Domain(name="shops")

logger = structlog.get_logger(__name__)
