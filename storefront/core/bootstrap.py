"""Application bootstrap wiring settings, logging and the customer session."""
from __future__ import annotations

import logging

from storefront.core.config import Settings, load_settings
from storefront.core.logging_setup import setup_logging
from storefront.services.session import StorefrontSession

logger = logging.getLogger(__name__)


def build_application(settings: Settings | None = None):
    """Create a customer session from configuration."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Storefront session started (currency=%s, delivery_fee=%s, strict_cart=%s)",
        settings.currency,
        settings.delivery_fee,
        settings.strict_cart,
    )
    return StorefrontSession(settings)
