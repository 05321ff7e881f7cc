"""Operator catalogue loader."""

import logging

from rail_announcements.adapters.config.app_config import AppConfig
from rail_announcements.adapters.config.static_tables import (
    STANDALONE_ONLY_OPERATORS,
    WITH_SERVICE_TO_FROM_OPERATORS,
)
from rail_announcements.domain.models.operator_catalogue import OperatorCatalogue

logger = logging.getLogger(__name__)


class OperatorCatalogueLoader:
    """Loads the operator catalogue from app config, falling back to built-in tables."""

    @staticmethod
    def load(config: AppConfig) -> OperatorCatalogue:
        """Load the operator catalogue from app config."""
        operators = config.get_operators_config()
        if operators:
            logger.debug(f"Using operators from {config.config_file}")

        return OperatorCatalogue(
            standalone_only=tuple(operators.get("standalone_only", STANDALONE_ONLY_OPERATORS)),
            with_service_to_from=tuple(
                operators.get("with_service_to_from", WITH_SERVICE_TO_FROM_OPERATORS)
            ),
        )
