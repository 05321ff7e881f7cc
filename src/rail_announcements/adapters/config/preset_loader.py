"""Announcement preset loader."""

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from rail_announcements.adapters.config.app_config import AppConfig
from rail_announcements.adapters.config.default_presets import (
    DISRUPTED_TRAIN_PRESETS,
    NEXT_TRAIN_PRESETS,
)
from rail_announcements.domain.models.announcement_preset import (
    DisruptedTrainPreset,
    NextTrainPreset,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", NextTrainPreset, DisruptedTrainPreset)


def _parse_presets(model: type[T], raw_presets: list[dict[str, Any]]) -> list[T]:
    presets: list[T] = []
    for raw in raw_presets:
        try:
            presets.append(model.model_validate(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid preset {raw.get('name', '<unnamed>')!r}: {e}") from e
    logger.debug(f"Loaded {len(presets)} {model.__name__} preset(s)")
    return presets


class PresetLoader:
    """Loads announcement presets from app config, falling back to built-in presets."""

    @staticmethod
    def load_next_train(config: AppConfig) -> list[NextTrainPreset]:
        """Load next train presets.

        Raises ValueError if a configured preset is invalid.
        """
        raw = config.get_presets_config().get("next_train", NEXT_TRAIN_PRESETS)
        return _parse_presets(NextTrainPreset, raw)

    @staticmethod
    def load_disrupted_train(config: AppConfig) -> list[DisruptedTrainPreset]:
        """Load disrupted train presets.

        Raises ValueError if a configured preset is invalid.
        """
        raw = config.get_presets_config().get("disrupted_train", DISRUPTED_TRAIN_PRESETS)
        return _parse_presets(DisruptedTrainPreset, raw)
