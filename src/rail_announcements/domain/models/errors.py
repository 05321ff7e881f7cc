"""Announcement build errors."""


class AnnouncementError(Exception):
    """Base class for errors that abort an announcement build."""


class InvalidTrainConfigurationError(AnnouncementError):
    """The described service cannot be announced, e.g. a divide with no destinations."""


class MissingAudioAssetError(AnnouncementError):
    """A clip required by the announcement is not in the available clip set."""

    def __init__(self, clip_id: str) -> None:
        super().__init__(f"Audio clip does not exist: {clip_id}")
        self.clip_id = clip_id


class UnknownDisruptionReasonError(AnnouncementError):
    """The disruption reason has no recording."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unknown disruption reason: {reason}")
        self.reason = reason
