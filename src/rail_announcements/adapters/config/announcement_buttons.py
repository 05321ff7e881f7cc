"""Built-in fixed announcement sequences."""

from rail_announcements.domain.models.announcement_button import AnnouncementButton
from rail_announcements.domain.models.audio_item import AudioClip

EMERGENCY_DELAY = 300

ANNOUNCEMENT_BUTTONS: tuple[AnnouncementButton, ...] = (
    AnnouncementButton(
        name="three-chimes",
        label="3 chimes",
        section="General",
        files=("sfx - three chimes",),
    ),
    AnnouncementButton(
        name="four-chimes",
        label="4 chimes",
        section="General",
        files=("sfx - four chimes",),
    ),
    AnnouncementButton(
        name="newton-aycliffe-chemical-emergency",
        label="Newton Aycliffe chemical emergency",
        section="Emergency",
        files=(
            "s.this is an emergency announcement",
            "e.for customers at newton aycliffe station",
            AudioClip("s.there is an emergency at a nearby chemical works", EMERGENCY_DELAY),
            AudioClip("m.please leave the station by the ramp from platform 1", EMERGENCY_DELAY),
            "e.and turning left make your way to a position of safety",
            AudioClip("e.listen for announcement by the emergency services", EMERGENCY_DELAY),
        ),
    ),
    AnnouncementButton(
        name="castleford-chemical-emergency",
        label="Castleford chemical emergency",
        section="Emergency",
        files=(
            "s.this is an emergency announcement",
            "e.for customers at castleford station",
            AudioClip("s.there is an emergency at a nearby chemical works", EMERGENCY_DELAY),
            AudioClip("m.please leave the station by the main exit", EMERGENCY_DELAY),
            "e.and proceed to the town centre",
            AudioClip("e.listen for announcement by the emergency services", EMERGENCY_DELAY),
        ),
    ),
)


def find_button(name: str) -> AnnouncementButton:
    """Look up a built-in button by name.

    Raises:
        ValueError: If there is no button with that name.
    """
    for button in ANNOUNCEMENT_BUTTONS:
        if button.name == name:
            return button
    raise ValueError(f"No announcement button named {name!r}")
