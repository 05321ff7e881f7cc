"""Operator catalogue domain model."""

from pydantic import BaseModel, ConfigDict


class OperatorCatalogue(BaseModel):
    """Train operating company names with recorded audio.

    Operators in ``standalone_only`` only exist as a bare name recording and
    are followed by a separate "service to" clip. Operators in
    ``with_service_to_from`` have a combined "<operator> service to" recording.
    """

    model_config = ConfigDict(frozen=True)

    standalone_only: tuple[str, ...] = ()
    with_service_to_from: tuple[str, ...] = ()

    def is_standalone_only(self, toc: str) -> bool:
        toc_lower = toc.lower()
        return any(name.lower() == toc_lower for name in self.standalone_only)

    def is_known(self, toc: str) -> bool:
        toc_lower = toc.lower()
        return any(name.lower() == toc_lower for name in self.all_operators())

    def all_operators(self) -> list[str]:
        """All operator names sorted case-insensitively."""
        return sorted([*self.standalone_only, *self.with_service_to_from], key=str.lower)
