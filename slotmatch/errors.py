from __future__ import annotations


class SlotmatchError(ValueError):
    """Base class for caller contract violations."""


class InvalidInterval(SlotmatchError):
    pass


class InvalidDuration(SlotmatchError):
    pass


class UnknownSide(SlotmatchError):
    pass


class StateError(SlotmatchError):
    """Saved state or an imported file could not be read."""


class ShareLinkError(SlotmatchError):
    pass
