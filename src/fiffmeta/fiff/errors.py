"""Exceptions raised by the channel metadata model."""

from __future__ import annotations


class InvalidSelectionError(IndexError):
    """A channel selection holds an index outside ``[0, nchan)``.

    Attributes
    ----------
    index : object
        The offending selection entry.
    nchan : int
        Number of channels in the metadata the selection was applied to.
    """

    def __init__(self, index: object, nchan: int, message: str | None = None) -> None:
        self.index = index
        self.nchan = nchan
        if message is None:
            message = (
                f"Channel index {index!r} is outside the valid range "
                f"[0, {nchan})."
            )
        super().__init__(message)


class MalformedInfoError(ValueError):
    """Channel metadata violates its structural invariants."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Malformed measurement info.")
