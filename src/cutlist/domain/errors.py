"""Domain exceptions."""

from __future__ import annotations

__all__ = ["ConstructionConflictError"]


class ConstructionConflictError(ValueError):
    """Raised when a cabinet is created with physically impossible options.

    Unlike advisory validation, this aborts cabinet creation: no panels can
    be requested from a spec that failed with this error.

    Attributes:
        cabinet_id: Identifier of the rejected cabinet.
        options: Names of the conflicting options.
    """

    def __init__(self, message: str, cabinet_id: str = "", options: tuple[str, ...] = ()) -> None:
        self.cabinet_id = cabinet_id
        self.options = options
        super().__init__(message)
