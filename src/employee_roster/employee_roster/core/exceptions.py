from __future__ import annotations

from typing import Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted data fails field validation.

    ``errors`` maps a field name to its list of messages; ``submitted`` keeps
    the values the user entered so the form can be shown again.
    """

    def __init__(self, errors: Mapping[str, Sequence[str]], submitted: Optional[object] = None):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        self.submitted = submitted
        super().__init__("; ".join(m for messages in self.errors.values() for m in messages))
