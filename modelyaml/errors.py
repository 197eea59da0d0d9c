"""Shared exception types for the model.yaml builder."""


class UnknownFormField(Exception):
    """Raised when an edit names a field the form does not have.

    Carries *key* so the caller can report exactly what was typed.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown form field: {key!r}")
