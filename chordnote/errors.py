"""Errors raised at the entry points of the notation engine.

Tokens inside a progression never raise: unrecognised chords are passed
through unchanged. Only the note or key a call is anchored on is validated.
"""


class InvalidNoteError(ValueError):
    """A note name is not one of the recognised spellings."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid note: {value!r}")


class InvalidKeyError(ValueError):
    """A key root cannot be resolved to a pitch class."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid key root: {value!r}")
