"""Error types raised by the tracking services."""


class TrackingError(Exception):
    """Base exception for all vehicle tracking errors."""


class StorageError(TrackingError):
    """The vehicle table could not be read or written."""


class ValidationError(TrackingError):
    """A position report was malformed or out of range."""

    def __init__(self, messages):
        self.messages = messages
        super().__init__(_summarize(messages))


def _summarize(messages):
    if isinstance(messages, dict):
        parts = []
        for field, errors in messages.items():
            if isinstance(errors, (list, tuple)):
                errors = '; '.join(str(e) for e in errors)
            parts.append(f'{field}: {errors}')
        return ', '.join(parts)
    return str(messages)
