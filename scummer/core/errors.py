class ScummError(Exception):
    """Base error for everything the scummer reports to the player."""


class NotFoundError(ScummError):
    """An expected directory is missing."""


class UnsupportedError(ScummError):
    """The save layout is one we don't handle yet."""


def format_error_chain(error):
    """Render an error and its causes as 'outer: inner: innermost'."""
    parts = []
    seen = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        parts.append(str(error) or error.__class__.__name__)
        error = error.__cause__
    return ": ".join(parts)
