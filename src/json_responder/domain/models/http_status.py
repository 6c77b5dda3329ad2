"""Standard reason phrases for HTTP status codes."""

from http import HTTPStatus


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for a status code, or "" if the code is unknown.

    Phrases come from ``http.HTTPStatus`` and follow the running Python version,
    e.g. 413 is "Request Entity Too Large" before 3.13 and "Content Too Large" after.
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
