"""Media session identifier generation."""

import uuid


def generate_session_id() -> str:
    """Generate a unique media session identifier.

    Returns:
        Random UUID4 string
    """
    return str(uuid.uuid4())


__all__ = ["generate_session_id"]
