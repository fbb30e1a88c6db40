"""
Identifier helpers.
"""

import uuid


def generate_id() -> str:
    """
    Generate an opaque record identifier.

    Returns:
        Random UUID4 string
    """
    return str(uuid.uuid4())
