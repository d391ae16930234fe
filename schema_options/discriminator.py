from __future__ import annotations

import logging
from typing import Any, Optional

from .accessors import get_in
from .constants import DISCRIMINATOR_KEY, PROPERTY_NAME_KEY

logger = logging.getLogger(__name__)

_MISSING = object()


def get_discriminator_field(schema: Any) -> Optional[str]:
    """Return ``schema.discriminator.propertyName`` when it names a field."""
    field = get_in(schema, [DISCRIMINATOR_KEY, PROPERTY_NAME_KEY], _MISSING)
    if field is _MISSING:
        return None
    if isinstance(field, str):
        return field
    logger.warning("Expecting discriminator to be a string, got %r instead", field)
    return None
