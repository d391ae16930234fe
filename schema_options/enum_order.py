from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, TypeVar

from .constants import ORDER_WILDCARD
from .values import to_string_form

logger = logging.getLogger(__name__)

OptionT = TypeVar('OptionT')


def apply_enum_order(options: Sequence[OptionT], order: Sequence[Any]) -> List[OptionT]:
    """Reorder ``options`` by the tokens in ``order``.

    Tokens match option values by string form. The ``'*'`` wildcard expands to
    every option no token names, in original order; each wildcard occurrence
    expands again. Without a wildcard, unlisted options are dropped. Tokens
    that match no option are skipped.
    """
    # Last occurrence wins when two values share a string form.
    by_key: Dict[str, OptionT] = {to_string_form(opt.value): opt for opt in options}

    listed = {to_string_form(token) for token in order if token != ORDER_WILDCARD}
    rest = [opt for opt in options if to_string_form(opt.value) not in listed]

    ordered: List[OptionT] = []
    for token in order:
        if token == ORDER_WILDCARD:
            ordered.extend(rest)
            continue
        option = by_key.get(to_string_form(token))
        if option is None:
            logger.debug("enumOrder token %r matches no option; skipped", token)
            continue
        ordered.append(option)
    return ordered
