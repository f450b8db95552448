"""Bureau filter - narrows a report's provider views to one bureau.

A multi-bureau report carries one provider view per bureau. Selecting a
single bureau keeps exactly the views tagged with that bureau's provider
code; selecting "all" keeps every view in its original order.
"""

import logging
from typing import Any, List, Optional, Sequence

from config.bureau_loader import get_provider_code_map
from schemas.bureau import Bureau, BureauSelector, InvalidBureauError, parse_bureau

logger = logging.getLogger(__name__)


def get_provider_code(selector: BureauSelector) -> Optional[str]:
    """Resolve a selector to its provider code. None for "all".

    Raises:
        InvalidBureauError: if the selector names no known bureau.
    """
    bureau = parse_bureau(selector)
    if bureau is Bureau.ALL:
        return None
    code = get_provider_code_map().get(bureau.value)
    if code is None:
        raise InvalidBureauError(selector)
    return code


def get_view_provider_code(view: Any) -> Optional[str]:
    """Provider code carried by a raw provider view, if any."""
    if not isinstance(view, dict):
        return None
    code = view.get("provider", view.get("providerCode"))
    return code if isinstance(code, str) else None


def filter_provider_views(
    provider_views: Sequence[Any],
    selector: BureauSelector = None,
) -> List[Any]:
    """Keep the provider views belonging to the selected bureau.

    Args:
        provider_views: Raw provider views in report order.
        selector: A Bureau, its string value, "all", or None (all bureaus).

    Returns:
        The matching views in their original relative order. May be empty.

    Raises:
        InvalidBureauError: if the selector names no known bureau.
    """
    provider_code = get_provider_code(selector)
    if provider_code is None:
        filtered = list(provider_views)
    else:
        filtered = [v for v in provider_views if get_view_provider_code(v) == provider_code]

    logger.debug(
        f"Bureau filter {provider_code or Bureau.ALL.value}: "
        f"{len(filtered)} of {len(provider_views)} provider views"
    )
    return filtered
