"""
Resolution of customization ids against the catalog.
"""
import logging
from typing import Iterable, List, Sequence

from ..entities.customization_option import CustomizationOption
from ..entities.product import MenuProduct

logger = logging.getLogger(__name__)


def resolve_customizations(
    option_ids: Iterable[str],
    catalog: Sequence[CustomizationOption],
) -> List[CustomizationOption]:
    """
    Resolve customization ids to their current catalog records.

    Request order is kept and duplicates collapse. Ids that are unknown or
    belong to inactive options are dropped, never raised: they usually mean
    the option was deactivated after the customer picked it.
    """
    by_id = {option.id: option for option in catalog}
    resolved: List[CustomizationOption] = []
    seen = set()

    for option_id in option_ids:
        option_id = str(option_id)
        if option_id in seen:
            continue
        seen.add(option_id)

        option = by_id.get(option_id)
        if option is None or not option.is_active:
            logger.warning(f"Dropping unknown or inactive customization option: {option_id}")
            continue
        resolved.append(option)

    return resolved


def customization_options_for(
    product: MenuProduct,
    catalog: Sequence[CustomizationOption],
) -> List[CustomizationOption]:
    """Options the product can be customized with, in display order."""
    linked = [
        option for option in catalog
        if option.is_active and product.offers_customization(option.id)
    ]
    return sorted(linked, key=lambda option: option.display_order)
