"""Asset class parameter resolver.

Maps selected asset classes to their assumption rows and averages them with
equal weights. An empty selection resolves to the fallback row (Other RWA).
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from ..config.loader import get_default_config
from ..config.schema import AssetClassParameters, Config
from .models import AssetClass, canonical_order

ASSET_CLASS_PARAMETERS: Mapping[AssetClass, AssetClassParameters] = MappingProxyType(
    dict(get_default_config().asset_classes)
)

PARAMETER_FIELDS = tuple(AssetClassParameters.model_fields)


def weighted_asset_class_parameters(
    asset_classes: Iterable[AssetClass],
    config: Config = None
) -> AssetClassParameters:
    """
    Equal-weighted mean of every parameter across the selected asset classes.

    Args:
        asset_classes: Selected asset classes (may be empty; duplicates collapse)
        config: Optional config supplying the table (defaults to packaged table)

    Returns:
        Resolved parameters. A single selection returns that row unchanged.
    """
    table = ASSET_CLASS_PARAMETERS if config is None else config.asset_classes
    selected = canonical_order(AssetClass(ac) for ac in asset_classes)

    if not selected:
        constants = get_default_config().constants if config is None else config.constants
        return table[constants.fallback_asset_class]
    if len(selected) == 1:
        return table[selected[0]]

    rows = [table[ac] for ac in selected]
    averaged = {
        name: sum(getattr(row, name) for row in rows) / len(rows)
        for name in PARAMETER_FIELDS
    }
    return AssetClassParameters(**averaged)


def default_alpha_for_asset_class(asset_class: AssetClass, config: Config = None) -> float:
    """Default differentiated alpha (%) of a single asset class."""
    table = ASSET_CLASS_PARAMETERS if config is None else config.asset_classes
    return table[AssetClass(asset_class)].default_differentiated_alpha


def average_default_alpha(asset_classes: Iterable[AssetClass], config: Config = None) -> float:
    """Average default alpha (%) across the selected asset classes."""
    return weighted_asset_class_parameters(asset_classes, config).default_differentiated_alpha
