"""Bureau configuration loader.

Loads and caches the bureau provider-code table and score bands from YAML.
"""

from typing import Dict, Any, Optional
from functools import lru_cache
from dataclasses import dataclass

import yaml

from config.settings import BUREAU_CONFIG_FILE


@dataclass(frozen=True)
class BureauConfig:
    """Parsed configuration for a single bureau."""
    key: str
    provider_code: str
    display_name: str


@lru_cache(maxsize=1)
def load_bureau_config() -> Dict[str, Any]:
    """Load and cache bureau configuration from YAML."""
    with open(BUREAU_CONFIG_FILE, 'r') as f:
        return yaml.safe_load(f)


def get_bureau_config(bureau_key: str) -> Optional[BureauConfig]:
    """
    Get configuration for a specific bureau.

    Args:
        bureau_key: The bureau selector key (e.g., 'equifax', 'experian')

    Returns:
        BureauConfig if found, None otherwise
    """
    bureaus = load_bureau_config().get('bureaus', {})
    if bureau_key not in bureaus:
        return None

    entry = bureaus[bureau_key]
    return BureauConfig(
        key=bureau_key,
        provider_code=entry['provider_code'],
        display_name=entry.get('display_name', bureau_key.title()),
    )


def get_provider_code_map() -> Dict[str, str]:
    """Get the bureau key -> provider code table."""
    bureaus = load_bureau_config().get('bureaus', {})
    return {key: entry['provider_code'] for key, entry in bureaus.items()}


def get_score_bands() -> Dict[str, int]:
    """Get the closed lower bound of each score band above 'poor'."""
    bands = load_bureau_config().get('score_bands', {})
    return {name: int(bound) for name, bound in bands.items()}
