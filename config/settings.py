"""Configuration settings for the system."""

import os

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# =============================================================================
# DATA PATHS - Change these when switching to new data files
# =============================================================================

# Demo multi-bureau report payload
SAMPLE_REPORT_FILE = os.path.join(_PROJECT_ROOT, "data", "sample_report.json")

# Bureau code table and score bands
BUREAU_CONFIG_FILE = os.path.join(_PROJECT_ROOT, "config", "bureaus.yaml")

# =============================================================================
# METRICS
# =============================================================================

# Average month length used for account age
DAYS_PER_MONTH = 30

DEFAULT_BUREAU = "all"

# =============================================================================
# SETTINGS
# =============================================================================

LOG_LEVEL = "INFO"
VERBOSE_MODE = True
