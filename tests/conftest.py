"""
Global pytest configuration and fixtures for planshift tests.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from planshift.billing.config import BillingConfig, set_billing_config  # noqa: E402


@pytest.fixture(autouse=True)
def billing_config():
    """Install default billing configuration for every test, ignoring the environment."""
    config = BillingConfig()
    set_billing_config(config)
    yield config
    set_billing_config(None)
