"""Test configuration and fixtures for the entire test suite."""

import sys
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

from src.bidder.adapters.tpmn.bidder import TpmnBidder
from src.bidder.protocols.bidder import CurrencyConverter
from tests.unit.app.bidder.helpers import ENDPOINT_URL


# Add the project root to the Python path
@pytest.fixture(scope="session", autouse=True)
def setup_path() -> None:
    """Add the project root to the Python path."""
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

    # Load environment variables from .env file
    load_dotenv()


@pytest.fixture
def converter() -> Mock:
    """Currency converter returning ten for any conversion."""
    mock = Mock(spec=CurrencyConverter)
    mock.convert_currency.return_value = Decimal("10")
    return mock


@pytest.fixture
def bidder(converter: Mock) -> TpmnBidder:
    """TPMN adapter wired to the mock converter."""
    return TpmnBidder(ENDPOINT_URL, converter)
