import pytest

from catalog_forms.adapters.navigation import RecordingNavigator
from catalog_forms.adapters.selection import SelectedProductStore
from catalog_forms.rules.models import FormRules, TimingRules
from tests.helpers import FakeProductStore


@pytest.fixture
def store() -> FakeProductStore:
    return FakeProductStore()


@pytest.fixture
def selection() -> SelectedProductStore:
    return SelectedProductStore()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def rules() -> FormRules:
    """Default rules with short timings to keep tests fast."""
    return FormRules(timing=TimingRules(load_error_redirect_ms=20, id_check_timeout_ms=200))
