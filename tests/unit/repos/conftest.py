import pytest

from tests.fakes import FakeSupabaseClient, FakeTable
from tests.test_data import EXERCISE_ROWS, PROFILE_ROW

# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def fake_table() -> FakeTable:
    """
    Empty table named "things". Tests can seed FakeTable.rows directly.
    """
    return FakeTable("things")


@pytest.fixture
def failing_table() -> FakeTable:
    return FakeTable("things", fail_on={"select", "insert", "update", "delete"})


@pytest.fixture
def table_client():
    """
    Wrap a single FakeTable in a client.
    Usage:
        client = table_client(fake_table)
    """

    def _make(table: FakeTable) -> FakeSupabaseClient:
        return FakeSupabaseClient(tables={table.name: table})

    return _make


@pytest.fixture
def empty_catalog_client(make_client):
    return make_client(exercises=[])


@pytest.fixture
def failing_catalog_client(make_client):
    return make_client(exercises=EXERCISE_ROWS, fail_on={"exercises": {"select"}})


@pytest.fixture
def bad_rows_catalog_client(make_client):
    """
    Returns malformed rows for parse-error tests.
    """
    return make_client(exercises=[{"id": "broken"}])


@pytest.fixture
def profile_client(make_client):
    return make_client(profiles=[PROFILE_ROW])
