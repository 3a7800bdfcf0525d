from datetime import datetime, timezone

import pytest

from anchors_data import TWO_ENTRIES_XML


@pytest.fixture
def now_2024():
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def two_entries_xml():
    return TWO_ENTRIES_XML
