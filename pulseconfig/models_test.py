from datetime import datetime, timezone

from .models import ConfigRow


def test_from_row():
    row = ConfigRow.from_row({"config_name": "a", "config_value": "1", "updatedAt": 1675209600000})
    assert row == ConfigRow("a", "1", 1675209600000)
    assert row.updated_at == datetime(2023, 2, 1, tzinfo=timezone.utc)


def test_null_updated_at():
    row = ConfigRow.from_row({"config_name": "a", "config_value": "1", "updatedAt": None})
    assert row.updatedAt is None
    assert row.updated_at is None
