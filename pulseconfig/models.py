from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class ConfigRow:
    """One row of the configuration table, as returned by the queries."""

    config_name: str
    config_value: str
    updatedAt: int | None

    @property
    def updated_at(self) -> datetime | None:
        if self.updatedAt is None:
            return None
        return datetime.fromtimestamp(self.updatedAt / 1000, tz=timezone.utc)

    @classmethod
    def from_row(cls, row):
        return cls(
            config_name=row["config_name"],
            config_value=row["config_value"],
            updatedAt=row["updatedAt"],
        )
