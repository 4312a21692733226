import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import InvalidDatasetError

DATASET_FIELD = "PULSE_DATASET"

# [[domain:]project.]dataset, project ids may contain dashes
_DATASET_RE = re.compile(r"(?:(?:[A-Za-z0-9.-]+:)?[A-Za-z0-9_-]+\.)?[A-Za-z0-9_]+")


def dataset_of(context) -> str:
    """Return the dataset qualifier carried by ``context``.

    ``context`` may be a :class:`QueryContext`, any object with a
    ``PULSE_DATASET`` attribute, or a mapping with a ``PULSE_DATASET`` key.
    The value is returned as is: an empty or malformed qualifier only fails
    once the query reaches BigQuery.
    """
    if isinstance(context, QueryContext):
        return context.dataset
    if isinstance(context, Mapping):
        if DATASET_FIELD not in context:
            raise InvalidDatasetError(None, f"no {DATASET_FIELD} key")
        return context[DATASET_FIELD]
    try:
        return getattr(context, DATASET_FIELD)
    except AttributeError:
        raise InvalidDatasetError(None, f"no {DATASET_FIELD} attribute") from None


@dataclass(frozen=True)
class QueryContext:
    """Validated holder for the dataset the configuration table lives in."""

    dataset: str

    def __post_init__(self):
        if not isinstance(self.dataset, str) or not self.dataset:
            raise InvalidDatasetError(self.dataset, "must be a non-empty string")
        if not _DATASET_RE.fullmatch(self.dataset):
            raise InvalidDatasetError(self.dataset, "expected [[domain:]project.]dataset")

    @property
    def PULSE_DATASET(self) -> str:
        return self.dataset

    @classmethod
    def from_object(cls, context) -> "QueryContext":
        return cls(dataset_of(context))

    @classmethod
    def from_env(cls, environ: Mapping = None) -> "QueryContext":
        if environ is None:
            environ = os.environ
        return cls(environ.get(DATASET_FIELD, ""))
