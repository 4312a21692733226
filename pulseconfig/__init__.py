from .context import QueryContext, dataset_of
from .exceptions import ConfigQueryError, InvalidConfigNameError, InvalidDatasetError
from .models import ConfigRow
from .queries import (
    config_by_name_query,
    config_by_name_sql,
    list_all_config_sql,
    safe_config_by_name_sql,
)
