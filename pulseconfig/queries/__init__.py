import re
from pathlib import Path

from ..context import dataset_of
from ..exceptions import InvalidConfigNameError

path = Path(__file__)

CONFIG_NAME_PARAM = "config_name"

_CONFIG_NAME_RE = re.compile(r"[A-Za-z0-9_.:-]{1,256}")


def select_query() -> str:
    with path.with_name('select.sql').open('r') as f:
        return f.read().strip()


def select_name_query() -> str:
    with path.with_name('select_name.sql').open('r') as f:
        return f.read().strip()


def list_all_config_sql(context) -> str:
    return select_query().format(dataset=dataset_of(context))


def config_by_name_sql(context, name: str) -> str:
    """Filter the configuration table on ``name``.

    ``name`` is pasted into the literal without escaping, so a quote in it
    rewrites the where clause. Use :func:`config_by_name_query` with a query
    parameter, or :func:`safe_config_by_name_sql`, for untrusted names.
    """
    return list_all_config_sql(context) + " where config_name = '" + name + "'"


def safe_config_by_name_sql(context, name: str) -> str:
    if not isinstance(name, str) or not _CONFIG_NAME_RE.fullmatch(name):
        raise InvalidConfigNameError(name)
    return config_by_name_sql(context, name)


def config_by_name_query(context) -> str:
    """Same filter, with the name bound as the ``@config_name`` parameter."""
    return select_name_query().format(dataset=dataset_of(context))


# camelCase names kept for existing callers
listAllConfigSql = list_all_config_sql
configByNameSql = config_by_name_sql
