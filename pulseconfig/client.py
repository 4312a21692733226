import logging

import pandas as pd

from .models import ConfigRow
from .queries import CONFIG_NAME_PARAM, config_by_name_query, list_all_config_sql

logger = logging.getLogger(__name__)


def _run(bigquery, sql, gcp_project: str, query_parameters=()):
    client = bigquery.Client(project=gcp_project)
    job_config = bigquery.QueryJobConfig(query_parameters=list(query_parameters))

    logger.debug("Running config query on %s: %s", gcp_project, sql)
    return client.query(sql, job_config=job_config)


def get_configs(bigquery, context, gcp_project: str):
    query_job = _run(bigquery, list_all_config_sql(context), gcp_project)
    return [ConfigRow.from_row(row) for row in query_job.result()]


def get_config(bigquery, context, name: str, gcp_project: str):
    params = [bigquery.ScalarQueryParameter(CONFIG_NAME_PARAM, "STRING", name)]
    query_job = _run(bigquery, config_by_name_query(context), gcp_project, params)

    rows = [ConfigRow.from_row(row) for row in query_job.result()]
    if not rows:
        logger.info("No configuration named %r", name)
        return None
    if len(rows) > 1:
        logger.warning("%d configuration rows named %r, using the first", len(rows), name)
    return rows[0]


def get_config_value(bigquery, context, name: str, gcp_project: str, default=None):
    row = get_config(bigquery, context, name, gcp_project)
    return row.config_value if row is not None else default


def get_config_frame(bigquery, context, gcp_project: str):
    df = _run(bigquery, list_all_config_sql(context), gcp_project).to_dataframe()
    df["updated_at"] = pd.to_datetime(df["updatedAt"], unit="ms", utc=True)
    return df
