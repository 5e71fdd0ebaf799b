import logging
from importlib import metadata
from typing import Any, Dict, Optional

import pandas as pd
import sqlalchemy as sa
from sqlalchemy import event

from jalali_convert.utils.datetime_format import (
    format_gregorian_as_jalali,
    parse_gregorian_timestamp,
    parse_jalali_datetime,
)

logger = logging.getLogger(__name__)

EXTENSION_NAME = "jalali"
DISTRIBUTION_NAME = "jalali-convert"

SUPPORTED_DIALECTS = {"sqlite"}


def extension_version() -> str:
    """Installed distribution version, or "" when running from a source tree."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return ""


# ───────────────────  Scalar functions (NULL in → NULL out) ─────────────────── #

def sql_jalali_to_gregorian(date_text: Optional[str], end_of_day: Any) -> Optional[str]:
    if date_text is None or end_of_day is None:
        return None
    return parse_jalali_datetime(str(date_text), bool(end_of_day)).isoformat(sep=" ")


def sql_gregorian_to_jalali(timestamp: Any) -> Optional[str]:
    if timestamp is None:
        return None
    return format_gregorian_as_jalali(parse_gregorian_timestamp(timestamp))


SCALAR_FUNCTIONS = (
    ("jalali_to_gregorian", 2, sql_jalali_to_gregorian),
    ("gregorian_to_jalali", 1, sql_gregorian_to_jalali),
)


def _register_dbapi_functions(dbapi_connection, connection_record) -> None:
    for name, n_args, fn in SCALAR_FUNCTIONS:
        dbapi_connection.create_function(name, n_args, fn, deterministic=True)
    logger.debug("🧩 %s: registered %s on new connection", EXTENSION_NAME, [s[0] for s in SCALAR_FUNCTIONS])


def register_jalali_functions(engine: sa.Engine) -> sa.Engine:
    """
    Make `jalali_to_gregorian(text, end_of_day)` and `gregorian_to_jalali(ts)`
    callable from SQL on every connection `engine` opens from now on.

    Register before the first connect: pooled connections that already exist
    are not touched. Calling it twice is a no-op.
    """
    dialect = engine.dialect.name
    if dialect not in SUPPORTED_DIALECTS:
        raise ValueError(
            f"{EXTENSION_NAME}: dialect {dialect!r} has no Python scalar functions "
            f"(supported: {sorted(SUPPORTED_DIALECTS)})"
        )

    if event.contains(engine, "connect", _register_dbapi_functions):
        logger.debug("🧩 %s: already registered on %s", EXTENSION_NAME, engine.url)
        return engine

    event.listen(engine, "connect", _register_dbapi_functions)
    logger.info("🧩 %s %s: functions attached to %s", EXTENSION_NAME, extension_version() or "(dev)", engine.url)
    return engine


def execute_query(engine: sa.Engine, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
    logger.info("🪄 execute_query: %s", query.replace("\n", " "))
    with engine.connect() as conn:
        result = conn.execute(sa.text(query), params or {})
        rows = result.fetchall()
        columns = result.keys()
    df = pd.DataFrame(rows, columns=list(columns))
    logger.info("🪄 execute_query: returned %s rows × %s cols", df.shape[0], df.shape[1])
    return df
