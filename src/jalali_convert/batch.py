import logging
from typing import Any, Iterable, Optional

import pandas as pd

from jalali_convert.utils.datetime_format import (
    format_gregorian_as_jalali,
    parse_gregorian_timestamp,
    parse_jalali_datetime,
)

logger = logging.getLogger(__name__)

# Rows are converted independently; missing values (None/NaN/NaT) stay missing.


def _is_missing(value: Any) -> bool:
    return value is None or bool(pd.isna(value))


def jalali_series_to_gregorian(series: pd.Series, end_of_day: bool = False, *, strict: bool = False) -> pd.Series:
    logger.debug("📅 jalali→gregorian: %s rows (end_of_day=%s, strict=%s)", len(series), end_of_day, strict)
    converted = series.map(
        lambda v: pd.NaT if _is_missing(v) else parse_jalali_datetime(str(v), end_of_day, strict=strict)
    )
    return pd.to_datetime(converted)


def gregorian_series_to_jalali(series: pd.Series) -> pd.Series:
    logger.debug("📅 gregorian→jalali: %s rows", len(series))
    values = [
        None if _is_missing(v) else format_gregorian_as_jalali(parse_gregorian_timestamp(v))
        for v in series
    ]
    return pd.Series(values, index=series.index, dtype=object, name=series.name)


def convert_frame_columns(
    df: pd.DataFrame,
    jalali_columns: Iterable[str] = (),
    gregorian_columns: Iterable[str] = (),
    end_of_day: bool = False,
    suffix: Optional[str] = None,
    *,
    strict: bool = False,
) -> pd.DataFrame:
    """
    Return a copy of `df` with Jalali text columns converted to timestamps and
    Gregorian timestamp columns converted to Jalali text.

    With `suffix`, results go to `<column><suffix>` and the sources are kept;
    otherwise the columns are replaced in place (on the copy).
    """
    jalali_columns, gregorian_columns = list(jalali_columns), list(gregorian_columns)
    out = df.copy()
    for col in jalali_columns:
        out[f"{col}{suffix}" if suffix else col] = jalali_series_to_gregorian(df[col], end_of_day, strict=strict)
    for col in gregorian_columns:
        out[f"{col}{suffix}" if suffix else col] = gregorian_series_to_jalali(df[col])
    logger.debug(
        "📅 convert_frame_columns: %s rows, jalali=%s gregorian=%s",
        len(df), jalali_columns, gregorian_columns,
    )
    return out
