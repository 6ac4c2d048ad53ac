import pandas as pd

"""
Cumulative wide tables -> daily series for one region
Each step takes the previous frame and returns a new one:
  unpivot -> aggregate -> join -> filter region -> sort -> daily deltas -> ratio
"""

KEYS = ['region', 'date']
DAILY_COLUMNS = ['date', 'daily_cases', 'daily_deaths', 'ratio']


def _empty_long():
    return pd.DataFrame({
        'region': pd.Series(dtype=object),
        'date': pd.Series(dtype='datetime64[ns]'),
        'value': pd.Series(dtype='float64'),
    })


def date_columns(table, date_format='%m/%d/%y'):
    """Map every column whose name parses under date_format to its date"""
    labels = [str(col) for col in table.columns]
    parsed = pd.to_datetime(pd.Index(labels), format=date_format, errors='coerce')
    return {col: day for col, day in zip(table.columns, parsed) if not pd.isna(day)}


def unpivot(table, region_column='Province_State', date_format='%m/%d/%y'):
    """
    Wide table (one column per date) -> long (region, date, value) rows.
    Columns that are not dates are left out, cells that are not numbers become NaN.
    """
    if not isinstance(table, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame, got {type(table).__name__}")
    if region_column not in table.columns:
        raise KeyError(f"Region column '{region_column}' not found in table")

    date_lookup = date_columns(table.drop(columns=[region_column]), date_format)
    if not date_lookup:
        return _empty_long()

    long = table[[region_column] + list(date_lookup)].melt(
        id_vars=[region_column], var_name='column', value_name='value'
    )

    return pd.DataFrame({
        'region': long[region_column],
        'date': pd.to_datetime(long['column'].map(date_lookup)).astype('datetime64[ns]'),
        'value': pd.to_numeric(long['value'], errors='coerce'),
    })


def aggregate(long):
    # counties -> state total; NaN adds nothing
    summed = long.groupby(KEYS, as_index=False)['value'].sum()
    return summed.assign(value=summed['value'].astype('int64'))


def join_series(cases, deaths):
    """Inner join: a date must be observed in both series to survive"""
    return pd.merge(
        cases.rename(columns={'value': 'cumulative_cases'}),
        deaths.rename(columns={'value': 'cumulative_deaths'}),
        on=KEYS,
        how='inner',
        validate='one_to_one',
    )


def filter_region(combined, region):
    return combined[combined['region'] == region]


def sort_by_date(frame):
    return frame.sort_values('date').reset_index(drop=True)


def to_daily(frame):
    daily = pd.DataFrame({
        'date': frame['date'],
        'daily_cases': frame['cumulative_cases'].diff(),
        'daily_deaths': frame['cumulative_deaths'].diff(),
    })

    # first row has no predecessor
    daily = daily.dropna(subset=['daily_cases', 'daily_deaths'])
    return daily.astype({'daily_cases': 'int64', 'daily_deaths': 'int64'}).reset_index(drop=True)


def add_ratio(daily):
    # NaN where there were no new cases, never 0
    cases = daily['daily_cases'].where(daily['daily_cases'] != 0)
    return daily.assign(ratio=daily['daily_deaths'] / cases)


def prepare(confirmed, deaths, region, region_column='Province_State', date_format='%m/%d/%y'):
    """
    Daily cases, daily deaths and deaths/cases ratio for one region.

    Returns an empty frame (same columns) when the region is missing from
    either table or no date is shared by both tables. Downward revisions
    in the cumulative counts come through as negative daily values.
    """
    cases_long = unpivot(confirmed, region_column, date_format).pipe(aggregate)
    deaths_long = unpivot(deaths, region_column, date_format).pipe(aggregate)

    return (
        join_series(cases_long, deaths_long)
        .pipe(filter_region, region)
        .pipe(sort_by_date)
        .pipe(to_daily)
        .pipe(add_ratio)[DAILY_COLUMNS]
    )


def count_negative_deltas(series):
    return {
        col: int((series[col] < 0).sum())
        for col in ['daily_cases', 'daily_deaths']
    }
