import pandas as pd
import statsmodels.api as sm
import statsmodels.formula.api as smf

"""
Relationship between daily deaths and daily cases
  - OLS: daily_deaths ~ daily_cases
  - LOWESS curve of the deaths/cases ratio over time
"""

MIN_POINTS = 3


def fit_deaths_on_cases(series):
    """Simple linear regression of daily deaths on daily cases (None if too few rows)"""
    if len(series) < MIN_POINTS:
        return None

    results = smf.ols('daily_deaths ~ daily_cases', data=series).fit()

    return {
        'intercept': float(results.params['Intercept']),
        'slope': float(results.params['daily_cases']),
        'r_squared': float(results.rsquared),
        'n_obs': int(results.nobs),
        'results': results,
    }


def smooth_ratio(series, frac=0.1):
    # undefined ratios are skipped, not smoothed as zeros
    defined = series.dropna(subset=['ratio'])
    if len(defined) < MIN_POINTS:
        return pd.DataFrame({
            'date': pd.Series(dtype='datetime64[ns]'),
            'ratio_smoothed': pd.Series(dtype='float64'),
        })

    days = (defined['date'] - defined['date'].min()).dt.days.to_numpy(dtype=float)
    smoothed = sm.nonparametric.lowess(
        defined['ratio'].to_numpy(dtype=float), days, frac=frac, return_sorted=False
    )

    return pd.DataFrame({
        'date': defined['date'].to_numpy(),
        'ratio_smoothed': smoothed,
    })
