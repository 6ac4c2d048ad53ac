import pandas as pd


def create_summary_table(series, region_name):

    numeric_df = series.select_dtypes(include='number')

    summary = numeric_df.describe().T
    summary = summary[['count', 'mean', 'std', 'min', 'max']]

    summary = summary.reset_index()
    summary.rename(columns={'index': 'Variable'}, inplace=True)

    if series.empty:
        period = "no data"
    else:
        start_date = series['date'].min().strftime('%Y-%m-%d')
        end_date = series['date'].max().strftime('%Y-%m-%d')
        period = f"{start_date} to {end_date}"

    summary['Region'] = region_name
    summary['Time Period'] = period

    return summary
