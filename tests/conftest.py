import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pandas as pd
import pytest


ID_COLUMNS = ['UID', 'Admin2', 'Province_State', 'Country_Region', 'Lat', 'Long_', 'Combined_Key']


def make_wide(rows, dates, population=False):
    """
    Build a CSSE-style wide cumulative table.
    rows: list of (state, county, [cumulative values, one per date])
    """
    records = []
    for uid, (state, county, values) in enumerate(rows, start=84000001):
        record = {
            'UID': uid,
            'Admin2': county,
            'Province_State': state,
            'Country_Region': 'US',
            'Lat': 40.7,
            'Long_': -74.0,
            'Combined_Key': f'{county}, {state}, US',
        }
        if population:
            record['Population'] = 1000000
        record.update(dict(zip(dates, values)))
        records.append(record)

    columns = ID_COLUMNS + (['Population'] if population else []) + list(dates)
    return pd.DataFrame(records, columns=columns)


@pytest.fixture
def dates():
    return ['3/1/20', '3/2/20', '3/3/20', '3/4/20']


@pytest.fixture
def example_tables(dates):
    """Region X: confirmed 100,150,150,200 and deaths 1,2,2,5"""
    confirmed = make_wide([('X', 'A', [100, 150, 150, 200])], dates)
    deaths = make_wide([('X', 'A', [1, 2, 2, 5])], dates, population=True)
    return confirmed, deaths


@pytest.fixture
def ny_tables():
    dates = [f'3/{day}/20' for day in range(1, 11)]
    confirmed = make_wide([
        ('New York', 'Kings', [10, 30, 60, 100, 150, 210, 280, 360, 450, 550]),
        ('New York', 'Queens', [5, 15, 30, 50, 75, 105, 140, 180, 225, 275]),
        ('New Jersey', 'Bergen', [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]),
    ], dates)
    deaths = make_wide([
        ('New York', 'Kings', [0, 1, 2, 4, 6, 9, 12, 16, 20, 25]),
        ('New York', 'Queens', [0, 0, 1, 2, 3, 4, 6, 8, 10, 12]),
        ('New Jersey', 'Bergen', [0, 0, 0, 0, 0, 0, 0, 1, 1, 1]),
    ], dates, population=True)
    return confirmed, deaths


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
