# COVID-19 Data (cumulative US time series)

import os
from io import StringIO

import certifi
import pandas as pd
import requests

from covid_data.Config import CONFIG


KINDS = {
    'confirmed': 'confirmed_file',
    'deaths': 'deaths_file',
}


def getTimeSeries(kind='confirmed', config=None):
    """
    Load one wide cumulative table from the CSSE time series distribution.
    One row per county, one column per reporting date.
    """
    config = CONFIG if config is None else config

    if kind not in KINDS:
        raise ValueError(f"Invalid series kind: {kind}. Expected one of {sorted(KINDS)}.")
    file_name = config[KINDS[kind]]

    if config.get('input_dir'):
        path = os.path.join(config['input_dir'], file_name)
        print(f"Reading {kind} from {path}")
        df = pd.read_csv(path)
    else:
        url = config['base_url'] + file_name
        print(f"Downloading {kind} from {url}")
        response = requests.get(url, verify=certifi.where(), timeout=config['timeout'])
        response.raise_for_status()
        df = pd.read_csv(StringIO(response.text))

    print(f"Loaded {kind}: {df.shape}")
    return df


def getConfirmedAndDeaths(config=None):
    confirmed = getTimeSeries('confirmed', config)
    deaths = getTimeSeries('deaths', config)
    return confirmed, deaths
