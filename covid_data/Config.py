import yaml

# ============================================
# CONFIGURATION
# ============================================

CONFIG = {
    'region': 'New York',
    'region_column': 'Province_State',
    'date_format': '%m/%d/%y',
    'base_url': (
        "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
        "csse_covid_19_data/csse_covid_19_time_series/"
    ),
    'confirmed_file': 'time_series_covid19_confirmed_US.csv',
    'deaths_file': 'time_series_covid19_deaths_US.csv',
    'input_dir': None,      # read local CSVs instead of downloading
    'timeout': 60,
    'output_dir': 'Results/report',
    'output_daily': 'daily_counts.png',
    'output_scatter': 'deaths_vs_cases.png',
    'output_ratio': 'death_case_ratio.png',
    'lowess_frac': 0.1,
    'figsize': (12, 6),
    'dpi': 150,
    'show_plots': False,
}


def load_config(path=None, **overrides):
    """
    Return a copy of CONFIG updated from a YAML file and keyword overrides.
    Keys that CONFIG does not know are rejected.
    """
    config = dict(CONFIG)

    updates = {}
    if path is not None:
        with open(path, 'r') as f:
            loaded = yaml.safe_load(f)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(loaded).__name__}")
        updates.update(loaded)
    updates.update(overrides)

    unknown = sorted(set(updates) - set(config))
    if unknown:
        raise KeyError(f"Unknown config keys: {unknown}")

    config.update(updates)
    if isinstance(config['figsize'], list):
        config['figsize'] = tuple(config['figsize'])
    return config
