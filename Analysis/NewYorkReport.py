import os
import sys

import matplotlib.pyplot as plt
import seaborn as sns

from covid_data.Config import load_config
from covid_data.GetTimeSeries import getConfirmedAndDeaths
from covid_data.PrepareTimeSeries import prepare, count_negative_deltas
from Analysis.RatioRegression import fit_deaths_on_cases, smooth_ratio, MIN_POINTS
from Analysis.summary import create_summary_table

"""
Daily COVID-19 cases and deaths for one state (New York by default)
Generates:
  - daily cases / daily deaths over time
  - daily deaths vs daily cases with the OLS regression line
  - deaths/cases ratio over time with a LOWESS curve
"""


def _no_data(ax):
    ax.text(0.5, 0.5, 'No data', ha='center', va='center',
            transform=ax.transAxes, fontsize=12, color='gray')


def plot_daily_counts(series, region, figsize=(12, 6)):
    fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)

    panels = [
        ('daily_cases', 'Daily New Cases', 'tab:blue'),
        ('daily_deaths', 'Daily New Deaths', 'tab:red'),
    ]

    for ax, (col, label, color) in zip(axes, panels):
        if series.empty:
            _no_data(ax)
        else:
            ax.plot(series['date'], series[col], color=color, linewidth=1.5,
                    marker='o', markersize=2, label=label)
            ax.legend()
        ax.set_title(f'{region} - {label}', fontsize=14, fontweight='bold')
        ax.set_ylabel(label)
        ax.grid(True, linestyle='--', alpha=0.6)

    axes[-1].set_xlabel('Date')
    axes[-1].tick_params(axis='x', rotation=45)
    fig.tight_layout()
    return fig


def plot_deaths_vs_cases(series, region, fit=None, figsize=(12, 6)):
    fig, ax = plt.subplots(figsize=figsize)

    if series.empty:
        _no_data(ax)
    elif len(series) < MIN_POINTS:
        ax.scatter(series['daily_cases'], series['daily_deaths'], color='tab:blue', alpha=0.6)
    else:
        sns.regplot(x='daily_cases', y='daily_deaths', data=series, ax=ax, ci=None,
                    scatter_kws={'alpha': 0.5, 's': 15},
                    line_kws={'color': 'darkorange', 'linewidth': 2})

    title = f'{region} - Daily Deaths vs Daily Cases'
    if fit is not None:
        title += f"\n(slope={fit['slope']:.4f}, intercept={fit['intercept']:.2f}, R²={fit['r_squared']:.3f})"
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_xlabel('Daily New Cases')
    ax.set_ylabel('Daily New Deaths')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def plot_ratio(series, region, frac=0.1, figsize=(12, 6)):
    fig, ax = plt.subplots(figsize=figsize)

    if series.empty:
        _no_data(ax)
    else:
        # NaN ratios (no new cases) break the line instead of dropping to zero
        ax.plot(series['date'], series['ratio'], color='lightgray', linewidth=1,
                marker='o', markersize=2, label='Deaths / Cases')

        smoothed = smooth_ratio(series, frac=frac)
        if not smoothed.empty:
            ax.plot(smoothed['date'], smoothed['ratio_smoothed'], color='darkorange',
                    linewidth=2.5, label=f'LOWESS (frac={frac})')
        ax.legend()

    ax.set_title(f'{region} - Daily Deaths / Daily Cases', fontsize=14, fontweight='bold')
    ax.set_xlabel('Date')
    ax.set_ylabel('Ratio')
    ax.grid(True, linestyle='--', alpha=0.6)
    ax.tick_params(axis='x', rotation=45)
    fig.tight_layout()
    return fig


def build_report(config):
    region = config['region']

    # ============================================
    # LOAD DATA
    # ============================================

    print("=" * 80)
    print(f"DAILY COVID-19 REPORT: {region}")
    print("=" * 80)

    confirmed, deaths = getConfirmedAndDeaths(config)

    # ============================================
    # PREPARE DAILY SERIES
    # ============================================

    print(f"\n{'='*80}")
    print("CONVERTING CUMULATIVE TO DAILY CASES/DEATHS")
    print(f"{'='*80}")

    series = prepare(confirmed, deaths, region,
                     region_column=config['region_column'],
                     date_format=config['date_format'])

    print(f"\nDaily series shape: {series.shape}")
    if series.empty:
        print(f"WARNING: no data for '{region}'")
    else:
        print(f"Date range: {series['date'].min()} to {series['date'].max()}")
        print(f"Days without new cases (undefined ratio): {series['ratio'].isna().sum()}")

    print("\nChecking for negative values:")
    negatives = count_negative_deltas(series)
    for col, count in negatives.items():
        if count > 0:
            print(f" {col}: {count} negative values (downward revisions, kept as is)")
    if not any(negatives.values()):
        print("  No negative values detected")

    summary = create_summary_table(series, region)
    print("\n" + summary.to_string())

    # ============================================
    # REGRESSION
    # ============================================

    print(f"\n{'='*80}")
    print("LINEAR REGRESSION: daily_deaths ~ daily_cases")
    print(f"{'='*80}")

    fit = fit_deaths_on_cases(series)
    if fit is None:
        print(f"Not enough rows to fit (need {MIN_POINTS}, have {len(series)})")
    else:
        print(f"  Slope: {fit['slope']:.6f}")
        print(f"  Intercept: {fit['intercept']:.4f}")
        print(f"  R²: {fit['r_squared']:.4f}")
        print(f"  Observations: {fit['n_obs']}")

    # ============================================
    # VISUALIZATION
    # ============================================

    print(f"\n{'='*80}")
    print("CREATING VISUALIZATION")
    print(f"{'='*80}")

    figures = {
        'output_daily': plot_daily_counts(series, region, figsize=config['figsize']),
        'output_scatter': plot_deaths_vs_cases(series, region, fit=fit, figsize=config['figsize']),
        'output_ratio': plot_ratio(series, region, frac=config['lowess_frac'], figsize=config['figsize']),
    }

    if config['output_dir']:
        os.makedirs(config['output_dir'], exist_ok=True)
        for key, fig in figures.items():
            path = os.path.join(config['output_dir'], config[key])
            fig.savefig(path, dpi=config['dpi'], bbox_inches='tight')
            print(f"✓ Saved {path}")

    if config['show_plots']:
        plt.show()

    return {
        'series': series,
        'summary': summary,
        'fit': fit,
        'figures': figures,
    }


#Usage

if __name__ == "__main__":
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    build_report(config)
