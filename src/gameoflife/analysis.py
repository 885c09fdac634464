"""
Performance analysis of the benchmark CSV: parallel speedup, efficiency and
throughput per worker count, as a terminal summary and a dashboard image.
"""
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.font_manager import FontProperties
from matplotlib.gridspec import GridSpec

plt.style.use('seaborn-v0_8-darkgrid')
sns.set_palette("husl")
COLORS = {
    'primary': '#2E86AB',
    'secondary': '#A23B72',
    'success': '#06A77D',
    'warning': '#F18F01',
    'danger': '#C73E1D',
}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}
LEGEND_FONT = FontProperties(family='sans-serif', size=9)

REQUIRED_COLUMNS = {'strategy', 'grid_size', 'workers', 'time_ms', 'throughput_mcells_s'}


def load_results(path: Path) -> pd.DataFrame:
    """Load benchmark results written by benchmark.save_results."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"benchmark results not found: {path}")
    df = pd.read_csv(path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {sorted(missing)}")
    return df


def calculate_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """
    Speedup and efficiency of each parallel run against the NumPy baseline
    at the same grid size. Sizes without a baseline are dropped.
    """
    baseline = (df[df['strategy'] == 'numpy'][['grid_size', 'time_ms']]
                .rename(columns={'time_ms': 'baseline_ms'}))
    parallel = df[df['strategy'] == 'parallel'].merge(baseline, on='grid_size')

    parallel['speedup'] = parallel['baseline_ms'] / parallel['time_ms']
    parallel['efficiency'] = parallel['speedup'] / parallel['workers'] * 100
    return parallel.sort_values(['grid_size', 'workers']).reset_index(drop=True)


def create_dashboard(df: pd.DataFrame, metrics: pd.DataFrame):
    """Three panels: throughput, speedup against ideal, parallel efficiency."""
    fig = plt.figure(figsize=(18, 6))
    fig.patch.set_facecolor('white')
    gs = GridSpec(1, 3, figure=fig, wspace=0.3)
    fig.suptitle('Game of Life: Row-Band Parallel Update', fontsize=18, fontweight='bold',
                 color=COLORS['primary'])

    grid_sizes = sorted(metrics['grid_size'].unique())
    worker_counts = sorted(metrics['workers'].unique())
    colors_gradient = plt.get_cmap('viridis')(np.linspace(0.2, 0.9, max(len(grid_sizes), 1)))

    ax1 = fig.add_subplot(gs[0, 0])
    for idx, size in enumerate(grid_sizes):
        data = metrics[metrics['grid_size'] == size]
        ax1.plot(data['workers'], data['throughput_mcells_s'], marker='o', linewidth=2,
                 label=f'{size}×{size}', color=colors_gradient[idx])
        seq = df[(df['strategy'] == 'numpy') & (df['grid_size'] == size)]
        if not seq.empty:
            ax1.axhline(y=seq['throughput_mcells_s'].values[0], color=colors_gradient[idx],
                        linestyle='--', linewidth=1.5, alpha=0.5)
    ax1.set_xlabel('Workers', **LABEL_FONT)
    ax1.set_ylabel('Throughput (M cells/s)', **LABEL_FONT)
    ax1.set_title('Throughput (dashed: NumPy)', **TITLE_FONT)
    ax1.legend(prop=LEGEND_FONT)

    ax2 = fig.add_subplot(gs[0, 1])
    for idx, size in enumerate(grid_sizes):
        data = metrics[metrics['grid_size'] == size]
        ax2.plot(data['workers'], data['speedup'], marker='o', linewidth=2,
                 label=f'{size}×{size}', color=colors_gradient[idx])
    ax2.plot(worker_counts, worker_counts, color=COLORS['danger'], linestyle=':', label='Ideal')
    ax2.set_xlabel('Workers', **LABEL_FONT)
    ax2.set_ylabel('Speedup vs NumPy', **LABEL_FONT)
    ax2.set_title('Speedup', **TITLE_FONT)
    ax2.legend(prop=LEGEND_FONT)

    ax3 = fig.add_subplot(gs[0, 2])
    sns.barplot(data=metrics, x='workers', y='efficiency', hue='grid_size', ax=ax3, palette='viridis')
    ax3.axhline(y=100, color=COLORS['success'], linestyle='--', linewidth=1.5)
    ax3.set_xlabel('Workers', **LABEL_FONT)
    ax3.set_ylabel('Efficiency (%)', **LABEL_FONT)
    ax3.set_title('Parallel Efficiency', **TITLE_FONT)

    for ax in (ax1, ax2):
        ax.set_xticks(worker_counts)
        ax.set_facecolor('#f8f9fa')
        ax.grid(True, alpha=0.3, linestyle='--')

    return fig


def print_summary(metrics: pd.DataFrame) -> None:
    print("\n" + "=" * 60)
    print("PERFORMANCE SUMMARY")
    print("=" * 60)
    if metrics.empty:
        print("No parallel runs with a NumPy baseline.")
        print("=" * 60)
        return

    for size in sorted(metrics['grid_size'].unique()):
        data = metrics[metrics['grid_size'] == size]
        best = data.loc[data['speedup'].idxmax()]
        print(f"Grid {size:>5}x{size:<5}: best {int(best['workers']):>2} workers "
              f"(Speedup: {best['speedup']:.2f}x, Efficiency: {best['efficiency']:.1f}%)")

    print(f"\nAverage Speedup: {metrics['speedup'].mean():>8.2f}x")
    print(f"Maximum Speedup: {metrics['speedup'].max():>8.2f}x")
    print("=" * 60)
