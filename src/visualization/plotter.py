import matplotlib.pyplot as plt
import seaborn as sns
from typing import Dict, List
import pandas as pd

sns.set_style('darkgrid')


def plot_hit_ratio_curves(trackers: Dict, save_path: str = None, show: bool = True):
    fig, axes = plt.subplots(1, 2, figsize=(15, 5))

    for name, tracker in trackers.items():
        ratios = tracker.cumulative_hit_ratio()
        steps = range(1, len(ratios) + 1)
        axes[0].plot(steps, ratios, label=name, alpha=0.8)
        axes[1].step(steps, tracker.occupancy, where='post', label=name, alpha=0.8)

    axes[0].set_xlabel('Reference')
    axes[0].set_ylabel('Hit Ratio')
    axes[0].set_title('Cumulative Hit Ratio')
    axes[0].set_ylim(0, 1)
    axes[0].legend()
    axes[0].grid(True)

    axes[1].set_xlabel('Reference')
    axes[1].set_ylabel('Resident Blocks')
    axes[1].set_title('Cache Occupancy')
    axes[1].legend()
    axes[1].grid(True)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    if show:
        plt.show()
    return fig


def plot_comparison(results: Dict[str, Dict[str, List[float]]], save_path: str = None, show: bool = True):
    """Bar chart of mean hit ratio, ``results[workload][policy]`` = per-episode ratios."""
    rows = []
    for workload, per_policy in results.items():
        for policy, ratios in per_policy.items():
            for ratio in ratios:
                rows.append({'workload': workload, 'policy': policy, 'hit_ratio': ratio})
    df = pd.DataFrame(rows, columns=['workload', 'policy', 'hit_ratio'])

    fig, ax = plt.subplots(figsize=(12, 5))

    if not df.empty:
        sns.barplot(data=df, x='workload', y='hit_ratio', hue='policy', ax=ax, errorbar='sd')

        for container in ax.containers:
            ax.bar_label(container, fmt='%.3f')

    ax.set_xlabel('Workload')
    ax.set_ylabel('Hit Ratio')
    ax.set_title('Mean Hit Ratio by Policy')
    ax.set_ylim(0, 1)
    ax.grid(True, axis='y')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    if show:
        plt.show()
    return fig
