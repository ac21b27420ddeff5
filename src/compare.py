import argparse
import json
import sys
import numpy as np
from pathlib import Path
from tqdm import tqdm

from cache.errors import SimulationError
from cache.policies import POLICIES
from cache.simulator import SimulationRequest, compare_policies
from metrics.tracker import TraceTracker
from workloads.generators import WORKLOAD_TYPES, create_workload
from visualization.plotter import plot_comparison, plot_hit_ratio_curves


def evaluate_workload(workload_type: str, cache_size: int, memory_size: int,
                      episodes: int, episode_length: int, seed: int = 42):
    workload = create_workload(workload_type, memory_size, cache_size, seed=seed)
    hit_ratios = {name: [] for name in POLICIES}

    for _ in tqdm(range(episodes), desc=workload_type):
        references = workload.generate(episode_length)
        results = compare_policies(references, cache_size, memory_size)
        for name, result in results.items():
            hit_ratios[name].append(result.ratio)

    return hit_ratios


def run_comparison(
    workload_types: list,
    cache_size: int = 8,
    memory_size: int = 32,
    episodes: int = 100,
    episode_length: int = 1000,
    seed: int = 42,
    output_dir: str = './comparison_results',
    plot: bool = False
):
    shape = SimulationRequest(cache_capacity=cache_size, memory_size=memory_size, policy='FIFO')

    Path(output_dir).mkdir(parents=True, exist_ok=True)

    results = {}

    print("=" * 60)
    print(f"POLICY COMPARISON (cache={shape.cache_capacity}, memory={shape.memory_size})")
    print("=" * 60)

    for workload_type in workload_types:
        hit_ratios = evaluate_workload(workload_type, cache_size, memory_size,
                                       episodes, episode_length, seed=seed)
        results[workload_type] = hit_ratios

        print(f"\n{workload_type}:")
        for name, ratios in hit_ratios.items():
            print(f"  {name:<5} {np.mean(ratios):.3f} ± {np.std(ratios):.3f}")

    with open(f"{output_dir}/comparison_results.json", 'w') as f:
        json.dump(results, f, indent=2)

    if plot:
        plot_comparison(results, save_path=f"{output_dir}/comparison.png", show=False)

        sample = create_workload(workload_types[0], memory_size, cache_size, seed=seed)
        trackers = {name: TraceTracker(policy=name) for name in POLICIES}
        compare_policies(sample.generate(episode_length), cache_size, memory_size, trackers=trackers)
        plot_hit_ratio_curves(trackers, save_path=f"{output_dir}/{workload_types[0]}_curves.png", show=False)

    print(f"\nResults saved to {output_dir}/")
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Compare cache replacement policies on synthetic workloads')
    parser.add_argument('--workloads', nargs='+', default=['zipf', 'uniform', 'loop'],
                        choices=WORKLOAD_TYPES, help='Workload types to evaluate')
    parser.add_argument('--cache-size', type=int, default=8, help='Cache capacity in blocks')
    parser.add_argument('--memory-size', type=int, default=32, help='Main memory size in blocks')
    parser.add_argument('--episodes', type=int, default=100, help='Reference sequences per workload')
    parser.add_argument('--episode-length', type=int, default=1000, help='References per sequence')
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--output-dir', type=str, default='./comparison_results')
    parser.add_argument('--plot', action='store_true', help='Save comparison plots')

    args = parser.parse_args(argv)

    try:
        run_comparison(
            workload_types=args.workloads,
            cache_size=args.cache_size,
            memory_size=args.memory_size,
            episodes=args.episodes,
            episode_length=args.episode_length,
            seed=args.seed,
            output_dir=args.output_dir,
            plot=args.plot
        )
    except SimulationError as e:
        print(e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
