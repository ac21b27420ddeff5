import json

import matplotlib
import pytest
matplotlib.use('Agg')

from simulate import main as simulate_main
from compare import main as compare_main, run_comparison
from metrics.tracker import TraceTracker
from visualization.plotter import plot_comparison, plot_hit_ratio_curves

REFERENCES = '1 2 3 1 4 2 12 5 3 6 8 11 9 12 10 7 1 9 5 7'.split()


def test_simulate_fifo(capsys):
    assert simulate_main(['8', '32', 'F'] + REFERENCES) == 0
    assert capsys.readouterr().out == "Hit Ratio = 7/20 = 0.350\n"


def test_simulate_lru(capsys):
    assert simulate_main(['8', '32', 'l'] + REFERENCES) == 0
    assert capsys.readouterr().out == "Hit Ratio = 6/20 = 0.300\n"


def test_simulate_negative_reference_is_positional(capsys):
    assert simulate_main(['8', '32', 'F', '1', '-1']) == 1
    assert capsys.readouterr().out == (
        "Error - Main memory block references should be non-negative and less than main memory size.\n"
    )


def test_simulate_errors(capsys):
    assert simulate_main(['8', '32']) == 1
    assert capsys.readouterr().out == "Error - Insufficient number of arguments.\n"

    assert simulate_main(['8', '48', 'F', '1']) == 1
    assert capsys.readouterr().out == "Error - Main memory size should be 32/64/128.\n"


def test_simulate_trace(tmp_path, capsys):
    trace_path = tmp_path / 'trace.json'
    assert simulate_main(['2', '32', 'L', '1', '2', '1', '3', '--trace', str(trace_path), '--verbose']) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 5
    assert 'MISS' in out[0]
    assert 'HIT' in out[2]
    assert 'evicted=  2' in out[3]
    assert out[-1] == "Hit Ratio = 1/4 = 0.250"

    tracker = TraceTracker()
    tracker.load(str(trace_path))
    assert tracker.policy == 'LRU'
    assert tracker.blocks == [1, 2, 1, 3]
    assert tracker.hits == [False, False, True, False]
    assert tracker.evictions == [None, None, None, 2]
    assert tracker.resident[-1] == [3, 1]
    assert tracker.get_stats()['hit_ratio'] == 0.25


def test_run_comparison(tmp_path):
    results = run_comparison(['scan', 'zipf'], cache_size=4, memory_size=32, episodes=2,
                             episode_length=50, output_dir=str(tmp_path))

    assert results['scan'] == {'FIFO': [0.0, 0.0], 'LRU': [0.0, 0.0]}
    assert all(0.0 <= r <= 1.0 for r in results['zipf']['LRU'])

    with open(tmp_path / 'comparison_results.json') as f:
        saved = json.load(f)
    assert saved['scan']['FIFO'] == [0.0, 0.0]


def test_plots(tmp_path):
    results = {'zipf': {'FIFO': [0.4, 0.5], 'LRU': [0.5, 0.6]}}
    plot_comparison(results, save_path=str(tmp_path / 'comparison.png'), show=False)
    assert (tmp_path / 'comparison.png').exists()

    tracker = TraceTracker('FIFO')
    tracker.record(1, False, None, [1])
    tracker.record(1, True, None, [1])
    plot_hit_ratio_curves({'FIFO': tracker}, save_path=str(tmp_path / 'curves.png'), show=False)
    assert (tmp_path / 'curves.png').exists()


def test_simulate_flags_between_references(capsys):
    assert simulate_main(['2', '32', 'L', '1', '--verbose', '2', '1']) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert out[-1] == "Hit Ratio = 1/3 = 0.333"


def test_compare_rejects_unknown_workload(capsys):
    with pytest.raises(SystemExit) as exc:
        compare_main(['--workloads', 'bogus', '--episodes', '1'])
    assert exc.value.code == 2
    assert 'invalid choice' in capsys.readouterr().err


def test_compare_rejects_bad_cache_size(tmp_path, capsys):
    assert compare_main(['--cache-size', '9', '--memory-size', '32', '--episodes', '1',
                         '--output-dir', str(tmp_path)]) == 1
    assert capsys.readouterr().out == (
        "Error - Cache size should neither exceed 1/4th of main memory size nor be less than 1.\n"
    )


def test_run_comparison_with_plots(tmp_path):
    run_comparison(['zipf'], cache_size=4, memory_size=32, episodes=2,
                   episode_length=100, output_dir=str(tmp_path), plot=True)

    assert (tmp_path / 'comparison.png').exists()
    assert (tmp_path / 'zipf_curves.png').exists()
