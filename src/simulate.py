import argparse
import sys

from cache.errors import SimulationError
from cache.loader import load_request
from cache.simulator import SimulationResult, run
from metrics.tracker import TraceTracker


def format_result(result: SimulationResult) -> str:
    return f"Hit Ratio = {result.hits}/{result.total} = {result.ratio:.3f}"


def format_step(index: int, block: int, hit: bool, evicted, resident) -> str:
    outcome = 'HIT ' if hit else 'MISS'
    evicted_text = '-' if evicted is None else str(evicted)
    return f"{index:4d}  {block:4d}  {outcome}  evicted={evicted_text:>3}  [{' '.join(map(str, resident))}]"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Simulate a FIFO or LRU cache over a sequence of memory block references'
    )
    parser.add_argument('args', nargs='*', metavar='ARG',
                        help='CACHE_SIZE MEMORY_SIZE POLICY(F/L) REF [REF ...]')
    parser.add_argument('--trace', type=str, default=None, help='Write the per-reference trace as JSON')
    parser.add_argument('--verbose', action='store_true', help='Print every reference')

    args = parser.parse_intermixed_args(argv)

    try:
        request = load_request(args.args)
        tracker = TraceTracker(policy=request.policy)
        result = run(request, tracker=tracker)
    except SimulationError as e:
        print(e)
        return 1

    if args.verbose:
        for i, block in enumerate(tracker.blocks):
            print(format_step(i + 1, block, tracker.hits[i], tracker.evictions[i], tracker.resident[i]))

    if args.trace:
        tracker.save(args.trace)

    print(format_result(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
