import cProfile
import io
import math
import pstats
import random
import time

from avl_trees.factory import create_avl_tree

# Test with different sizes - focus on a SINGLE insertion and deletion
sizes = [50, 100, 200, 400, 800, 1600, 3200, 6400, 12800]


def profile_call(fn, *args):
    profiler = cProfile.Profile()
    profiler.enable()
    start = time.perf_counter()
    fn(*args)
    elapsed = time.perf_counter() - start
    profiler.disable()

    ps = pstats.Stats(profiler, stream=io.StringIO())
    return elapsed, ps.total_calls


print("SIZE  | Insert Time | Insert Calls | Calls/log(n) | Delete Calls | Calls/log(n)")
print("-" * 84)

for SIZE in sizes:
    # Even keys leave room for an odd key that lands on the deepest path
    keys = list(range(0, 2 * SIZE, 2))
    random.seed(1)
    random.shuffle(keys)

    tree = create_avl_tree()
    for key in keys:
        tree.insert(key)

    new_key = 2 * SIZE - 1
    insertion_time, insert_calls = profile_call(tree.insert, new_key)
    _, delete_calls = profile_call(tree.delete, tree.root.value)

    log_n = math.log2(SIZE)
    print(
        f"{SIZE:5d} | {insertion_time:10.6f}s | {insert_calls:12d} | {insert_calls / log_n:12.1f} "
        f"| {delete_calls:12d} | {delete_calls / log_n:12.1f}"
    )

print()
print("Analysis:")
print("=" * 84)
print("If Calls/log(n) stays roughly constant, a single insertion or deletion makes O(log n) calls.")
