import random
from pyinstrument import Profiler
from boundedlist import BoundedList

def fill_sorted(values, capacity):
    lst = BoundedList(capacity)
    for v in values:
        lst.insert_sorted(v)
    return lst

def drain_front(lst):
    total = 0
    while not lst.empty():
        total += lst.pop_front()
    return total

def benchmark_large():
    capacity = 5_000
    rng = random.Random(1)
    values = [rng.randrange(1_000_000) for _ in range(capacity)]
    print(f"Generated {len(values)} values")

    profiler = Profiler()
    profiler.start()

    N = 3
    print(f"Starting computation ({N} iterations)...")
    for _ in range(N):
        lst = fill_sorted(values, capacity)
        assert lst.full()
        drain_front(lst)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("boundedlist_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
