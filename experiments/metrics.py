import time
from pathlib import Path

def timed(fn):
    start = time.perf_counter()
    result = fn()
    end = time.perf_counter()
    return result, (end - start) * 1000  # ms

def percentile(samples, p):
    ordered = sorted(samples)
    if not ordered:
        return 0.0
    k = min(len(ordered) - 1, int(round(p / 100 * (len(ordered) - 1))))
    return ordered[k]

def append_csv(row, path="experiments/results/results.csv"):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    header = not Path(path).exists()
    with open(path, "a") as f:
        if header:
            f.write(",".join(row.keys()) + "\n")
        f.write(",".join(str(v) for v in row.values()) + "\n")
