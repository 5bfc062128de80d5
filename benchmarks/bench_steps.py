"""
Microbenchmark: N-body step time vs population size.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from physics_lab.nbody import NBodyEngine
from physics_lab.profiler import Profiler


def run(n: int, steps: int = 200):
    prof = Profiler()
    engine = NBodyEngine(width=800, height=600, gravity_coef=0.1, electro_coef=1.0, profiler=prof)
    engine.populate(n, np.random.default_rng(12345))

    # warmup
    for _ in range(10):
        engine.step(1.0)

    t0 = time.perf_counter()
    for _ in range(steps):
        engine.step(1.0)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces_integrate", "boundaries"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
