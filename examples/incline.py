from physics_lab.demos import InclineDemo
from physics_lab.driver import ManualScheduler

scheduler = ManualScheduler()
demo = InclineDemo(scheduler=scheduler, angle=30, mass=5, friction=0.2)
print("forces:", demo.derived())

demo.start()
frames = scheduler.run(frames=10_000)
s = demo.get_state()
print(f"reached {s.position} m after {s.time:.3f} s ({frames} frames), status={demo.status.value}")
