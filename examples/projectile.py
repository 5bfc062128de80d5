from physics_lab.demos import ProjectileDemo
from physics_lab.driver import ManualScheduler

scheduler = ManualScheduler()
demo = ProjectileDemo(scheduler=scheduler, velocity=50, angle=45, height=10)
print(demo.derived())

demo.start()
while scheduler.pending:
    scheduler.fire(scheduler.now + 1000 / 60)

for s in demo.get_state().visible[::10]:
    print(f"t={s.time:6.3f}  x={s.x:8.2f}  y={s.y:7.2f}")
print("status:", demo.status.value)
