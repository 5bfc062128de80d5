# examples/pendulum.py
from physics_lab.demos import PendulumDemo
from physics_lab.driver import ManualScheduler

scheduler = ManualScheduler()
demo = PendulumDemo(scheduler=scheduler, length=1.0, initial_angle=20)

demo.start()
scheduler.run(frames=240)  # 4 s at 60 Hz

d = demo.derived()
print("t:", demo.get_state().time)
print("angle [rad]:", demo.get_state().angle)
print("period [s]:", d["period"])
print("energy [J]: kinetic", d["kinetic_energy"], "potential", d["potential_energy"])
