from physics_lab.demos import ParticleDemo
from physics_lab.driver import ManualScheduler
from physics_lab.recorder import HistoryBuffer

history = HistoryBuffer(capacity=600)
scheduler = ManualScheduler()
demo = ParticleDemo(scheduler=scheduler, seed=2024, electrostatics=2.0)
demo.on_step = lambda state: history.append(state.time, demo.derived())

demo.start()
scheduler.run(frames=600)

t, cols = history.arrays()
print("frames recorded:", len(t))
print("kinetic energy first/last:", cols["kinetic_energy"][0], cols["kinetic_energy"][-1])
print("first body:", demo.get_state().positions[0])
