# examples/hexagon_drop.py
from hexagon_sim import HexagonSimulation, SimulationParameters

# Static hexagon, no drag: the ball free-falls from just above the center
sim = HexagonSimulation.create(start=(300.0, 274.0))
params = SimulationParameters(gravity_magnitude=0.15, air_drag_coefficient=0.0, angular_rate=0.0)

for _ in range(120):
    contacts = sim.step(params)
    for c in contacts:
        print(f"tick {sim.tick}: edge {c.edge} vn {c.normal_speed:.3f} -> {c.normal_speed_after:.3f}")

print("pos:", sim.ball.position)
print("vel:", sim.ball.velocity)
