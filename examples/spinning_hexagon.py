# examples/spinning_hexagon.py
import logging

from hexagon_sim import HexagonSimulation, SimulationParameters
from hexagon_sim.core.invariants import kinetic_energy
from hexagon_sim.logging_config import setup_logging
from hexagon_sim.renderer import DebugRenderer

setup_logging(logging.INFO)

sim = HexagonSimulation.create()
params = SimulationParameters(angular_rate=0.02, tangential_friction=0.3)
renderer = DebugRenderer(verbose=False)

for _ in range(10):
    n = sim.run(params, 60)
    renderer.render_simulation(sim)
    print(f"contacts {n:3d}  KE {kinetic_energy(sim.ball):.3f}")
