"""Basic example of using the gravity simulator and field sampler directly."""

from gravity_field import GravitySimulator, VectorFieldSampler
from gravity_field.physics.diagnostics import total_energy, total_momentum
from gravity_field.presets import BinaryPreset, make_vector_field


def main():
    """Run the binary scene headless and report conserved quantities."""
    simulator = GravitySimulator(0.81)
    sampler = VectorFieldSampler()

    bodies = BinaryPreset().generate()
    vector_field = make_vector_field(grid_count=20)

    print(f"Initial energy: {total_energy(bodies, 0.81):.6f}")

    for frame in range(300):
        simulator.update(bodies, 1.0 / 60, substeps=5)
        sampler.update(simulator, bodies, vector_field)
        if frame % 60 == 0:
            print(f"Frame {frame}: E={total_energy(bodies, 0.81):.6f}, P={total_momentum(bodies)}")

    print(f"Final energy: {total_energy(bodies, 0.81):.6f}")


if __name__ == "__main__":
    main()
