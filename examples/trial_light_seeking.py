"""
Light Seeking Trial

A small, self-contained evolutionary run showing how a creature simulation
drives the genome core. No world is simulated: each creature is shown random
sight snapshots and is rewarded for accelerating when the center of its field
of view is bright, and for standing still when it is dark.

Fitness:
    For each snapshot, the creature's 'acceleration_radius' output is
    compared with the lightness seen by the center sight slot:
        fitness = - Σ(acceleration_radius - lightness_c0)²

Selection:
    Truncation selection. The better half of the population survives,
    and the other half is replaced by offspring of random survivor pairs.

Usage:
    python examples/trial_light_seeking.py [config_critters.ini]
"""

import sys
from pathlib import Path

from loguru import logger

from neatcritters import Config, Genome, Lineage

NUM_SNAPSHOTS   = 20
POPULATION_SIZE = 30
NUM_GENERATIONS = 50

def random_snapshot(lineage: Lineage, genome: Genome) -> dict[str, float]:
    """Random body state and sight readings for one creature."""
    rng    = lineage.rng
    inputs = {key: rng.random() for key in Genome.BODY_INPUTS}
    for i in range(genome.sight_resolution):
        pixel = genome.pixel_id(i)
        for channel in Genome.SIGHT_CHANNELS:
            inputs[f"sight_{pixel}{channel}"] = rng.random()
    return inputs

def evaluate(lineage: Lineage, genome: Genome) -> float:
    brain   = genome.build_brain()
    fitness = 0.0
    for _ in range(NUM_SNAPSHOTS):
        inputs  = random_snapshot(lineage, genome)
        outputs = brain.think(inputs)
        fitness -= (outputs['acceleration_radius'] - inputs['sight_c0l']) ** 2
    return fitness

def run(config: Config, seed: int = 0) -> None:
    lineage    = Lineage(config, seed=seed)
    population = [lineage.generate_reduced_random_genome() for _ in range(POPULATION_SIZE)]

    for generation in range(NUM_GENERATIONS):
        scored = sorted(((evaluate(lineage, g), g) for g in population), key=lambda pair: pair[0], reverse=True)
        survivors = [genome for _, genome in scored[:POPULATION_SIZE // 2]]

        offspring = []
        while len(survivors) + len(offspring) < POPULATION_SIZE:
            mother = lineage.rng.choice(survivors)
            father = lineage.rng.choice(survivors)
            offspring.append(mother.mix(father))
        population = survivors + offspring

        best_fitness, best = scored[0]
        brain = best.build_brain()
        s  = f"Generation {generation:03d}: "
        s += f"best fitness={best_fitness:+.3f}, "
        s += f"hidden={brain.number_nodes_hidden:2}, "
        s += f"enabled conns={brain.number_connections_enabled:3}"
        print(s)

if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    config_file = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "config_critters.ini"
    run(Config(str(config_file)))
