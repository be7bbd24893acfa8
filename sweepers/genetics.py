"""
Generational genetic algorithm over flat weight vectors.

One `epoch` takes the fitness-scored population and produces the next one:
sort ascending by fitness, copy the elites, then fill the rest with
roulette-wheel parents, single-point crossover and per-weight perturbation.
"""
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import CFG
from .entities import Genome
from .errors import ConfigurationError, DegenerateSelectionError
from .utils import random_clamped


class GeneticAlgorithm:
    def __init__(self, population_size: int, mutation_rate: float, crossover_rate: float,
                 genome_length: int, max_perturbation: float = 0.3, num_elite: int = 4,
                 num_copies_elite: int = 1, rng: Optional[np.random.Generator] = None):
        self.population_size = population_size
        self.mutation_rate = mutation_rate
        self.crossover_rate = crossover_rate
        self.genome_length = genome_length
        self.max_perturbation = max_perturbation
        self.num_elite = num_elite
        self.num_copies_elite = num_copies_elite
        self.rng = rng if rng is not None else np.random.default_rng()

        self.genomes: List[Genome] = []
        self.total_fitness = 0.0
        self.best_fitness = 0.0
        self.average_fitness = 0.0
        self.worst_fitness = float("inf")
        self.fittest_genome = 0

        self.initialize()

    @classmethod
    def from_config(cls, cfg: CFG, genome_length: int, rng: np.random.Generator) -> "GeneticAlgorithm":
        return cls(
            population_size=cfg.SWEEPER_COUNT,
            mutation_rate=cfg.MUTATION_RATE,
            crossover_rate=cfg.CROSSOVER_RATE,
            genome_length=genome_length,
            max_perturbation=cfg.MAX_PERTURBATION,
            num_elite=cfg.NUM_ELITE,
            num_copies_elite=cfg.NUM_COPIES_ELITE,
            rng=rng,
        )

    def initialize(self) -> List[Genome]:
        """Fresh population: random weights in [-1, 1), fitness 0."""
        self.genomes = [Genome(self.rng.uniform(-1.0, 1.0, self.genome_length), 0.0)
                        for _ in range(self.population_size)]
        self._reset()
        return self.genomes

    # ----- one generation -----

    def epoch(self, population: Sequence[Genome]) -> List[Genome]:
        if len(population) != self.population_size:
            raise ConfigurationError(
                f"epoch got {len(population)} genomes, population size is {self.population_size}")
        for g in population:
            if len(g) != self.genome_length:
                raise ConfigurationError(
                    f"genome has {len(g)} weights, expected {self.genome_length}")

        self.genomes = list(population)
        self._reset()

        # list.sort is stable: equal fitness keeps its relative order
        self.genomes.sort(key=lambda g: g.fitness)
        self._calculate_statistics()

        new_population: List[Genome] = []

        # an odd number of elites would leave the pairwise fill one short
        if (self.num_elite * self.num_copies_elite) % 2 == 0:
            self._grab_n_best(self.num_elite, self.num_copies_elite, new_population)

        while len(new_population) < self.population_size:
            mum = self.roulette_select()
            dad = self.roulette_select()

            baby1, baby2 = self.crossover(mum.weights, dad.weights)
            self.mutate(baby1)
            self.mutate(baby2)

            new_population.append(Genome(baby1, 0.0))
            new_population.append(Genome(baby2, 0.0))

        # odd population sizes overshoot by one offspring
        del new_population[self.population_size:]

        self.genomes = new_population
        return self.genomes

    # ----- operators -----

    def roulette_select(self) -> Genome:
        """Fitness-proportionate pick over the (sorted) population."""
        if self.total_fitness <= 0:
            raise DegenerateSelectionError(
                "total fitness is zero, no genome can be picked by roulette selection")

        wheel_slice = self.rng.random() * self.total_fitness
        fitness_so_far = 0.0
        for genome in self.genomes:
            fitness_so_far += genome.fitness
            if fitness_so_far >= wheel_slice:
                return genome

        raise DegenerateSelectionError(
            f"roulette slice {wheel_slice} beyond cumulative fitness {fitness_so_far}")

    def crossover(self, mum: np.ndarray, dad: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Single-point crossover; parents are copied through unchanged when the
        rate draw fails or both parents are the same genome."""
        if self.rng.random() > self.crossover_rate or mum is dad or len(mum) < 2:
            return np.array(mum, dtype=float), np.array(dad, dtype=float)

        point = int(self.rng.integers(0, len(mum) - 1))
        baby1 = np.concatenate([mum[:point], dad[point:]])
        baby2 = np.concatenate([dad[:point], mum[point:]])
        return baby1, baby2

    def mutate(self, chromo: np.ndarray) -> np.ndarray:
        """Perturb each weight with probability mutation_rate by at most max_perturbation (in place)."""
        mask = self.rng.random(chromo.shape) < self.mutation_rate
        perturbation = random_clamped(self.rng, chromo.shape) * self.max_perturbation
        chromo[mask] += perturbation[mask]
        return chromo

    # ----- bookkeeping -----

    def _grab_n_best(self, n_best: int, copy_count: int, population: List[Genome]) -> None:
        # lowest of the top block first, fittest last
        while n_best > 0:
            n_best -= 1
            elite = self.genomes[(self.population_size - 1) - n_best]
            for _ in range(copy_count):
                population.append(elite.copy())

    def _calculate_statistics(self) -> None:
        self.total_fitness = 0.0
        highest = 0.0
        lowest = float("inf")
        for i, genome in enumerate(self.genomes):
            if genome.fitness > highest:
                highest = genome.fitness
                self.fittest_genome = i
                self.best_fitness = highest
            if genome.fitness < lowest:
                lowest = genome.fitness
                self.worst_fitness = lowest
            self.total_fitness += genome.fitness
        self.average_fitness = self.total_fitness / self.population_size

    def _reset(self) -> None:
        self.total_fitness = 0.0
        self.best_fitness = 0.0
        self.worst_fitness = float("inf")
        self.average_fitness = 0.0
        self.fittest_genome = 0
