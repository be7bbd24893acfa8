from typing import Callable, List

import numpy as np

from .config import CFG
from .entities import Genome
from .errors import ConfigurationError, DegenerateSelectionError, MalformedOutputError
from .frame import FrameState, SweeperView
from .genetics import GeneticAlgorithm
from .sweeper import Sweeper
from .utils import random_position


class Controller:
    """Owns the sweepers, the mines and the genetic algorithm; advances the world.

    Every sweeper carries the genome its brain was built from, so the
    sweeper/genome pairing lives in one list and survives each epoch by index.
    """

    def __init__(self, cfg: CFG, log: Callable[[str], None] = print):
        self.cfg = cfg.validate()
        self.log = log
        self.rng = np.random.default_rng(cfg.SEED)

        self.sweepers: List[Sweeper] = [Sweeper(cfg, self.rng) for _ in range(cfg.SWEEPER_COUNT)]
        self.weights_in_nn = self.sweepers[0].weight_count()
        self.ga = GeneticAlgorithm.from_config(cfg, self.weights_in_nn, self.rng)
        self._pair(self.ga.genomes)

        self.mines = np.array([random_position(self.rng, cfg.WIDTH, cfg.HEIGHT)
                               for _ in range(cfg.MINE_COUNT)], dtype=float)

        self.ticks = 0
        self.generation = 0
        self.fast_mode = cfg.START_FAST
        self.should_stop = False
        self.elite_slots = 0
        self.reseeds = 0

        # per-generation metrics
        self.average_fitness_history: List[float] = []
        self.best_fitness_history: List[float] = []
        self.collections_this_generation = 0

    # ----- pairing -----

    @property
    def population(self) -> List[Genome]:
        return [s.genome for s in self.sweepers]

    def _pair(self, genomes: List[Genome]) -> None:
        if len(genomes) != len(self.sweepers):
            raise ConfigurationError(
                f"{len(genomes)} genomes for {len(self.sweepers)} sweepers")
        for sweeper, genome in zip(self.sweepers, genomes):
            sweeper.load_genome(genome)

    # ----- driver signals -----

    def toggle_fast_mode(self) -> bool:
        self.fast_mode = not self.fast_mode
        return self.fast_mode

    def stop(self) -> None:
        self.should_stop = True

    @property
    def finished(self) -> bool:
        return self.cfg.N_GENERATIONS > 0 and self.generation >= self.cfg.N_GENERATIONS

    # ----- main loop -----

    def update(self) -> None:
        """One call = one tick, or the epoch once the generation's ticks are used up."""
        if self.ticks < self.cfg.TICKS_PER_GENERATION:
            self.tick()
        else:
            self.epoch()

    def run_generation(self) -> None:
        start = self.generation
        while self.generation == start and not self.should_stop:
            self.update()

    def tick(self) -> None:
        cfg = self.cfg
        for i, s in enumerate(self.sweepers):
            if not s.update(self.mines):
                raise MalformedOutputError(i, cfg.OUTPUT_COUNT)

            hit = s.check_for_mine(self.mines, cfg.MINE_SCALE)
            if hit is not None:
                s.increment_fitness()
                self.mines[hit] = random_position(self.rng, cfg.WIDTH, cfg.HEIGHT)
                self.collections_this_generation += 1
                if cfg.LOG_EVENTS:
                    self.log(f"[gen {self.generation} tick {self.ticks}] COLLECT sweeper={i} mine={hit} fitness={s.fitness}")

            s.genome.fitness = float(s.fitness)
        self.ticks += 1

    def epoch(self) -> None:
        cfg = self.cfg
        try:
            new_population = self.ga.epoch(self.population)
            reseeded = False
        except DegenerateSelectionError:
            reseeded = True

        # stats of the generation that just finished
        avg, best, worst = self.ga.average_fitness, self.ga.best_fitness, self.ga.worst_fitness
        self.average_fitness_history.append(avg)
        self.best_fitness_history.append(best)
        self.log(f"[gen {self.generation}] EPOCH avg={avg:.2f} best={best:.0f} worst={worst:.0f} "
                 f"collected={self.collections_this_generation}")

        if reseeded:
            self.reseeds += 1
            self.log(f"[gen {self.generation}] RESEED reason=zero-fitness")
            new_population = self.ga.initialize()
            self.elite_slots = 0
        elif (cfg.NUM_ELITE * cfg.NUM_COPIES_ELITE) % 2 == 0:
            self.elite_slots = cfg.NUM_ELITE * cfg.NUM_COPIES_ELITE
        else:
            self.elite_slots = 0

        self.generation += 1
        self.ticks = 0
        self.collections_this_generation = 0

        self._pair(new_population)
        for s in self.sweepers:
            s.reset()

    # ----- rendering snapshot -----

    def frame_state(self) -> FrameState:
        cfg = self.cfg
        views = [
            SweeperView(
                x=float(s.position[0]), y=float(s.position[1]),
                rotation=s.rotation, speed=s.speed,
                heading=(float(s.look_at[0]), float(s.look_at[1])),
                fitness=s.fitness,
                is_elite=i < self.elite_slots,
            )
            for i, s in enumerate(self.sweepers)
        ]
        return FrameState(
            width=cfg.WIDTH,
            height=cfg.HEIGHT,
            generation=self.generation,
            ticks=self.ticks,
            best_fitness=self.best_fitness_history[-1] if self.best_fitness_history else 0.0,
            average_fitness=self.average_fitness_history[-1] if self.average_fitness_history else 0.0,
            fast_mode=self.fast_mode,
            sweeper_scale=cfg.SWEEPER_SCALE,
            mine_scale=cfg.MINE_SCALE,
            sweepers=views,
            mines=[(float(x), float(y)) for x, y in self.mines],
            best_history=list(self.best_fitness_history),
            average_history=list(self.average_fitness_history),
        )
