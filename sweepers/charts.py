import os
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .controller import Controller


def final_charts(controller: Controller, output_dir: Optional[str] = None) -> List[str]:
    """Save the fitness charts of a run and print a summary. Returns the saved paths."""
    if not controller.best_fitness_history:
        print("No completed generations to plot")
        return []

    output_dir = output_dir or controller.cfg.RESULTS_DIR
    os.makedirs(output_dir, exist_ok=True)

    generations = np.arange(len(controller.best_fitness_history))
    best = np.asarray(controller.best_fitness_history, dtype=float)
    avg = np.asarray(controller.average_fitness_history, dtype=float)
    saved = []

    # 1. Best and average fitness per generation
    plt.figure(figsize=(10, 6), dpi=150)
    plt.plot(generations, best, lw=3, color="#d62728", label="Best")
    plt.plot(generations, avg, lw=3, color="#2ca02c", label="Average")
    plt.title(f"Fitness Evolution - {len(generations)} Generations", fontsize=16, fontweight='bold')
    plt.xlabel("Generation", fontsize=12)
    plt.ylabel("Mines Collected", fontsize=12)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    path = os.path.join(output_dir, "fitness_history.png")
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close()
    saved.append(path)

    # 2. Summary: history, improvement per generation, final fitness distribution
    fig, (ax1, ax2, ax3) = plt.subplots(1, 3, figsize=(15, 5), dpi=150)

    ax1.plot(generations, best, lw=2, color="#d62728")
    ax1.plot(generations, avg, lw=2, color="#2ca02c")
    ax1.set_title("Best / Average Fitness", fontweight='bold')
    ax1.set_xlabel("Generation")
    ax1.grid(True, alpha=0.3)

    if len(avg) > 1:
        ax2.bar(generations[1:], np.diff(avg), color="#1f77b4")
    ax2.set_title("Average Fitness Change", fontweight='bold')
    ax2.set_xlabel("Generation")
    ax2.grid(True, alpha=0.3)

    current = [s.fitness for s in controller.sweepers]
    ax3.hist(current, bins=20, alpha=0.7, color='#ff7f0e', edgecolor='black')
    ax3.set_title("Current Fitness Distribution", fontweight='bold')
    ax3.set_xlabel("Mines Collected")
    ax3.set_ylabel("Sweepers")
    ax3.grid(True, alpha=0.3)

    fig.tight_layout()
    path = os.path.join(output_dir, "summary_statistics.png")
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    saved.append(path)

    print(f"\n=== SIMULATION SUMMARY ===")
    print(f"Generations completed: {len(generations)}")
    print(f"Best fitness (last / overall): {best[-1]:.0f} / {best.max():.0f}")
    print(f"Average fitness (last): {avg[-1]:.2f}")
    print(f"Population reseeds: {controller.reseeds}")
    print(f"\nCharts saved to '{output_dir}/' directory:")
    for p in saved:
        print(f"  - {os.path.basename(p)}")
    print("========================\n")
    return saved
