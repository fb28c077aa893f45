"""Headless autoplay harness.

Runs the simulation without a window: the cannon follows the highest rock
that is still above it and every restart is taken immediately. Useful
for balancing runs and for checking that a seed replays identically.

    python -m rockblast.batch_sim --frames 3600 --seed 1 --runs 4
"""

import argparse
import multiprocessing
import time
from typing import Any, Dict, List

from rockblast.logger import get_logger
from rockblast.simulation import ACTION_RESTART, Simulation

log = get_logger("batch_sim")


def autopilot_target(sim: Simulation) -> float | None:
    """Pointer x for the autopilot: center of the highest rock still above the cannon.

    Rocks already level with the cannon are left alone so the autopilot does
    not steer into them. None keeps the cannon where it is.
    """
    cannon_top = sim.state.cannon.y
    above = [r for r in sim.state.rocks if r.y + r.height < cannon_top]
    if not above:
        return None
    highest = min(above, key=lambda r: r.y + r.height)
    return highest.x + highest.width / 2


def run_episode(seed: int, frames: int) -> Dict[str, Any]:
    sim = Simulation(seed=seed)
    rounds = 1
    best_score = 0
    destroyed = 0
    for _ in range(frames):
        if sim.state.round_over:
            best_score = max(best_score, sim.state.score)
            destroyed += sim.state.destroyed
            sim.handle_actions([ACTION_RESTART])
            rounds += 1
        sim.step(autopilot_target(sim))
    best_score = max(best_score, sim.state.score)
    destroyed += sim.state.destroyed
    return {
        "seed": seed,
        "frames": frames,
        "rounds": rounds,
        "best_score": best_score,
        "final_score": sim.state.score,
        "waves": sim.state.current_wave,
        "destroyed": destroyed,
    }


def _worker_run(seed: int, frames: int, queue: multiprocessing.Queue):
    queue.put(run_episode(seed, frames))


class BatchSimulation:
    """Runs several seeds in parallel worker processes."""

    def __init__(self, num_runs: int = 4, base_seed: int = 1):
        self.num_runs = num_runs
        self.base_seed = base_seed

    def run_batch(self, frames: int = 3600) -> Dict[str, Any]:
        queue: multiprocessing.Queue = multiprocessing.Queue()
        processes = []
        start_time = time.time()
        for i in range(self.num_runs):
            p = multiprocessing.Process(target=_worker_run, args=(self.base_seed + i, frames, queue))
            processes.append(p)
            p.start()

        results: List[Dict[str, Any]] = [queue.get() for _ in range(self.num_runs)]
        for p in processes:
            p.join()
        total_time = time.time() - start_time
        results.sort(key=lambda r: r["seed"])

        total_frames = sum(r["frames"] for r in results)
        return {
            "total_frames": total_frames,
            "wall_time": total_time,
            "fps": total_frames / total_time if total_time > 0 else 0,
            "results": results,
        }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run Rock Blast headless with an autopilot cannon.")
    parser.add_argument("--frames", type=int, default=3600, help="frames to simulate per run")
    parser.add_argument("--seed", type=int, default=1, help="seed of the first run")
    parser.add_argument("--runs", type=int, default=1, help="number of seeds, run in parallel when > 1")
    args = parser.parse_args(argv)
    if args.frames <= 0 or args.runs <= 0:
        parser.error("--frames and --runs must be positive")

    if args.runs == 1:
        results = [run_episode(args.seed, args.frames)]
    else:
        stats = BatchSimulation(num_runs=args.runs, base_seed=args.seed).run_batch(args.frames)
        results = stats["results"]
        log.info(f"Batch: {stats['total_frames']} frames in {stats['wall_time']:.2f}s ({stats['fps']:.0f} fps)")
    for r in results:
        print(
            f"seed {r['seed']}: rounds {r['rounds']}, best score {r['best_score']}, "
            f"waves {r['waves']}, rocks destroyed {r['destroyed']}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
