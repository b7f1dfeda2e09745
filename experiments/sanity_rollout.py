# /experiments/sanity_rollout.py
"""
Run a random and a gap-jumping policy through RunnerEnv over fixed seeds and
write one CSV row per run (score, top speed, how it ended).

  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path

import numpy as np

from src.env.runner_env import RunnerEnv

FIELDS = ["policy", "seed", "decisions", "score", "speed", "death_cause"]


def gap_jumper(obs: np.ndarray) -> int:
    # hold jump while the nearest probe is over water or a hazard is close
    gap_ahead = obs[3] >= 0.999
    return int(gap_ahead or obs[4] == 1.0 or obs[6] == 1.0)


def make_policy(name: str, seed: int):
    if name == "heuristic":
        return gap_jumper
    if name == "random":
        rng = np.random.RandomState(10_000 + seed)
        return lambda _obs: int(rng.randint(0, 2))
    raise ValueError(f"Unknown policy {name!r}")


def run_episode(policy_name: str, seed: int, frame_skip: int, steps: int, traces: Path | None) -> dict:
    env = RunnerEnv(frame_skip=frame_skip)
    policy = make_policy(policy_name, seed)
    actions = []
    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps):
            actions.append(policy(obs))
            obs, _, terminated, truncated, info = env.step(actions[-1])
            if terminated or truncated:
                break
    finally:
        env.close()

    if traces is not None:
        traces.mkdir(parents=True, exist_ok=True)
        np.save(traces / f"{policy_name}_{seed}.npy", np.asarray(actions, dtype=np.int8))

    return {
        "policy": policy_name,
        "seed": seed,
        "decisions": len(actions),
        "score": info["score"],
        "speed": info.get("speed", 0),
        "death_cause": info.get("death_cause") or "",
    }


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", default="both", choices=["random", "heuristic", "both"])
    ap.add_argument("--seeds", default="", help="Comma-separated seeds, default 101..120")
    ap.add_argument("--frame-skip", type=int, default=2)
    ap.add_argument("--steps", type=int, default=5_000, help="Decision cap per run")
    ap.add_argument("--out-dir", default="experiments/runs")
    ap.add_argument("--save-traces", action="store_true", help="Keep each run's actions as .npy")
    args = ap.parse_args()

    seeds = [int(s) for s in args.seeds.split(",") if s.strip()] or list(range(101, 121))
    policies = ["random", "heuristic"] if args.policies == "both" else [args.policies]
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    traces = out_dir / "traces" if args.save_traces else None

    with (out_dir / "episodes.csv").open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for policy_name in policies:
            for seed in seeds:
                row = run_episode(policy_name, seed, args.frame_skip, args.steps, traces)
                writer.writerow(row)
                print(f"[{policy_name}] seed={seed} score={row['score']}m speed={row['speed']} "
                      f"cause={row['death_cause'] or '-'}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
