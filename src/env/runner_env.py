# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS
from src.game.assets import Assets, placeholder_assets
from src.game.simulation import Simulation
from src.game.surface import NullSurface, PygameSurface
from src.env.observations import build_observation, OBS_SIZE


class RunnerEnv(gym.Env):
    """
    Endless runner Gymnasium environment (vector observations).
    - One simulation tick per display frame (60 Hz reference).
    - Agent acts every `frame_skip` ticks (default 2) -> 30 decisions/sec.
    - Actions: 0 = release jump, 1 = hold jump (holding extends the jump).
    - Observation: shape (9,), float32, see observations.build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 2,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(2)
        low = np.array([0.0, -1.0, 0.0] + [0.0, 0.0] * 3, dtype=np.float32)
        high = np.array([1.0, 1.0, 1.0] + [1.0, 1.0] * 3, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, shape=(OBS_SIZE,), dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self._render_surface: Optional[PygameSurface] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # A given seed fixes the whole layout; None lets the Spawner pick one.
        run_seed = int(seed) if seed is not None else None
        assets = placeholder_assets() if self.render_mode is not None else Assets.headless()
        self.sim = Simulation(surface=self._ensure_surface(), assets=assets, seed=run_seed)
        self.sim.start_game()

        self.timestep = 0
        self.current_seed = self.sim.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": self.sim.score}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() before step()"

        keys = {"jump": action == 1}
        for _ in range(self.frame_skip):
            self.sim.tick(keys)
            if not self.sim.running:
                break

        alive = self.sim.running
        reward = 1.0 if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = {
            "score": self.sim.score,
            "speed": self.sim.player.speed,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "death_cause": self.sim.death_cause,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(self.sim)

    def _ensure_surface(self):
        if self.render_mode is None:
            return NullSurface()
        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Kandi Runner — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self._render_surface = PygameSurface(self.screen)
        return self._render_surface

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.screen is None:
            return None

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # Return an (H, W, 3) uint8 array
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self._render_surface = None
