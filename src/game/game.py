# src/game/game.py
import sys, argparse
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE, K_r
from .config import WIDTH, HEIGHT, FPS, COLOR_BG, COLOR_FG, COLOR_DANGER, SEED_DEFAULT
from .assets import placeholder_assets
from .simulation import Simulation, IDLE, GAME_OVER
from .surface import PygameSurface

# keyboard -> named input actions polled by the simulation
KEY_CODES = {
    K_SPACE: "jump",
    K_UP: "jump",
}

PANEL_W, PANEL_H = 320, 110


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Run seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    return p.parse_args()


def resolve_seed(seed_arg):
    if seed_arg is None:
        return SEED_DEFAULT
    if seed_arg == -1:
        return None  # signals Spawner to randomize
    return seed_arg


def draw_center(screen, font, text, y, color=COLOR_FG):
    img = font.render(text, True, color)
    screen.blit(img, (WIDTH // 2 - img.get_width() // 2, y))


def start_run(sim, key_status):
    sim.start_game()
    for name in key_status:
        key_status[name] = False


def press_action(sim, key_status, action) -> bool:
    """
    Route an action key press. Outside a run the press only starts one, so
    the new run doesn't open with a jump. Returns True when a run was started.
    """
    if sim.state in (IDLE, GAME_OVER):
        start_run(sim, key_status)
        return True
    key_status[action] = True
    return False


def draw_game_over(screen, frozen, font, big_font, score):
    # repaint the last frame first so the translucent panel never stacks up
    screen.blit(frozen, (0, 0))
    panel = pygame.Surface((PANEL_W, PANEL_H), pygame.SRCALPHA)
    panel.fill((10, 20, 35, 190))
    screen.blit(panel, ((WIDTH - PANEL_W) // 2, HEIGHT // 2 - 70))
    draw_center(screen, big_font, "GAME OVER", HEIGHT // 2 - 60, COLOR_DANGER)
    draw_center(screen, font, f"Score: {score}m   Restart (R / SPACE)", HEIGHT // 2)


def run():
    args = parse_args()

    pygame.init()
    pygame.display.set_caption("Kandi Runner")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 20)
    big_font = pygame.font.SysFont("arial", 36)

    sim = Simulation(PygameSurface(screen, font), placeholder_assets(), seed=resolve_seed(args.seed))
    final_score = {"value": 0}

    def on_game_over(score):
        final_score["value"] = score

    sim.add_game_over_listener(on_game_over)
    key_status = {action: False for action in KEY_CODES.values()}
    frozen = None  # last frame of a finished run

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in KEY_CODES:
                    if press_action(sim, key_status, KEY_CODES[event.key]):
                        frozen = None
                elif event.key == K_r and sim.state == GAME_OVER:
                    start_run(sim, key_status)
                    frozen = None
            if event.type == pygame.KEYUP and event.key in KEY_CODES:
                key_status[KEY_CODES[event.key]] = False

        if sim.state == IDLE:
            screen.fill(COLOR_BG)
            draw_center(screen, big_font, "KANDI RUNNER", HEIGHT // 2 - 60)
            draw_center(screen, font, "SPACE to play | ESC quit", HEIGHT // 2)
        elif frozen is None:
            sim.tick(key_status)
            hud = f"Seed: {sim.seed}   Speed: {sim.player.speed}"
            screen.blit(font.render(hud, True, COLOR_FG), (12, 10))
            if sim.state == GAME_OVER:
                frozen = screen.copy()

        if frozen is not None:
            draw_game_over(screen, frozen, font, big_font, final_score["value"])

        pygame.display.flip()


if __name__ == "__main__":
    run()
