"""Unified rendering pipeline.

Draws one ``FrameSnapshot`` onto a pygame surface. The renderer only reads
snapshots, so it can never mutate the simulation, and the same code path
serves the game window and headless tests.

Layer Order (bottom -> top):
1. Background gradient
2. Ground strip
3. Collectibles
4. Rocks (health label, hit flash, elite tint)
5. Split ghosts
6. Projectiles
7. Particles
8. Cannon (shield ring when active)
9. HUD (score, level, wave, active power-ups)
10. Debug overlay (optional)
11. Round-over banner (only when the round has ended)

Design Notes:
- Optional ``capture_sequence`` records executed layers for tests (avoids
  brittle pixel sampling).
- Fonts are created lazily on first use so importing this module does not
  require an initialized pygame.
"""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from rockblast.logger import get_logger
from rockblast.snapshot import FrameSnapshot, RockSnapshot

_log = get_logger("renderer")

SKY_TOP = (10, 10, 35)
SKY_BOTTOM = (40, 25, 60)
GROUND = (80, 60, 40)
GROUND_EDGE = (120, 95, 60)
ROCK = (120, 110, 100)
ROCK_ELITE = (128, 112, 192)
ROCK_FLASH = (255, 255, 255)
PROJECTILE = (255, 215, 0)
CANNON = (255, 107, 53)
SHIELD = (0, 255, 255)
TEXT = (255, 255, 255)
POWERUP_COLORS = {"shield": (0, 255, 255), "rapid_fire": (255, 0, 255)}


def _rock_outline(cx: float, cy: float, w: float, h: float, rotation: float, points: int = 8):
    out = []
    for i in range(points):
        a = i / points * math.tau
        # Slightly irregular outline, fixed per vertex so rocks do not wobble.
        r = 0.85 + 0.15 * ((i * 7) % 3) / 2
        px = math.cos(a) * w / 2 * r
        py = math.sin(a) * h / 2 * r
        out.append(
            (
                cx + px * math.cos(rotation) - py * math.sin(rotation),
                cy + px * math.sin(rotation) + py * math.cos(rotation),
            )
        )
    return out


def _faded(color, alpha: float):
    a = max(0.0, min(1.0, alpha)) * (color[3] / 255 if len(color) > 3 else 1.0)
    return (int(color[0] * a), int(color[1] * a), int(color[2] * a))


class Renderer:
    """High-level frame orchestrator.

    Usage:
        r = Renderer()
        r.render(sim.snapshot(), window_surface)
    """

    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

    def _fonts(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
            self._big_font = pygame.font.Font(None, 64)
        return self._font, self._big_font

    def render(
        self,
        snap: FrameSnapshot,
        target: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence

        def mark(step: str) -> None:
            if seq is not None:
                seq.append(step)

        self._draw_background(snap, target)
        mark("background")
        self._draw_ground(snap, target)
        mark("ground")
        self._draw_collectibles(snap, target)
        mark("collectibles")
        for rock in snap.rocks:
            self._draw_rock(rock, target)
        mark("rocks")
        self._draw_ghosts(snap, target)
        mark("ghosts")
        for p in snap.projectiles:
            pygame.draw.rect(target, PROJECTILE, (p.x, p.y, p.width, p.height), border_radius=4)
        mark("projectiles")
        self._draw_particles(snap, target)
        mark("particles")
        self._draw_cannon(snap, target)
        mark("cannon")
        self._draw_hud(snap, target)
        mark("hud")
        if snap.hud.debug:
            self._draw_debug(snap, target)
            mark("debug")
        if snap.hud.round_over:
            self._draw_game_over(snap, target)
            mark("game_over")

    # --- Layers -----------------------------------------------------------------
    def _draw_background(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        h = max(1, target.get_height())
        w = target.get_width()
        bands = 16
        for i in range(bands):
            t = i / (bands - 1)
            color = tuple(int(SKY_TOP[c] + (SKY_BOTTOM[c] - SKY_TOP[c]) * t) for c in range(3))
            pygame.draw.rect(target, color, (0, i * h / bands, w, h / bands + 1))

    def _draw_ground(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        g = snap.ground_y
        pygame.draw.rect(target, GROUND, (0, g, snap.arena_width, snap.arena_height - g))
        pygame.draw.line(target, GROUND_EDGE, (0, g), (snap.arena_width, g), 2)

    def _draw_collectibles(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        for k in snap.collectibles:
            color = POWERUP_COLORS.get(k.kind, TEXT)
            cx = k.x + k.width / 2 + k.float_offset
            cy = k.y + k.height / 2
            pygame.draw.circle(target, color, (cx, cy), k.width / 2, 3)
            pygame.draw.circle(target, color, (cx, cy), k.width / 4)

    def _draw_rock(self, rock: RockSnapshot, target: pygame.Surface) -> None:
        cx = rock.x + rock.width / 2
        cy = rock.y + rock.height / 2
        if rock.hit_flash > 0:
            color = ROCK_FLASH
        else:
            color = ROCK_ELITE if rock.elite else ROCK
        pygame.draw.polygon(target, color, _rock_outline(cx, cy, rock.width, rock.height, rock.rotation))
        if rock.impact_intensity > 0.05:
            pygame.draw.circle(target, SHIELD, (cx, cy), rock.width / 2 + 4, 2)
        font, _ = self._fonts()
        label = font.render(str(rock.health), True, TEXT)
        target.blit(label, label.get_rect(center=(cx, cy)))

    def _draw_ghosts(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        for g in snap.ghosts:
            cx = g.x + g.width / 2 + g.shake
            cy = g.y + g.height / 2
            color = _faded(ROCK_ELITE if g.elite else ROCK, 1 - (g.scale - 1) / 0.4)
            pygame.draw.polygon(target, color, _rock_outline(cx, cy, g.width * g.scale, g.height * g.scale, g.rotation))

    def _draw_particles(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        for p in snap.particles:
            radius = max(1, int(p.size))
            color = _faded(p.color, p.alpha)
            if p.glow:
                pygame.draw.circle(target, _faded(p.color, p.alpha * 0.3), (p.x, p.y), radius * 2)
            pygame.draw.circle(target, color, (p.x, p.y), radius)

    def _draw_cannon(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        c = snap.cannon
        if snap.hud.round_over:
            return
        pygame.draw.rect(target, CANNON, (c.x, c.y + c.height / 2, c.width, c.height / 2), border_radius=6)
        pygame.draw.rect(target, CANNON, (c.x + c.width / 2 - 6, c.y, 12, c.height / 2 + 2))
        if c.shielded:
            pygame.draw.circle(target, SHIELD, (c.x + c.width / 2, c.y + c.height / 2), c.width * 0.8, 3)

    def _draw_hud(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        font, _ = self._fonts()
        hud = snap.hud
        lines = [f"Score: {hud.score}", f"Level: {hud.level}", f"Wave: {hud.wave}"]
        for i, text in enumerate(lines):
            target.blit(font.render(text, True, TEXT), (10, 10 + i * 22))
        x = snap.arena_width - 10
        for kind in hud.powerups:
            label = "SHIELD" if kind == "shield" else f"DOUBLE {hud.double_fire_frames / 60:.1f}s"
            surf = font.render(label, True, POWERUP_COLORS.get(kind, TEXT))
            x -= surf.get_width()
            target.blit(surf, (x, 10))
            x -= 16
        if not hud.audio_enabled:
            target.blit(font.render("MUTED", True, TEXT), (10, 10 + len(lines) * 22))

    def _draw_debug(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        font, _ = self._fonts()
        hud = snap.hud
        text = (
            f"frame {hud.frame}  t={hud.elapsed_seconds:.1f}s  rocks {len(snap.rocks)}  "
            f"shots {len(snap.projectiles)}  particles {len(snap.particles)}"
        )
        target.blit(font.render(text, True, TEXT), (10, snap.arena_height - 24))
        for r in snap.rocks:
            pygame.draw.rect(target, (0, 255, 0), (r.x, r.y, r.width, r.height), 1)
        c = snap.cannon
        pygame.draw.rect(target, (0, 255, 0), (c.x, c.y, c.width, c.height), 1)

    def _draw_game_over(self, snap: FrameSnapshot, target: pygame.Surface) -> None:
        font, big = self._fonts()
        cx = snap.arena_width / 2
        cy = snap.arena_height / 2
        title = big.render("GAME OVER", True, CANNON)
        target.blit(title, title.get_rect(center=(cx, cy - 30)))
        info = font.render(
            f"Score {snap.hud.score}  Wave {snap.hud.wave}  Rocks {snap.hud.destroyed}", True, TEXT
        )
        target.blit(info, info.get_rect(center=(cx, cy + 15)))
        hint = font.render("Click or press R to play again", True, TEXT)
        target.blit(hint, hint.get_rect(center=(cx, cy + 45)))


__all__ = ["Renderer"]
