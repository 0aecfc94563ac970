"""Game state and rules: the player's ship, the enemy fleet and projectiles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from galaxyguard.screen import Color, Screen

ENEMIES_PER_ROW = 6
NUM_ROWS = 4
NUM_ENEMIES = ENEMIES_PER_ROW * NUM_ROWS
MAX_PROJECTILES = 2
WIDTH = 81
HEIGHT = 24

ENEMY_SHOT_PERIOD = 3
FIRE_CHANCE_PERCENT = 5
FIRE_ATTEMPTS = 3
POINTS_PER_ENEMY = 10

PLAYER_CHAR = "W"
ENEMY_CHAR = "M"
SHOT_CHAR = "!"


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Projectile:
    pos: Position = field(default_factory=lambda: Position(0, 0))
    active: bool = False


@dataclass
class Enemy:
    pos: Position
    alive: bool = True


class Outcome(Enum):
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


class Game:
    """One round of play; the score carries over between rounds."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.enemy_shot_counter = 0
        self.reset()

    def reset(self) -> None:
        """Place the player and a full fleet, and clear all projectiles."""
        self.player = Position(WIDTH // 2, HEIGHT - 3)
        spacing = WIDTH // (ENEMIES_PER_ROW + 1)
        self.enemies = [
            Enemy(Position((i % ENEMIES_PER_ROW + 1) * spacing, 3 + i // ENEMIES_PER_ROW))
            for i in range(NUM_ENEMIES)
        ]
        self.player_shots = [Projectile() for _ in range(MAX_PROJECTILES)]
        self.enemy_shots = [Projectile() for _ in range(MAX_PROJECTILES)]

    def _move_player_shot(self, shot: Projectile) -> None:
        shot.pos.y -= 1
        if shot.pos.y < 1:
            shot.active = False
        for enemy in self.enemies:
            if enemy.alive and enemy.pos == shot.pos:
                enemy.alive = False
                shot.active = False
                self.score += POINTS_PER_ENEMY

    def _move_enemy_shot(self, shot: Projectile) -> bool:
        """Move an enemy shot down; return True if it hit the player."""
        shot.pos.y += 1
        if shot.pos.y >= HEIGHT - 1:
            shot.active = False
        return shot.pos == self.player

    def _enemy_fire(self, enemy: Enemy) -> None:
        for _ in range(FIRE_ATTEMPTS):
            free = next((s for s in self.enemy_shots if not s.active), None)
            if free is None:
                return
            free.pos = Position(enemy.pos.x, enemy.pos.y + 1)
            free.active = True

    def step(self) -> Outcome:
        """Advance the game by one frame and report how the round stands."""
        enemy_shots_move = self.enemy_shot_counter % ENEMY_SHOT_PERIOD == 0
        for shot, enemy_shot in zip(self.player_shots, self.enemy_shots):
            if shot.active:
                self._move_player_shot(shot)
            if enemy_shot.active and enemy_shots_move:
                if self._move_enemy_shot(enemy_shot):
                    self.enemy_shot_counter += 1
                    return Outcome.LOST
        self.enemy_shot_counter += 1

        any_alive = False
        for enemy in self.enemies:
            if enemy.alive:
                any_alive = True
                if self.rng.randrange(100) < FIRE_CHANCE_PERCENT:
                    self._enemy_fire(enemy)

        return Outcome.PLAYING if any_alive else Outcome.WON

    def handle_key(self, ch: int | str) -> None:
        """Apply a key press: 'a' and 'd' move, space fires."""
        if isinstance(ch, str):
            ch = ord(ch)
        if ch == ord("a") and self.player.x > 2:
            self.player.x -= 1
        if ch == ord("d") and self.player.x < WIDTH - 3:
            self.player.x += 1
        if ch == ord(" ") and not any(s.active for s in self.player_shots):
            free = next(s for s in self.player_shots if not s.active)
            free.pos = Position(self.player.x, self.player.y - 1)
            free.active = True

    def draw(self, screen: Screen) -> None:
        """Render the whole frame, score included."""
        screen.clear()
        screen.init(True)
        screen.set_color(Color.GREEN, Color.BLACK)
        screen.put_char(self.player.x, self.player.y, PLAYER_CHAR)

        for enemy in self.enemies:
            if enemy.alive:
                screen.put_char(enemy.pos.x, enemy.pos.y, ENEMY_CHAR)

        for shot, enemy_shot in zip(self.player_shots, self.enemy_shots):
            if shot.active:
                screen.put_char(shot.pos.x, shot.pos.y, SHOT_CHAR)
            if enemy_shot.active:
                screen.put_char(enemy_shot.pos.x, enemy_shot.pos.y, SHOT_CHAR)

        text = f"Score: {self.score}"
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.put_text((WIDTH - len(text)) // 2, 0, text)
        screen.update()