"""Build the complete game state."""
from __future__ import annotations

from dataclasses import dataclass

from summit import HillClimb, build_hill_climb

from game.truck import Controls, Truck, make_truck_system

START = "start"
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER = "game_over"


@dataclass
class GameState:
    """Holds the run, the truck and the screen state."""
    game: HillClimb
    truck: Truck
    controls: Controls
    mode: str = START
    best: int = 0
    new_record: bool = False

    def start_run(self) -> None:
        self.controls.gas = self.controls.brake = False
        self.game.engine.start(self.truck.reset(self.game.terrain))
        self.mode = PLAYING
        self.new_record = False

    def finish_run(self) -> None:
        dist = int(self.game.distance)
        self.new_record = dist > self.best
        if self.new_record:
            self.best = dist
        self.mode = GAME_OVER


def build_game(seed: int | None = None, lookahead: float = 1920.0) -> GameState:
    """Wire up the game. Terrain is generated ``lookahead`` units past the truck."""
    truck = Truck()
    controls = Controls()
    terrain_ref: list = []
    game = build_hill_climb(
        make_truck_system(truck, controls, terrain_ref),
        seed=seed,
        lookahead=lookahead,
    )
    terrain_ref.append(game.terrain)
    return GameState(game=game, truck=truck, controls=controls)
