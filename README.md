# FlipTurn

FlipTurn is Reversi on an 8×8 board with a few twists:

- **Energy.** Every disc you flip earns one point of energy.
- **Skills.** On your turn you can spend energy on a special action. Click the
  skill button to arm it (click it again to disarm it), then click a cell:
  - *Intercambiar Color* (20 energy) turns one opponent disc into yours.
  - *Volteo Forzado* (25 energy) turns one opponent disc into yours.

  A skill button is greyed out while the player to move cannot afford it.
  Using a skill spends the energy and passes the turn.
- **Ghost preview.** Hovering over an empty cell where you can move shows a
  translucent disc there and outlines the discs it would flip.
- **Corner bonus.** Each corner you hold adds 10 points to your score when the
  game ends.

You can play against another person at the same screen, or against a computer
opponent (White) that uses minimax search with alpha-beta pruning and a
transposition table keyed by Zobrist hashes.

## Installing

```
pip install .
```

This installs pygame, which draws the game window.

## Playing

```
flipturn
```

The window opens on the main menu, which offers **Jugar vs IA** (you play
Black against the computer) and **Jugar 1 vs 1** (two players share the
mouse). Click a cell to place a disc. The left panel shows Black's statistics
and energy and holds the skill buttons; the right panel shows White's
statistics and energy. A yellow-ringed marker shows whose turn it is. The line
under the board shows the turn and both scores. **Reiniciar** starts the game
again.

When neither player can move, the game-over screen shows the result, with
**Volver al Menu** to return to the main menu and **Reiniciar** to play again.
If a file named `fondo_fin_juego.png` is in the working directory it is used
as the game-over background. The window can be resized; the picture keeps its
proportions. Progress messages (moves, skills, AI timing) are logged to the
terminal.

## Using the game engine

The rules live apart from the window, so you can script games:

```python
from flipturn.game import Game
from flipturn.config import PlayerMode

game = Game(4)
game.set_mode(PlayerMode.HUMAN_VS_HUMAN)
game.try_move(2, 3)           # Black plays row 3, column 4
print(game.board)
print(game.current, game.energy("X"), game.state)
```

- `flipturn.board.Board` holds the plain Reversi rules: `valid_moves`,
  `flips`, `play`, `count`, `cell`, `set` and `is_game_over`. Printing a board
  gives a numbered text grid.
- `flipturn.game.Game` adds turn order, energy (`energy`, `can_afford`,
  `spend_energy`), the skills (`color_swap`, `forced_flip`), corner points and
  the result in `state`. `play_ai_turn` lets the computer move for White in
  `PlayerMode.HUMAN_VS_AI`.
- `flipturn.ai.AI` picks a move with `best_move(game, player)`.
- `flipturn.controller.Controller` turns clicks and mouse movement (in window
  coordinates of the unscaled layout) into game actions and builds the status
  texts, without drawing anything; `flipturn.app.App` is the pygame window
  around it.

## Running the tests

```
pip install .[test]
pytest
```