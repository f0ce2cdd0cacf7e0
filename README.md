# reversigame

Two-player Reversi (Othello). Both players share one pygame window and the
mouse. The package also has a plain-text console loop.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing in the window

```
reversigame
```

By default the game saves to and loads from `db-reversi.txt` in the working
directory. To use another file:

```
reversigame --save-file mygame.txt
```

Black moves first. Click an empty square to place a piece. A move counts only
if it flips at least one of the opponent's pieces. After a move the turn
passes to the other player. If the current player has no legal move,
clicking any board square passes the turn.

- **Timer**: each turn lasts 21 seconds. The time left is shown under the
  turn line. When it runs out, a random legal move is played for the current
  player. If that player has no legal move, the turn passes instead.
- **Hints**: hints start switched on. The *Hints* button or the `H` key
  switches them on and off. When they are on, translucent pieces mark the
  squares where the current player can move.
- **Saving**: after every move the board and the player to move are written to
  the save file. The *Load* button reads that file back. If the file is
  missing, the game carries on unchanged.
- **Game over**: when neither player can move, a box shows the winner and the
  piece counts. Press a key or click to close it. You are then asked whether to
  play again. *Yes* starts a new game, and *No* closes the window.

## Save file format

The file holds nine lines. The first eight are the board rows from top to
bottom, one character per column: `B`, `W`, or a space for an empty square.
The ninth line is `B` or `W` and names the player to move.

`Game.reset()` writes eight rows of `.` followed by `B`. When a new game is
started from the window, the file is then saved again in the normal format.

## Using the game logic

```python
from reversigame.game import Game

game = Game("db-reversi.txt")
game.move(2, 3, "B")          # column 2, row 3
game.switch_turn()
print(game.board.render())
print(game.board.valid_moves("W"))
game.save()
print(game.winner_message())
```

- `reversigame.board.Board` holds the 8×8 grid. It has the rules for placing
  and flipping pieces (`move`, `flip`, `is_valid_move`, `valid_moves`). It
  also has cell access (`cell`, `cells`, `set_cell`, `set_board`) and a text
  rendering in which `.` marks squares that either side could play.
- `reversigame.player.Player` keeps a colour, a score and the moves currently
  open to that player.
- `reversigame.game.Game` handles turns, game-over detection, piece counting,
  and saving and loading. `Game.start()` runs a console game. It reads pairs of
  column and row numbers from standard input, or from a given stream. Entering
  `9` for either number reloads the save file first. During each turn a
  10-second countdown is printed, but it does not end the turn.
- `reversigame.gui.GUI` is the pygame window, and `reversigame.gui.main` is the
  `reversigame` command.

## Limitations

The console loop has no command of its own. Start it from Python with
`Game().start()`. Neither front end has a computer opponent. Both players are
people taking turns.