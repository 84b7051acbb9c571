# dominoes

A game of dominoes for one player against a computer opponent, drawn in a
pygame window.

## Installing

    pip install .

## Playing

    dominoes

By default the results are kept in `records.txt` in the working directory.
Another file can be named with `--records`:

    dominoes --records my-results.txt

The main menu has three buttons: **play** starts a game, **help** explains
the rules and **records** shows how earlier games went. The small cross in
the top right corner of the other screens goes back to the menu; during a
game it abandons the game without recording it.

### The rules

- Each side gets seven tiles from a shuffled double-six set. One more tile
  opens the field, and the rest form the bazaar.
- To place a tile, click it in your hand, then click the left or right half
  of the playing field. The tile goes on that end of the line if one of its
  values matches that end; otherwise nothing happens.
- If you have no possible move, click the **bazaar** button to draw a tile.
  If that tile does not fit either end, your turn passes to the opponent.
  When the bazaar is empty and you cannot move, click **miss** to pass.
- The first side to lay out all of its tiles wins.
- If neither side can move and the bazaar is empty, the side whose remaining
  tiles add up to less wins. On equal sums you lose if your last action was
  laying a tile, and win if it was drawing or passing.
- The winner gains the sum of the loser's remaining tiles, and the loser
  loses that many points.

Who moves first alternates with the number of games played: after an odd
number of recorded games the opponent opens. When it has no fitting tile
the opponent draws once from the bazaar and tries again. It always plays
its highest fitting double when it has one. Otherwise it prefers a tile
that closes off a value already shown six times on the field; failing that,
it plays the tile whose values it holds most of, the heavier tile on a tie.

### Records

The records screen shows the balance, victories, games played, win
percentage and the best single win. The file is rewritten after every
finished game; a missing file starts everything at zero.

## Using the game logic from code

The rules live in `dominoes.game` and do not need a window:

```python
import random
from dominoes.game import Game, Side

game = Game.new(random.Random(1))
print(game.field.left_end(), game.field.right_end())
for index, tile in enumerate(game.player.tiles):
    if game.field.fits(tile, Side.LEFT):
        game.player_place(index, Side.LEFT)
        break
game.bot_turn()
print(game.result)
```

`Game.player_draw()` draws for a player with no fitting tile, and
`Game.player_stuck()` tells whether the player has one. A move the rules do
not allow raises `dominoes.game.MoveError`. `choose_move(bot, field, stock)`
makes one move for the computer side.

`dominoes.records.Records` holds the totals; `Records.load(path)` and
`Records.save(path)` read and write the score file, and
`Records.register(result, points)` counts a finished game.

`dominoes.font` turns text into strokes and dots for the built-in vector
font, and `dominoes.render.Renderer` draws the screens on a pygame surface.

## What it does not do

There is only one opponent and no choice of its strength, no play between
two people, no saving of a game in progress, and no keyboard controls: the
game is played with the left mouse button alone.