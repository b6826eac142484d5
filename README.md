# undercover

A pass-and-play party game for three or more players sharing one text
console.

Every player is secretly dealt a role. The citizens (shown as *CIVIL*) all
share one word. The undercover players get a different, related word. An
optional Mr. White gets no word at all. Players take turns describing their
word, then vote someone out.

The in-game text is in French; the setup menu and the command hints are in
English.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
undercover [--words FILE] [--seed N]
```

- `--words FILE` — the word-pair file (default: `undercover.txt` in the
  current directory).
- `--seed N` — seed for the random number generator, for repeatable deals.

If the word file cannot be loaded, the command prints the error and exits
with status 1.

The screen is redrawn after every command, followed by a line listing the
commands available at that moment. Commands that are not valid in the current
situation, and bad player numbers, are reported as `error: ...` and ignored.
`quit` (or end of input) leaves the game at any time.

### Setup menu

| Command       | Effect |
|---------------|--------|
| `+`           | one more undercover player, taken from the citizens (refused when only two citizens are left) |
| `-`           | one fewer undercover player (at least one is kept) |
| `white on`    | add Mr. White in place of a citizen (refused when only two citizens are left) |
| `white off`   | remove Mr. White, giving the place back to the citizens |
| `add`         | add a player called "New Player" and select it for editing |
| `remove N`    | remove player number N (only while there are more than three players) |
| `edit N`      | select player number N for renaming |
| `name TEXT`   | rename the selected player |
| `ok`          | deal the roles and start the game |

Player names must be non-empty and at most 30 bytes of UTF-8; otherwise
starting the game is refused with an error.

### During a game

1. **Reveal.** Each player in turn uses `reveal` to see their word (or
   "Tu es Mr. White"), then `next` to pass the device on.
2. **Vote.** The screen shows who starts the discussion and the list of
   players; eliminated players show their role. `vote N` selects a player,
   then `yes` eliminates them or `no` cancels.
3. **Guess.** When Mr. White is eliminated, `guess WORD` submits a guess at
   the citizens' word, and voting resumes if the game is not over.

The first speaker is chosen at random among the players other than Mr. White;
after each elimination a new starting player is drawn.

After each elimination and after each guess, the game checks for an end:

- a guess equal to the citizens' word (ignoring case) makes Mr. White win;
- once a guess has been entered, the citizens win if no undercover player is
  left, and the undercover players win if one is still in and fewer than three
  players remain;
- while no guess has been entered, fewer than three remaining players ends
  the game with Mr. White declared the winner.

When a game ends, both words are shown and `menu` returns to the setup menu
with the same player names, one undercover player and no Mr. White.

## Word list

Word pairs are read from a UTF-8 text file with one pair per line: the
citizens' word, a colon, then the undercover word. Blank lines are skipped.

```
chat:chien
café:thé
plage:piscine
```

Each game uses one pair chosen at random. A file that cannot be read, a line
without a colon, or a file with no pairs raises `WordFileError`.

## Using it as a library

The game logic does not depend on the console front end:

```python
import random

from undercover.game import Game, choose_words, load_word_pairs

rng = random.Random(7)
pairs = load_word_pairs("words.txt")
words = choose_words(pairs, rng)

game = Game(["Ana", "Bo", "Cy"], 2, 1, False, words, rng)
game.reveal()
print(game.render())
game.next()
```

`Game` raises `ValueError` when the number of names does not match the roles
to deal. Its `state`, `players`, `over` and `winner` attributes describe the
current position; `render()` returns the screen as text.

- `undercover.player` holds `Role` and `Player`.
- `undercover.menu.Menu` holds the setup state and its rules.
- `undercover.game` holds `Game`, `GameState`, `WordFileError`,
  `load_word_pairs` and `choose_words`.
- `undercover.app.Application` ties the menu and the game together; its
  `handle(command)` method takes the console commands listed above.

## What it does not do

There is no graphical window: the game is played through text commands in a
terminal. No word list ships with the package; you supply your own file.