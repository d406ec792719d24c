# pixelarcade

A small collection of arcade games built on pygame:

- **Space Invaders**: a formation of invaders, destructible shields, a bonus UFO
  and a local high-score table.
- **Pong**: a title menu and a network lobby. One player hosts a lobby and
  others join it over TCP by entering the host's IP address.

## Installation

```
pip install .
```

## Playing

Start the launcher:

```
pixelarcade
```

The launcher asks which game to play:

```
Which Game would you like to play?
1. Space Invaders
2. Pong
3. Exit
```

Enter a number and press Enter. Anything else is rejected and the question is
asked again; the launcher also stops when its input ends. Close the game window
to return to the launcher and choose another game.

### Resources

Textures, fonts and sounds are loaded from a `res/` directory relative to the
directory the game runs from:

- `res/txrs/<name>.png` for images (for example `si/invaders`, `si/player`,
  `si/logo`, `pong/logo`; the window icon is `res/txrs/icon.png`)
- `res/fonts/<name>.ttf` for fonts (the text uses `arcade`)
- `res/sfx/<name>.ogg` for sounds

When a resource is missing, the `_fail_` file of the same folder is used in its
place. If that is missing too, images are drawn as plain white rectangles,
sounds stay silent and text uses pygame's default font.

### Space Invaders

- `A` / `D`: move left and right
- `Space`: fire

High scores are stored in `res/space_invaders/scores.txt` as a comma-separated
list of `name,score,` pairs. The high-score screen shows the best ten; after a
game is over, *Submit Score* lets the player enter a name and add the score.

### Pong lobby

Select *Create Lobby* to host, or *Join Lobby* and enter the host's IP address
to join. Lobbies use TCP port 52324 and hold up to four players; the lobby lists
the names of the players who have joined.

## What is not included

Pong stops at the lobby. There is no Pong match to play: the host's *Start*
button becomes active once more than one player has joined but starts nothing,
and *Play Vs Computer* on the Pong menu does nothing.

## Using the pieces

The building blocks can be used on their own, for example:

- `pixelarcade.game.Game` and `StateBase`: a state stack and main loop
- `pixelarcade.gui`: `StackMenu`, `Button`, `Label` and `TextBox`
- `pixelarcade.invaders.highscores`: `load_scores`, `write_scores`,
  `highest_score` and `submit_score` for the score file
- `pixelarcade.pong.net`: `Packet`, `PacketReceiver` and the lobby commands;
  `pixelarcade.pong.server.PongServer` is the lobby server

## Development

Install the test extra and run the tests:

```
pip install .[test]
pytest
```