"""The Space Invaders game: entities, world simulation, high scores and screens."""