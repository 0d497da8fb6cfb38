"""Q*bert-style gameplay pieces: animation, movement, health, discs and high scores."""