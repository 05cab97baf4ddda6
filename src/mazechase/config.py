from dataclasses import dataclass

@dataclass(frozen=True)
class Rules:
    # Scoring
    pellet_score: int = 10
    power_pellet_score: int = 50
    capture_score: int = 200

    starting_lives: int = 3
    # Pursue mode heads for the player this often, else its scatter corner.
    chase_probability: float = 0.7

# Default rule set (tools may build their own)
RULES = Rules()
