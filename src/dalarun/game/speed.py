"""World scroll speed as a function of score."""


def scroll_speed(
    score: int,
    base_speed: float = 6.0,
    speed_per_step: float = 5.0,
    score_step: float = 250.0,
) -> float:
    """Pixels per tick for the floor and obstacles.

    Linear in score: every ``score_step`` points add ``speed_per_step``.
    """
    return base_speed + speed_per_step * (score / score_step)
