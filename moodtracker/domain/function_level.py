# moodtracker/domain/function_level.py

MIN_LEVEL = -10
MAX_LEVEL = 10


def function_level_descriptor(level: float) -> str:
    """Descriptive label for a function level (-10 .. 10), or an average of levels."""
    if level == -10:
        return "Suicidal"
    if level <= -8:
        return "Severe crisis"
    if level <= -6:
        return "In despair"
    if level <= -4:
        return "Struggling significantly"
    if level <= -2:
        return "Feeling down"
    if level == 0:
        return "Neutral"
    # -1 and fractional averages like -0.5 land here too
    if level <= 2:
        return "Okay"
    if level <= 4:
        return "Good"
    if level <= 6:
        return "Very good"
    if level <= 8:
        return "Excellent"
    return "Thriving"
