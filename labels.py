# labels.py
# Suggestion lists offered by the entry form. The data layer accepts any string,
# these are hints only.

POTENTIAL_CAUSES = [
    "Caffeine",
    "Alcohol",
    "Sleep deprivation",
    "Dehydration",
    "Stress",
    "Screen time",
    "Weather change",
    "Hunger",
    "Bright light",
    "Hormonal",
]

HEADACHE_LOCATIONS = [
    "Left temple",
    "Right temple",
    "Back of head",
    "Front of head",
    "Left side",
    "Right side",
    "Top of head",
    "Whole head",
]

TIME_OF_DAY = ["Morning", "Noon", "Afternoon", "Evening"]


def severity_label(score: float) -> str:
    """'None' .. 'Extreme' for a 0-5 score."""
    if score < 1:
        return "None"
    if score < 2:
        return "Mild"
    if score < 3:
        return "Moderate"
    if score < 4:
        return "Severe"
    if score < 5:
        return "Very Severe"
    return "Extreme"
