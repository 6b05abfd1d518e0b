"""
Domain Constants

Centrally manages thresholds, score bands, and feedback messages shared
across the trainer.
"""

# Scenario kinds
ALLOCATION = "allocation"
PROJECTION = "projection"
SCENARIO_KINDS = [ALLOCATION, PROJECTION]

# Allocation difficulty levels
LEVELS = ["Basic", "Intermediate", "Advanced"]

LEVEL_DESCRIPTIONS = {
    "Basic": "3-4 channels, straightforward goals",
    "Intermediate": "4-5 channels, specific KPI targets",
    "Advanced": "6+ channels, complex multi-stage funnels",
}

# A submitted allocation must sum to exactly this value (no tolerance)
REQUIRED_ALLOCATION_TOTAL = 100

# Channel deviation thresholds (absolute percentage points)
CLOSE_DEVIATION = 5
ADJUST_DEVIATION = 10

# Score points lost per average percentage point of deviation
ALLOCATION_PENALTY_PER_POINT = 2

PERFECT_CHANNEL_MESSAGE = "Perfect allocation!"
CLOSE_CHANNEL_MESSAGE = "Very close! Minor adjustment could optimize this."

# (minimum score, message), evaluated high to low
ALLOCATION_SCORE_MESSAGES = [
    (90, "Excellent work! Your allocation is nearly optimal."),
    (75, "Good job! A few tweaks could improve efficiency."),
    (60, "Not bad, but there is room for improvement in channel selection."),
]
ALLOCATION_FALLBACK_MESSAGE = "Keep practicing! Consider the relative efficiency of each channel."

# A metric within this relative deviation (%) counts as correct
CORRECT_DEVIATION_PERCENT = 10

# (maximum deviation %, score contribution), evaluated low to high
PROJECTION_DEVIATION_BANDS = [
    (0, 100),
    (5, 95),
    (10, 85),
    (20, 70),
    (30, 50),
]
PROJECTION_FLOOR_CONTRIBUTION = 25

# Deviation reported when the correct value is 0 and the answer is not
ZERO_KEY_DEVIATION_PERCENT = 100

PROJECTION_SCORE_MESSAGES = [
    (90, "Excellent work! Your calculations are spot on."),
    (75, "Great job! Minor adjustments in your calculations."),
    (60, "Good effort. Review the formulas and try again."),
]
PROJECTION_FALLBACK_MESSAGE = "Keep practicing! Focus on understanding each metric formula."

# Session defaults (overridable through TrainerConfig)
HINT_UNLOCK_FAILURES = 3
HINT_FAILURE_SCORE = 70
PASSING_SCORE = 75
