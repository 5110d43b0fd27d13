LEVELS = [
    {"level": 1, "name": "Seedling", "min_points": 0, "max_points": 100},
    {"level": 2, "name": "Sprout", "min_points": 101, "max_points": 250},
    {"level": 3, "name": "Sapling", "min_points": 251, "max_points": 500},
    {"level": 4, "name": "Growing", "min_points": 501, "max_points": 1000},
    {"level": 5, "name": "Flourishing", "min_points": 1001, "max_points": 2000},
    {"level": 6, "name": "Thriving", "min_points": 2001, "max_points": 4000},
    {"level": 7, "name": "Radiant", "min_points": 4001, "max_points": 7000},
    {"level": 8, "name": "Unstoppable", "min_points": 7001, "max_points": 10000},
    {"level": 9, "name": "Transformed", "min_points": 10001, "max_points": 15000},
    # top range is unbounded
    {"level": 10, "name": "SteadySteps Master", "min_points": 15001, "max_points": None},
]

MAX_LEVEL = LEVELS[-1]["level"]

STAGE_DESCRIPTIONS = {
    "beginner": "You are building the foundation. Focus on showing up.",
    "consistent": "You have proven you can stick with it. Keep going.",
    "confident": "You have built real habits. This is who you are now.",
}
