"""Static vocabularies, unit tables and policy constants for fitparse."""

from __future__ import annotations

LBS_TO_KG = 0.453592
MAX_SET_COUNT = 100

FOOD_WORDS = [
    "ate",
    "eat",
    "eaten",
    "eating",
    "breakfast",
    "brunch",
    "lunch",
    "dinner",
    "supper",
    "snack",
    "meal",
    "food",
]

# Food names become nutrition items; multi-word names must be listed before
# their single-word parts.
FOOD_NAMES = [
    "peanut butter",
    "protein shake",
    "eggs",
    "egg",
    "toast",
    "chicken",
    "rice",
    "salad",
    "sandwich",
    "pizza",
    "pasta",
    "steak",
    "fish",
    "salmon",
    "tuna",
    "vegetables",
    "fruit",
    "yogurt",
    "cereal",
    "oatmeal",
    "oats",
    "coffee",
    "tea",
    "juice",
    "milk",
    "cheese",
    "bread",
    "bagel",
    "apple",
    "banana",
    "orange",
    "berries",
    "nuts",
    "soup",
    "burger",
    "fries",
    "protein",
    "avocado",
    "potatoes",
    "beans",
]

WORKOUT_WORDS = [
    "ran",
    "run",
    "running",
    "jog",
    "jogged",
    "jogging",
    "walk",
    "walked",
    "walking",
    "cycled",
    "cycling",
    "bike",
    "biked",
    "biking",
    "rode",
    "swim",
    "swam",
    "swimming",
    "hike",
    "hiked",
    "hiking",
    "rowed",
    "rowing",
    "yoga",
    "tennis",
    "played",
    "gym",
    "workout",
    "exercise",
    "cardio",
    "trained",
    "training",
]

STRENGTH_WORDS = [
    "bench",
    "squat",
    "squats",
    "deadlift",
    "deadlifts",
    "press",
    "sets",
    "reps",
    "lift",
    "lifted",
    "lifting",
    "curls",
    "pullups",
    "pull-ups",
    "pushups",
    "push-ups",
    "lunges",
    "weights",
]

WEIGHT_WORDS = ["weight", "weigh", "weighed", "weighing", "weighs"]

SLEEP_WORDS = ["sleep", "slept", "asleep", "nap", "napped"]

WATER_WORDS = ["water", "hydration", "hydrated", "drank"]

MOOD_WORDS = [
    "mood",
    "happy",
    "sad",
    "stressed",
    "anxious",
    "tired",
    "exhausted",
    "upset",
    "depressed",
    "cheerful",
    "grumpy",
    "irritable",
    "calm",
]

ENERGY_WORDS = ["energy", "energetic", "energized", "drained", "sluggish", "pumped"]

FEELING_WORDS = ["feel", "feeling", "feelings", "felt"]

MEAL_TYPES = ["breakfast", "lunch", "dinner", "snack"]
DEFAULT_MEAL_TYPE = "snack"

# Verb -> canonical cardio activity name; first match in text order wins.
CARDIO_ACTIVITIES = [
    (("ran", "run", "running", "jog", "jogged", "jogging"), "running"),
    (("walk", "walked", "walking"), "walking"),
    (("cycled", "cycling", "bike", "biked", "biking", "rode"), "cycling"),
    (("swim", "swam", "swimming"), "swimming"),
    (("hike", "hiked", "hiking"), "hiking"),
    (("rowed", "rowing"), "rowing"),
    (("yoga",), "yoga"),
    (("tennis",), "tennis"),
]
DEFAULT_CARDIO_ACTIVITY = "cardio"
DEFAULT_STRENGTH_ACTIVITY = "strength training"

# Named lifts recognized when no set pattern is present.
STRENGTH_EXERCISES = [
    "bench press",
    "overhead press",
    "shoulder press",
    "leg press",
    "deadlifts",
    "deadlift",
    "squats",
    "squat",
    "curls",
    "pull-ups",
    "pullups",
    "push-ups",
    "pushups",
    "lunges",
    "rows",
]

# Leading words dropped from a free-text exercise name.
EXERCISE_FILLER_WORDS = {"i", "did", "do", "done", "completed", "finished", "just", "then", "and"}

# Canonical activity name -> past-tense verb used when rebuilding a phrase.
CARDIO_VERBS = {
    "running": "ran",
    "walking": "walked",
    "cycling": "cycled",
    "swimming": "swam",
    "hiking": "hiked",
    "rowing": "rowed",
}

MOOD_LABELS = [
    ("great", ["great", "amazing", "excellent", "fantastic", "awesome"]),
    ("terrible", ["terrible", "awful", "horrible", "miserable"]),
    ("bad", ["bad", "down", "sad", "low", "stressed", "anxious", "upset", "poor"]),
    ("tired", ["tired", "exhausted", "sleepy", "worn out"]),
    ("good", ["good", "fine", "well", "happy", "cheerful", "calm"]),
]
DEFAULT_MOOD = "okay"

# Energy words on a 1-10 scale, used when no "energy N" pattern is present.
ENERGY_LEVELS = [
    (["energized", "energetic", "pumped", "high energy"], 8),
    (["drained", "sluggish", "low energy"], 3),
]
DEFAULT_ENERGY_LEVEL = 5

SLEEP_QUALITY = [
    ("great", ["great", "amazing", "excellent", "deeply"]),
    ("poor", ["badly", "poorly", "bad", "poor", "terrible", "awful", "restless"]),
    ("good", ["well", "good", "fine", "soundly"]),
]

NUMBER_WORDS = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "half": 0.5,
}

CONFIDENCE_BANDS = {
    "structured_full": 95,
    "structured": 90,
    "bare_number": 85,
    "keyword_full": 85,
    "keyword_default": 80,
    "keyword_partial": 75,
    "keyword_only": 70,
    "fallback": 60,
    "fallback_weak": 40,
    "conflict": 25,
    "unknown": 10,
}

# Upper bound on confidence by how the type was chosen.
SOURCE_CAPS = {
    "pattern": 100,
    "keyword": 85,
    "override": 85,
    "history": 80,
    "fallback": 60,
    "conflict": 30,
    "none": 30,
}
UNKNOWN_CONFIDENCE_CAP = 30

# Shared by the single-activity and batch paths; values are on the 0-100 scale.
CONFIRMATION_POLICY = {
    "auto_log_above": 80,
    "confirm_above": 50,
}

EXAMPLE_PHRASES = [
    "weight 175 lbs",
    "ran 5k in 25 minutes",
    "bench press 3x10 @ 135 lbs",
    "ate eggs and toast for breakfast",
    "slept 7.5 hours",
    "drank 64 oz water",
    "energy 8/10",
    "feeling great",
]

TYPE_LABELS = {
    "nutrition": "Food",
    "cardio": "Cardio",
    "strength": "Strength Training",
    "weight": "Weight",
    "sleep": "Sleep",
    "water": "Water",
    "mood": "Mood",
    "energy": "Energy",
    "unknown": "Other",
}

OVERRIDE_ALIASES = {
    "food": "nutrition",
    "meal": "nutrition",
    "exercise": "workout",
    "workout": "workout",
}
