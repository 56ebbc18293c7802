"""
Progress photo fixtures.

Images come from picsum.photos by numeric id (portrait 800x1200, with a
200x300 thumbnail). The schedule spreads 12 photos over a 90-day span,
cycling front/side/back with a slowly declining body weight.
"""

SEED_PHOTO_PREFIX = "seed-photo"

# Days covered by PHOTO_SCHEDULE; shorter histories compress it
SCHEDULE_SPAN_DAYS = 90

FULL_IMAGE_URL = "https://picsum.photos/id/{image_id}/800/1200"
THUMBNAIL_URL = "https://picsum.photos/id/{image_id}/200/300"

SEED_IMAGES = [
    # Front
    {"image_id": 237, "category": "front"},
    {"image_id": 1025, "category": "front"},
    {"image_id": 169, "category": "front"},
    {"image_id": 1015, "category": "front"},
    # Side
    {"image_id": 10, "category": "side"},
    {"image_id": 1003, "category": "side"},
    {"image_id": 1074, "category": "side"},
    {"image_id": 200, "category": "side"},
    # Back
    {"image_id": 20, "category": "back"},
    {"image_id": 1024, "category": "back"},
    {"image_id": 152, "category": "back"},
    {"image_id": 118, "category": "back"},
]

PHOTO_SCHEDULE = [
    {"days_ago": 90, "image_index": 0, "weight_kg": 82.0, "is_private": True, "notes": "Starting photo, day one"},
    {"days_ago": 82, "image_index": 4, "weight_kg": 81.8, "is_private": True, "notes": None},
    {"days_ago": 75, "image_index": 8, "weight_kg": 81.5, "is_private": True, "notes": "Feeling good about consistency"},
    {"days_ago": 67, "image_index": 1, "weight_kg": 81.2, "is_private": True, "notes": None},
    {"days_ago": 59, "image_index": 5, "weight_kg": 81.0, "is_private": True, "notes": "Tough week but staying on track"},
    {"days_ago": 52, "image_index": 9, "weight_kg": 80.7, "is_private": False, "notes": None},
    {"days_ago": 44, "image_index": 2, "weight_kg": 80.4, "is_private": True, "notes": "Noticed some changes today"},
    {"days_ago": 37, "image_index": 6, "weight_kg": 80.2, "is_private": True, "notes": None},
    {"days_ago": 29, "image_index": 10, "weight_kg": 80.0, "is_private": True, "notes": "One month in, proud of the progress"},
    {"days_ago": 21, "image_index": 3, "weight_kg": 79.8, "is_private": True, "notes": None},
    {"days_ago": 14, "image_index": 7, "weight_kg": 79.7, "is_private": False, "notes": "Two weeks to go"},
    {"days_ago": 7, "image_index": 11, "weight_kg": 79.5, "is_private": True, "notes": "Really happy with how things are going"},
]

MAX_COMPARISONS = 4
