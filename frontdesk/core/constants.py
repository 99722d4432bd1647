"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Card readers emit plain alphanumeric UIDs, sometimes colon/dash separated.
RFID_PATTERN = r"^[A-Za-z0-9:_-]{1,64}$"

# Bounded retries for compare-and-set transitions on dialects without UPDATE ... RETURNING.
MAX_TRANSITION_ATTEMPTS = 3

GUEST_PASS_BATCH_MAX = 100
GUEST_PASS_PREFIX = "V"

UPLOADS_URL_PREFIX = "/uploads"

DEFAULT_SETTINGS = {
    "building_name": "Main Building",
    "kiosk_welcome_message": "Welcome! Please scan your card.",
}

DEFAULT_DESTINATIONS = (
    ("Reception", "Ground"),
    ("Administration", "2"),
)
