"""Configuration constants for waitlist functionality."""

# Native languages offered on the sign-up form
NATIVE_LANGUAGES = [
    "Spanish",
    "Mandarin",
    "Hindi",
    "Arabic",
    "Portuguese",
    "Bengali",
    "Russian",
    "Japanese",
    "French",
    "German",
    "Korean",
    "Italian",
    "Vietnamese",
    "Turkish",
    "Polish",
    "Dutch",
    "Other",
]

# Validation Messages
MISSING_FIELDS_MESSAGE = "Please fill in all fields"
DUPLICATE_EMAIL_MESSAGE = "Email already registered for waitlist"
