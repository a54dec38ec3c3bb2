# uninits/models/constants.py

# Admission-year code (first two digits of a scholar ID) -> current semester.
# Valid for the 2025-26 academic year only.
SEMESTER_BY_YEAR_CODE = {
    "22": 8,
    "23": 6,
    "24": 4,
    "25": 2,
}

# Branch digit (index 3 of a scholar ID) -> department short name
BRANCH_BY_CODE = {
    1: "CE",
    2: "CSE",
    3: "EE",
    4: "ECE",
    5: "EIE",
    6: "ME",
}

DEFAULT_PROFILE_IMAGE = "default.png"
POISONED_IMAGE = "undefined"

INSTITUTE_EMAIL_DOMAIN = "nits.ac.in"

PROFILE_IMAGE_URL_PREFIX = "/uploads/profile-images"

# Pillow format name -> extension a stored profile picture is saved under
IMAGE_EXTENSIONS = {
    "PNG": ".png",
    "JPEG": ".jpg",
    "GIF": ".gif",
    "WEBP": ".webp",
    "BMP": ".bmp",
}
