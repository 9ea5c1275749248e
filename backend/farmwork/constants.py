import re

# Length and size limits shared by form and payload validators
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500
JOB_TITLE_MIN_LENGTH = 3
JOB_TITLE_MAX_LENGTH = 100
JOB_DESCRIPTION_MIN_LENGTH = 10
JOB_POSTING_DESCRIPTION_MIN_LENGTH = 50  # employer "post a job" page
JOB_DESCRIPTION_MAX_LENGTH = 2000
COVER_LETTER_MAX_LENGTH = 1500
LOCATION_MIN_LENGTH = 2
LOCATION_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
MAX_SKILLS = 20
SKILL_MAX_LENGTH = 50
MIN_WORKERS = 1
MAX_WORKERS = 1000
MIN_AGE = 16
MAX_AGE = 100

# Form validators and payload validators disagree on the salary ceiling.
# Both are kept as-is until the product owner picks one.
FORM_SALARY_CEILING = 10_000_000
PAYLOAD_SALARY_CEILING = 1_000_000

MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
ALLOWED_DOCUMENT_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s\-']+$")
# Loose pattern used by the payload validators
PAYLOAD_PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{10,15}$")

PHONE_PATTERNS: dict[str, re.Pattern] = {
    "KE": re.compile(r"^(\+254|0)(7|1)\d{8}$"),  # Kenya
    "UG": re.compile(r"^(\+256|0)(7|3|4)\d{8}$"),  # Uganda
    "TZ": re.compile(r"^(\+255|0)(7|6)\d{8}$"),  # Tanzania
    "RW": re.compile(r"^(\+250|0)(7|2)\d{8}$"),  # Rwanda
    "ET": re.compile(r"^(\+251|0)(9|7)\d{8}$"),  # Ethiopia
    "GH": re.compile(r"^(\+233|0)(2|5)\d{8}$"),  # Ghana
    "NG": re.compile(r"^(\+234|0)(7|8|9)\d{9}$"),  # Nigeria
    "ZA": re.compile(r"^(\+27|0)(6|7|8)\d{8}$"),  # South Africa
    "generic": re.compile(r"^(\+\d{1,3}|0)\d{8,12}$"),
}

JOB_CATEGORIES = (
    "Crop Production",
    "Livestock Farming",
    "Poultry Farming",
    "Fish Farming (Aquaculture)",
    "Dairy Farming",
    "Horticulture",
    "Agricultural Processing",
    "Farm Management",
    "Agricultural Equipment Operation",
    "Irrigation Systems",
    "Organic Farming",
    "Greenhouse Management",
    "Agricultural Sales & Marketing",
    "Veterinary Services",
    "Agricultural Research",
    "Forestry",
    "Beekeeping",
    "Seed Production",
    "Agricultural Consulting",
    "Food Safety & Quality Control",
)

# Storage keys for the persisted auth session
AUTH_TOKEN_KEY = "farmwork_auth_token"
REFRESH_TOKEN_KEY = "farmwork_refresh_token"
USER_DATA_KEY = "farmwork_user_data"
SEARCH_FILTERS_KEY = "farmwork_search_filters"

DEFAULT_PAGE_SIZE = 12
