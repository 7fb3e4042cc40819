"""Page store constants."""

# Display names for the languages the site ships in. Languages missing here
# are shown by their code.
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "he": "עברית",
}

# Root HTML files with these prefixes belong to the admin panel itself and
# are never listed or edited as site pages.
ADMIN_FILE_PREFIXES = ("admin",)

# Class toggled on a section element to hide it without deleting its markup.
HIDDEN_SECTION_CLASS = "admin-hidden"

# Pages whose missing translations are reported with the highest urgency.
CRITICAL_PAGES = ("index", "contact-us", "our-team", "class-action")
