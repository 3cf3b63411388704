"""RSS 2.0 constants.

Values defined by the RSS 2.0 specification, plus the lookup tables the
validator checks against. The tables are frozen at import and never mutated.
"""

# Feed identity
VERSION = "2.0"  # Only supported rss/@version
DOCS_URL = "http://blogs.law.harvard.edu/tech/rss"  # Only allowed channel/docs value

# Image
DEFAULT_WIDTH = 88  # Width implied by a missing or zero image width
DEFAULT_HEIGHT = 31  # Height implied by a missing or zero image height
MAX_IMAGE_WIDTH = 144
MAX_IMAGE_HEIGHT = 400

# Cloud
MIN_CLOUD_PORT = 1
MAX_CLOUD_PORT = 65535

# Skip hours
MIN_SKIP_HOUR = 0
MAX_SKIP_HOUR = 23

ALLOWED_CLOUD_PROTOCOLS = frozenset({"xml-rpc", "soap", "http-post"})

ALLOWED_SKIP_DAYS = frozenset(
    {"Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"}
)

# http://cyber.law.harvard.edu/rss/languages.html
ALLOWED_LANGUAGES = frozenset(
    {
        "af", "sq", "eu", "be", "bg", "ca", "zh-cn", "zh-tw", "hr", "cs", "da",
        "nl", "nl-be", "nl-nl", "en", "en-au", "en-bz", "en-ca", "en-ie", "en-jm",
        "en-nz", "en-ph", "en-za", "en-tt", "en-gb", "en-us", "en-zw", "et", "fo",
        "fi", "fr", "fr-be", "fr-ca", "fr-fr", "fr-lu", "fr-mc", "fr-ch", "gl",
        "gd", "de", "de-at", "de-de", "de-li", "de-lu", "de-ch", "el", "haw", "hu",
        "is", "in", "ga", "it", "it-it", "it-ch", "ja", "ko", "mk", "no", "pl",
        "pt", "pt-br", "pt-pt", "ro", "ro-mo", "ro-ro", "ru", "ru-mo", "ru-ru",
        "sr", "sk", "sl", "es", "es-ar", "es-bo", "es-cl", "es-co", "es-cr",
        "es-do", "es-ec", "es-sv", "es-gt", "es-hn", "es-mx", "es-ni", "es-pa",
        "es-py", "es-pe", "es-pr", "es-es", "es-uy", "es-ve", "sv", "sv-fi",
        "sv-se", "tr", "uk",
    }
)  # fmt: skip
