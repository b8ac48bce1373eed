import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    # API Configuration
    API_TITLE = "Play Store Version Lookup"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = "Look up the currently published version of a Google Play application"

    # Server Configuration
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    # Request Configuration
    PLAY_STORE_URL = os.getenv("PLAY_STORE_URL", "https://play.google.com/store/apps/details?id=")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 10))
    ACCEPT_LANGUAGE = os.getenv("ACCEPT_LANGUAGE", "en-US,en;q=0.9")

    # User Agent String
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Linux; Android 5.0; SM-G900P Build/LRX21T) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/67.0.3396.87 Mobile Safari/537.36"
    )

    # Extraction Configuration
    # Zero-based index into the page's value cells; depends on the current Play Store layout
    POSITIONAL_FALLBACK_INDEX = int(os.getenv("POSITIONAL_FALLBACK_INDEX", 6))
    VARIES_WITH_DEVICE = os.getenv("VARIES_WITH_DEVICE", "Varies with device")
    VERSION_PLACEHOLDER = os.getenv("VERSION_PLACEHOLDER", "0.0.0")

    # Play Store page selectors
    LD_JSON_SELECTOR = 'script[type="application/ld+json"]'
    FIELD_BLOCK_SELECTOR = "div.hAyfc"
    FIELD_LABEL_SELECTOR = ".BgcNfc"
    FIELD_VALUE_SELECTOR = ".htlgb"
    CURRENT_VERSION_LABELS = ["Current Version", "Current version"]

    # Logging Configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Security Configuration
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


# Create settings instance
settings = Settings()
