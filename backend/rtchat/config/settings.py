"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _env_flag("TESTING", "false")
    DEBUG = _env_flag("DEBUG", "false")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "9293"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # API surface
    API_MEDIA_TYPE = "application/vnd.api+json"
    CABLE_PATH = os.getenv("CABLE_PATH", "/cable")

    # Conversations
    CONVERSATION_SEED_TEXT = os.getenv(
        "CONVERSATION_SEED_TEXT", "Hello, how can I help you?"
    )
    SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", "true")

    # Auto reply
    # Seconds between a human message and the synthetic reply
    AUTO_REPLY_DELAY_SECONDS = float(os.getenv("AUTO_REPLY_DELAY_SECONDS", "2.5"))
    AUTO_REPLY_TEXT = os.getenv(
        "AUTO_REPLY_TEXT",
        "AI: I'm sorry, I don't understand. Can you please rephrase that?",
    )
    # When on, a newer human message cancels the pending reply timer instead of
    # letting the stale timer fire and no-op.
    AUTO_REPLY_CANCEL_PENDING = _env_flag("AUTO_REPLY_CANCEL_PENDING", "false")

    # Broadcast
    BROADCAST_SEND_TIMEOUT_SECONDS = float(
        os.getenv("BROADCAST_SEND_TIMEOUT_SECONDS", "5")
    )

    # Auth
    AUTH_TOKEN_MODE = os.getenv("AUTH_TOKEN_MODE", "opaque")  # "opaque" or "jwt"
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "rtchat")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "rtchat-clients")
    SERVICE_AUTH_TTL_SECONDS = int(os.getenv("SERVICE_AUTH_TTL_SECONDS", "3600"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    LOG_PATH = None
    SEED_DEMO_DATA = True
    AUTO_REPLY_DELAY_SECONDS = 0.05
    AUTH_TOKEN_MODE = "opaque"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
