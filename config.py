"""
Configuration management for the notifications bot.

Loads environment variables from .env file and provides typed access to configuration.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the notifications bot."""

    # Slack App Configuration
    SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET", "")
    SLACK_SERVICE_NAME = os.getenv("SLACK_SERVICE_NAME", "slack")
    SLACK_REQUEST_MAX_AGE = int(os.getenv("SLACK_REQUEST_MAX_AGE", "300"))

    # Slash command shown in usage instructions when Slack omits it
    BOT_COMMAND = os.getenv("BOT_COMMAND", "/argocd")

    # Bot API Configuration
    BOT_PORT = int(os.getenv("BOT_PORT", "8000"))

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    @classmethod
    def validate(cls) -> bool:
        """Validate that required configuration is set."""
        required = ["SLACK_SIGNING_SECRET"]
        missing = [key for key in required if not getattr(cls, key)]

        if missing:
            print(f"⚠️  Missing required environment variables: {', '.join(missing)}")
            print(f"   Please set them in .env file")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Slack Signing Secret: {'✓ Set' if Config.SLACK_SIGNING_SECRET else '✗ Missing'}")
    print(f"  Slack Service Name: {Config.SLACK_SERVICE_NAME}")
    print(f"  Bot Command: {Config.BOT_COMMAND}")
    print(f"  Bot Port: {Config.BOT_PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
