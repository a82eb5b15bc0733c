from pydantic_settings import BaseSettings

from umeng_push.errors import ConfigurationError
from umeng_push.schemas.envelope import Platform


class Settings(BaseSettings):
    host: str = "http://msg.umeng.com"

    # Endpoint paths
    upload_path: str = "/upload"
    send_path: str = "/api/send"
    status_path: str = "/api/status"
    cancel_path: str = "/api/cancel"

    # Per-platform app credentials from the Umeng console
    android_app_key: str = ""
    android_app_master_secret: str = ""
    ios_app_key: str = ""
    ios_app_master_secret: str = ""

    # Seconds, handed to the HTTP client the library creates itself
    timeout: float = 15

    model_config = {"env_prefix": "UMENG_", "env_file": ".env", "extra": "ignore"}

    def credentials(self, platform: Platform) -> tuple[str, str]:
        """Return ``(app_key, app_master_secret)`` for a platform."""
        if platform == Platform.ANDROID:
            app_key, secret = self.android_app_key, self.android_app_master_secret
        elif platform == Platform.IOS:
            app_key, secret = self.ios_app_key, self.ios_app_master_secret
        else:
            raise ConfigurationError(f"unknown platform: {platform}")

        prefix = f"UMENG_{Platform(platform).name}"
        if not app_key:
            raise ConfigurationError(f"{prefix}_APP_KEY is not set")
        if not secret:
            raise ConfigurationError(f"{prefix}_APP_MASTER_SECRET is not set")
        return app_key, secret
