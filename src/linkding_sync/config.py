from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="LINKDING_SYNC_"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 9003
    log_level: str = "WARNING"

    # Persisted sync settings (the seven user-editable fields)
    settings_path: str = "./data/settings.yaml"

    # Destination paths are resolved against this directory
    vault_dir: str = "./vault"

    # Notices kept for GET /api/v1/notices
    notice_history: int = 50
