from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    max_upload_bytes: int = 50 * 1024 * 1024
    allowed_extensions: list[str] = [".pdf", ".docx", ".txt"]

    binary_scan_max_chars: int = 10_000
    docx_xml_max_chars: int = 50_000
    docx_raw_max_chars: int = 20_000

    words_per_minute: int = 200
