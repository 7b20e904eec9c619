from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_suppressed_substrings: list[str] = ["TT:", "font"]

    pdf_engine: str = "pdfplumber"

    allowed_mime_type: str = "application/pdf"
    max_file_size_bytes: int = 50 * 1024 * 1024
    pacing_delay_seconds: float = 0.5
    raw_text_preview_chars: int = 2000

    chat_provider: str = "huggingface"
    chat_endpoint_url: str = "https://router.huggingface.co/hf-inference"
    chat_api_token: str = ""
    chat_payload_style: str = "inputs"
    chat_timeout_seconds: int = 30
    chat_max_new_tokens: int = 500
    chat_temperature: float = 0.7

    chat_openai_api_key: str = ""
    chat_openai_model_name: str = ""
    chat_openai_base_url: str = ""
