from pydantic_settings import BaseSettings

from translit.text.engine import CaseMode

class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000

    require_auth: bool = False
    api_key: str = "dummy-local-key"

    builtin_tables: bool = True  # ship-in tables: devanagari, bengali, gurmukhi, gujarati, cyrillic
    rules_dir: str | None = None  # directory of *.json rule files; same script name overrides a built-in
    default_case: CaseMode = "preserve"
    normalize_unicode: bool = True  # NFC before segmentation
    max_input_chars: int = 4096

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"
