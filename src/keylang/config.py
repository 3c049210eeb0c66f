from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"
    # Trailing keystroke buffer handed to the classifier on every key press
    window_capacity: int = 100
    # Seconds without a key press before the tracker reports "not typing"
    typing_timeout_seconds: float = 2.0
    # YAML file with custom language profiles. Empty string = built-in table.
    profiles_path: str = ""
    # Load the built-in profiles before the ones in profiles_path
    profiles_include_builtin: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "KEYLANG_",
        "extra": "ignore",
    }


settings = Settings()
