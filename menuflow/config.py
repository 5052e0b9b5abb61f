from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Text shown once when a console starts; an empty string disables it
    GREETING_TEXT: str = (
        "Welcome to menuflow! You can customize or disable this message "
        "with the greeting_text property."
    )

    # Default message printed before asking again (RetryForever policy)
    RETRY_PROMPT: str = "Invalid input, please try again: "

    # Shown when a bounded integer (read_int, BranchOnInt) is out of range
    RANGE_INVALID_MESSAGE: str = "Please enter a number between {low} and {high}."
    MIN_INVALID_MESSAGE: str = "Please enter a number of at least {low}."
    MAX_INVALID_MESSAGE: str = "Please enter a number of at most {high}."

    # Branch directors; {options} is filled in by BranchOnString
    OPTION_INVALID_MESSAGE: str = "Please enter one of: {options}."
    BRANCH_RETRY_PROMPT: str = "Your choice: "

    # Applied by the demo entry point only; the library never configures logging
    LOG_LEVEL: str = "WARNING"

    # Loads from MENUFLOW_* environment variables or a .env file in the working directory
    model_config = SettingsConfigDict(env_prefix="MENUFLOW_", env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
