from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GitHub REST API (public, unauthenticated)
    github_api_url: str = "https://api.github.com"
    github_user_agent: str = "GitHub-User-Search-App"
    github_timeout_seconds: float = 30.0
    github_connect_timeout_seconds: float = 5.0

    # Serve fixture data instead of calling GitHub (demos, end-to-end runs)
    use_in_memory_github: bool = False

    # Page sizes forwarded upstream
    search_results_limit: int = 5
    repos_per_page: int = 30

    # Browser-side client
    proxy_base_url: str = "http://localhost:8000"
    search_debounce_seconds: float = 0.3


settings = Settings()
