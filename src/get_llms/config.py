"""Configuration settings for get-llms."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """get-llms configuration.

    Environment variables (all prefixed with GET_LLMS_):
    - REGISTRY_URL: npm registry base URL (default: https://registry.npmjs.org)
    - GITHUB_RAW_URL: raw content host used for README lookups
    - HTTP_TIMEOUT: Per-request timeout in seconds (default: 10)
    - FALLBACK: "none" | "readme" | "empty" | "skip" (default: none)
    - OUTPUT: Output directory for fetched files (default: docs/llms)
    - FILENAME: Filename pattern, supports {name} (default: {name})
    - EXTENSION: File extension (default: txt)
    - DEPS: Dependency groups to read from package.json (default: all)
    - CONCURRENCY: Packages resolved in parallel (default: 4)
    """

    # Upstream endpoints
    registry_url: str = "https://registry.npmjs.org"
    github_raw_url: str = "https://raw.githubusercontent.com"

    # HTTP
    http_timeout: float = 10.0
    user_agent: str = "get-llms (+https://github.com/get-llms/get-llms)"

    # Behavior
    fallback: str = "none"
    concurrency: int = 4

    # Output
    package_path: str = "./package.json"
    deps: str = "all"
    output: str = "docs/llms"
    filename: str = "{name}"
    extension: str = "txt"

    # Filename sanitizer
    space_replacement: str = "_"
    slash_replacement: str = "-"
    at_replacement: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "GET_LLMS_", "case_sensitive": False}


settings = Settings()
