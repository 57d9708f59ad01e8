"""
Configuration for polytoken.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_WARMUP_MODELS = ["gpt-4o", "gpt-4", "gpt-3.5-turbo"]


class TokenizerConfig(BaseModel):
    """Tokenizer engine configuration."""

    # Flagship model used when an OpenAI count names no model
    openai_model: str = "gpt-4o"
    warmup_models: list[str] = Field(default_factory=lambda: list(DEFAULT_WARMUP_MODELS))
    gemini_model: str = "gemini-2.0-flash"
    anthropic_model: str = "claude-sonnet-4-5"
    anthropic_api_key: str | None = None
    anthropic_timeout: float = Field(default=30.0, gt=0)
    benchmark_iterations: int = Field(default=10, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            POLYTOKEN_OPENAI_MODEL: Default OpenAI model for counting
            POLYTOKEN_WARMUP_MODELS: Comma separated OpenAI models to preload
            POLYTOKEN_GEMINI_MODEL: Gemini model for the local tokenizer
            POLYTOKEN_ANTHROPIC_MODEL: Claude model used for count requests
            POLYTOKEN_ANTHROPIC_API_KEY: Anthropic API key (falls back to ANTHROPIC_API_KEY)
            POLYTOKEN_ANTHROPIC_TIMEOUT: Anthropic request timeout in seconds
            POLYTOKEN_BENCHMARK_ITERATIONS: Default benchmark rounds
            POLYTOKEN_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            if isinstance(default, list):
                return [item.strip() for item in value.split(",") if item.strip()]
            return value

        return cls(
            tokenizer=TokenizerConfig(
                openai_model=get_env("POLYTOKEN_OPENAI_MODEL", "gpt-4o"),
                warmup_models=get_env("POLYTOKEN_WARMUP_MODELS", list(DEFAULT_WARMUP_MODELS)),
                gemini_model=get_env("POLYTOKEN_GEMINI_MODEL", "gemini-2.0-flash"),
                anthropic_model=get_env("POLYTOKEN_ANTHROPIC_MODEL", "claude-sonnet-4-5"),
                anthropic_api_key=get_env(
                    "POLYTOKEN_ANTHROPIC_API_KEY", os.getenv("ANTHROPIC_API_KEY")
                ),
                anthropic_timeout=get_env("POLYTOKEN_ANTHROPIC_TIMEOUT", 30.0),
                benchmark_iterations=get_env("POLYTOKEN_BENCHMARK_ITERATIONS", 10),
            ),
            logging=LoggingConfig(
                level=get_env("POLYTOKEN_LOG_LEVEL", "INFO"),
                log_to_file=get_env("POLYTOKEN_LOG_TO_FILE", False),
                log_dir=get_env("POLYTOKEN_LOG_DIR", "logs"),
                file_rotation=get_env("POLYTOKEN_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("POLYTOKEN_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("POLYTOKEN_LOG_COMPRESSION", "zip"),
                serialize=get_env("POLYTOKEN_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Apply env overrides (non-default values)
        default = cls()
        if env_config.tokenizer != default.tokenizer:
            final_dict["tokenizer"] = env_config.tokenizer.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
