import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class EmbeddingConfig:
    """Configuration for the OpenAI-compatible embedding backend"""
    model_id: str = "ai/mxbai-embed-large"
    base_url: str = "http://localhost:12434/engines/llama.cpp/v1"
    api_key: str = ""
    dimension: int = 1024  # Output vector length, also the chunk size limit
    timeout: float = 60.0

    def __post_init__(self):
        if self.dimension <= 0:
            raise ValueError("embedding dimension must be positive")

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


@dataclass
class RedisConfig:
    """Configuration for the RediSearch vector store"""
    address: str = "localhost:6379"
    password: str = ""
    db: int = 0
    index_name: str = "vector_idx"
    key_prefix: str = "doc:"
    distance_metric: str = "L2"
    max_connections: int = 50

    def __post_init__(self):
        valid_metrics = ["L2", "IP", "COSINE"]
        if self.distance_metric not in valid_metrics:
            raise ValueError(
                f"distance_metric must be one of {valid_metrics}, "
                f"got '{self.distance_metric}'"
            )

        if self.max_connections <= 0:
            raise ValueError("max_connections must be positive")

    @property
    def url(self) -> str:
        """Connection URL built from address and password"""
        if self.address.startswith(("redis://", "rediss://", "unix://")):
            return self.address
        if self.password:
            return f"redis://:{self.password}@{self.address}/{self.db}"
        return f"redis://{self.address}/{self.db}"


@dataclass
class ChunkingConfig:
    chunk_size: int = 512
    overlap: int = 64
    delimiter_header_lines: int = 2

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        if self.overlap < 0:
            raise ValueError("overlap cannot be negative")

        if self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be "
                f"smaller than chunk_size ({self.chunk_size})"
            )

        if self.delimiter_header_lines < 0:
            raise ValueError("delimiter_header_lines cannot be negative")


@dataclass
class SearchConfig:
    default_max_count: int = 5

    def __post_init__(self):
        if self.default_max_count <= 0:
            raise ValueError("default_max_count must be positive")


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    mcp_port: int = 9090  # streamable HTTP transport of the MCP server

    def __post_init__(self):
        for name in ("port", "mcp_port"):
            value = getattr(self, name)
            if not 0 < value < 65536:
                raise ValueError(f"{name} must be between 1 and 65535, got {value}")


@dataclass
class Config:
    """
    Main configuration for the vectormind service

    One instance is created at startup and threaded explicitly into the
    embedder, the vector store and the vector service.
    """
    embedding: EmbeddingConfig = field(default_factory=EmbeddingConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        self.log_level = self.log_level.upper()
        if self.log_level not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got '{self.log_level}'")


# Environment variable -> (section, key, type)
ENV_OVERRIDES = {
    "EMBEDDING_MODEL": ("embedding", "model_id", str),
    "EMBEDDING_DIMENSION": ("embedding", "dimension", int),
    "MODEL_RUNNER_BASE_URL": ("embedding", "base_url", str),
    "EMBEDDING_API_KEY": ("embedding", "api_key", str),
    "REDIS_ADDRESS": ("redis", "address", str),
    "REDIS_PASSWORD": ("redis", "password", str),
    "REDIS_INDEX_NAME": ("redis", "index_name", str),
    "API_REST_PORT": ("server", "port", int),
    "MCP_HTTP_PORT": ("server", "mcp_port", int),
}


def load_config_file(config_path: str) -> dict:
    """Helper to read YAML from path"""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)
    return config or {}


def _apply_env_overrides(data: Dict[str, Any], environ) -> Dict[str, Any]:
    for env_name, (section, key, cast) in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            value = cast(raw)
        except ValueError:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}")
        if not data.get(section):
            data[section] = {}
        data[section][key] = value
        logger.debug(f"Config override from {env_name}: {section}.{key}")

    if environ.get("LOG_LEVEL"):
        data["log_level"] = environ["LOG_LEVEL"]
    return data


def load_config(config_path: Optional[str] = None, environ=None) -> Config:
    """
    Load configuration from an optional YAML file and the environment

    Environment variables take precedence over values from the file.

    Args:
        config_path: Path to YAML config file, or None for defaults
        environ: Mapping to read overrides from (defaults to os.environ)

    Returns:
        Validated Config instance
    """
    data: Dict[str, Any] = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        data = load_config_file(config_path)

    data = _apply_env_overrides(data, os.environ if environ is None else environ)

    return Config(
        embedding=EmbeddingConfig(**(data.get('embedding') or {})),
        redis=RedisConfig(**(data.get('redis') or {})),
        chunking=ChunkingConfig(**(data.get('chunking') or {})),
        search=SearchConfig(**(data.get('search') or {})),
        server=ServerConfig(**(data.get('server') or {})),
        log_level=data.get('log_level', 'INFO'),
    )
