import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

VARIANT_NAMES = ("ksuid", "ksuid_ms")


class KsuidConfig:
    __slots__ = ("default_variant", "max_batch")

    def __init__(self, default_variant="ksuid", max_batch=100):
        if default_variant not in VARIANT_NAMES:
            raise ValueError(f"Unknown KSUID variant: {default_variant!r}. Use 'ksuid' or 'ksuid_ms'.")
        self.default_variant = default_variant
        self.max_batch = max_batch


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("ksuid", "server", "logging")

    def __init__(self, ksuid=None, server=None, logging=None):
        self.ksuid = ksuid or KsuidConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            KsuidConfig(**d.get("ksuid", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
