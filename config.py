import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class UIDConfig:
    __slots__ = ("alphabet", "time_length", "random_length", "max_time", "strict_prefix")
    
    def __init__(
        self,
        alphabet="0123456789_abcdefghijklmnopqrstuvwxyz",
        time_length=9,
        random_length=8,
        max_time=2**46 - 1,
        strict_prefix=False,
    ):
        self.alphabet = alphabet
        self.time_length = time_length
        self.random_length = random_length
        self.max_time = max_time
        self.strict_prefix = strict_prefix

    @property
    def length(self):
        return self.time_length + self.random_length


class ServerConfig:
    __slots__ = ("host", "port", "max_batch")
    
    def __init__(self, host="127.0.0.1", port=8080, max_batch=1000):
        self.host = host
        self.port = port
        self.max_batch = max_batch


class LoggingConfig:
    __slots__ = ("level", "crash_file")
    
    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("uid", "server", "logging")
    
    def __init__(self, uid=None, server=None, logging=None):
        self.uid = uid or UIDConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            UIDConfig(**d.get("uid", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    """Load JSON config from `path`, $UID_CONFIG, or config.json next to this file."""
    config_path = Path(path or os.environ.get("UID_CONFIG") or _DEFAULT_CONFIG)
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
