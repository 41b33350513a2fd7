import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "phosys_parser.yml"

DEFAULT_PARSER = {
    "root_name": "PHOSYS",
    "depth_aware": False,
}


class PPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.parser = {**DEFAULT_PARSER, **(data.get("parser", {}) or {})}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def root_name(self):
        # An empty/null root name accepts any wrapper block.
        return self.parser.get("root_name") or None

    @property
    def depth_aware(self) -> bool:
        return bool(self.parser.get("depth_aware", False))


def load_config(path=None) -> 'PPConfig':
    """
    Load configuration from YAML.

    An explicit ``path`` must exist. The default project config is
    optional; built-in defaults are used when it is absent.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return PPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PPConfig(data)

_config_cache = None

def get_config() -> 'PPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
