"""
Settings for the demonstration drivers.
"""
import json
import os
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)


def _default_flyweight_seed() -> List[List[str]]:
    return [
        ["Chevrolet", "Camaro2018", "pink"],
        ["Mercedes Benz", "C300", "black"],
        ["Mercedes Benz", "C500", "red"],
        ["BMW", "M5", "red"],
        ["BMW", "X6", "white"],
    ]


def _default_flyweight_cars() -> List[List[str]]:
    # plates, owner, brand, model, color
    return [
        ["CL234IR", "James Doe", "BMW", "M5", "red"],
        ["CL234IR", "James Doe", "BMW", "X1", "red"],
        ["CA123ON", "Michael Jack", "Toyota", "Corolla", "silver"],
    ]


@dataclass
class DemoSettings:
    """Inputs for every demo plus the logging and metrics switches."""
    # Command
    command_payload: str = "Say Hi!"
    command_receiver_args: List[str] = field(default_factory=lambda: ["Send email", "Save report"])

    # Flyweight
    flyweight_seed: List[List[str]] = field(default_factory=_default_flyweight_seed)
    flyweight_cars: List[List[str]] = field(default_factory=_default_flyweight_cars)

    # Prototype
    prototype_values: List[float] = field(default_factory=lambda: [90.0, 10.0])

    # Observer
    observer_messages: List[str] = field(default_factory=lambda: [
        "Hello World! :D",
        "The weather is hot today! :p",
        "My new car is great! ;)",
    ])

    # Strategy
    strategy_text: str = "haegicbjdf"

    # Singleton
    singleton_values: List[str] = field(default_factory=lambda: ["FOO", "BAR"])
    singleton_start_delay: float = 0.1

    # Logging
    log_level: str = "WARNING"
    log_dir: str = "logs"
    log_to_file: bool = False
    structured_logging: bool = False

    # Metrics
    use_metrics: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    def to_yaml(self, filepath: str):
        """Save settings to YAML file."""
        with open(filepath, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, settings_dict: Dict[str, Any]) -> 'DemoSettings':
        """Create settings from dictionary."""
        unknown = set(settings_dict) - set(cls.field_names())
        if unknown:
            raise ConfigurationError(
                f"Unknown settings: {sorted(unknown)}",
                details={'available_settings': cls.field_names()}
            )
        return cls(**settings_dict)

    @classmethod
    def from_yaml(cls, filepath: str) -> 'DemoSettings':
        """Load settings from YAML file."""
        with open(filepath, 'r') as f:
            settings_dict = yaml.safe_load(f) or {}
        return cls.from_dict(settings_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'DemoSettings':
        """Load settings from JSON file."""
        with open(filepath, 'r') as f:
            settings_dict = json.load(f)
        return cls.from_dict(settings_dict)

    @classmethod
    def from_file(cls, filepath: str) -> 'DemoSettings':
        """Load settings from a YAML or JSON file, chosen by suffix."""
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix in ['.yaml', '.yml']:
            settings = cls.from_yaml(str(path))
        elif path.suffix == '.json':
            settings = cls.from_json(str(path))
        else:
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        logger.info(f"Loaded settings from {filepath}")
        return settings

    def apply_env(self, prefix: str = "PATTERNS_", environ: Optional[Dict[str, str]] = None) -> 'DemoSettings':
        """
        Override settings from environment variables.

        PATTERNS_STRATEGY_TEXT=abc sets strategy_text. Text settings take the
        raw value; all others are parsed as JSON and must match the type of
        the default, so PATTERNS_SINGLETON_VALUES='["FOO", "BAR"]' is a list.

        Args:
            prefix: Prefix for environment variables
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If a value does not have the setting's type
        """
        environ = os.environ if environ is None else environ
        defaults = self.__class__()
        known = set(self.field_names())
        applied = 0

        for key, value in environ.items():
            if not key.startswith(prefix):
                continue

            name = key[len(prefix):].lower()
            if name not in known:
                logger.warning(f"Ignoring unknown setting from environment: {key}")
                continue

            expected = type(getattr(defaults, name))
            setattr(self, name, self._parse_env_value(key, value, expected))
            applied += 1

        logger.info(f"Loaded {applied} settings from environment")
        return self

    @staticmethod
    def _parse_env_value(key: str, value: str, expected: type) -> Any:
        if expected is str:
            return value

        try:
            parsed_value = json.loads(value)
        except json.JSONDecodeError:
            parsed_value = value

        # JSON has one number type; whole numbers are fine for float settings
        if expected is float and type(parsed_value) is int:
            parsed_value = float(parsed_value)

        if type(parsed_value) is not expected:
            raise ConfigurationError(
                f"Invalid value for {key}: expected {expected.__name__}",
                details={
                    'variable': key,
                    'value': value,
                    'expected_type': expected.__name__,
                    'actual_type': type(parsed_value).__name__
                }
            )
        return parsed_value


def load_settings(path: Optional[str] = None, env_prefix: str = "PATTERNS_") -> DemoSettings:
    """Defaults, then the optional file, then environment overrides."""
    settings = DemoSettings.from_file(path) if path else DemoSettings()
    return settings.apply_env(env_prefix)
