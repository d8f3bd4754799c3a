"""Configuration management for TidyFinder."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tidyfinder.config.file_ops import write_text_file
from tidyfinder.config.paths import default_config_path
from tidyfinder.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Saved profiles JSON file
    profiles_file: Path | None = _path_field()

    # Root searched when resetting every folder view (defaults to home)
    reset_root: Path | None = _path_field()

    # Relaunch Finder after applying settings, profiles or templates
    relaunch_after_apply: bool = False

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# TidyFinder Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/tidyfinder.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Profiles file (optional)")
        lines.append("# JSON file holding saved Finder profiles")
        lines.append('# Example: profiles_file = "~/Library/Application Support/TidyFinder/profiles.json"')
        if config["profiles_file"] is not None:
            lines.append(f"profiles_file = {self._format_toml_value(config['profiles_file'])}")
        lines.append("")

        lines.append("# Reset root (optional)")
        lines.append("# Folder searched when resetting all folder views (default: home)")
        if config["reset_root"] is not None:
            lines.append(f"reset_root = {self._format_toml_value(config['reset_root'])}")
        lines.append("")

        lines.append("# Relaunch Finder after applying changes (default false)")
        lines.append(
            f"relaunch_after_apply = {self._format_toml_value(config['relaunch_after_apply'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("relaunch_after_apply", False)

                known = {f.name for f in fields(cls)}
                for key in list(config_dict):
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        del config_dict[key]

                for key, value in config_dict.items():
                    if key.endswith("_file") or key.endswith("_root"):
                        if isinstance(value, str) and value.strip() != "":
                            config_dict[key] = value
                        else:
                            config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config"]
