"""Typed configuration loading.

The config file is optional. Every field has a default matching plain
`git gc --aggressive` / `git fetch --prune` / `git stash list | wc -l`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitSettings",
    "ScanSettings",
    "load_config",
    "load_config_or_default",
    "DEFAULT_MAX_DEPTH",
]

# Root is depth 0; depth 2 reaches `<child>/.git`.
DEFAULT_MAX_DEPTH = 2


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _default_gc_args() -> tuple[str, ...]:
    return ("--aggressive",)


def _default_line_counter() -> tuple[str, ...]:
    return ("wc", "-l")


@dataclass(frozen=True, slots=True)
class GitSettings:
    """How git and the line counter are invoked.

    Attributes:
        executable: git binary name or path
        gc_args: arguments after `gc`
        remote: remote passed to `fetch --prune`, None for git's default
        line_counter: command that counts lines of `stash list` on stdin
    """

    executable: str = "git"
    gc_args: tuple[str, ...] = field(default_factory=_default_gc_args)
    remote: str | None = None
    line_counter: tuple[str, ...] = field(default_factory=_default_line_counter)


@dataclass(frozen=True, slots=True)
class ScanSettings:
    """Repository discovery settings."""

    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitSettings = field(default_factory=GitSettings)
    scan: ScanSettings = field(default_factory=ScanSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        git: StrDict = get_table(data, "git") or {}
        scan: StrDict = get_table(data, "scan") or {}
        stash: StrDict = get_table(data, "stash") or {}

        gc_args = get_str_list(git, "gc_args")
        line_counter = get_str_list(stash, "line_counter")
        max_depth = get_int(scan, "max_depth")
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"scan.max_depth must be >= 1, got {max_depth}")
        if line_counter is not None and not line_counter:
            raise ValueError("stash.line_counter must not be empty")

        return cls(
            git=GitSettings(
                executable=get_str(git, "executable") or "git",
                gc_args=tuple(gc_args) if gc_args is not None else _default_gc_args(),
                remote=get_str(git, "remote"),
                line_counter=(
                    tuple(line_counter) if line_counter is not None else _default_line_counter()
                ),
            ),
            scan=ScanSettings(max_depth=max_depth or DEFAULT_MAX_DEPTH),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return defaults.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
