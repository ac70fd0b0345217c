"""Tool configuration model for flutter-quickstart.

Captures flutter_quickstart.yaml fields with defaults matching a
Homebrew + zsh setup on macOS. Every field is optional.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

CONFIG_FILENAME = "flutter_quickstart.yaml"


class ToolchainConfig(BaseModel):
    """Where the Flutter toolchain lives and how to find help installing it."""

    model_config = {"extra": "forbid"}

    binary: str = "flutter"
    sdk_bin: str = "/usr/local/bin/flutter/bin"
    install_url: str = "https://flutter.dev/docs/get-started/install"


class PackageManagerConfig(BaseModel):
    """OS package manager used to install the toolchain when it is missing."""

    model_config = {"extra": "forbid"}

    binary: str = "brew"
    package: str = "flutter"
    cask: bool = True

    def install_args(self) -> list[str]:
        """Return the argument list for the install command."""
        args = ["install"]
        if self.cask:
            args.append("--cask")
        args.append(self.package)
        return args


class ToolConfig(BaseModel):
    """Top-level configuration loaded from flutter_quickstart.yaml.

    check_exit_codes controls whether a failing external command aborts
    the remaining steps. check_decline_is_fatal makes `check-flutter`
    exit 1 when the user declines installation, like `run` does.
    """

    model_config = {"extra": "forbid"}

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    package_manager: PackageManagerConfig = Field(default_factory=PackageManagerConfig)
    shell_profile: str = "~/.zshrc"
    architecture_root: str = "lib"
    check_exit_codes: bool = True
    check_decline_is_fatal: bool = False

    def shell_profile_path(self) -> Path:
        """Return the shell profile path with ~ expanded."""
        return Path(self.shell_profile).expanduser()


def load_tool_config(config_path: Path | None = None) -> ToolConfig:
    """Load ToolConfig from YAML. Returns defaults if no file is found.

    Args:
        config_path: Explicit path to a config file. If None, looks for
            flutter_quickstart.yaml in the current working directory.

    Returns:
        Validated ToolConfig instance.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If the file does not match the schema.
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
        if not config_path.exists():
            return ToolConfig()
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ToolConfig()
    return ToolConfig.model_validate(raw)
