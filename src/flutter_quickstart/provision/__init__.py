"""Toolchain detection and installation."""

from flutter_quickstart.provision.toolchain import ProvisionOutcome, ToolchainProvisioner

__all__ = ["ProvisionOutcome", "ToolchainProvisioner"]
