"""Configuration models for declarative package installation.

This module defines the Pydantic models representing the frontier TOML
document. Validation happens in two phases: the models check only the
document structure (sections are tables, required keys are present),
while the accessor methods check field value types on demand.
"""

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from frontier.exceptions import FieldTypeError
from frontier.managers.registry import ManagerDescriptor, resolve_manager


def _strings_only(values: list[Any]) -> list[str]:
    """Drop non-string elements from a TOML array, keeping order."""
    return [value for value in values if isinstance(value, str)]


class PackageManagerSection(BaseModel):
    """The [packageManager] section.

    Attributes:
        name: Key of the package manager to drive (e.g., "pacman").
        args: Extra flags forwarded verbatim to the install command.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[Any, Field(description="Package manager key")]
    args: Annotated[Any, Field(description="Extra install flags")] = None


class PackagesSection(BaseModel):
    """The [pkgs] section.

    Attributes:
        install: Package identifiers to install.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    install: Annotated[Any, Field(description="Packages to install")]


class FrontierConfig(BaseModel):
    """Complete configuration document.

    Non-string elements inside otherwise valid arrays are silently
    dropped by the accessors, while a field of the wrong type altogether
    raises FieldTypeError.

    Attributes:
        package_manager: The [packageManager] section.
        pkgs: The [pkgs] section.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    package_manager: Annotated[
        PackageManagerSection,
        Field(
            validation_alias=AliasChoices("packageManager", "package_manager"),
            description="Package manager section",
        ),
    ]
    pkgs: Annotated[PackagesSection, Field(description="Packages section")]

    def pkgs_to_install(self) -> list[str]:
        """Get the string entries of pkgs.install.

        Returns:
            Package names in document order.

        Raises:
            FieldTypeError: If install is not an array.
        """
        install = self.pkgs.install
        if not isinstance(install, list):
            raise FieldTypeError("install field is not an array", field="pkgs.install")
        return _strings_only(install)

    def pkg_mgr_name(self) -> str:
        """Get packageManager.name.

        Raises:
            FieldTypeError: If name is not a string.
        """
        name = self.package_manager.name
        if not isinstance(name, str):
            raise FieldTypeError("name field is not a string", field="packageManager.name")
        return name

    def args_to_pkg_mgr(self) -> list[str]:
        """Get the string entries of packageManager.args.

        Returns:
            Extra install flags, or an empty list when args is absent.

        Raises:
            FieldTypeError: If args is present but not an array.
        """
        args = self.package_manager.args
        if args is None:
            return []
        if not isinstance(args, list):
            raise FieldTypeError("args field is not an array", field="packageManager.args")
        return _strings_only(args)

    def pkg_mgr(self) -> ManagerDescriptor:
        """Resolve the configured package manager.

        Raises:
            FieldTypeError: If name is not a string.
            UnsupportedManagerError: If the name is not a supported manager.
        """
        return resolve_manager(self.pkg_mgr_name())
