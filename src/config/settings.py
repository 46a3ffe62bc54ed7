"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via keyword arguments or
environment variables. All settings use the MDINCLUDE_ prefix
(e.g., MDINCLUDE_PRISTINE=true).

The settings structure is closed: any key that is not a declared field is
rejected at construction and surfaced as UnrecognizedOption.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.errors import MissingRequiredConfiguration, UnrecognizedOption


class AppSettings(BaseSettings):
    """
    Application configuration via keyword arguments or environment variables.

    Environment variables use MDINCLUDE_ prefix.

    Examples:
        MDINCLUDE_PRISTINE=true
        MDINCLUDE_ROOT=/path/to/project
        MDINCLUDE_REPO_USER=someone
        MDINCLUDE_REPO_NAME=some_repo
    """

    model_config = SettingsConfigDict(
        env_prefix="MDINCLUDE_",
        case_sensitive=False,
        extra="forbid",
    )

    # Output configuration
    pristine: bool = Field(
        default=False,
        description="Suppress generated begin/end marker comments in output",
    )

    # Project configuration
    root: Path = Field(
        default_factory=Path.cwd,
        description="Project root; paths in markers and backtraces are shown relative to it",
    )

    # Image resolution configuration
    repo_user: Optional[str] = Field(
        default=None,
        description="Repository owner, used to build absolute image URLs",
    )

    repo_name: Optional[str] = Field(
        default=None,
        description="Repository name, used to build absolute image URLs",
    )

    image_url_base: str = Field(
        default="https://raw.githubusercontent.com/{repo_user}/{repo_name}/master",
        description="Template for the absolute URL prefix of resolved images",
    )

    def imageUrlBase_make(self) -> str:
        """
        Build the absolute URL prefix for resolved images.

        Raises:
            MissingRequiredConfiguration: If repo_user or repo_name is unset

        Example:
            >>> settings = AppSettings(repo_user="me", repo_name="docs")
            >>> settings.imageUrlBase_make()
            'https://raw.githubusercontent.com/me/docs/master'
        """
        missing = [name for name in ("repo_user", "repo_name") if not getattr(self, name)]
        if missing:
            raise MissingRequiredConfiguration(missing)
        return self.image_url_base.format(repo_user=self.repo_user, repo_name=self.repo_name)


def settings_build(**options: Any) -> AppSettings:
    """
    Construct AppSettings from caller options.

    Args:
        **options: Setting values (pristine, root, repo_user, ...)

    Returns:
        Validated AppSettings instance

    Raises:
        UnrecognizedOption: If any key is not a declared setting
        pydantic.ValidationError: If a known setting has an invalid value
    """
    try:
        return AppSettings(**options)
    except ValidationError as e:
        for error in e.errors():
            if error["type"] == "extra_forbidden":
                raise UnrecognizedOption(str(error["loc"][0])) from e
        raise

