"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides the result warning threshold and paths for config files."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rngestimate import __version__
from rngestimate.estimation.estimator import DEFAULT_RESULT_WARNING_THRESHOLD


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project.

    Every field can be overridden with an environment variable prefixed with
    RNGESTIMATE_, e.g. RNGESTIMATE_RESULT_WARNING_THRESHOLD=100000.
    """

    model_config = SettingsConfigDict(env_prefix="RNGESTIMATE_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    RESULT_WARNING_THRESHOLD: int = DEFAULT_RESULT_WARNING_THRESHOLD
    """Estimated result counts above this value trigger a warning."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def requests_dir(self) -> Path:
        """Directory with example estimation request files."""
        return self.configs_dir / "requests"


settings = Settings()
