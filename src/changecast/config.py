from pathlib import Path
from typing import Optional
from xdg_base_dirs import xdg_config_home
import tomllib
import logging
from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from typing_extensions import Annotated

from changecast.errors import ConfigError


logger = logging.getLogger(__name__)

APP_NAME = "changecast"

Selector = Annotated[str, StringConstraints(pattern=r"^[A-Za-z_]\w*$")]


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_selector: Selector = "update"


def get_config_file() -> Path:
    return xdg_config_home() / APP_NAME / f"{APP_NAME}.toml"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from `path`, or from the user's XDG config file.

    A missing file gives the default settings.
    """
    if path is None:
        path = get_config_file()
    if not path.is_file():
        logger.debug('%s not found, using default settings', path)
        return Settings()
    with path.open("rb") as file:
        try:
            data = tomllib.load(file)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse '{path}': {e}") from e
    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in '{path}': {e}") from e
    logger.debug('Loaded %r from %s', settings, path)
    return settings
