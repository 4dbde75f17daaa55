"""Runtime settings read from the environment."""

from dataclasses import dataclass

from environs import Env, EnvError

from scalar_measure.domain.constants import ENV_PREFIX
from scalar_measure.domain.exceptions import ValidationError
from scalar_measure.domain.models.domains import NATIVE_POINTER_WIDTH
from scalar_measure.domain.units import PointerWidth
from scalar_measure.domain.validators import validate_pointer_width


@dataclass(frozen=True, slots=True)
class Settings:
    pointer_width: PointerWidth


def load_settings(env: Env | None = None) -> Settings:
    """Load settings from the environment.

    Variables:
        SCALAR_MEASURE_POINTER_WIDTH: width of usize/isize in bits
            (default: the interpreter's pointer width)

    Raises:
        ValidationError: If the pointer width is not supported
    """
    if env is None:
        env = Env()

    try:
        with env.prefixed(ENV_PREFIX):
            pointer_width = env.int("POINTER_WIDTH", NATIVE_POINTER_WIDTH)
    except EnvError as e:
        raise ValidationError(f"Invalid {ENV_PREFIX}POINTER_WIDTH: {e}") from e

    return Settings(pointer_width=validate_pointer_width(pointer_width))
