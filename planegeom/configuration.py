"""Tools related to planegeom configuration"""

import logging
import math
from pathlib import Path
from typing import Mapping

import attrs
from expression import Option, Result
import yaml

from planegeom import EPSILON, ConfigurationValueError
from planegeom.geometry import PlanarAlgebra, Point
from planegeom.numeric_types import cast_to_float
from planegeom.tolerance import feq

__all__ = [
    "EPSILON_KEY",
    "TOLERANCE_SECTION_KEY",
    "ToleranceSettings",
    "read_configuration_file",
    "read_tolerance_configuration",
    ]

EPSILON_KEY = "epsilon"
TOLERANCE_SECTION_KEY = "tolerance"


def _is_positive_finite(_, attribute: attrs.Attribute, value: float) -> None:
    if not (math.isfinite(value) and value > 0):
        raise ValueError(f"Value for {attribute.name} must be positive and finite, but got {value}")


@attrs.define(frozen=True, kw_only=True)
class ToleranceSettings:
    """Caller-chosen tolerance, applied by every operation which compares values within epsilon"""
    epsilon = attrs.field(default=EPSILON, validator=[attrs.validators.instance_of(float), _is_positive_finite]) # type: float

    def feq(self, a: float, b: float) -> bool:
        return feq(a, b, eps=self.epsilon)

    def points_equal(self, a: PlanarAlgebra, b: PlanarAlgebra) -> bool:
        return a.equals(b, eps=self.epsilon)

    def unit_vector(self, p: Point) -> Point:
        return p.unit_vector(eps=self.epsilon)

    def distance_to_segment(self, p: Point, a: PlanarAlgebra, b: PlanarAlgebra) -> float:
        return p.distance_to_segment(a, b, eps=self.epsilon)

    def square_distance_to_segment(self, p: Point, a: PlanarAlgebra, b: PlanarAlgebra) -> float:
        return p.square_distance_to_segment(a, b, eps=self.epsilon)


def read_tolerance_configuration(conf_data: Mapping[str, object]) -> Result[ToleranceSettings, ConfigurationValueError]:
    """Get the tolerance settings from parsed configuration data, with defaults for whatever's absent."""
    match conf_data.get(TOLERANCE_SECTION_KEY):
        case None:
            logging.debug("No tolerance section ('%s') in config data; using defaults", TOLERANCE_SECTION_KEY)
            return Result.Ok(ToleranceSettings())
        case dict(section):
            return Option.of_optional(section.get(EPSILON_KEY))\
                .map(cast_to_float)\
                .default_value(Result.Ok(EPSILON))\
                .bind(_build_tolerance_settings)\
                .map_error(ConfigurationValueError)
        case obj:
            return Result.Error(ConfigurationValueError(
                f"Tolerance section ('{TOLERANCE_SECTION_KEY}') isn't a mapping, but {type(obj).__name__}"
            ))


def read_configuration_file(config_file: str | Path) -> Mapping[str, object]:
    """Parse a planegeom configuration file from YAML."""
    logging.info("Reading planegeom configuration file: %s", config_file)
    with open(config_file, "r") as fh:
        data = yaml.safe_load(fh)
    match data:
        case None:
            return {}
        case dict():
            return data
        case _:
            raise ConfigurationValueError(f"Configuration file content isn't a mapping, but {type(data).__name__}: {config_file}")


def _build_tolerance_settings(epsilon: float) -> Result[ToleranceSettings, str]:
    try:
        settings = ToleranceSettings(epsilon=epsilon)
    except (TypeError, ValueError) as e:
        return Result.Error(f"Illegal tolerance ({EPSILON_KEY}={epsilon}): {e}")
    return Result.Ok(settings)
