"""
Scenario store: owns the editable scenarios and keeps each one's series in
step with its parameters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List

from networth import (
    AGE_FIELDS, DEFAULT_PARAMETERS, FALLBACK_COLOR, QUADRANT_SEEDS, SCENARIO_COLORS,
    ProjectionSeries, ProjectionSummary, ScenarioParameters, field_name, project, summarize,
)
from networth_logging import get_logger

logger = get_logger(__name__)

SINGLE_SCENARIO = 'Net Worth'


class Mode(Enum):
    SINGLE = 'single'
    QUADRANT = 'quadrant'

    @classmethod
    def parse(cls, text: str) -> "Mode":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown mode {text!r}; expected 'single' or 'quadrant'") from None


def seed_parameters(mode: Mode) -> Dict[str, ScenarioParameters]:
    """Starting parameters for each scenario, in display order."""
    if mode is Mode.SINGLE:
        return {SINGLE_SCENARIO: DEFAULT_PARAMETERS}
    return dict(QUADRANT_SEEDS)


@dataclass
class Scenario:
    """A named projection whose series always matches its parameters."""
    name: str
    parameters: ScenarioParameters
    series: ProjectionSeries
    color: str = FALLBACK_COLOR

    @classmethod
    def create(cls, name: str, parameters: ScenarioParameters) -> "Scenario":
        return cls(
            name=name,
            parameters=parameters,
            series=project(parameters),
            color=SCENARIO_COLORS.get(name, FALLBACK_COLOR),
        )

    @property
    def summary(self) -> ProjectionSummary:
        return summarize(self.parameters, self.series)


def combined_series(scenarios: Iterable[Scenario]) -> Dict[str, ProjectionSeries]:
    """Collect each scenario's series under its name for an overlay chart."""
    return {scenario.name: scenario.series for scenario in scenarios}


class ScenarioStore:
    """One (single mode) or four (quadrant mode) scenarios keyed by name.

    update_parameter is the only place a series is recomputed. Edits are
    expected one at a time from a single session; the store holds no lock.
    """

    def __init__(self, mode: Mode = Mode.SINGLE):
        self.mode = mode
        self._scenarios: Dict[str, Scenario] = {
            name: Scenario.create(name, params)
            for name, params in seed_parameters(mode).items()
        }
        logger.debug("Initialized %s store with %d scenario(s)", mode.value, len(self._scenarios))

    @classmethod
    def initialize(cls, mode: Mode) -> "ScenarioStore":
        return cls(mode)

    def __getitem__(self, name: str) -> Scenario:
        try:
            return self._scenarios[name]
        except KeyError:
            raise KeyError(f"No scenario named {name!r}") from None

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios.values())

    def __len__(self) -> int:
        return len(self._scenarios)

    @property
    def names(self) -> List[str]:
        return list(self._scenarios)

    def update_parameter(self, name: str, field: str, value) -> Scenario:
        """Set one parameter of one scenario and recompute its series.

        Raising start_age past end_age drags end_age up with it. Lowering
        end_age below start_age raises ValueError and leaves the scenario as
        it was; the end age input is bounded below by start_age.
        Ages must be whole numbers; 30.0 is accepted, 30.7 raises ValueError.
        """
        scenario = self[name]
        attr = field_name(field)
        if attr in AGE_FIELDS:
            if not float(value).is_integer():
                raise ValueError(f"{name}: {attr} must be a whole number of years, got {value!r}")
            value = int(value)
        else:
            value = float(value)

        current = scenario.parameters
        params = current.replace(attr, value)
        if attr == 'start_age' and params.end_age < params.start_age:
            logger.info("%s: start age %d passes end age %d, clamping end age",
                        name, params.start_age, params.end_age)
            params = params.replace('end_age', params.start_age)
        elif attr == 'end_age' and params.end_age < params.start_age:
            raise ValueError(
                f"{name}: end age {params.end_age} is below start age {params.start_age}"
            )

        series = project(params)
        scenario.parameters, scenario.series = params, series
        logger.debug("%s: %s -> %r, final balance %.2f", name, attr, value, series.final)
        return scenario

    def derived_summary(self, name: str) -> ProjectionSummary:
        return self[name].summary

    def combined_series(self) -> Dict[str, ProjectionSeries]:
        return combined_series(self)
