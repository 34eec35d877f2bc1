import numpy as np
import time
from dataclasses import dataclass, fields, replace as dc_replace
from tabulate import tabulate

from networth_config import Config

HORIZON = 80           # Years simulated after age 0; the series has HORIZON + 1 points

# Edit events may name fields the way the input widgets do
FIELD_ALIASES = {
    'startAge': 'start_age',
    'endAge': 'end_age',
    'annualContribution': 'annual_contribution',
    'interestRate': 'interest_rate',
}
AGE_FIELDS = ('start_age', 'end_age')

@dataclass(frozen=True)
class ScenarioParameters:
    """Inputs for one projection."""
    start_age: int                  # First year a contribution is made
    end_age: int                    # Last year a contribution is made (inclusive)
    annual_contribution: float      # Added once per year inside [start_age, end_age]
    interest_rate: float            # Percent growth applied to the prior balance each year

    def replace(self, field: str, value) -> "ScenarioParameters":
        return dc_replace(self, **{field_name(field): value})

def field_name(field: str) -> str:
    """Map a widget-style or attribute field name onto a ScenarioParameters attribute.

    Raises ValueError for anything that isn't one of the four parameters.
    """
    name = FIELD_ALIASES.get(field, field)
    if name not in {f.name for f in fields(ScenarioParameters)}:
        raise ValueError(f"Unknown scenario parameter: {field!r}")
    return name

DEFAULT_PARAMETERS = ScenarioParameters(
    start_age=25, end_age=58, annual_contribution=10000, interest_rate=7,
)

QUADRANT_SEEDS = {
    'Shale': ScenarioParameters(start_age=25, end_age=58, annual_contribution=10000, interest_rate=7),
    'Luke': ScenarioParameters(start_age=30, end_age=58, annual_contribution=12000, interest_rate=6.5),
    'Vaughan': ScenarioParameters(start_age=22, end_age=58, annual_contribution=8000, interest_rate=7.5),
    'Jake': ScenarioParameters(start_age=28, end_age=58, annual_contribution=15000, interest_rate=6),
}

SCENARIO_COLORS = {
    'Net Worth': 'rgba(75, 192, 192, 1)',
    'Shale': 'rgba(75, 192, 192, 1)',
    'Luke': 'rgba(255, 99, 132, 1)',
    'Vaughan': 'rgba(255, 205, 86, 1)',
    'Jake': 'rgba(54, 162, 235, 1)',
}
FALLBACK_COLOR = 'rgba(99, 110, 250, 1)'

def translucent(color, alpha=0.2):
    """Fill colour for an opaque rgba(..., 1) line colour; None for anything else."""
    if not color or not color.startswith('rgba(') or not color.endswith(', 1)'):
        return None
    return f"{color[:-len(', 1)')]}, {alpha})"

@dataclass(frozen=True, eq=False)
class ProjectionSeries:
    """Projected net worth for every simulated year, 0 through HORIZON."""
    values: np.ndarray              # (HORIZON + 1,) float64, read-only

    @property
    def ages(self) -> np.ndarray:
        return np.arange(len(self.values))

    @property
    def final(self) -> float:
        return float(self.values[HORIZON])

@dataclass(frozen=True)
class ProjectionSummary:
    """Headline numbers shown under a chart."""
    years_of_contribution: int
    total_contributions: float
    final_net_worth: float
    growth_from_interest: float

def project(params: ScenarioParameters) -> ProjectionSeries:
    """Project net worth from year 0 to HORIZON.

    Each year the prior balance grows by interest_rate percent, then the
    year's contribution is added if the year falls inside the contribution
    window. A contribution therefore starts compounding the following year.

    Inputs are not validated: an inverted window simply adds nothing and
    NaN/inf propagate through the balance.
    """
    growth = 1 + params.interest_rate / 100
    values = np.zeros(HORIZON + 1)
    balance = 0.0
    for year in range(1, HORIZON + 1):
        balance *= growth
        if params.start_age <= year <= params.end_age:
            balance += params.annual_contribution
        values[year] = balance
    values.setflags(write=False)
    return ProjectionSeries(values=values)

def summarize(params: ScenarioParameters, series: ProjectionSeries) -> ProjectionSummary:
    years = params.end_age - params.start_age + 1
    total = years * params.annual_contribution
    final = series.final
    return ProjectionSummary(
        years_of_contribution=years,
        total_contributions=total,
        final_net_worth=final,
        growth_from_interest=final - total,
    )

def compact_dollars(value: float) -> str:
    """Axis tick label: $1.2M, $45.0K, or the plain amount below a thousand."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.1f}K"
    value = float(value)
    return f"${int(value)}" if value.is_integer() else f"${value}"

def whole_dollars(value: float) -> str:
    """Currency with thousands separators and no cents, e.g. $1,234,567."""
    if value < 0:
        return f"-${-value:,.0f}"
    return f"${value:,.0f}"

def summary_rows(scenarios):
    """Rows for the text report, one per (name, parameters) pair."""
    rows = []
    for name, params in scenarios:
        summary = summarize(params, project(params))
        rows.append([
            name,
            f"{params.start_age}-{params.end_age}",
            whole_dollars(params.annual_contribution),
            f"{params.interest_rate:g}%",
            summary.years_of_contribution,
            whole_dollars(summary.total_contributions),
            whole_dollars(summary.final_net_worth),
            whole_dollars(summary.growth_from_interest),
        ])
    return rows

SUMMARY_HEADERS = ["Scenario", "Ages", "Per Year", "Rate", "Years",
                   "Contributed", f"Age {HORIZON}", "Interest"]

if __name__ == "__main__":
    t0 = time.time()

    print("=" * 95)
    print(f"NET WORTH PROJECTION: {HORIZON}-YEAR HORIZON")
    print("=" * 95)
    print()

    scenarios = [('Default', DEFAULT_PARAMETERS)] + list(QUADRANT_SEEDS.items())
    print(tabulate(summary_rows(scenarios), headers=SUMMARY_HEADERS,
                   tablefmt=Config.TABLE_FMT, stralign="right"))
    print()

    # Milestones every decade for the quadrant seeds
    milestones = list(range(10, HORIZON + 1, 10))
    table_data = []
    for name, params in QUADRANT_SEEDS.items():
        series = project(params)
        table_data.append([name] + [compact_dollars(series.values[a]) for a in milestones])
    headers = ["Scenario"] + [f"age {a}" for a in milestones]
    print(tabulate(table_data, headers=headers, tablefmt=Config.TABLE_FMT, stralign="right"))
    print()

    elapsed = time.time() - t0
    print(f"Done in {elapsed:.2f}s")
