"""
streamlit run networth_dashboard.py
"""


import streamlit as st
import plotly.graph_objects as go

from networth import HORIZON, translucent, whole_dollars
from networth_config import Config
from networth_logging import get_logger
from networth_store import Mode, ScenarioStore

logger = get_logger(__name__)

st.set_page_config(page_title="Net Worth Projection", page_icon="📈", layout="wide")

# Input ranges for the widgets; the store trusts values inside these bounds
START_AGE_RANGE = (18, 70)
MAX_END_AGE = HORIZON
RATE_RANGE = (1.0, 15.0)
RATE_STEP = 0.1
CONTRIBUTION_STEP = 1000.0

MODE_LABELS = {Mode.SINGLE: "Single", Mode.QUADRANT: "Four Quadrants"}


def get_store(mode: Mode) -> ScenarioStore:
    """One store per mode per browser session, created from seed defaults."""
    if 'stores' not in st.session_state:
        st.session_state.stores = {}
    if mode not in st.session_state.stores:
        st.session_state.stores[mode] = ScenarioStore.initialize(mode)
        logger.info("New %s session", mode.value)
    return st.session_state.stores[mode]


def widget_key(mode: Mode, name: str, attr: str) -> str:
    return f"{mode.value}_{name}_{attr}"


def sync_widgets(mode: Mode, scenario, overwrite=False):
    """Mirror a scenario's parameters into its widgets' session state."""
    p = scenario.parameters
    for attr, value in [('start_age', p.start_age), ('end_age', p.end_age),
                        ('annual_contribution', float(p.annual_contribution)),
                        ('interest_rate', float(p.interest_rate))]:
        key = widget_key(mode, scenario.name, attr)
        if overwrite or key not in st.session_state:
            st.session_state[key] = value


def on_edit(mode: Mode, name: str, attr: str):
    store = get_store(mode)
    scenario = store.update_parameter(name, attr, st.session_state[widget_key(mode, name, attr)])
    # start age may have pushed end age up
    sync_widgets(mode, scenario, overwrite=True)


def render_inputs(mode: Mode, scenario):
    name = scenario.name
    st.slider(
        "Starting Age", min_value=START_AGE_RANGE[0], max_value=START_AGE_RANGE[1], step=1,
        key=widget_key(mode, name, 'start_age'),
        on_change=on_edit, args=(mode, name, 'start_age')
    )
    st.slider(
        "Ending Age", min_value=scenario.parameters.start_age, max_value=MAX_END_AGE, step=1,
        key=widget_key(mode, name, 'end_age'),
        on_change=on_edit, args=(mode, name, 'end_age')
    )
    st.number_input(
        "Annual Contribution ($)", min_value=0.0, step=CONTRIBUTION_STEP, format="%.0f",
        key=widget_key(mode, name, 'annual_contribution'),
        on_change=on_edit, args=(mode, name, 'annual_contribution')
    )
    st.slider(
        "Interest Rate (%)", min_value=RATE_RANGE[0], max_value=RATE_RANGE[1], step=RATE_STEP,
        format="%.1f%%",
        key=widget_key(mode, name, 'interest_rate'),
        on_change=on_edit, args=(mode, name, 'interest_rate')
    )


def net_worth_figure(series_by_name, colors, height=400, fill=True):
    fig = go.Figure()
    for name, series in series_by_name.items():
        color = colors.get(name)
        fig.add_trace(go.Scatter(
            x=series.ages, y=series.values,
            mode='lines', line=dict(color=color, width=3 if fill else 2),
            fill='tozeroy' if fill else None,
            fillcolor=translucent(color) if fill else None,
            name=name,
            hovertemplate=f'{name}: $%{{y:,.0f}}<extra></extra>'
        ))
    fig.update_layout(
        xaxis_title="Age",
        yaxis_title="Net Worth ($)",
        yaxis=dict(tickformat='$,.0f', rangemode='tozero'),
        hovermode='x unified',
        height=height,
        margin=dict(t=30, b=40),
        legend=dict(orientation='h', yanchor='bottom', y=1.02),
    )
    return fig


def render_summary(scenario, columns=True):
    summary = scenario.summary
    items = [
        ("Years of Contributions", f"{summary.years_of_contribution} years"),
        ("Total Contributions", whole_dollars(summary.total_contributions)),
        (f"Final Net Worth (Age {HORIZON})", whole_dollars(summary.final_net_worth)),
        ("Growth from Interest", whole_dollars(summary.growth_from_interest)),
    ]
    if columns:
        for col, (label, value) in zip(st.columns(len(items)), items):
            with col:
                st.metric(label, value)
    else:
        for label, value in items:
            st.metric(label, value)


# =============================================================================
# SIDEBAR: Mode
# =============================================================================
try:
    default_mode = Mode.parse(Config.DEFAULT_MODE)
except ValueError as e:
    logger.warning("%s; falling back to single mode", e)
    default_mode = Mode.SINGLE

with st.sidebar:
    st.header("View")
    mode = st.radio(
        "Mode", list(MODE_LABELS), index=list(MODE_LABELS).index(default_mode),
        format_func=MODE_LABELS.get,
        help="Four Quadrants compares four independently editable scenarios"
    )
    if st.button("Reset to defaults"):
        st.session_state.get("stores", {}).pop(mode, None)
        for key in [k for k in st.session_state if k.startswith(f"{mode.value}_")]:
            del st.session_state[key]
        st.rerun()

store = get_store(mode)
for scenario in store:
    sync_widgets(mode, scenario)

# =============================================================================
# SINGLE SCENARIO
# =============================================================================
if mode is Mode.SINGLE:
    st.title("Net Worth Projection Calculator")
    scenario = next(iter(store))

    col1, col2 = st.columns([1, 2])
    with col1:
        st.subheader("Calculator Inputs")
        render_inputs(mode, scenario)
    with col2:
        st.subheader("Net Worth Projection Over Time")
        fig = net_worth_figure({scenario.name: scenario.series}, {scenario.name: scenario.color})
        st.plotly_chart(fig, width="stretch")

    st.markdown("---")
    st.subheader("Summary")
    render_summary(scenario)

# =============================================================================
# FOUR QUADRANTS
# =============================================================================
else:
    st.title("Net Worth Projection Calculator - Four Quadrants")
    scenarios = list(store)

    for row in (scenarios[:2], scenarios[2:]):
        for col, scenario in zip(st.columns(2), row):
            with col:
                with st.container(border=True):
                    st.subheader(scenario.name)
                    render_inputs(mode, scenario)
                    fig = net_worth_figure({scenario.name: scenario.series},
                                           {scenario.name: scenario.color}, height=280)
                    st.plotly_chart(fig, width="stretch", key=f"chart_{scenario.name}")

    st.markdown("---")
    st.subheader("Combined Net Worth Projection")
    colors = {s.name: s.color for s in scenarios}
    fig = net_worth_figure(store.combined_series(), colors, height=450, fill=False)
    st.plotly_chart(fig, width="stretch")

    st.subheader("Summary")
    for col, scenario in zip(st.columns(len(scenarios)), scenarios):
        with col:
            st.markdown(f"**{scenario.name}**")
            render_summary(scenario, columns=False)
