"""
Solar Site Screener
Streamlit application for a quick solar feasibility check of a business site.
"""

import logging
from functools import partial

import streamlit as st
import plotly.graph_objects as go

# Import screener modules
from screener.business_data import (
    BUSINESS_TYPES,
    UTILITY_PROVIDERS,
    TARIFF_PLANS,
    DEFAULT_UTILITY,
    DEFAULT_TARIFF,
    usage_intensity_table
)
from screener.config import (
    OFFSET_RATE_PER_KWH,
    INSTALLED_COST_PER_KW,
    get_log_level,
    get_request_timeout,
    get_solar_api_url
)
from screener.estimation_task import EstimationScheduler
from screener.feasibility_calcs import (
    compute_feasibility,
    estimate_building_size
)
from screener.session_state import ScreenerState, run_feasibility_scan

# Page configuration
st.set_page_config(
    page_title="Solar Site Screener",
    page_icon="☀️",
    layout="centered",
    initial_sidebar_state="collapsed"
)

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
log = logging.getLogger("screener.app")


def initialize_session_state():
    """Initialize session state variables."""
    if 'screener' not in st.session_state:
        st.session_state.screener = ScreenerState()

    if 'scheduler' not in st.session_state:
        # Resolve settings here; the worker thread has no script context
        estimate = partial(
            estimate_building_size,
            api_url=get_solar_api_url(),
            timeout=get_request_timeout()
        )
        st.session_state.scheduler = EstimationScheduler(
            st.session_state.screener, estimate=estimate
        )


def render_estimate_card(state: ScreenerState):
    """Show the estimated building size and monthly usage."""
    if state.estimation is None or state.is_estimating:
        return

    with st.container(border=True):
        col1, col2 = st.columns(2)
        col1.metric(
            "📍 Estimated Building Size",
            f"{state.estimation.roof_area_sqft:,} ft²"
        )
        col2.metric(
            "🧮 Estimated Monthly Usage",
            f"{state.estimation.monthly_usage_kwh:,} kWh"
        )


def render_form(state: ScreenerState, scheduler: EstimationScheduler):
    """Address, business type, utility and tariff inputs."""
    state.address = st.text_input(
        "Business Address",
        key="address",
        placeholder="123 Main St, City, State"
    )

    state.business_type = st.selectbox(
        "Business Type",
        options=BUSINESS_TYPES,
        index=None,
        key="business_type",
        placeholder="Select business type"
    )

    # Re-estimate whenever both inputs are present and have changed
    future = scheduler.submit(state.address, state.business_type)
    if future is not None and not future.done():
        with st.spinner("Estimating building size from Google Maps..."):
            try:
                future.result()
            except Exception:
                st.warning("Could not estimate building size.")

    render_estimate_card(state)

    utility_options = list(UTILITY_PROVIDERS.keys())
    state.utility = st.selectbox(
        "Utility Provider",
        options=utility_options,
        index=utility_options.index(DEFAULT_UTILITY),
        key="utility",
        format_func=lambda x: UTILITY_PROVIDERS[x]
    )

    state.tariff = st.selectbox(
        "Tariff Plan",
        options=TARIFF_PLANS,
        index=TARIFF_PLANS.index(DEFAULT_TARIFF),
        key="tariff"
    )


def render_submit(state: ScreenerState):
    """Run Feasibility Scan button."""
    if st.button(
        "Run Feasibility Scan",
        type="primary",
        width="stretch",
        disabled=not state.can_submit
    ):
        if not state.address:
            st.error("Please enter an address.")
            return

        scan = partial(
            compute_feasibility,
            api_url=get_solar_api_url(),
            timeout=get_request_timeout()
        )
        with st.spinner("Processing..."):
            result = run_feasibility_scan(state, state.address, compute=scan)

        if result is None:
            st.warning(f"Feasibility scan failed: {state.last_error}")


def render_results(state: ScreenerState):
    """Results panel for the last completed scan."""
    results = state.results
    if results is None:
        return

    st.divider()
    st.subheader("✅ Solar Feasibility Results")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Estimated Roof Size", f"{results.roof_size:,} ft²")
        st.metric("Estimated Monthly Usage", f"{results.monthly_usage:,} kWh")
        st.metric("System Size Needed", f"{results.system_size:g} kW")

    with col2:
        st.metric("Estimated Annual Savings", f"${results.annual_savings:,}")
        st.metric("Estimated Build Cost", f"${results.build_cost:,}")
        st.metric("Estimated ROI", f"{results.roi}%")

    if not results.roi_is_finite:
        st.caption("ROI is undefined because the estimated build cost is $0.")

    fig = go.Figure(go.Bar(
        x=["Annual Savings", "Build Cost"],
        y=[results.annual_savings, results.build_cost],
        marker_color=["#2563eb", "#16a34a"],
        text=[f"${results.annual_savings:,}", f"${results.build_cost:,}"],
        textposition="auto"
    ))

    fig.update_layout(
        yaxis_title="USD",
        margin=dict(l=0, r=0, t=10, b=0),
        height=300
    )

    st.plotly_chart(fig, width="stretch")


def main():
    """Main application entry point."""

    # Initialize session state
    initialize_session_state()
    state = st.session_state.screener
    scheduler = st.session_state.scheduler

    # Sidebar
    with st.sidebar:
        st.title("☀️ Site Screener")
        st.divider()

        st.markdown("### About")
        st.markdown(f"""
        A rough first look at rooftop solar for a business site:
        - Roof area from the address
        - Monthly usage from the business type
        - Savings at ${OFFSET_RATE_PER_KWH:.2f}/kWh offset
        - Build cost at ${INSTALLED_COST_PER_KW / 1000:.2f}/W installed
        """)

        with st.expander("Energy-use intensity by business type"):
            st.dataframe(usage_intensity_table(), hide_index=True)

    # Main content
    st.title("☀️ Solar Site Screener")
    st.caption("Enter property details to check solar feasibility")

    render_form(state, scheduler)
    render_submit(state)
    render_results(state)


if __name__ == "__main__":
    main()
