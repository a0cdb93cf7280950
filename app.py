import logging
import warnings

import streamlit as st

from core import config
from core.forecast import forecast
from core.models import UNREACHABLE, PlanStatus, ValidationFailure
from core.projector import analyse
from utils.progress_ring import progress_ring
from utils.report import forecast_frame, summary_frame


warnings.filterwarnings("ignore", category=DeprecationWarning)
logging.basicConfig(level=config.LOG_LEVEL)

st.set_page_config(
    page_title="AttendWise Planner",
    page_icon="😎",
    layout="wide"
)

st.title("AttendWise Planner")
st.caption("📅 Project your end-of-term attendance before it's too late")


FIELDS = {
    "attended": "Classes Attended",
    "conducted": "Classes Conducted",
    "remaining": "Remaining Classes",
    "target": "Target Attendance (%)",
    "planned": "Planned Attendance (What-If)",
}

# -----------------------------
# Session state
# -----------------------------

if "result" not in st.session_state:
    st.session_state.result = None
    st.session_state.show_logic = False
    st.session_state.target = f"{config.DEFAULT_TARGET:g}"


def run_analysis():
    raw = {field: st.session_state.get(field, "") for field in FIELDS}
    st.session_state.result = analyse(raw)


def reset_all():
    for field in FIELDS:
        st.session_state[field] = ""
    st.session_state.result = None
    st.session_state.show_logic = False


def toggle_logic():
    st.session_state.show_logic = not st.session_state.show_logic


def metric_card(title, value):
    st.markdown(
        f"""
        <div style="
            background:#111;
            padding:14px;
            border-radius:12px;
            margin-bottom:10px;
        ">
            <div style="opacity:0.8">{title}</div>
            <div style="font-size:20px;font-weight:600">{value}</div>
        </div>
        """,
        unsafe_allow_html=True
    )


inputs, outcome = st.columns(2)

# -----------------------------
# INPUTS
# -----------------------------

with inputs:
    st.subheader("Inputs")

    for field, label in FIELDS.items():
        st.text_input(label, key=field)

    if config.REQUIRE_PLANNED:
        st.caption("All five fields are required.")

    btn1, btn2 = st.columns(2)
    with btn1:
        st.button("Run Analysis", type="primary", on_click=run_analysis)
    with btn2:
        st.button("Reset", on_click=reset_all)

# -----------------------------
# OUTCOME
# -----------------------------

with outcome:
    st.subheader("Outcome")

    result = st.session_state.result

    if isinstance(result, ValidationFailure):
        st.warning(result.message)

    elif result is not None:
        view = result.display()
        plan = result.what_if

        if plan is not None:
            st.image(progress_ring(plan.final_percentage, plan.status), width=140)

        m1, m2 = st.columns(2)
        with m1:
            metric_card("Current", f"{view['current']:.2f}%")
            metric_card("Best Case", f"{view['best_case']:.2f}%")
        with m2:
            if plan is not None:
                metric_card("Final (What-If)", f"{view['final']:.2f}%")
            metric_card("Worst Case", f"{view['worst_case']:.2f}%")

        if result.minimum_additional_classes == UNREACHABLE:
            st.error("Target is unreachable this term, even if you attend every remaining class.")
        else:
            st.info(
                f"Attend at least {result.minimum_additional_classes} more classes to reach the target "
                f"· you can still skip {result.bunk_budget}"
            )

        if plan is not None:
            if plan.status is PlanStatus.SAFE:
                st.success(f"Status: {plan.status.value}")
            elif plan.status is PlanStatus.RISK:
                st.warning(f"Status: {plan.status.value}")
            else:
                st.error(f"Status: {plan.status.value}")
            st.write(plan.message)

        with st.expander("Summary table"):
            st.dataframe(summary_frame(result), use_container_width=True, hide_index=True)

    st.button(
        "Hide Logic" if st.session_state.show_logic else "Show Calculation Logic",
        on_click=toggle_logic
    )

    if st.session_state.show_logic:
        for line in config.EXPLANATION:
            st.caption(line)

# -----------------------------
# Term Forecast
# -----------------------------

result = st.session_state.result

if result is not None and not isinstance(result, ValidationFailure):
    st.subheader("📈 Term Forecast")

    src = result.source

    if src.remaining == 0:
        st.info("No future classes left this term 📭")
    else:
        data = forecast(src.attended, src.conducted, src.remaining, src.planned)

        st.line_chart(forecast_frame(data))
        st.caption(f"⚠️ Target: {src.target:g}%")

        if len(data["class"]) < src.remaining:
            st.caption(f"Showing {len(data['class'])} of {src.remaining} classes")
