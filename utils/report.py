import pandas as pd

from core.models import UNREACHABLE

SERIES_LABELS = {
    "attend_all": "Attend All",
    "plan": "Follow Plan",
    "bunk_all": "Bunk All",
}


def summary_frame(result):
    """Metric/Value table for one projection, percentages rounded for display."""
    view = result.display()

    needed = view["minimum_additional_classes"]
    if needed == UNREACHABLE:
        needed = "Unreachable"

    rows = [
        ("Current", f"{view['current']:.2f}%"),
        ("Best Case", f"{view['best_case']:.2f}%"),
        ("Worst Case", f"{view['worst_case']:.2f}%"),
        ("Classes Needed", str(needed)),
        ("Bunk Budget", "—" if view["bunk_budget"] is None else str(view["bunk_budget"])),
    ]

    if "final" in view:
        rows.append(("Final (What-If)", f"{view['final']:.2f}%"))
        rows.append(("Status", view["status"]))

    return pd.DataFrame(rows, columns=["Metric", "Value"])


def forecast_frame(data):
    columns = {
        SERIES_LABELS[key]: data[key]
        for key in ("attend_all", "plan", "bunk_all")
        if key in data
    }

    df = pd.DataFrame(columns, index=pd.Index(data["class"], name="Class"))
    return df
