from __future__ import annotations

from collections.abc import Mapping
from datetime import date

import pandas as pd

from .types import PredictionState

COLUMNS = ["date", "value", "min_value", "max_value", "impactful_deltas"]
VALUE_COLUMNS = ["value", "min_value", "max_value"]


def forecast_frame(states: Mapping[date, PredictionState], fill_days: bool = False) -> pd.DataFrame:
    """Tabular view of ``Prediction.predict`` output, one row per state.

    With ``fill_days`` every calendar day between the first and last state gets
    a row; running values carry forward and no deltas are listed on filled days.
    """
    rows = [
        {
            "date": day,
            "value": state.value,
            "min_value": state.min_value,
            "max_value": state.max_value,
            "impactful_deltas": ", ".join(sorted(state.impactful_deltas)),
        }
        for day, state in states.items()
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    if not fill_days or df.empty:
        return df

    all_days = pd.date_range(df["date"].min(), df["date"].max(), freq="D").date
    out = df.set_index("date").reindex(all_days)
    out[VALUE_COLUMNS] = out[VALUE_COLUMNS].ffill()
    out["impactful_deltas"] = out["impactful_deltas"].fillna("")
    return out.rename_axis("date").reset_index()
