#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from moolah.frame import forecast_frame
from moolah.records import load_scenario
from moolah.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Forecast an account balance from a scenario file")
    p.add_argument("--scenario", default="data/example_scenario.json", help="JSON file with start, initial_value and deltas")
    p.add_argument("--end", type=date.fromisoformat, default=None, help="Last forecast date (YYYY-MM-DD)")
    p.add_argument("--days", type=int, default=settings.horizon_days, help="Horizon in days when --end is not given")
    p.add_argument("--out", default=None, help="Write a CSV here instead of printing JSON")
    p.add_argument("--fill-days", action="store_true", help="Emit a row for every calendar day")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    prediction = load_scenario(args.scenario)
    states = prediction.predict(args.end) if args.end else prediction.predict_days(args.days)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df = forecast_frame(states, fill_days=args.fill_days)
        df.to_csv(out_path, index=False)
        print(f"Wrote {len(df)} rows to {out_path}")
        return

    output = {
        "name": prediction.name,
        "start": prediction.start.isoformat(),
        "initial_value": prediction.initial_value,
        "states": [
            {
                "date": day.isoformat(),
                "value": state.value,
                "min_value": state.min_value,
                "max_value": state.max_value,
                "impactful_deltas": sorted(state.impactful_deltas),
            }
            for day, state in states.items()
        ],
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
