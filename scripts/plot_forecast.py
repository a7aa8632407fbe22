#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from moolah.frame import forecast_frame
from moolah.records import load_scenario
from moolah.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Plot a balance forecast with its uncertainty band")
    p.add_argument("--scenario", default="data/example_scenario.json", help="JSON file with start, initial_value and deltas")
    p.add_argument("--days", type=int, default=settings.horizon_days)
    p.add_argument("--out", default=str(Path(settings.report_dir) / "visuals" / "forecast.png"))
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    prediction = load_scenario(args.scenario)
    d = forecast_frame(prediction.predict_days(args.days), fill_days=True)

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.fill_between(d["date"], d["min_value"], d["max_value"], step="post", color="#457b9d", alpha=0.25, label="Range")
    ax.step(d["date"], d["value"], where="post", linewidth=2, label="Expected")
    ax.axhline(0.0, color="#d62828", linewidth=1, alpha=0.6)
    ax.set_title(prediction.name or "Balance forecast")
    ax.set_ylabel("Balance")
    ax.set_xlabel("Date")
    ax.legend()
    ax.grid(alpha=0.2)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out, dpi=160)
    plt.close(fig)
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
