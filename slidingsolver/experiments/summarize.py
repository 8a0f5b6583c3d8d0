#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import pandas as pd

METRICS = ["moves", "expanded", "generated", "duplicates", "time_sec"]
KEYS = ["heuristic", "tie_break", "n", "depth"]


def load_many(paths, keep_all: bool = False) -> pd.DataFrame:
    dfs = []
    for fn in paths:
        df = pd.read_csv(fn)
        df["__src__"] = os.path.basename(str(fn))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "time_sec"})

    # Keep clean rows only
    if not keep_all and "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]

    for c in METRICS + ["n", "depth", "seed"]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and std of each metric per (heuristic, tie_break, n, depth)."""
    keys = [k for k in KEYS if k in df.columns]
    metrics = [m for m in METRICS if m in df.columns]
    if df.empty or not keys or not metrics:
        return pd.DataFrame()
    table = df.groupby(keys)[metrics].agg(["mean", "std"])
    table.columns = [f"{m}_{stat}" for m, stat in table.columns]
    table["runs"] = df.groupby(keys).size()
    return table.reset_index()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean/std per heuristic, tie-break and depth).")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--all", action="store_true", help="Include timeout/budget/exhausted rows")
    ap.add_argument("--out", type=Path, default=None, help="Also write the summary table to this CSV")
    args = ap.parse_args(argv)

    df = load_many(args.csv, keep_all=args.all)
    table = summarize(df)
    if table.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return

    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
