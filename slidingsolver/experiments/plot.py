#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from slidingsolver.experiments.summarize import load_many


def plot_metric(ax, df, metric):
    groups = sorted(df.groupby(["heuristic", "tie_break"]), key=lambda kv: kv[0])
    # spread series a little so error bars don't overlap
    offsets = np.linspace(-0.15, 0.15, num=len(groups)) if len(groups) > 1 else np.zeros(1)
    for off, ((heur, tb), g) in zip(offsets, groups):
        by_depth = g.groupby("depth")[metric]
        xs = np.asarray(by_depth.mean().index, dtype=float)
        ys = by_depth.mean().to_numpy()
        es = np.nan_to_num(by_depth.std(ddof=0).to_numpy())
        ax.errorbar(xs + off, ys, yerr=es, marker="o", capsize=3, label=f"{heur} | tie={tb}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    plt.close(fig)

    for metric in ["expanded", "duplicates", "moves"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
