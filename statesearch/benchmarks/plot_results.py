# statesearch/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def load_rows(results_json: Path) -> List[dict]:
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: statesearch-bench --out {results_json}")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _label(r: dict) -> str:
    return f"{r['algo']} / {r['problem']}" if r.get("problem") else r["algo"]

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    labels = [_label(r) for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(labels)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows) -> str:
    lines = [
        "| Algorithm | Problem | Cost | Path Len | Nodes Expanded | Max Frontier | Time (s) |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {r.get('problem', '')} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('path_len'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('max_frontier'))} | {fnum(r.get('time_s'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()

def render(rows: List[dict], out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)

    charts = [
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
        ("time_s", "Wall Time (lower is better)", "seconds"),
        ("cost", "Path Cost (lower is better)", "cost"),
    ]
    for metric, title, ylabel in charts:
        fig, ax = plt.subplots(figsize=(7, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        png = out_dir / f"{metric}.png"
        png.write_bytes(fig_to_png_bytes(fig))
        written.append(png)
    return written

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot statesearch benchmark results.")
    p.add_argument("results", type=Path, nargs="?", default=Path("results.json"))
    p.add_argument("--out-dir", type=Path, default=None)
    args = p.parse_args(argv)

    rows = load_rows(args.results)
    for path in render(rows, args.out_dir or args.results.parent):
        print(f"Wrote {path}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
