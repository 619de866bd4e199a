"""
Balanced Integer Set Demo — Tree shapes, height growth, and churn behaviour.

Generates:
- viz/*.png — Individual visualization files
- viz/01_rotation_sequence.dot — Graphviz source of the final example tree
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from balanced_int_set import BalancedIntSet
from graph_export import write_dot
from tree_check import HEIGHT_BOUND_FACTOR, check_consistent, check_with_set

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

BALANCE_COLORS = {-1: "#3498db", 0: "#ecf0f1", 1: "#e74c3c"}
EDGE_COLORS = {0: "#2c3e50", 1: "#7f8c8d"}

MAX_N = 2000
CHURN_STEPS = 5000
CHURN_KEY_RANGE = 100


def layout(tree):
    """x = in-order rank, y = -depth for every node reachable from the root."""
    positions = {}
    stack = []
    node = tree.root
    depth = 0
    rank = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.child[0]
            depth += 1
        node, depth = stack.pop()
        positions[id(node)] = (rank, -depth)
        rank += 1
        node = node.child[1]
        depth += 1
    return positions


def draw_tree(ax, tree, title):
    positions = layout(tree)
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        x0, y0 = positions[id(node)]
        for i, child in enumerate(node.child):
            if child is None:
                continue
            x1, y1 = positions[id(child)]
            ax.plot([x0, x1], [y0, y1], color=EDGE_COLORS[i], linewidth=1.5, zorder=1)
            stack.append(child)

    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        x, y = positions[id(node)]
        ax.scatter([x], [y], s=700, color=BALANCE_COLORS[node.balance],
                   edgecolors="#2c3e50", linewidths=1.5, zorder=2)
        ax.text(x, y, f"{node.value}\n{node.balance:+d}", ha="center", va="center",
                fontsize=8, zorder=3)
        stack.extend(c for c in node.child if c is not None)

    ax.set_title(title, fontsize=10)
    ax.set_xlim(-1, max(len(tree), 1))
    ax.set_ylim(-max(tree.height(), 1), 1)
    ax.axis("off")


def example_1_rotation_sequence():
    """Insert 10, 20, 30, 40, 50, 25 and draw the tree after each step."""
    print("=" * 60)
    print("Example 1: Rotation Sequence (10, 20, 30, 40, 50, 25)")
    print("=" * 60)

    keys = [10, 20, 30, 40, 50, 25]
    tree = BalancedIntSet()
    fig, axes = plt.subplots(2, 3, figsize=(14, 8))

    for ax, k in zip(axes.flat, keys):
        tree.insert(k)
        check_consistent(tree)
        draw_tree(ax, tree, f"after insert({k})  height={tree.height()}")
        print(f"  insert({k:>2}) -> {tree.in_order()}  root={tree.root.value}")

    fig.suptitle("AVL rotations during insertion (labels: value / balance)", fontsize=13)
    fig.tight_layout()
    path = VIZ_DIR / "01_rotation_sequence.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    dot_path = VIZ_DIR / "01_rotation_sequence.dot"
    write_dot(tree, dot_path)
    print(f"  Graphviz source: {dot_path}")

    return [path]


def _heights_for(order):
    tree = BalancedIntSet()
    heights = np.zeros(len(order), dtype=int)
    for i, k in enumerate(order):
        tree.insert(int(k))
        heights[i] = tree.height()
    check_consistent(tree)
    return heights


def example_2_height_growth():
    """Height vs. number of keys for different insertion orders."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth vs. AVL Bound")
    print("=" * 60)

    np.random.seed(SEED)
    n = np.arange(1, MAX_N + 1)
    orders = {
        "ascending": np.arange(MAX_N),
        "descending": np.arange(MAX_N)[::-1],
        "random": np.random.permutation(MAX_N),
    }
    colors = {"ascending": "#e74c3c", "descending": "#27ae60", "random": "#3498db"}

    fig, ax = plt.subplots(figsize=(10, 6))
    for name, order in orders.items():
        heights = _heights_for(order)
        ax.step(n, heights, where="post", label=name, color=colors[name], linewidth=1.5)
        print(f"  {name:<10} final height = {heights[-1]}")

    ax.plot(n, HEIGHT_BOUND_FACTOR * np.log2(n + 2), "k--", linewidth=1.5, label="1.45·log2(n + 2)")
    ax.plot(n, np.log2(n + 1), ":", color="#7f8c8d", label="log2(n + 1) (perfect tree)")
    ax.set_xlabel("number of keys n")
    ax.set_ylabel("tree height")
    ax.set_title("Height stays logarithmic for every insertion order")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "02_height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return [path]


def example_3_deletion_churn():
    """Random insert/delete toggles, checked against a reference set."""
    print("\n" + "=" * 60)
    print("Example 3: Insert/Delete Churn")
    print("=" * 60)

    np.random.seed(SEED)
    tree = BalancedIntSet()
    reference = set()
    sizes = np.zeros(CHURN_STEPS, dtype=int)
    heights = np.zeros(CHURN_STEPS, dtype=int)

    for step, k in enumerate(np.random.randint(0, CHURN_KEY_RANGE, size=CHURN_STEPS)):
        k = int(k)
        if k in reference:
            tree.delete(k)
            reference.discard(k)
        else:
            tree.insert(k)
            reference.add(k)
        sizes[step] = len(tree)
        heights[step] = tree.height()

    check_consistent(tree)
    check_with_set(tree, reference)
    print(f"  steps: {CHURN_STEPS}, final size: {sizes[-1]}, max height: {heights.max()}")

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    ax1.plot(sizes, color="#3498db", linewidth=1)
    ax1.set_ylabel("size")
    ax1.set_title("Set size during churn")
    ax1.grid(True, alpha=0.3)

    ax2.plot(heights, color="#e74c3c", linewidth=1, label="height")
    ax2.plot(HEIGHT_BOUND_FACTOR * np.log2(sizes + 2), "k--", linewidth=1, label="AVL bound")
    ax2.set_xlabel("operation")
    ax2.set_ylabel("height")
    ax2.set_title("Height during churn")
    ax2.legend()
    ax2.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "03_deletion_churn.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return [path]


def example_4_balance_distribution():
    """Share of nodes with balance -1, 0, +1 in randomly built trees."""
    print("\n" + "=" * 60)
    print("Example 4: Balance Factor Distribution")
    print("=" * 60)

    np.random.seed(SEED)
    sizes = [15, 100, 1000]
    shares = np.zeros((len(sizes), 3))

    for row, size in enumerate(sizes):
        tree = BalancedIntSet()
        for k in np.random.permutation(size):
            tree.insert(int(k))
        counts = {-1: 0, 0: 0, 1: 0}
        stack = [tree.root]
        while stack:
            node = stack.pop()
            counts[node.balance] += 1
            stack.extend(c for c in node.child if c is not None)
        shares[row] = [counts[-1] / size, counts[0] / size, counts[1] / size]
        print(f"  n={size:>5}: -1: {shares[row, 0]:.2%}  0: {shares[row, 1]:.2%}  +1: {shares[row, 2]:.2%}")

    fig, ax = plt.subplots(figsize=(9, 6))
    width = 0.25
    x = np.arange(len(sizes))
    for i, balance in enumerate((-1, 0, 1)):
        ax.bar(x + (i - 1) * width, shares[:, i], width, label=f"balance {balance:+d}",
               color=BALANCE_COLORS[balance], edgecolor="#2c3e50")
    ax.set_xticks(x)
    ax.set_xticklabels([f"n = {s}" for s in sizes])
    ax.set_ylabel("share of nodes")
    ax.set_title("Balance factors in randomly built trees")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "04_balance_distribution.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return [path]


def generate_pdf_report(all_figures):
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Balanced Integer Set (AVL)", ha="center", fontsize=24, fontweight="bold")
        fig.text(0.5, 0.5, "Iterative insertion and deletion without parent links",
                 ha="center", fontsize=14)
        fig.text(0.5, 0.4, f"Seed: {SEED}", ha="center", fontsize=11, color="#7f8c8d")
        pdf.savefig(fig)
        plt.close(fig)

        titles = [
            "Example 1: Rotation Sequence",
            "Example 2: Height Growth vs. AVL Bound",
            "Example 3: Insert/Delete Churn",
            "Example 4: Balance Factor Distribution",
        ]

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  BALANCED INTEGER SET — DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_rotation_sequence())
    all_figures.extend(example_2_height_growth())
    all_figures.extend(example_3_deletion_churn())
    all_figures.extend(example_4_balance_distribution())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
