"""
AVL Tree Demo — Examples, construction strategies, and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

_src = str(Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from avltree import AVLTree, BuildStrategy, Direction, Traversal

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"


def _layout(tree):
    """Map each key to (x, depth): x is the in-order rank."""
    positions = {}
    rank = 0

    def walk(node, depth):
        nonlocal rank
        if node is None:
            return
        walk(node.left, depth + 1)
        positions[node.key] = (rank, depth)
        rank += 1
        walk(node.right, depth + 1)

    walk(tree._root, 0)
    return positions


def _edges(tree):
    edges = []
    stack = [tree._root] if tree._root is not None else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.key, child.key))
                stack.append(child)
    return edges


def draw_tree(ax, tree, title):
    positions = _layout(tree)
    for parent, child in _edges(tree):
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [-y0, -y1], color="gray", linewidth=1.5, zorder=1)
    for key, (x, y) in positions.items():
        ax.scatter(x, -y, s=600, color="steelblue", edgecolors="black", zorder=2)
        ax.text(x, -y, str(key), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(f"{title} (height {tree.height()})")
    ax.axis("off")


def example_1_range_tree():
    """The [1, 7] tree, its traversals, and a deletion of the root."""
    print("=" * 60)
    print("Example 1: Balanced tree over [1, 7]")
    print("=" * 60)

    tree = AVLTree.from_inclusive_range(1, 7)
    for order in Traversal:
        print(f"  {order.value:>10}: {tree.traverse(order)}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], tree, "from_inclusive_range(1, 7)")

    tree.delete(4)
    print(f"  after delete(4), in-order: {tree.traverse(Traversal.IN_ORDER)}")
    print(f"  balanced: {tree.is_balanced()}")
    draw_tree(axes[1], tree, "after delete(4)")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_range_tree.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_height_growth():
    """Height vs n for sorted inserts, random inserts, and the direct build."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.unique(np.logspace(0, 4, 25).astype(int))
    sorted_heights, random_heights, direct_heights = [], [], []

    for n in sizes:
        n = int(n)
        sorted_tree: AVLTree[int] = AVLTree()
        for key in range(n):
            sorted_tree.add(key)
        random_tree: AVLTree[int] = AVLTree()
        for key in rng.permutation(n):
            random_tree.add(int(key))
        direct_tree = AVLTree.from_inclusive_range(1, n)

        sorted_heights.append(sorted_tree.height())
        random_heights.append(random_tree.height())
        direct_heights.append(direct_tree.height())

    lower = np.ceil(np.log2(sizes + 1))
    upper = 1.44 * np.log2(sizes + 2)

    print(f"  {'n':>6} {'sorted':>7} {'random':>7} {'direct':>7} {'ceil(log2(n+1))':>16}")
    for n, s, r, d, lo in zip(sizes, sorted_heights, random_heights, direct_heights, lower):
        print(f"  {n:>6} {s:>7} {r:>7} {d:>7} {int(lo):>16}")

    assert np.array_equal(np.array(direct_heights), lower)

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(sizes, sorted_heights, "o-", label="Sorted inserts")
    ax.plot(sizes, random_heights, "s-", label="Random inserts")
    ax.plot(sizes, direct_heights, "^-", label="Direct bulk build")
    ax.plot(sizes, lower, "k--", alpha=0.6, label="ceil(log2(n+1)) (minimum)")
    ax.plot(sizes, upper, "r:", alpha=0.6, label="1.44 log2(n+2) (AVL bound)")
    ax.set_xscale("log")
    ax.set_xlabel("Number of keys n")
    ax.set_ylabel("Tree height")
    ax.set_title("AVL Height Growth")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, sizes, direct_heights


def example_3_rotation_counts():
    """Count rotations per insertion order through the on_rotate hook."""
    print("\n" + "=" * 60)
    print("Example 3: Rotations per Insertion Order")
    print("=" * 60)

    n = 1000
    rng = np.random.default_rng(SEED)
    orders = {
        "ascending": np.arange(n),
        "descending": np.arange(n)[::-1],
        "random": rng.permutation(n),
        "median-first": None,
    }

    counts = {}
    for name, keys in orders.items():
        events = []
        if keys is None:
            AVLTree.from_inclusive_range(
                0, n - 1, strategy=BuildStrategy.INCREMENTAL, on_rotate=events.append
            )
        else:
            tree: AVLTree[int] = AVLTree(on_rotate=events.append)
            for key in keys:
                tree.add(int(key))
        left = sum(1 for e in events if e.direction is Direction.LEFT)
        counts[name] = (left, len(events) - left)
        print(f"  {name:>12}: {left:>4} left, {len(events) - left:>4} right")

    names = list(counts)
    lefts = np.array([counts[k][0] for k in names])
    rights = np.array([counts[k][1] for k in names])
    x = np.arange(len(names))

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.bar(x, lefts, label="Left rotations", color="steelblue")
    ax.bar(x, rights, bottom=lefts, label="Right rotations", color="darkorange")
    ax.set_xticks(x)
    ax.set_xticklabels(names)
    ax.set_ylabel("Rotations")
    ax.set_title(f"Rotations while inserting {n} keys")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_rotation_counts.png", dpi=150)
    plt.close(fig)

    return fig, counts


def example_4_strategy_shapes():
    """DIRECT and INCREMENTAL builds hold the same keys but may differ in shape."""
    print("\n" + "=" * 60)
    print("Example 4: Direct vs Incremental Construction")
    print("=" * 60)

    direct = AVLTree.from_inclusive_range(1, 12)
    incremental = AVLTree.from_inclusive_range(1, 12, strategy=BuildStrategy.INCREMENTAL)

    print(f"  same keys:  {direct.in_order() == incremental.in_order()}")
    print(f"  same shape: {direct.pre_order() == incremental.pre_order()}")
    print(f"  direct pre-order:      {direct.pre_order()}")
    print(f"  incremental pre-order: {incremental.pre_order()}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    draw_tree(axes[0], direct, "DIRECT")
    draw_tree(axes[1], incremental, "INCREMENTAL")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_strategy_shapes.png", dpi=150)
    plt.close(fig)

    return fig, direct, incremental


def generate_pdf_report():
    """Bundle the visualizations into report.pdf."""
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    titles = {
        "01_range_tree.png": "Example 1: Balanced Tree over [1, 7]",
        "02_height_growth.png": "Example 2: Height Growth",
        "03_rotation_counts.png": "Example 3: Rotations per Insertion Order",
        "04_strategy_shapes.png": "Example 4: Direct vs Incremental Construction",
    }

    with PdfPages(report_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.6, "AVL Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.5, "Rebalancing, traversal orders, and bulk construction",
                fontsize=14, ha="center", va="center", transform=ax.transAxes)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


def main():
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    VIZ_DIR.mkdir(exist_ok=True)

    example_1_range_tree()
    example_2_height_growth()
    example_3_rotation_counts()
    example_4_strategy_shapes()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
