"""
Verify Parent Rank-Based Selection

驗證排名偏置的父母選擇：被選中的機率應隨排名線性遞減，
線性擬合的截距約為均勻密度的兩倍，斜率顯著為負。
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from ga_fit.evolution.components.random_stream import RandomStream
from ga_fit.evolution.components.strategies.selection import select_rank_biased_pair
from ga_fit.utils.visualization import plot_selection_density, selection_density


def main():
    parser = argparse.ArgumentParser(description="Verify rank-biased parent selection")
    parser.add_argument("--population-size", type=int, default=500)
    parser.add_argument("--nmc", type=int, default=100000)
    parser.add_argument("--bins", type=int, default=100)
    parser.add_argument("--seed", type=int, default=1234)
    parser.add_argument("--save", type=str, default=None, help="Save the plot (e.g. C_ParentProb.png)")
    args = parser.parse_args()

    print("=" * 80)
    print("🧪 測試父母選擇的排名偏置")
    print("=" * 80)

    random = RandomStream(args.seed)
    indices = np.empty(2 * args.nmc, dtype=np.int64)
    for mc in range(args.nmc):
        p1, p2 = select_rank_biased_pair(random, args.population_size)
        indices[2 * mc] = p1
        indices[2 * mc + 1] = p2

    density, centers = selection_density(indices, args.population_size, args.bins)
    slope, intercept = np.polyfit(centers, density, 1)
    uniform = 1.0 / args.population_size

    print(f"   樣本數: {len(indices)}")
    print(f"   線性擬合: y = {slope:.3g} x + {intercept:.3g}")
    print(f"   截距 / 均勻密度: {intercept / uniform:.3f} (預期約 2)")
    print(f"   斜率為負: {'✓' if slope < 0 else '✗'}")

    if args.save:
        plot_selection_density(indices, args.population_size, args.bins, save_path=args.save)


if __name__ == "__main__":
    main()
