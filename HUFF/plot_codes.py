import argparse
import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from huffman import ALPH_SIZE, count_weights, build_tree, build_codebook
from metrics import code_lengths, entropy, mean_code_length

def plot_code_lengths(data: bytes, path: str):
    """
    Bar chart of the Huffman code length of every byte present in data,
    against the ideal -log2(p) length.
    """
    weights = count_weights(data)
    codes = build_codebook(build_tree(weights))
    L = code_lengths(codes)[:ALPH_SIZE]

    w = weights[:ALPH_SIZE].astype(np.float64)
    present = np.nonzero(w)[0]
    ideal = -np.log2(w[present] / w.sum()) if present.size else np.zeros(0)

    plt.figure(figsize=(10, 3))
    plt.bar(present, L[present], width=1.0, label="code length")
    plt.plot(present, ideal, "r.", markersize=3, label="-log2(p)")
    plt.xlim(-1, ALPH_SIZE)
    plt.xlabel("byte value")
    plt.ylabel("bits")
    plt.title(f"H={entropy(weights):.3f} b/B, mean code={mean_code_length(weights, codes):.3f} b/B", fontsize=9)
    plt.legend(fontsize=8)
    plt.tight_layout()

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    plt.savefig(path, dpi=150)
    plt.close()
    return path

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", default="results/fig_code_lengths.png")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()
    plot_code_lengths(data, args.output)
    print(f"[plot] wrote {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
