import numpy as np

from huffman import ALPH_SIZE

def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out <= 0:
        raise ValueError("compressed size must be positive")
    return float(n_in) / float(n_out)

def bits_per_byte(n_in: int, n_out: int) -> float:
    if n_in == 0:
        return 0.0
    return float(n_out * 8) / float(n_in)

def entropy(weights) -> float:
    """Shannon entropy (bits/byte) of the byte slots; the sentinel is excluded."""
    w = np.asarray(weights, dtype=np.float64)[:ALPH_SIZE]
    total = w.sum()
    if total == 0:
        return 0.0
    p = w[w > 0] / total
    return float(-(p * np.log2(p)).sum())

def code_lengths(codes) -> np.ndarray:
    return np.array([len(c) if c is not None else -1 for c in codes], dtype=np.int64)

def mean_code_length(weights, codes) -> float:
    w = np.asarray(weights, dtype=np.float64)[:ALPH_SIZE]
    total = w.sum()
    if total == 0:
        return 0.0
    L = np.clip(code_lengths(codes)[:ALPH_SIZE], 0, None).astype(np.float64)
    return float((w * L).sum() / total)
