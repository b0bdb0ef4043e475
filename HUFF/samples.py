import os
import numpy as np

WORDS = [
    b"the", b"of", b"and", b"to", b"in", b"a", b"is", b"that", b"for", b"it",
    b"tree", b"code", b"bit", b"leaf", b"node", b"weight", b"stream", b"byte",
]

def skewed_bytes(n: int, seed: int = 0, p: float = 0.2) -> bytes:
    """Geometric-distributed byte values: small values dominate."""
    rng = np.random.default_rng(seed)
    v = rng.geometric(p, size=n) - 1
    return np.clip(v, 0, 255).astype(np.uint8).tobytes()

def uniform_bytes(n: int, seed: int = 0) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=n).astype(np.uint8).tobytes()

def text_bytes(n: int, seed: int = 0) -> bytes:
    rng = np.random.default_rng(seed)
    out = bytearray()
    while len(out) < n:
        out += WORDS[int(rng.integers(len(WORDS)))]
        out += b"\n" if rng.random() < 0.1 else b" "
    return bytes(out[:n])

KINDS = {
    "skewed": skewed_bytes,
    "uniform": uniform_bytes,
    "text": text_bytes,
}

def save_sample(path, kind: str = "text", n: int = 65536, seed: int = 0):
    data = KINDS[kind](n, seed=seed)
    os.makedirs(os.path.dirname(str(path)) or ".", exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    return path

if __name__ == "__main__":
    import argparse
    ap = argparse.ArgumentParser()
    ap.add_argument("--output", default="data/sample.txt")
    ap.add_argument("--kind", choices=sorted(KINDS), default="text")
    ap.add_argument("--size", type=int, default=65536)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()
    p = save_sample(args.output, kind=args.kind, n=args.size, seed=args.seed)
    print("Saved:", p)
