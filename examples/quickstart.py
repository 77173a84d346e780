# %% [markdown]
# # pgtrigram: Quickstart
#
# Trigram similarity that scores strings the way PostgreSQL's `pg_trgm` does,
# without a database round trip.
#
# | Part | Topic |
# |------|-------|
# | 1 | Scoring pairs |
# | 2 | Ranking candidates |
# | 3 | Polars |
# | 4 | Backends |

# %%
import time

import polars as pl

import pgtrigram as pt

# %% [markdown]
# ---
# ## Part 1: Scoring pairs
#
# Case, accents on capitals and punctuation between words do not matter;
# the words themselves do.

# %%
pairs = [
    ("hello", "hallo"),
    ("café", "cafe"),
    ("İstanbul", "istanbul"),
    ("hello-world", "hello world"),
    ("LLC", "L.L.C."),
]
for a, b in pairs:
    print(f"  {a!r:>16} vs {b!r:<16} {pt.similarity(a, b):.3f}")

print(pt.show_trgm("cat"))

# %% [markdown]
# ---
# ## Part 2: Ranking candidates
#
# Your user typed "acme corp" and you have a list of vendors.

# %%
vendors = [
    "Acme Corporation",
    "ACME Corp.",
    "Globex LLC",
    "Initech, Inc.",
    "Acme Corp",
]

best = pt.best_match("acme corp", vendors)
print(f"Best: [{best.score:.0%}] {vendors[best.index]}")

for m in pt.score_all("acme corp", vendors, min_threshold=0.3):
    print(f"  [{m.score:.0%}] {vendors[m.index]}")

try:
    pt.best_match("acme corp", [])
except pt.EmptyHaystacksError:
    print("No candidates to rank")

# %% [markdown]
# ---
# ## Part 3: Polars

# %%
df = pl.DataFrame({"vendor": vendors})
print(
    df.with_columns(score=pl.col("vendor").trgm.similarity("acme corp")).sort(
        "score", descending=True
    )
)
print(pt.score_series("acme corp", df["vendor"], min_similarity=0.3))

# %% [markdown]
# ---
# ## Part 4: Backends
#
# Both engines return bit-identical scores. The parallel one only pays off
# for large batches.

# %%
haystacks = [f"vendor number {i}" for i in range(20_000)]

for backend in pt.available_backends():
    pt.use_backend(backend)
    start = time.perf_counter()
    pt.score_all("vendor number 42", haystacks, 0.5)
    print(f"  {backend.value:<10} {time.perf_counter() - start:.3f}s")

# An engine of your own keeps its worker pool between calls until closed.
with pt.ParallelEngine(parallel_threshold=1_000) as engine:
    for _ in range(3):
        start = time.perf_counter()
        engine.score_all("vendor number 42", haystacks, 0.5)
        print(f"  own pool   {time.perf_counter() - start:.3f}s")
