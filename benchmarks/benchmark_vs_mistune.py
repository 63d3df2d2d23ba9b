"""Benchmark chatmark against mistune and markdown-it-py on chat traffic.

The corpus is synthetic: short chat replies, forum posts with lists and
tables, and assistant answers with fenced code, mixed in a fixed ratio.
The comparison is rough: the other parsers do full CommonMark and build
HTML, chatmark only builds its block tuple and tokenizes text blocks.

Run with:
    pip install -e ".[bench]"
    python benchmarks/benchmark_vs_mistune.py
"""

import random
import time
from collections.abc import Callable

SHORT_REPLIES = [
    "ok, see you at 6",
    "Is the **room** still available?",
    "Thanks! I sent the *deposit* yesterday.",
    "The code is `4821`",
]

FORUM_POST = """# Looking for a roommate

Two bedroom flat, **10 min** from campus.

- furnished
- *quiet* street
  - bus stop outside
1. Send a message
2) Book a viewing

| Room | Rent | Deposit |
|------|------|---------|
| A    | 450  | 900     |
| B    | 520  | 1040    |

---
"""

ASSISTANT_ANSWER = """## Splitting the rent

Use the ***square meter*** ratio:

```python
def share(area, total_area, rent):
    return rent * area / total_area
```

Then round with `round(x, 2)`.
"""


def build_corpus(size: int = 600, seed: int = 7) -> list[str]:
    rng = random.Random(seed)
    corpus: list[str] = []
    for _ in range(size):
        roll = rng.random()
        if roll < 0.7:
            corpus.append(rng.choice(SHORT_REPLIES))
        elif roll < 0.9:
            corpus.append(FORUM_POST)
        else:
            corpus.append(ASSISTANT_ANSWER)
    return corpus


def _time(fn: Callable[[str], object], docs: list[str], iterations: int) -> float:
    for doc in docs[:10]:
        fn(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            fn(doc)
    return (time.perf_counter() - start) / iterations


def benchmark_chatmark(docs: list[str], iterations: int = 10) -> float:
    from chatmark import parse, tokenize_block

    def run(doc: str) -> None:
        for block in parse(doc):
            tokenize_block(block)

    return _time(run, docs, iterations)


def benchmark_mistune(docs: list[str], iterations: int = 10) -> float:
    try:
        import mistune
    except ImportError:
        print("mistune not installed. Run: pip install mistune")
        return float("inf")

    return _time(mistune.create_markdown(), docs, iterations)


def benchmark_markdown_it(docs: list[str], iterations: int = 10) -> float:
    try:
        from markdown_it import MarkdownIt
    except ImportError:
        print("markdown-it-py not installed. Run: pip install markdown-it-py")
        return float("inf")

    return _time(MarkdownIt().render, docs, iterations)


def main() -> None:
    import sys

    docs = build_corpus()
    print(f"Corpus: {len(docs)} messages, {sum(map(len, docs))} characters")
    print(f"Python {sys.version.split()[0]}\n")

    iterations = 10
    results = [
        ("chatmark", benchmark_chatmark(docs, iterations)),
        ("mistune", benchmark_mistune(docs, iterations)),
        ("markdown-it-py", benchmark_markdown_it(docs, iterations)),
    ]
    results.sort(key=lambda x: x[1])
    baseline = results[0][1]

    print("=" * 60)
    print(f"RESULTS: {len(docs)} chat messages, {iterations} iterations")
    print("=" * 60)
    for name, time_val in results:
        if time_val == float("inf"):
            print(f"{name:20} not installed")
        else:
            ratio = time_val / baseline if baseline > 0 else 0
            print(f"{name:20} {time_val * 1000:8.2f}ms  ({ratio:.2f}x)")


if __name__ == "__main__":
    main()
