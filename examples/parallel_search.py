"""Sharing one explorer between threads.

An Explorer is thread-safe: concurrent searches that overlap (for
example, from sibling directories) share one in-flight read per file
and one computation per directory.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from configseek import create_explorer


explorer = create_explorer("myapp")

packages = [p for p in Path.cwd().iterdir() if p.is_dir()]

with ThreadPoolExecutor(max_workers=4) as executor:
    results = dict(zip(packages, executor.map(explorer.search, packages)))

for package, result in results.items():
    source = result.filepath if result is not None else "(none)"
    print(f"{package.name}: {source}")
