"""Parallel load example for a monorepo.

This example shows how to load configuration for many directories from a
thread pool. Directories that resolve to the same file share a single
read and parse, even when their loads overlap.
"""

from concurrent.futures import ThreadPoolExecutor

from oxfmt_config import ConfigLoader, LoadOptions


packages = ["packages/app", "packages/lib", "packages/docs", "tools/scripts"]
loader = ConfigLoader()

with ThreadPoolExecutor(max_workers=4) as pool:
    documents = list(
        pool.map(loader.load_options, [LoadOptions(cwd=p) for p in packages])
    )

# Results come back in submission order
for package, options in zip(packages, documents):
    print(f"{package}: {len(options)} option(s)")

# Inspect what was cached: resolve keys are "<cwd>::<config_path>",
# config keys are file paths or "missing:<resolve key>"
print(loader.resolve_cache.list_all_keys())
print(loader.config_cache.list_all_keys())
