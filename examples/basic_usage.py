"""Basic config search example.

This example shows the simplest usage pattern: create an explorer for
your application and search upward from the current directory. The
first config file found wins; results are memoized per directory.
"""

from configseek import create_explorer


# Searches pyproject.toml [tool.myapp], package.json "myapp", .myapprc,
# .myapprc.{json,yaml,yml,toml,py}, .config/myapprc*, myapp.config.*
explorer = create_explorer("myapp")

# Walks up from the cwd to the home directory
result = explorer.search()

if result is None:
    print("No configuration found, using defaults")
    settings: dict = {}
elif result.is_empty:
    print(f"{result.filepath} exists but is empty")
    settings = {}
else:
    print(f"Loaded {result.filepath}")
    settings = result.config

# Load a specific file directly, bypassing the search
# result = explorer.load("deploy/myapp.prod.yaml")

# Repeated searches from the same directory hit the cache
result = explorer.search()

# Drop memoized results after config files change on disk
explorer.clear_caches()
