"""Project-wide meta-config example.

A project can tell every configseek user where to look by adding a
[tool.configseek] table to its pyproject.toml (or a configseek key to
.config/config.{json,yaml,yml,toml}) in the directory the tool runs from:

    [tool.configseek]
    search_places = ["config/{name}.toml", ".{name}rc.yaml"]
    ignore_empty_search_places = false

    [tool.myapp]
    log_level = "DEBUG"

If the meta-config file itself holds a section for the application, as
[tool.myapp] does above, it is returned without walking the tree.
"""

from configseek import create_explorer, find_meta_config


meta = find_meta_config()
if meta is not None:
    print(f"Meta-config: {meta.filepath}")

# Options from the meta-config fill in anything not passed here
explorer = create_explorer("myapp")
print(f"Search places: {explorer.options.search_places}")

# Explicit options always win; use_meta_config=False ignores the file
plain = create_explorer("myapp", use_meta_config=False)

result = explorer.search()
if result is not None:
    print(f"{result.filepath}: {result.config}")
