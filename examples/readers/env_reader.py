"""Example reader: build a config tree from prefixed environment variables."""

import os


class EnvReader:
    """Reads ``PREFIX__SECTION__KEY=value`` variables into ``{"section": {"key": "value"}}``.

    Demonstrates a custom reader: any object with a ``read(options)`` method
    returning a mapping can be passed as the ``reader`` option.

    Options:
        prefix: Variable prefix, default ``"APP"``.
        environ: Mapping to read instead of ``os.environ``.
    """

    def read(self, options: dict) -> dict:
        prefix = (options.get("prefix") or "APP") + "__"
        environ = options.get("environ")
        if environ is None:
            environ = os.environ

        tree: dict = {}
        for name, value in sorted(environ.items()):
            if not name.startswith(prefix):
                continue
            keys = name[len(prefix):].lower().split("__")
            node = tree
            for key in keys[:-1]:
                if not isinstance(node.get(key), dict):
                    node[key] = {}
                node = node[key]
            node[keys[-1]] = value
        return tree
